from __future__ import annotations

"""
Runtime Options.

The tool keeps no persistent state: every run is configured entirely from
its command line. TreeOptions is the validated, immutable snapshot the
interface layer hands to the rest of the application.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TreeOptions:
    """
    Options for a single listing.

    Attributes:
        path: Root directory requested by the user; None means the CWD.
        show_files: Include file-like entries.
        ascii_only: Draw connectors with ASCII glyphs.
        output_file: Optional path where the tree is also saved.
        debug: Elevate diagnostics to DEBUG.
        log_file: Optional path of a rotating diagnostic log.
    """
    path: Optional[str] = None
    show_files: bool = False
    ascii_only: bool = False
    output_file: Optional[str] = None
    debug: bool = False
    log_file: Optional[str] = None
