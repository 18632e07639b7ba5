from __future__ import annotations

"""
Directory Tree Data Models.

Provides the value types exchanged between the path resolver and the
tree printer. All models are immutable; a depth prefix is a tuple so
every recursion level extends its own copy without touching the
caller's history.
"""

from dataclasses import dataclass
from typing import Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

# One flag per ancestor level (root excluded): was that ancestor the last
# entry among its siblings.
DepthPrefix = Tuple[bool, ...]


@dataclass(frozen=True)
class DirectoryEntry:
    """
    A retained entry from a single directory read.

    Attributes:
        path: Full filesystem path of the entry.
        name: Display name (final path component).
        is_dir: True when the entry is directory-like and must be recursed.
    """
    path: str
    name: str
    is_dir: bool


@dataclass(frozen=True)
class ResolvedRoot:
    """
    Canonical starting directory of a listing.

    Attributes:
        path: Absolute, symlink-resolved path of an existing directory.
        display_name: Label printed on the first output line.
    """
    path: str
    display_name: str
