from __future__ import annotations

"""
Directory Tree Service.

Orchestrates a full listing: the root label on the first line followed by
the recursive subtree. Optionally persists the rendered lines to a file in
addition to streaming them.
"""

import logging
import os
import sys
from typing import List, Optional, TextIO

from dirtree.core.printer import print_subtree
from dirtree.domain.glyphs import UNICODE_GLYPHS, GlyphSet
from dirtree.domain.tree_models import ResolvedRoot

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_tree(
        root: ResolvedRoot,
        show_files: bool = False,
        glyphs: GlyphSet = UNICODE_GLYPHS,
        out: Optional[TextIO] = None,
        save_path: Optional[str] = None,
) -> int:
    """
    Write the complete tree of a resolved root directory.

    Args:
        root: Canonical starting directory.
        show_files: Include file-like entries in the listing.
        glyphs: Connector strings used to draw the tree.
        out: Destination stream. Defaults to sys.stdout.
        save_path: Optional file path to persist the tree.

    Returns:
        int: Number of lines written, root line included.
    """
    logger.debug(f"Generating directory tree for: {root.path}")

    recorder = _LineRecorder(out if out is not None else sys.stdout)
    recorder.write(f"{root.display_name}\n")
    print_subtree(root.path, show_files, (), glyphs, out=recorder)

    logger.debug(f"Tree complete: {len(recorder.lines)} lines")

    if save_path:
        _save_tree_to_disk(save_path, recorder.lines)

    return len(recorder.lines)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

class _LineRecorder:
    """
    Stream wrapper that forwards writes and keeps the emitted lines.

    The printer issues exactly one write per line, terminator included.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self.lines: List[str] = []

    def write(self, text: str) -> int:
        self.lines.append(text[:-1] if text.endswith("\n") else text)
        return self._stream.write(text)


def _save_tree_to_disk(save_path: str, lines: List[str]) -> None:
    """Safely persist tree lines to the filesystem."""
    try:
        out_dir = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(save_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        logger.info(f"Tree saved to file: {save_path}")
    except OSError as e:
        logger.error(f"Failed to save tree to '{save_path}': {e}")
