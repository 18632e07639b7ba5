from __future__ import annotations

"""
Directory Tree Printer.

Walks a directory depth-first in pre-order and writes one connector
prefixed line per retained entry. Unreadable directories and entries whose
metadata cannot be queried are skipped silently so a single failure never
interrupts the rest of the listing.
"""

import logging
import os
import stat
import sys
from typing import List, Optional, TextIO

from dirtree.core.resolver import display_name
from dirtree.domain.glyphs import GlyphSet
from dirtree.domain.tree_models import DepthPrefix, DirectoryEntry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def print_subtree(
        path: str,
        show_files: bool,
        depth_prefix: DepthPrefix,
        glyphs: GlyphSet,
        out: Optional[TextIO] = None,
) -> None:
    """
    Recursively write the children of a directory to the output stream.

    The directory itself is never written; the caller prints the root line.
    Each directory-like child is recursed into right after its own line, so
    a subtree is always printed contiguously before its next sibling.

    Args:
        path: Directory whose children are listed.
        show_files: Include file-like entries (directories are always shown).
        depth_prefix: Last-sibling flags of every ancestor level.
        glyphs: Connector strings used to draw the tree.
        out: Destination stream. Defaults to sys.stdout.
    """
    stream = out if out is not None else sys.stdout

    try:
        entries = list_entries(path, show_files)
    except OSError as e:
        logger.debug(f"Skipping unreadable directory '{path}': {e}")
        return

    count = len(entries)
    for i, entry in enumerate(entries):
        child_prefix = depth_prefix + (i == count - 1,)
        stream.write(f"{render_prefix(child_prefix, glyphs)}{entry.name}\n")

        if entry.is_dir:
            print_subtree(entry.path, show_files, child_prefix, glyphs, out=stream)


def list_entries(path: str, show_files: bool) -> List[DirectoryEntry]:
    """
    Read, classify, filter and sort the immediate entries of a directory.

    Args:
        path: Directory to read.
        show_files: Keep file-like entries alongside directories.

    Returns:
        List[DirectoryEntry]: Retained entries sorted by full path. When
        iteration fails partway, the entries read so far are returned.

    Raises:
        OSError: The directory cannot be opened.
    """
    entries: List[DirectoryEntry] = []

    with os.scandir(path) as it:
        while True:
            try:
                dir_entry = next(it)
            except StopIteration:
                break
            except OSError as e:
                logger.debug(f"Listing of '{path}' interrupted: {e}")
                break

            is_dir = classify_entry(dir_entry)
            if is_dir is None:
                continue
            if is_dir or show_files:
                entries.append(
                    DirectoryEntry(
                        path=dir_entry.path,
                        name=display_name(dir_entry.path),
                        is_dir=is_dir,
                    )
                )

    # Byte order of the encoded path, so undecodable names sort as on disk
    entries.sort(key=lambda e: os.fsencode(e.path))
    return entries


def classify_entry(dir_entry: os.DirEntry) -> Optional[bool]:
    """
    Classify an entry from its own metadata, without following links.

    Returns:
        Optional[bool]: True for a directory, False for a regular file or a
        symbolic link (always a leaf), None for anything else or when the
        metadata query fails.
    """
    try:
        mode = dir_entry.stat(follow_symlinks=False).st_mode
    except OSError as e:
        logger.debug(f"Skipping entry '{dir_entry.path}': {e}")
        return None

    if stat.S_ISDIR(mode):
        return True
    if stat.S_ISREG(mode) or stat.S_ISLNK(mode):
        return False
    return None


def render_prefix(child_prefix: DepthPrefix, glyphs: GlyphSet) -> str:
    """
    Build the connector prefix of a line.

    Every ancestor level renders a continuation column (blank under a last
    sibling, vertical otherwise); the final level renders the entry's own
    connector (corner when last, branch otherwise).
    """
    if not child_prefix:
        return ""

    *ancestors, own_is_last = child_prefix
    parts = [glyphs.blank if is_last else glyphs.vertical for is_last in ancestors]
    parts.append(glyphs.corner if own_is_last else glyphs.branch)
    return "".join(parts)
