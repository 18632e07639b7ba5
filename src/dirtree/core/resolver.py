from __future__ import annotations

"""
Root Path Resolver.

Turns the optional user supplied path into a canonical, existing
directory. Resolution failures are raised as typed DirtreeError
subclasses; deciding the exit status and the message shown to the user
is left to the interface layer.
"""

import logging
import os
import stat
from typing import Optional

from dirtree.domain.errors import (
    CwdUnavailableError,
    MetadataError,
    NotADirectoryPathError,
    PathResolutionError,
)
from dirtree.domain.tree_models import ResolvedRoot

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_root(raw_path: Optional[str] = None) -> ResolvedRoot:
    """
    Resolve the starting directory of a listing.

    Falls back to the process working directory when no path is given,
    canonicalizes the result (symbolic links, '.' and '..' resolved) and
    verifies it references an existing directory.

    Args:
        raw_path: Path supplied by the user, or None for the current directory.

    Returns:
        ResolvedRoot: Canonical directory path and its display name.

    Raises:
        CwdUnavailableError: The working directory cannot be determined.
        PathResolutionError: The path does not exist or cannot be canonicalized.
        MetadataError: The canonical path metadata cannot be read.
        NotADirectoryPathError: The canonical path is not a directory.
    """
    if raw_path is None:
        raw_path = _current_directory()

    canonical = _canonicalize(raw_path)

    try:
        st = os.stat(canonical)
    except OSError as e:
        raise MetadataError(
            f"unable to get metadata ({e})", path=canonical, reason=str(e)
        ) from e

    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectoryPathError("path is not a directory", path=canonical)

    logger.debug(f"Resolved root directory: {canonical}")
    return ResolvedRoot(path=canonical, display_name=display_name(canonical))


def display_name(path: str) -> str:
    """
    Return the final component of a path, or the whole path when it has none.

    Filesystem roots ('/', 'C:\\') have no final component and are shown in
    full. Names that are not valid in the filesystem encoding are decoded
    lossily so they can always be written to a text stream.
    """
    return _lossy(os.path.basename(path) or path)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _current_directory() -> str:
    """Query the process working directory."""
    try:
        return os.getcwd()
    except OSError as e:
        raise CwdUnavailableError(
            f"unable to get current directory ({e})", reason=str(e)
        ) from e


def _canonicalize(raw_path: str) -> str:
    """Resolve a path strictly: every component must exist and be traversable."""
    if not raw_path:
        raise PathResolutionError(
            "unable to canonicalize path (empty path)", path=raw_path, reason="empty path"
        )

    # stat rejects "file/..", which realpath folds away lexically
    try:
        os.stat(raw_path)
        return os.path.realpath(raw_path, strict=True)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(
            f"unable to canonicalize path '{raw_path}' ({e})", path=raw_path, reason=str(e)
        ) from e


def _lossy(name: str) -> str:
    """Replace undecodable bytes (surrogate escapes) with U+FFFD."""
    return os.fsencode(name).decode("utf-8", errors="replace")
