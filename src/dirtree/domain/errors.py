from __future__ import annotations

"""
Root Resolution Error Taxonomy.

Every failure that prevents the program from establishing its starting
directory derives from DirtreeError. These errors are terminal: the CLI
controller reports them on stderr and exits with status 1. Failures that
happen during the walk itself are not represented here; the printer
recovers from them locally.
"""

from typing import Optional


class DirtreeError(Exception):
    """
    Base class for fatal root resolution failures.

    Attributes:
        path: Offending filesystem path, when one is known.
        reason: Human readable description of the underlying cause.
    """

    def __init__(self, message: str, path: Optional[str] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.reason = reason


class CwdUnavailableError(DirtreeError):
    """The process current working directory could not be determined."""


class PathResolutionError(DirtreeError):
    """The path could not be canonicalized (missing, broken link, OS error)."""


class MetadataError(DirtreeError):
    """The canonical path exists but its metadata could not be read."""


class NotADirectoryPathError(DirtreeError):
    """The canonical path exists but is not a directory."""
