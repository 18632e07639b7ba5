from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Logging isolation between tests that bootstrap the CLI in-process.
3. Shared directory layouts used across unit and integration tests.
"""

import io
import logging
import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirtree.core.printer import print_subtree  # noqa: E402
from dirtree.domain.glyphs import UNICODE_GLYPHS, GlyphSet  # noqa: E402
from dirtree.infra.logging import (  # noqa: E402
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by configure_logging before and after each test."""
    _reset_root_logger()
    yield
    _reset_root_logger()


@pytest.fixture
def simple_root(tmp_path: Path) -> Path:
    """
    Root with an empty subdirectory and a file.

    Structure:
    /R
      /a
      b.txt
    """
    root = tmp_path / "R"
    root.mkdir()
    (root / "a").mkdir()
    (root / "b.txt").write_text("b", encoding="utf-8")
    return root


@pytest.fixture
def nested_root(tmp_path: Path) -> Path:
    """
    Root with a nested directory and a sibling.

    Structure:
    /R
      /a
        /x
      /z
    """
    root = tmp_path / "R"
    (root / "a" / "x").mkdir(parents=True)
    (root / "z").mkdir()
    return root


@pytest.fixture
def render_subtree():
    """Return a helper running print_subtree on a path and collecting its output."""

    def _render(path: Path, show_files: bool = False, glyphs: GlyphSet = UNICODE_GLYPHS) -> str:
        buf = io.StringIO()
        print_subtree(str(path), show_files, (), glyphs, out=buf)
        return buf.getvalue()

    return _render


def _reset_root_logger() -> None:
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)
    root.setLevel(logging.WARNING)
