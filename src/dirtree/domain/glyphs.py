from __future__ import annotations

"""
Connector Glyph Sets.

Defines the four display strings used to draw tree connectors and the
two standard variants: Unicode box-drawing characters (default) and a
plain ASCII fallback for terminals without extended character support.
"""

from typing import NamedTuple


class GlyphSet(NamedTuple):
    """
    Immutable set of connector strings.

    Attributes:
        corner: Connector for the last child at its own depth.
        branch: Connector for a non-last child at its own depth.
        blank: Continuation column under an ancestor that was last.
        vertical: Continuation column under an ancestor that was not last.
    """
    corner: str
    branch: str
    blank: str
    vertical: str


UNICODE_GLYPHS = GlyphSet(corner="└───", branch="├───", blank="    ", vertical="│   ")
ASCII_GLYPHS = GlyphSet(corner="\\---", branch="+---", blank="    ", vertical="|   ")


def select_glyphs(ascii_only: bool) -> GlyphSet:
    """Return the ASCII glyph set when requested, otherwise the Unicode one."""
    return ASCII_GLYPHS if ascii_only else UNICODE_GLYPHS
