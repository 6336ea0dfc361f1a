"""High-level drawing calls on top of a draw list."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from frames.drawlist import DrawList
from frames.font import FontDescriptor
from frames.primitives import Rectangle
from frames.vector import Vec2


class Context(DrawList):
    """Graphics context: shapes and text turned into draw-list geometry."""

    def __init__(self, font_descriptor: FontDescriptor | None = None) -> None:
        super().__init__()
        self.font_descriptor = font_descriptor

    def draw_rect(self, tl: Vec2, br: Vec2) -> None:
        self.construct_rect(tl, br)

    def draw_line(self, p1: Vec2, p2: Vec2) -> None:
        self.construct_line(p1, p2, 1.0)

    def draw_polyline(self, points: Sequence[Vec2]) -> None:
        """Draw a line through consecutive points; needs at least two."""
        if len(points) < 2:
            raise ValueError("Count must be gte 2")
        for p1, p2 in pairwise(points):
            self.construct_line(p1, p2, 1.0)

    def draw_quad(self, tl: Vec2, tr: Vec2, br: Vec2, bl: Vec2) -> None:
        self.construct_quad(tl, tr, br, bl)

    def draw_character(self, pos: Vec2, c: str) -> Rectangle:
        """Return the on-screen rectangle occupied by glyph ``c`` at ``pos``."""
        font = self._font()
        return Rectangle(pos, font.character_width(c), font.character_height())

    def draw_string(self, pos: Vec2, text: str) -> list[Rectangle]:
        """Return the glyph rectangles for every character of ``text``."""
        return [self.draw_character(pos, c) for c in text]

    def _font(self) -> FontDescriptor:
        if self.font_descriptor is None:
            raise RuntimeError("no font descriptor set")
        return self.font_descriptor