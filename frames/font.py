"""Font metric descriptions used when laying out text."""

from __future__ import annotations

from abc import ABC, abstractmethod

from frames.primitives import Rectangle
from frames.vector import Vec2

_GLYPH_COUNT = 255


class FontDescriptor(ABC):
    """Metrics of a font: glyph widths, line height and texture coordinates."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def character_width(self, c: str) -> float:
        """Width of glyph ``c``."""

    @abstractmethod
    def character_height(self) -> float:
        """Height shared by all glyphs."""

    def character_uv(self) -> Rectangle:
        """UV rectangle of a glyph; by default the whole font texture."""
        return Rectangle(Vec2(0.0, 0.0), 1.0, 1.0)


class TextureFontDescriptor(FontDescriptor):
    """Fixed-cell font laid out on a texture, 8 units per glyph."""

    def __init__(self) -> None:
        super().__init__("default")
        self.character_widths = [8.0] * _GLYPH_COUNT
        self.sprite_origins = [Vec2() for _ in range(_GLYPH_COUNT)]
        self._character_height = 8.0

    def character_width(self, c: str) -> float:
        code = ord(c)
        if not 0 <= code < _GLYPH_COUNT:
            raise IndexError(f"no glyph for character {c!r}")
        return self.character_widths[code]

    def character_height(self) -> float:
        return self._character_height