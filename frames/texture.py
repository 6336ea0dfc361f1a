"""Texture and sprite descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field

from frames.primitives import Rectangle


@dataclass
class Sprite:
    """A region of a texture, in UV space."""

    uv_rectangle: Rectangle = field(default_factory=Rectangle)


@dataclass
class Texture:
    """A named texture with pixel dimensions."""

    width: int = 0
    height: int = 0
    name: str = ""

    def handle(self) -> int:
        """Return a lookup handle derived from the texture's name."""
        return hash(self.name)