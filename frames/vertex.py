"""Vertex layout shared by all generated geometry."""

from __future__ import annotations

from dataclasses import dataclass, field

from frames.vector import Vec2, Vec4


@dataclass(frozen=True)
class Vertex:
    """Position, colour and texture coordinate of one vertex."""

    position: Vec2 = field(default_factory=Vec2)
    color: Vec4 = field(default_factory=lambda: Vec4(1.0, 1.0, 1.0, 1.0))
    texture: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))