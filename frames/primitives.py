"""Geometric primitives and primitive kinds for draw commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from frames.vector import Vec2


class PrimitiveType(IntEnum):
    """How a run of indices is assembled into geometry."""

    NONE = 0
    POINTS = 1
    LINES = 2
    TRIANGLES = 3


@dataclass
class Rectangle:
    """Axis-aligned rectangle anchored at its top-left corner."""

    origin: Vec2 = field(default_factory=Vec2)
    width: float = 0.0
    height: float = 0.0

    def topleft(self) -> Vec2:
        return self.origin

    def topright(self) -> Vec2:
        return Vec2(self.origin.x + self.width, self.origin.y)

    def bottomright(self) -> Vec2:
        return Vec2(self.origin.x + self.width, self.origin.y + self.height)

    def bottomleft(self) -> Vec2:
        return Vec2(self.origin.x, self.origin.y + self.height)

    def left(self) -> Vec2:
        return Vec2(self.origin.x, self.origin.y + self.height / 2.0)

    def right(self) -> Vec2:
        return Vec2(self.origin.x + self.width, self.origin.y + self.height / 2.0)

    def top(self) -> Vec2:
        return Vec2(self.origin.x + self.width / 2.0, self.origin.y)

    def bottom(self) -> Vec2:
        return Vec2(self.origin.x + self.width / 2.0, self.origin.y + self.height)

    def center(self) -> Vec2:
        return Vec2(
            self.origin.x + self.width / 2.0, self.origin.y + self.height / 2.0
        )


@dataclass
class Circle:
    """Circle given by its centre and radius."""

    origin: Vec2 = field(default_factory=Vec2)
    radius: float = 0.0


@dataclass
class Line:
    """Segment between two points."""

    point0: Vec2 = field(default_factory=Vec2)
    point1: Vec2 = field(default_factory=Vec2)


@dataclass
class Point:
    """A single point."""

    origin: Vec2 = field(default_factory=Vec2)