"""Small fixed-size vectors used throughout the drawing code."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """Two-component vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Vec3:
    """Three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_vec2(cls, v: Vec2) -> Vec3:
        """Extend a two-component vector with a zero ``z``."""
        return cls(v.x, v.y, 0.0)


@dataclass(frozen=True)
class Vec4:
    """Four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0