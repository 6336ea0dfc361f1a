"""RGBA colour with float components."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Color:
    """A colour with red, green, blue and alpha in the range 0..1."""

    r: float
    g: float
    b: float
    a: float

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Build a colour from a packed integer with red in the lowest byte.

        The alpha channel is read through the blue mask, so it is always zero.
        """
        value &= 0xFFFFFFFF
        r = (value & 0x0000FF) / 255.0
        g = ((value & 0x00FF00) >> 8) / 255.0
        b = ((value & 0xFF0000) >> 16) / 255.0
        a = ((value & 0xFF0000) >> 24) / 255.0
        return cls(r, g, b, a)