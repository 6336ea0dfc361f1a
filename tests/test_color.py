import pytest

from frames.color import Color


def test_red_lowest_byte():
    c = Color.from_hex(0x0000FF)
    assert c.r == 1.0
    assert c.g == 0.0
    assert c.b == 0.0


def test_green_middle_byte():
    c = Color.from_hex(0x00FF00)
    assert c.g == 1.0
    assert c.r == 0.0


def test_blue_third_byte():
    c = Color.from_hex(0xFF0000)
    assert c.b == 1.0


def test_alpha_is_always_zero():
    assert Color.from_hex(0xFFFFFFFF).a == 0.0


@pytest.mark.parametrize("value", [0x123456, 0xABCDEF, 0x010203])
def test_components_round_trip(value):
    c = Color.from_hex(value)
    rebuilt = round(c.r * 255) | (round(c.g * 255) << 8) | (round(c.b * 255) << 16)
    assert rebuilt == value


def test_direct_construction():
    c = Color(0.1, 0.2, 0.3, 0.4)
    assert (c.r, c.g, c.b, c.a) == (0.1, 0.2, 0.3, 0.4)