import pytest

from frames.primitives import Circle, Line, Point, PrimitiveType, Rectangle
from frames.vector import Vec2


@pytest.fixture
def rect():
    return Rectangle(Vec2(2.0, 4.0), 6.0, 8.0)


def _mid(a, b):
    return Vec2((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


def test_primitive_type_values():
    assert PrimitiveType(0) is PrimitiveType.NONE
    assert PrimitiveType(1) is PrimitiveType.POINTS
    assert PrimitiveType(2) is PrimitiveType.LINES
    assert PrimitiveType(3) is PrimitiveType.TRIANGLES
    assert [t.name for t in list(PrimitiveType)] == ["NONE", "POINTS", "LINES", "TRIANGLES"]
    with pytest.raises(ValueError):
        PrimitiveType(4)


def test_topleft_is_origin(rect):
    assert rect.topleft() == rect.origin


def test_corners_span_size(rect):
    assert rect.topright().x - rect.topleft().x == rect.width
    assert rect.bottomleft().y - rect.topleft().y == rect.height
    assert rect.bottomright() == Vec2(rect.topright().x, rect.bottomleft().y)


def test_edge_midpoints(rect):
    assert rect.left() == _mid(rect.topleft(), rect.bottomleft())
    assert rect.right() == _mid(rect.topright(), rect.bottomright())
    assert rect.top() == _mid(rect.topleft(), rect.topright())
    assert rect.bottom() == _mid(rect.bottomleft(), rect.bottomright())


def test_center_is_diagonal_midpoint(rect):
    assert rect.center() == _mid(rect.topleft(), rect.bottomright())


def test_zero_size_rectangle_collapses():
    r = Rectangle(Vec2(1.0, 1.0), 0.0, 0.0)
    assert r.center() == r.topleft() == r.bottomright()


def test_simple_shapes_hold_values():
    assert Circle(Vec2(1.0, 2.0), 3.0).radius == 3.0
    assert Line(Vec2(0.0, 0.0), Vec2(1.0, 1.0)).point1 == Vec2(1.0, 1.0)
    assert Point(Vec2(5.0, 6.0)).origin == Vec2(5.0, 6.0)