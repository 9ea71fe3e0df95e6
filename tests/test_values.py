import pytest
from numpy import array, allclose

from discmesh.color import BLACK, WHITE, Color
from discmesh.exceptions import InvalidGeometry
from discmesh.triangle import Triangle
from discmesh.vector import Vector3, ZERO


def test_vector_arithmetic():
    a = Vector3(1, 2, 3)
    b = Vector3(-1, 0.5, 2)
    assert a + b == Vector3(0, 2.5, 5)
    assert a - b == Vector3(2, 1.5, 1)
    assert a*2 == Vector3(2, 4, 6)
    assert 2*a == a.scale(2)
    assert -a == Vector3(-1, -2, -3)
    assert a.dot(b) == -1 + 1 + 6
    assert tuple(a) == (1.0, 2.0, 3.0)
    assert isinstance(a.x, float)


def test_vector_cross():
    x, y, z = Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)
    assert x.cross(y) == z
    assert y.cross(z) == x
    assert z.cross(x) == y
    assert x.cross(x) == ZERO
    a, b = Vector3(1, 2, 3), Vector3(4, -5, 6)
    assert allclose(a.cross(b).as_array(), [27, 6, -13])


def test_vector_normalize():
    v = Vector3(3, 0, 4)
    assert v.length == 5
    assert v.normalize().is_close(Vector3(0.6, 0, 0.8), 1e-12)
    assert abs(v.normalize(2.5).length - 2.5) < 1e-12
    with pytest.raises(InvalidGeometry):
        ZERO.normalize()


def test_vector_is_close():
    assert Vector3(0, 0, 0).is_close(Vector3(1e-6, -1e-6, 0), 1e-5)
    assert not Vector3(0, 0, 0).is_close(Vector3(1e-4, 0, 0), 1e-5)


def test_vector_immutable():
    v = Vector3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5


def test_vector_from_iterable():
    assert Vector3.from_iterable(array([1, 2, 3])) == Vector3(1, 2, 3)
    v = Vector3(1, 2, 3)
    assert Vector3.from_iterable(v) is v
    with pytest.raises(InvalidGeometry):
        Vector3.from_iterable([1, 2])


def test_color_from_rgb8():
    assert Color.from_rgb8(255, 0, 51) == Color(1.0, 0.0, 0.2)
    assert Color.from_rgb8(0, 0, 0) == BLACK
    assert Color.from_rgb8(255, 255, 255) == WHITE
    assert Color.from_rgb8(12.0, 200, 77) == Color.from_rgb8(12, 200, 77)
    with pytest.raises(InvalidGeometry):
        Color.from_rgb8(-1, 0, 0)
    with pytest.raises(InvalidGeometry):
        Color(1.5, 0, 0)


def test_color_coerce():
    assert Color.coerce(WHITE) is WHITE
    assert Color.coerce((0, 255, 0)) == Color(0, 1, 0)


@pytest.mark.parametrize("value", ["abc", (None, 0, 0), ("red", 0, 0), 5, (0, float("nan"), 0)])
def test_color_coerce_rejects_non_numeric(value):
    with pytest.raises(InvalidGeometry):
        Color.coerce(value)


@pytest.fixture
def triangle():
    return Triangle(Vector3(0, 0, 0), Vector3(2, 0, 0), Vector3(0, 2, 0), WHITE)


def test_triangle(triangle):
    assert triangle.area == 2.0
    assert triangle.normal == Vector3(0, 0, 4)
    assert triangle.as_floats() == (0, 0, 0, 2, 0, 0, 0, 2, 0)
    assert not triangle.is_degenerate()


def test_degenerate_triangle():
    p = Vector3(1, 1, 1)
    assert Triangle(p, p, Vector3(0, 0, 0), BLACK).is_degenerate()
    collinear = Triangle(Vector3(0, 0, 0), Vector3(1, 1, 1), Vector3(2, 2, 2), BLACK)
    assert collinear.is_degenerate()
    assert abs(Triangle(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0), BLACK).area - 0.5) < 1e-12
