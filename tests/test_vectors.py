import math

import pytest

from meshforge.color import BLACK, WHITE, Color
from meshforge.vectors import (
    Vector2,
    Vector3,
    Vector4,
    color_to_vector3,
    vector2_to_3,
    vector2_to_4,
    vector3_to_2,
    vector3_to_4,
    vector3_to_color,
    vector4_to_2,
    vector4_to_3,
)


def test_add_then_subtract_round_trips():
    v = Vector3(1.5, -2.0, 4.0)
    w = Vector3(0.5, 3.0, -1.0)
    assert v + w - w == v


def test_scalar_multiplication_is_symmetric():
    v = Vector3(1.0, 2.0, 3.0)
    assert v * 2 == 2 * v
    assert v * 2 / 2 == v


def test_componentwise_product_with_ones():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    assert v * Vector4(1, 1, 1, 1) == v


def test_negation():
    v = Vector2(3.0, -4.0)
    assert -v + v == Vector2()


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3(1, 2, 3) / 0


def test_mixing_vector_types_raises():
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) + Vector2(1, 2)


def test_length_of_scaled_vector():
    v = Vector3(1.0, 2.0, 2.0)
    assert (v * 3).length() == pytest.approx(v.length() * 3)


def test_normalize_gives_unit_length_and_same_direction():
    v = Vector3(3.0, -7.0, 2.0)
    n = v.normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.is_parallel(v)
    assert n.dot(v) > 0


def test_normalize_zero_vector_stays_zero():
    assert Vector3().normalize() == Vector3()


def test_cross_is_orthogonal_to_both_operands():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_cross_is_anticommutative():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    assert a.cross(b) == -b.cross(a)


def test_cross_of_axes():
    assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)


def test_dot_with_self_is_squared_length():
    v = Vector3(2.0, -3.0, 6.0)
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_is_parallel():
    v = Vector3(1.0, 2.0, 3.0)
    assert v.is_parallel(v * -4.5)
    assert not v.is_parallel(Vector3(3.0, 2.0, 1.0))


def test_conversions_round_trip():
    v3 = Vector3(1.0, 2.0, 3.0)
    v2 = Vector2(4.0, 5.0)
    assert vector4_to_3(vector3_to_4(v3)) == v3
    assert vector3_to_2(vector2_to_3(v2)) == v2
    assert vector4_to_2(vector2_to_4(v2)) == v2


def test_homogeneous_points_have_unit_w():
    assert vector3_to_4(Vector3(1, 2, 3)).w == 1.0
    assert vector2_to_4(Vector2(1, 2)).w == vector3_to_4(Vector3()).w


def test_vector4_to_3_ignores_w():
    assert vector4_to_3(Vector4(1, 2, 3, 9)) == vector4_to_3(Vector4(1, 2, 3, 1))


def test_color_to_vector_maps_channel_range_to_unit_range():
    assert color_to_vector3(WHITE) == Vector3(1.0, 1.0, 1.0)
    assert color_to_vector3(BLACK) == Vector3()


def test_color_to_vector_keeps_channel_order():
    v = color_to_vector3(Color(255, 0, 0))
    assert v.x == 1.0 and v.y == 0.0 and v.z == 0.0


@pytest.mark.parametrize("color", [Color(0, 0, 0), Color(12, 128, 255), Color(1, 2, 3)])
def test_color_vector_round_trip(color):
    assert vector3_to_color(color_to_vector3(color)) == color