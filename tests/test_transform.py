import math

import pytest

from meshforge.matrices import identity4
from meshforge.transform import Transform
from meshforge.vectors import Vector3, Vector4


def test_default_matrix_is_identity():
    assert Transform().matrix() == identity4()


def test_position_moves_origin():
    t = Transform()
    t.set_position(Vector3(4, -2, 7))
    result = tuple(t.matrix() * Vector4(0, 0, 0, 1))
    assert result == pytest.approx((4, -2, 7, 1), abs=1e-9)


def test_position_component_setters():
    t = Transform()
    t.set_position_x(1)
    t.set_position_y(2)
    t.set_position_z(3)
    assert t.position == Vector3(1, 2, 3)


def test_move_accumulates():
    t = Transform()
    delta = Vector3(1.5, -2, 0.5)
    t.move(delta)
    t.move(delta)
    assert t.position == delta * 2


def test_move_components():
    t = Transform()
    t.move_x(2)
    t.move_y(-1)
    t.move_z(0.5)
    t.move_x(2)
    assert t.position == Vector3(4, -1, 0.5)


def test_angles_degrees_round_trip():
    t = Transform()
    t.set_angles(Vector3(90, 45, 30), in_radians=False)
    assert tuple(t.get_angles(in_radians=False)) == pytest.approx((90, 45, 30), abs=1e-9)
    assert tuple(t.get_angles()) == pytest.approx(
        (math.radians(90), math.radians(45), math.radians(30)), abs=1e-9
    )


def test_single_angle_setters_in_degrees():
    t = Transform()
    t.set_angle_x(10, in_radians=False)
    t.set_angle_y(20, in_radians=False)
    t.set_angle_z(30, in_radians=False)
    assert tuple(t.get_angles(False)) == pytest.approx((10, 20, 30), abs=1e-9)


def test_rotation_about_z_turns_x_into_y():
    t = Transform()
    t.set_angle_z(math.pi / 2)
    result = tuple(t.matrix() * Vector4(1, 0, 0, 1))
    assert result == pytest.approx((0, 1, 0, 1), abs=1e-9)


def test_scale_setters_scale_points():
    t = Transform()
    t.set_scale_x(2)
    t.set_scale_y(3)
    t.set_scale_z(4)
    assert t.scales == Vector3(2, 3, 4)
    assert tuple(t.matrix() * Vector4(1, 1, 1, 1)) == pytest.approx((2, 3, 4, 1), abs=1e-9)


def test_scaling_happens_before_translation():
    t = Transform()
    t.set_scales(Vector3(2, 2, 2))
    t.set_position(Vector3(1, 0, 0))
    result = tuple(t.matrix() * Vector4(1, 1, 1, 1))
    assert result == pytest.approx((3, 2, 2, 1), abs=1e-9)


def test_inverse_round_trip():
    t = Transform()
    t.set_position(Vector3(3, -4, 5))
    t.set_angles(Vector3(0.3, 1.1, -0.7))
    t.set_scales(Vector3(0.5, 2, 1.5))
    m = t.matrix()
    point = Vector4(7, -1, 2, 1)
    result = tuple(m.inverse() * (m * point))
    assert result == pytest.approx((7, -1, 2, 1), abs=1e-9)