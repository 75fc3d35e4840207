import pytest

from meshforge.mesh import Mesh
from meshforge.uv import Plane, generate_planar_uv
from meshforge.vectors import Vector2, Vector3


def _mesh(*points):
    return Mesh(vertices=[Vector3(*p) for p in points])


def test_xy_projection_fits_unit_square():
    mesh = _mesh((0, 0, 7), (2, 4, -3), (1, 1, 0))
    generate_planar_uv(mesh, Plane.XY)
    assert mesh.texture_coords[0] == Vector2(0, 0)
    assert mesh.texture_coords[1] == Vector2(1, 1)
    assert mesh.texture_coords[2] == Vector2(0.5, 0.25)


def test_coords_stay_within_unit_range():
    mesh = _mesh((-5, 3, 2), (4, -1, 8), (0, 0, 0), (2, 9, -4))
    generate_planar_uv(mesh, Plane.XZ)
    assert len(mesh.texture_coords) == len(mesh.vertices)
    assert all(0 <= uv.x <= 1 and 0 <= uv.y <= 1 for uv in mesh.texture_coords)


def test_flat_axis_gives_zero():
    mesh = _mesh((0, 1, 5), (3, 2, 5), (6, 3, 5))
    generate_planar_uv(mesh, Plane.XZ)
    assert [uv.y for uv in mesh.texture_coords] == [0, 0, 0]


def test_yz_uses_y_and_z():
    mesh = _mesh((100, 0, 0), (-100, 2, 4))
    generate_planar_uv(mesh, Plane.YZ)
    assert mesh.texture_coords == [Vector2(0, 0), Vector2(1, 1)]


def test_replaces_existing_coords():
    mesh = _mesh((0, 0, 0), (1, 1, 1))
    mesh.texture_coords = [Vector2(9, 9)] * 5
    generate_planar_uv(mesh, Plane.XY)
    assert len(mesh.texture_coords) == 2


def test_empty_mesh_gets_no_coords():
    mesh = Mesh()
    mesh.texture_coords = [Vector2(1, 1)]
    generate_planar_uv(mesh, Plane.XY)
    assert mesh.texture_coords == []


@pytest.mark.parametrize("plane", list(Plane))
def test_every_plane_spans_corners(plane):
    mesh = _mesh((0, 0, 0), (1, 2, 3))
    generate_planar_uv(mesh, plane)
    assert mesh.texture_coords == [Vector2(0, 0), Vector2(1, 1)]