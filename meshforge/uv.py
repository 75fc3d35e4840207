"""Planar texture-coordinate projection for meshes."""

from __future__ import annotations

from enum import Enum

from .mesh import Mesh
from .vectors import Vector2

_START_MIN = 1e9
_START_MAX = -1e9


class Plane(Enum):
    """Plane to project onto, named by the two axes it keeps."""

    XY = ("x", "y")
    XZ = ("x", "z")
    YZ = ("y", "z")


def generate_planar_uv(obj: Mesh, plane: Plane) -> None:
    """Set one UV per vertex by projecting onto ``plane`` and fitting the
    bounding box to the unit square."""
    a_axis, b_axis = plane.value
    pairs = [(getattr(v, a_axis), getattr(v, b_axis)) for v in obj.vertices]

    min_a = min([_START_MIN, *(a for a, _ in pairs)])
    max_a = max([_START_MAX, *(a for a, _ in pairs)])
    min_b = min([_START_MIN, *(b for _, b in pairs)])
    max_b = max([_START_MAX, *(b for _, b in pairs)])

    span_a = (max_a - min_a) or 1.0
    span_b = (max_b - min_b) or 1.0

    obj.texture_coords = [
        Vector2((a - min_a) / span_a, (b - min_b) / span_b) for a, b in pairs
    ]