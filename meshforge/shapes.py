"""Ready-made meshes: a cube, a cylinder and a flat grid."""

from __future__ import annotations

import math
from enum import Enum, auto

from .mesh import Mesh
from .vectors import Vector2, Vector3


def _half(value: int) -> int:
    """Half of an integer, truncated towards zero."""
    return int(value / 2)


class Cube(Mesh):
    """An axis-aligned cube centred on the origin, built from 12 triangles."""

    DEFAULT_SIDE_LENGTH = 100

    _FACES = (
        0, 1, 2, 2, 3, 0,
        3, 2, 6, 6, 7, 3,
        4, 5, 1, 1, 0, 4,
        7, 6, 5, 5, 4, 7,
        1, 5, 6, 6, 2, 1,
        4, 0, 3, 3, 7, 4,
    )

    def __init__(self, side_length: int = DEFAULT_SIDE_LENGTH) -> None:
        super().__init__()
        self.side_length = side_length
        r = _half(side_length)

        self.vertices = [
            Vector3(-r, r, -r),
            Vector3(r, r, -r),
            Vector3(r, -r, -r),
            Vector3(-r, -r, -r),
            Vector3(-r, r, r),
            Vector3(r, r, r),
            Vector3(r, -r, r),
            Vector3(-r, -r, r),
        ]
        self.transformed_vertices = list(self.vertices)
        self.face_vertex_indices = list(self._FACES)

        # Faces are wound clockwise, so the cross product is flipped.
        self.normals = [
            ((self.vertices[i1] - self.vertices[i0])
             .cross(self.vertices[i2] - self.vertices[i0]) * -1.0).normalize()
            for i0, i1, i2 in self.triangles()
        ]

        self.texture_coords = [Vector2(0.0, 0.0) for _ in self.vertices]

        self.vertex_to_face_normals = [[] for _ in self.vertices]
        for face_id, triangle in enumerate(self.triangles()):
            for vertex_id in triangle:
                self.vertex_to_face_normals[vertex_id].append(face_id)

        self.vertex_normals = [
            sum((self.normals[n] for n in face_ids), Vector3()).normalize()
            for face_ids in self.vertex_to_face_normals
        ]


class Cylinder(Mesh):
    """A closed cylinder along the y axis, centred on the origin.

    Rim vertices alternate bottom, top around the circle; the bottom and
    top centre vertices follow them.
    """

    DEFAULT_RADIUS = 40
    DEFAULT_HEIGHT = 100
    DEFAULT_VERTICES_IN_CIRCLE = 10

    def __init__(
        self,
        radius: int = DEFAULT_RADIUS,
        height: int = DEFAULT_HEIGHT,
        vertices_in_circle: int = DEFAULT_VERTICES_IN_CIRCLE,
    ) -> None:
        super().__init__()
        self.radius = radius
        self.height = height
        self.vertices_in_circle = vertices_in_circle

        n = vertices_in_circle
        half_height = height / 2.0
        steps = range(max(n, 0))

        for it in steps:
            angle = it * 2 * math.pi / n
            x = radius * math.cos(angle)
            z = radius * math.sin(angle)
            self.vertices.append(Vector3(x, -half_height, z))
            self.vertices.append(Vector3(x, half_height, z))

        center_bottom = len(self.vertices)
        self.vertices.append(Vector3(0.0, -half_height, 0.0))
        center_top = len(self.vertices)
        self.vertices.append(Vector3(0.0, half_height, 0.0))

        faces: list[int] = []
        for it in steps:
            nxt = (it + 1) % n
            faces += [center_bottom, nxt * 2, it * 2]
            faces += [center_top, it * 2 + 1, nxt * 2 + 1]

        for it in steps:
            nxt = (it + 1) % n
            bottom, top = it * 2, it * 2 + 1
            bottom_next, top_next = nxt * 2, nxt * 2 + 1
            faces += [bottom, bottom_next, top_next]
            faces += [top_next, top, bottom]

        self.face_vertex_indices = faces
        self.transformed_vertices = list(self.vertices)


class GridOrientation(Enum):
    """Plane a grid lies in: HORIZONTAL is y = 0, VERTICAL is z = 0."""

    HORIZONTAL = auto()
    VERTICAL = auto()


class Grid(Mesh):
    """A square grid of triangles centred on the origin."""

    DEFAULT_ORIENTATION = GridOrientation.VERTICAL
    DEFAULT_LINES_INTERVAL = 50
    DEFAULT_SIZE = 500

    def __init__(
        self,
        orientation: GridOrientation = DEFAULT_ORIENTATION,
        lines_interval: int = DEFAULT_LINES_INTERVAL,
        size: int = DEFAULT_SIZE,
    ) -> None:
        if lines_interval <= 0:
            raise ValueError("lines_interval must be positive")
        super().__init__()
        self.orientation = orientation
        self.lines_interval = lines_interval
        self.size = size

        start, end = -_half(size), _half(size)
        per_row = size // lines_interval + 1
        steps = range(start, end + 1, lines_interval)

        if orientation is GridOrientation.HORIZONTAL:
            self.vertices = [Vector3(x, 0.0, z) for z in steps for x in steps]
        else:
            self.vertices = [Vector3(x, y, 0.0) for y in steps for x in steps]

        faces: list[int] = []
        for row in range(per_row - 1):
            for col in range(per_row - 1):
                base = per_row * row + col
                faces += [base, base + 1, base + per_row]
                faces += [base + per_row, base + per_row + 1, base + 1]
        self.face_vertex_indices = faces
        self.transformed_vertices = list(self.vertices)