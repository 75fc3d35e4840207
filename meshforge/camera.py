"""A perspective camera placed in the scene."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .matrices import Matrix4
from .mesh import SceneObject
from .vectors import Vector3, vector4_to_3


@dataclass(eq=False)
class Camera(SceneObject):
    """A camera with a perspective projection; ``fov_y`` is in degrees."""

    DEFAULT_FOV_Y: ClassVar[float] = 60.0
    DEFAULT_NEAR_PLANE: ClassVar[float] = 0.1
    DEFAULT_FAR_PLANE: ClassVar[float] = 1000.0

    fov_y: float = DEFAULT_FOV_Y
    aspect: float = 1.0
    near_plane: float = DEFAULT_NEAR_PLANE
    far_plane: float = DEFAULT_FAR_PLANE
    fov: float = 200.0

    def view_matrix(self) -> Matrix4:
        """World-to-camera matrix: the inverse of the camera's model matrix."""
        return self.transform.matrix().inverse()

    def projection_matrix(self) -> Matrix4:
        """Perspective projection mapping the near and far planes to -1 and 1."""
        tan_half = math.tan(math.radians(self.fov_y / 2))
        near, far = self.near_plane, self.far_plane
        return Matrix4(
            [
                [1 / (tan_half * self.aspect), 0, 0, 0],
                [0, 1 / tan_half, 0, 0],
                [0, 0, -(far + near) / (far - near), -(2 * far * near) / (far - near)],
                [0, 0, -1, 0],
            ]
        )

    def set_perspective(
        self, fov_y: float, aspect: float, near_plane: float, far_plane: float
    ) -> None:
        self.fov_y = fov_y
        self.aspect = aspect
        self.near_plane = near_plane
        self.far_plane = far_plane

    def frustum(self) -> list[Vector3]:
        """Corners of the view frustum in world space.

        Order: near top-left, near top-right, near bottom-left, near bottom-right,
        then the same four on the far plane.
        """
        model = self.transform.matrix()
        pos = self.transform.position
        forward = vector4_to_3(model.col(2) * -1.0).normalize()
        up = vector4_to_3(model.col(1) * -1.0).normalize()
        right = vector4_to_3(model.col(0) * -1.0).normalize()

        tan_half = math.tan(math.radians(self.fov_y) * 0.5)
        corners: list[Vector3] = []
        for distance in (self.near_plane, self.far_plane):
            height = 2 * tan_half * distance
            width = height * self.aspect
            center = pos + forward * distance
            half_up, half_right = up * (height / 2), right * (width / 2)
            corners += [
                center + half_up - half_right,
                center + half_up + half_right,
                center - half_up - half_right,
                center - half_up + half_right,
            ]
        return corners