"""Light sources: distant (directional), point and spot lights."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar, Sequence

from .buffer import Buffer
from .color import WHITE, Color
from .matrices import (
    Matrix4,
    identity4,
    light_view,
    orthographic_projection,
    perspective_projection,
)
from .mesh import SceneObject
from .vectors import Vector3


class LightType(Enum):
    DISTANT = auto()
    SPOT = auto()
    POINT = auto()


@dataclass(eq=False)
class Light(SceneObject):
    """Common properties of every light source."""

    color: Color = WHITE
    bias: float = 0.001
    intensity: float = 1.0
    casts_shadow: bool = True
    light_type: LightType = LightType.DISTANT


class DistantLight(Light):
    """A light infinitely far away that shines along one direction.

    Only ``direction`` matters for lighting; the inherited position is unused.
    """

    DEFAULT_UP: ClassVar[Vector3] = Vector3(0.0, 0.0, 1.0)
    SECOND_CHOICE_UP: ClassVar[Vector3] = Vector3(0.0, 0.0, 1.0)
    DEFAULT_SHADOW_MAP_SIZE: ClassVar[int] = 1024

    def __init__(
        self,
        direction: Vector3,
        shadow_map_size: int = DEFAULT_SHADOW_MAP_SIZE,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("light_type", LightType.DISTANT)
        super().__init__(**kwargs)
        self.direction: Vector3 = direction.normalize()
        self.shadow_map: Buffer[float] = Buffer(shadow_map_size, shadow_map_size, math.inf)
        self.view_matrix: Matrix4 = identity4()
        self.projection_matrix: Matrix4 = identity4()

    def set_view_matrix(self, bbox_center: Vector3, up: Vector3 = DEFAULT_UP) -> None:
        """Look along the light's direction from ``bbox_center``."""
        if up.is_parallel(self.direction):
            up = self.SECOND_CHOICE_UP
        self.view_matrix = light_view(bbox_center, bbox_center + self.direction, up)

    def set_projection_matrix(
        self,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> None:
        """Use an orthographic projection of the given box."""
        self.projection_matrix = orthographic_projection(left, right, bottom, top, near, far)

    def bbox_center(self, bounding_box: Sequence[Vector3]) -> Vector3:
        """Mean of the bounding-box corners."""
        if not bounding_box:
            raise ValueError("bounding box has no vertices")
        count = len(bounding_box)
        total = sum(bounding_box, Vector3())
        return total / count


_CUBE_DIRECTIONS = (
    Vector3(1, 0, 0),
    Vector3(-1, 0, 0),
    Vector3(0, 1, 0),
    Vector3(0, -1, 0),
    Vector3(0, 0, 1),
    Vector3(0, 0, -1),
)
_CUBE_UPS = (
    Vector3(0, -1, 0),
    Vector3(0, -1, 0),
    Vector3(0, 0, 1),
    Vector3(0, 0, -1),
    Vector3(0, -1, 0),
    Vector3(0, -1, 0),
)


@dataclass(eq=False)
class PointLight(Light):
    """A light shining in every direction from its position."""

    FOV: ClassVar[float] = math.pi / 2
    ASPECT: ClassVar[float] = 1.0
    DEFAULT_SHADOW_MAP_SIZE: ClassVar[int] = 512

    light_type: LightType = LightType.POINT
    attenuation_constant: float = 1.0
    attenuation_linear: float = 0.0
    attenuation_quadratic: float = 0.0
    range: float = 50.0
    shadow_maps: list[Buffer[float]] = field(default_factory=list)

    def view_matrix(self, face: int) -> Matrix4:
        """View matrix for one of the six cube-map faces (+x, -x, +y, -y, +z, -z)."""
        if not 0 <= face < len(_CUBE_DIRECTIONS):
            raise IndexError(f"cube face {face} out of range")
        position = self.transform.position
        return light_view(position, position + _CUBE_DIRECTIONS[face], _CUBE_UPS[face])

    def projection_matrix(self, near: float, far: float) -> Matrix4:
        """Perspective projection covering one cube-map face."""
        return perspective_projection(self.FOV, near, far, self.ASPECT)


@dataclass(eq=False)
class SpotLight(Light):
    """A light shining in a cone from its position along ``direction``.

    Angles are in radians.
    """

    DEFAULT_SHADOW_MAP_SIZE: ClassVar[int] = 512
    ASPECT: ClassVar[float] = 1.0
    DEFAULT_UP: ClassVar[Vector3] = Vector3(0.0, 1.0, 0.0)

    light_type: LightType = LightType.SPOT
    direction: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -1.0))
    cutoff_angle: float = math.pi / 4
    inner_angle: float = math.pi / 8
    attenuation_constant: float = 1.0
    attenuation_linear: float = 0.0
    attenuation_quadratic: float = 0.0

    def view_matrix(self) -> Matrix4:
        """Look from the light's position along its direction."""
        position = self.transform.position
        return light_view(position, position + self.direction, self.DEFAULT_UP)

    def projection_matrix(self, near: float, far: float) -> Matrix4:
        """Perspective projection whose field of view spans the whole cone."""
        return perspective_projection(self.cutoff_angle * 2, near, far, self.ASPECT)