"""Position, rotation and scale of an object, combined into one model matrix."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .matrices import Matrix4, rotation4, scaling4, translation4
from .vectors import Vector3


def _radians(value: float, in_radians: bool) -> float:
    return value if in_radians else math.radians(value)


def _unit_scale() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)


@dataclass
class Transform:
    """Translation, rotation (stored in radians) and scale of an object.

    The model matrix applies scaling first, then rotation, then translation.
    """

    position: Vector3 = field(default_factory=Vector3)
    angles: Vector3 = field(default_factory=Vector3)
    scales: Vector3 = field(default_factory=_unit_scale)

    def matrix(self) -> Matrix4:
        """The model matrix ``T * R * S``."""
        return (
            translation4(*self.position)
            * rotation4(*self.angles)
            * scaling4(*self.scales)
        )

    def get_angles(self, in_radians: bool = True) -> Vector3:
        """Rotation angles about x, y and z, in radians or degrees."""
        if in_radians:
            return self.angles
        return Vector3(*(math.degrees(a) for a in self.angles))

    def set_position(self, position: Vector3) -> None:
        self.position = position

    def set_position_x(self, value: float) -> None:
        self.position = replace(self.position, x=value)

    def set_position_y(self, value: float) -> None:
        self.position = replace(self.position, y=value)

    def set_position_z(self, value: float) -> None:
        self.position = replace(self.position, z=value)

    def move(self, delta: Vector3) -> None:
        """Shift the position by ``delta``."""
        self.position = self.position + delta

    def move_x(self, delta: float) -> None:
        self.position = replace(self.position, x=self.position.x + delta)

    def move_y(self, delta: float) -> None:
        self.position = replace(self.position, y=self.position.y + delta)

    def move_z(self, delta: float) -> None:
        self.position = replace(self.position, z=self.position.z + delta)

    def set_angles(self, angles: Vector3, in_radians: bool = True) -> None:
        self.angles = Vector3(*(_radians(a, in_radians) for a in angles))

    def set_angle_x(self, angle: float, in_radians: bool = True) -> None:
        self.angles = replace(self.angles, x=_radians(angle, in_radians))

    def set_angle_y(self, angle: float, in_radians: bool = True) -> None:
        self.angles = replace(self.angles, y=_radians(angle, in_radians))

    def set_angle_z(self, angle: float, in_radians: bool = True) -> None:
        self.angles = replace(self.angles, z=_radians(angle, in_radians))

    def set_scales(self, scales: Vector3) -> None:
        self.scales = scales

    def set_scale_x(self, value: float) -> None:
        self.scales = replace(self.scales, x=value)

    def set_scale_y(self, value: float) -> None:
        self.scales = replace(self.scales, y=value)

    def set_scale_z(self, value: float) -> None:
        self.scales = replace(self.scales, z=value)