"""Two-, three- and four-component vectors and conversions between them."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, fields
from numbers import Real
from typing import Callable, Iterator

from .color import CHANNEL_MAX, Color

_PARALLEL_TOLERANCE = 1e-9


class _Vector:
    """Component-wise arithmetic shared by all vector types."""

    __slots__ = ()

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))

    def _combine(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, type(self)):
            rhs = tuple(other)
        elif isinstance(other, Real):
            rhs = (other,) * len(fields(self))
        else:
            return NotImplemented
        return type(self)(*map(op, self, rhs))

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._combine(other, operator.mul)
        return NotImplemented

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __neg__(self):
        return type(self)(*(-c for c in self))


@dataclass(frozen=True, slots=True)
class Vector2(_Vector):
    """A point or direction on a plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Vector3(_Vector):
    """A point or direction in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3:
        """Unit vector of the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector3(self.x, self.y, self.z)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def cross(self, other: Vector3) -> Vector3:
        """Cross product ``self × other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def is_parallel(self, other: Vector3) -> bool:
        """True when both vectors lie on one line through the origin."""
        return self.cross(other).length() <= _PARALLEL_TOLERANCE


@dataclass(frozen=True, slots=True)
class Vector4(_Vector):
    """A homogeneous point or direction."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


def vector4_to_2(vector: Vector4) -> Vector2:
    """Drop the z and w components."""
    return Vector2(vector.x, vector.y)


def vector4_to_3(vector: Vector4) -> Vector3:
    """Drop the w component."""
    return Vector3(vector.x, vector.y, vector.z)


def vector3_to_2(vector: Vector3) -> Vector2:
    """Drop the z component."""
    return Vector2(vector.x, vector.y)


def vector3_to_4(vector: Vector3) -> Vector4:
    """Homogeneous point with w set to 1."""
    return Vector4(vector.x, vector.y, vector.z, 1.0)


def vector2_to_3(vector: Vector2) -> Vector3:
    """Point on the z = 0 plane."""
    return Vector3(vector.x, vector.y, 0.0)


def vector2_to_4(vector: Vector2) -> Vector4:
    """Homogeneous point on the z = 0 plane."""
    return Vector4(vector.x, vector.y, 0.0, 1.0)


def color_to_vector3(color: Color) -> Vector3:
    """Map blue, green, red in [0, 255] to x, y, z in [0.0, 1.0]."""
    return Vector3(color.b / CHANNEL_MAX, color.g / CHANNEL_MAX, color.r / CHANNEL_MAX)


def _to_channel(value: float) -> int:
    return max(0, min(CHANNEL_MAX, round(value * CHANNEL_MAX)))


def vector3_to_color(vector: Vector3) -> Color:
    """Map x, y, z in [0.0, 1.0] to blue, green, red in [0, 255]."""
    return Color(_to_channel(vector.x), _to_channel(vector.y), _to_channel(vector.z))