"""BGRA colours with saturating arithmetic and a set of common colours."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from numbers import Real
from typing import Callable

CHANNEL_MIN = 0
CHANNEL_MAX = 255


def _saturate(value: float) -> int:
    return max(CHANNEL_MIN, min(CHANNEL_MAX, int(value)))


@dataclass(frozen=True, slots=True)
class Color:
    """A colour stored in blue, green, red, alpha order.

    Arithmetic works on the blue, green and red channels only, keeps the
    left operand's alpha and saturates every channel to [0, 255].
    """

    b: int = 0
    g: int = 0
    r: int = 0
    a: int = CHANNEL_MAX

    @property
    def channels(self) -> tuple[int, int, int]:
        """The blue, green and red channels."""
        return (self.b, self.g, self.r)

    def _combine(self, other: object, op: Callable[[float, float], float]) -> Color:
        if isinstance(other, Color):
            rhs: tuple[float, ...] = other.channels
        elif isinstance(other, Real):
            rhs = (float(other),) * 3
        else:
            return NotImplemented
        b, g, r = (_saturate(op(x, y)) for x, y in zip(self.channels, rhs))
        return Color(b, g, r, self.a)

    def __add__(self, other: object) -> Color:
        return self._combine(other, operator.add)

    def __sub__(self, other: object) -> Color:
        return self._combine(other, operator.sub)

    def __mul__(self, other: object) -> Color:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: object) -> Color:
        return self._combine(other, operator.truediv)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(0, 0, 255)
GREEN = Color(0, 255, 0)
BLUE = Color(255, 0, 0)
PURPLE = Color(128, 0, 128)
ORANGE = Color(0, 165, 255)
GRAY = Color(128, 128, 128)
TRANSPARENT = Color(0, 0, 0, 0)