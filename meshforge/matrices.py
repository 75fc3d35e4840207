"""3x3 and 4x4 matrices and builders for common transformation matrices."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from .vectors import Vector3, Vector4

_SINGULAR_TOLERANCE = 1e-12


class _SquareMatrix:
    """Row-major square matrix of floats."""

    _SIZE = 0
    _VECTOR: type = tuple
    __slots__ = ("_m",)

    def __init__(self, rows: Iterable[Iterable[float]] | None = None) -> None:
        n = self._SIZE
        if rows is None:
            self._m = [[0.0] * n for _ in range(n)]
            return
        m = [[float(v) for v in row] for row in rows]
        if len(m) != n or any(len(row) != n for row in m):
            raise ValueError(f"expected a {n}x{n} matrix")
        self._m = m

    def _check(self, index: int) -> int:
        if not 0 <= index < self._SIZE:
            raise IndexError(f"index {index} out of range for a {self._SIZE}x{self._SIZE} matrix")
        return index

    def _get(self, key: tuple[int, int]) -> float:
        row, col = key
        return self._m[self._check(row)][self._check(col)]

    def _set(self, key: tuple[int, int], value: float) -> None:
        row, col = key
        self._m[self._check(row)][self._check(col)] = float(value)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return (tuple(row) for row in self._m)

    def _row_vector(self, index: int):
        return self._VECTOR(*self._m[self._check(index)])

    def _col_vector(self, index: int):
        self._check(index)
        return self._VECTOR(*(row[index] for row in self._m))

    def _transposed(self):
        return type(self)(zip(*self._m))

    def _inverted(self):
        n = self._SIZE
        aug = [row[:] + [1.0 if i == j else 0.0 for j in range(n)] for i, row in enumerate(self._m)]
        for col in range(n):
            pivot = max(range(col, n), key=lambda r: abs(aug[r][col]))
            if abs(aug[pivot][col]) < _SINGULAR_TOLERANCE:
                raise ValueError("matrix is singular")
            aug[col], aug[pivot] = aug[pivot], aug[col]
            p = aug[col][col]
            aug[col] = [v / p for v in aug[col]]
            for r in range(n):
                factor = aug[r][col]
                if r != col and factor != 0.0:
                    aug[r] = [a - factor * b for a, b in zip(aug[r], aug[col])]
        return type(self)(row[n:] for row in aug)

    def _plus(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(
            [a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._m, other._m)
        )

    def _minus(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(
            [a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._m, other._m)
        )

    def _times(self, other):
        if type(other) is type(self):
            cols = list(zip(*other._m))
            return type(self)(
                [sum(a * b for a, b in zip(row, col)) for col in cols] for row in self._m
            )
        if isinstance(other, self._VECTOR):
            comps = tuple(other)
            return self._VECTOR(*(sum(a * b for a, b in zip(row, comps)) for row in self._m))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._m!r})"


class Matrix3(_SquareMatrix):
    """A 3x3 matrix acting on Vector3."""

    _SIZE = 3
    _VECTOR = Vector3
    __slots__ = ()

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._get(key)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._set(key, value)

    def row(self, index: int) -> Vector3:
        """The row at ``index`` as a vector."""
        return self._row_vector(index)

    def col(self, index: int) -> Vector3:
        """The column at ``index`` as a vector."""
        return self._col_vector(index)

    def inverse(self) -> Matrix3:
        """The inverse matrix; raises ValueError when the matrix is singular."""
        return self._inverted()

    def transpose(self) -> Matrix3:
        """The transposed matrix."""
        return self._transposed()

    def __add__(self, other):
        return self._plus(other)

    def __sub__(self, other):
        return self._minus(other)

    def __mul__(self, other):
        return self._times(other)


class Matrix4(_SquareMatrix):
    """A 4x4 matrix acting on Vector4."""

    _SIZE = 4
    _VECTOR = Vector4
    __slots__ = ()

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._get(key)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._set(key, value)

    def row(self, index: int) -> Vector4:
        """The row at ``index`` as a vector."""
        return self._row_vector(index)

    def col(self, index: int) -> Vector4:
        """The column at ``index`` as a vector."""
        return self._col_vector(index)

    def inverse(self) -> Matrix4:
        """The inverse matrix; raises ValueError when the matrix is singular."""
        return self._inverted()

    def __add__(self, other):
        return self._plus(other)

    def __sub__(self, other):
        return self._minus(other)

    def __mul__(self, other):
        return self._times(other)


def identity3() -> Matrix3:
    return Matrix3([[1, 0, 0], [0, 1, 0], [0, 0, 1]])


def translation3(x: float, y: float) -> Matrix3:
    return Matrix3([[1, 0, x], [0, 1, y], [0, 0, 1]])


def scaling3(x: float, y: float) -> Matrix3:
    return Matrix3([[x, 0, 0], [0, y, 0], [0, 0, 1]])


def rotation3(angle: float) -> Matrix3:
    """Rotation about the origin by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Matrix3([[c, -s, 0], [s, c, 0], [0, 0, 1]])


def shearing3(x: float, y: float) -> Matrix3:
    return Matrix3([[1, x, 0], [y, 1, 0], [0, 0, 1]])


def identity4() -> Matrix4:
    return Matrix4([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])


def translation4(x: float, y: float, z: float) -> Matrix4:
    return Matrix4([[1, 0, 0, x], [0, 1, 0, y], [0, 0, 1, z], [0, 0, 0, 1]])


def scaling4(x: float, y: float, z: float) -> Matrix4:
    return Matrix4([[x, 0, 0, 0], [0, y, 0, 0], [0, 0, z, 0], [0, 0, 0, 1]])


def rotation_x(angle: float) -> Matrix4:
    c, s = math.cos(angle), math.sin(angle)
    return Matrix4([[1, 0, 0, 0], [0, c, -s, 0], [0, s, c, 0], [0, 0, 0, 1]])


def rotation_y(angle: float) -> Matrix4:
    c, s = math.cos(angle), math.sin(angle)
    return Matrix4([[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1]])


def rotation_z(angle: float) -> Matrix4:
    c, s = math.cos(angle), math.sin(angle)
    return Matrix4([[c, -s, 0, 0], [s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])


def rotation4(angle_x: float, angle_y: float, angle_z: float) -> Matrix4:
    """Rotation about x, then y, then z (angles in radians)."""
    return rotation_z(angle_z) * rotation_y(angle_y) * rotation_x(angle_x)


def matrix4_to_3(m: Matrix4) -> Matrix3:
    """The upper-left 3x3 block of ``m``."""
    return Matrix3([m[r, c] for c in range(3)] for r in range(3))


def light_view(point: Vector3, light: Vector3, up: Vector3) -> Matrix4:
    """View matrix of an eye at ``point`` looking towards ``light``."""
    forward = (light - point).normalize()
    side = forward.cross(up).normalize()
    true_up = side.cross(forward)
    return Matrix4(
        [
            [side.x, side.y, side.z, -side.dot(point)],
            [true_up.x, true_up.y, true_up.z, -true_up.dot(point)],
            [-forward.x, -forward.y, -forward.z, forward.dot(point)],
            [0, 0, 0, 1],
        ]
    )


def orthographic_projection(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Matrix4:
    """Orthographic projection of the given box onto the [-1, 1] cube."""
    return Matrix4(
        [
            [2 / (right - left), 0, 0, -(right + left) / (right - left)],
            [0, 2 / (top - bottom), 0, -(top + bottom) / (top - bottom)],
            [0, 0, -2 / (far - near), -(far + near) / (far - near)],
            [0, 0, 0, 1],
        ]
    )


def perspective_projection(fov_y: float, near: float, far: float, aspect: float) -> Matrix4:
    """Perspective projection; ``fov_y`` is the vertical field of view in radians."""
    f = 1.0 / math.tan(fov_y / 2)
    return Matrix4(
        [
            [f / aspect, 0, 0, 0],
            [0, f, 0, 0],
            [0, 0, (far + near) / (near - far), 2 * far * near / (near - far)],
            [0, 0, -1, 0],
        ]
    )