"""Fixed-size two-dimensional buffers, such as depth and hit-detection buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Buffer(Generic[T]):
    """A rows x cols grid filled with a default value.

    ``buffer[y]`` is the row list, so ``buffer[y][x] = value`` writes a cell.
    Default values are shared between cells, so they should be immutable.
    """

    def __init__(self, rows: int, cols: int, default: T) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("buffer dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self.default = default
        self._data: list[list[T]] = [[default] * cols for _ in range(rows)]

    def __getitem__(self, row: int) -> list[T]:
        return self._data[row]

    def __iter__(self) -> Iterator[list[T]]:
        return iter(self._data)

    def __len__(self) -> int:
        """Number of cells, default or not."""
        return self.rows * self.cols

    def non_empty_elements(self) -> int:
        """Number of cells holding something other than the default."""
        return sum(value != self.default for row in self._data for value in row)

    def is_empty(self) -> bool:
        """True when every cell holds the default."""
        return all(value == self.default for row in self._data for value in row)

    def clear(self) -> None:
        """Reset every cell to the default."""
        for row in self._data:
            row[:] = [self.default] * self.cols


@dataclass(frozen=True)
class IdBufferElement:
    """What was drawn at one pixel: object, face, vertex and edge ids."""

    is_empty: bool = True
    mock: bool = False
    object_id: int = -1
    face_id: int = -1
    vertex_id: int = -1
    edge_vertices: tuple[int, int] = (-1, -1)


class HitDetectionManager:
    """Holds the id buffer used to find what lies under a pixel."""

    def __init__(self, height: int, width: int) -> None:
        self.id_buffer: Buffer[IdBufferElement] = Buffer(height, width, IdBufferElement())