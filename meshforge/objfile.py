"""Reading and writing meshes in the Wavefront OBJ format.

Only plain vertices (``v``) and triangular faces (``f``) are handled; face
indices are 1-based and must be positive.
"""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Callable, TypeVar

from .mesh import Mesh
from .vectors import Vector3

N = TypeVar("N", int, float)


def _parse_fields(tokens: list[str], count: int, convert: Callable[[str], N], default: N) -> list[N]:
    """Convert up to ``count`` tokens; parsing stops at the first bad token."""
    values = [default] * count
    for slot, token in enumerate(tokens[:count]):
        try:
            values[slot] = convert(token)
        except ValueError:
            break
    return values


def _face_index(token: str) -> int:
    # "f 1/2/3" style tokens: only the vertex index is used.
    return int(token.split("/", 1)[0])


def load_objects(path: str | os.PathLike[str]) -> list[Mesh]:
    """Read an OBJ file into a list holding one mesh."""
    vertices: list[Vector3] = []
    indices: list[int] = []

    with open(path, encoding="utf-8") as file:
        for line in file:
            tokens = line.split()
            if not tokens:
                continue
            kind, rest = tokens[0], tokens[1:]
            if kind == "v":
                vertices.append(Vector3(*_parse_fields(rest, 3, float, 0.0)))
            elif kind == "f":
                indices.extend(i - 1 for i in _parse_fields(rest, 3, _face_index, -1))

    mesh = Mesh(
        vertices=vertices,
        transformed_vertices=list(vertices),
        face_vertex_indices=indices,
    )
    return [mesh]


def generate_file_name() -> str:
    """A file name stamped with the current time in milliseconds."""
    return f"object{time.time_ns() // 1_000_000}.obj"


def save_object(obj: Mesh, path: str | os.PathLike[str] | None = None) -> Path:
    """Write the mesh's vertices and faces as OBJ and return the path written.

    Without ``path`` a time-stamped name in the current directory is used.
    """
    target = Path(path) if path is not None else Path(generate_file_name())
    lines = [f"v {v.x:.6f} {v.y:.6f} {v.z:.6f}\n" for v in obj.vertices]
    lines += [f"f {a + 1} {b + 1} {c + 1}\n" for a, b, c in obj.triangles()]
    with open(target, "w", encoding="utf-8") as file:
        file.writelines(lines)
    return target