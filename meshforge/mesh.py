"""Scene objects, triangle meshes and the interface for drawing them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator

from .display import DisplaySettings, ViewportDisplay
from .transform import Transform
from .vectors import Vector2, Vector3


class RenderStrategy(ABC):
    """A way of drawing a mesh with a renderer."""

    @abstractmethod
    def render(self, obj: Mesh, renderer: Any, obj_id: int) -> None:
        """Draw ``obj`` as scene object number ``obj_id``."""


@dataclass(eq=False)
class SceneObject:
    """Anything placed in a scene."""

    STARTING_POSITION: ClassVar[Vector3] = Vector3(0.0, 0.0, 0.0)

    transform: Transform = field(default_factory=Transform)
    viewport_display: ViewportDisplay = field(default_factory=ViewportDisplay)
    visible_in_scene: bool = True
    true_position: Vector3 = field(default_factory=Vector3)


@dataclass
class Texture:
    """An image applied to a mesh, with the path it was loaded from."""

    image: Any = None
    path: str = ""


@dataclass(eq=False)
class Mesh(SceneObject):
    """A triangle mesh; every three face indices form one triangle."""

    vertices: list[Vector3] = field(default_factory=list)
    transformed_vertices: list[Vector3] = field(default_factory=list)
    face_vertex_indices: list[int] = field(default_factory=list)
    normals: list[Vector3] = field(default_factory=list)
    vertex_to_face_normals: list[list[int]] = field(default_factory=list)
    vertex_normals: list[Vector3] = field(default_factory=list)
    display_settings: DisplaySettings = field(default_factory=DisplaySettings)
    texture_coords: list[Vector2] = field(default_factory=list)
    texture: Texture | None = None
    render_strategy: RenderStrategy | None = None

    def set_render_strategy(self, strategy: RenderStrategy | None) -> None:
        self.render_strategy = strategy

    def triangles(self) -> Iterator[tuple[int, int, int]]:
        """Vertex index triples, one per face."""
        indices = self.face_vertex_indices
        if len(indices) % 3:
            raise ValueError("face index count is not a multiple of three")
        it = iter(indices)
        return zip(it, it, it)

    def copy(self) -> Mesh:
        """A copy with the same geometry and transform and fresh display settings."""
        return Mesh(
            transform=Transform(
                self.transform.position, self.transform.angles, self.transform.scales
            ),
            vertices=list(self.vertices),
            transformed_vertices=list(self.transformed_vertices),
            face_vertex_indices=list(self.face_vertex_indices),
            normals=list(self.normals),
            texture_coords=list(self.texture_coords),
        )