"""How an object is drawn in the viewport and which part of it is selected."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .color import GRAY, ORANGE, Color


class RenderMode(Enum):
    NONE = auto()
    WIREFRAME = auto()
    RASTER = auto()


class RasterMode(Enum):
    NONE = auto()
    COLOR = auto()
    TEXTURE = auto()


class Shading(Enum):
    NONE = auto()
    FLAT = auto()
    GOURAUD = auto()
    PHONG = auto()


class LightingModel(Enum):
    NONE = auto()
    FACE_RATIO = auto()
    LAMBERT = auto()


@dataclass
class DisplaySettings:
    """Rendering options of one object."""

    hide_unseen_wireframes: bool = False
    color_wireframes: bool = False
    render_mode: RenderMode = RenderMode.RASTER
    raster_mode: RasterMode = RasterMode.COLOR
    shading_mode: Shading = Shading.PHONG
    lighting_mode: LightingModel = LightingModel.FACE_RATIO


class DisplayMode(Enum):
    WIREFRAME = auto()
    SOLID = auto()
    TEXTURED = auto()


class SelectMode(Enum):
    OBJECTS = auto()
    FACES = auto()
    EDGES = auto()
    VERTICES = auto()
    NONE = auto()


_NO_EDGE = (-1, -1)


@dataclass
class ViewportDisplay:
    """Colours of an object and the part of it currently selected."""

    display_mode: DisplayMode = DisplayMode.WIREFRAME
    color: Color = GRAY
    wireframe_color: Color = Color(200, 110, 170)
    select_color: Color = ORANGE
    selected_part: SelectMode = SelectMode.NONE
    selected_vertex: int = -1
    selected_edge: tuple[int, int] = _NO_EDGE
    selected_face: int = -1

    def _select(
        self,
        part: SelectMode,
        vertex: int = -1,
        edge: tuple[int, int] = _NO_EDGE,
        face: int = -1,
    ) -> None:
        self.selected_part = part
        self.selected_vertex = vertex
        self.selected_edge = edge
        self.selected_face = face

    def select_object(self) -> None:
        """Toggle selection of the whole object."""
        if self.selected_part is SelectMode.OBJECTS:
            self._select(SelectMode.NONE)
        else:
            self._select(SelectMode.OBJECTS)

    def select_face(self, face_id: int) -> None:
        """Select a face, or clear the selection if a face is already selected."""
        if self.selected_part is SelectMode.FACES:
            self._select(SelectMode.NONE)
        else:
            self._select(SelectMode.FACES, face=face_id)

    def select_edge(self, v1: int, v2: int) -> None:
        """Select an edge, or clear the selection if an edge is already selected."""
        if self.selected_part is SelectMode.EDGES:
            self._select(SelectMode.NONE)
        else:
            self._select(SelectMode.EDGES, edge=(v1, v2))

    def select_vertex(self, vertex_id: int) -> None:
        """Select a vertex; selecting the selected vertex again clears it."""
        if self.selected_part is SelectMode.VERTICES and self.selected_vertex == vertex_id:
            self._select(SelectMode.NONE)
        else:
            self._select(SelectMode.VERTICES, vertex=vertex_id)

    def unselect(self) -> None:
        """Clear any selection."""
        self._select(SelectMode.NONE)