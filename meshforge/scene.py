"""An ordered collection of scene objects and the lights among them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .camera import Camera
from .lights import Light
from .mesh import SceneObject
from .shapes import Grid


@dataclass
class SpecialSceneObjects:
    """Objects the scene keeps aside from its ordinary list."""

    default_camera: Camera | None = None
    horizontal_grid: Grid | None = None
    vertical_grid: Grid | None = None


@dataclass
class Scene:
    """Objects in display order; lights added to it are also kept in ``light_sources``."""

    special_scene_objects: SpecialSceneObjects = field(default_factory=SpecialSceneObjects)
    light_sources: list[Light] = field(default_factory=list)
    _objects: list[SceneObject] = field(default_factory=list, repr=False)

    def add_object(self, obj: SceneObject) -> None:
        self._objects.append(obj)
        if isinstance(obj, Light):
            self.light_sources.append(obj)

    def remove_object(self, obj: SceneObject) -> None:
        """Remove ``obj``; raises ValueError if it is not in the scene."""
        self._objects.remove(obj)

    def remove_object_at(self, index: int) -> None:
        """Remove the object at ``index``; raises IndexError when out of range."""
        if not 0 <= index < len(self._objects):
            raise IndexError(f"object index {index} out of range")
        del self._objects[index]

    def move_object(self, object_id: int, target_id: int) -> None:
        """Move the object at ``object_id`` so that it ends up at ``target_id``."""
        if not 0 <= object_id < len(self._objects):
            raise IndexError(f"object index {object_id} out of range")
        moved = self._objects.pop(object_id)
        if not 0 <= target_id <= len(self._objects):
            self._objects.insert(object_id, moved)
            raise IndexError(f"target index {target_id} out of range")
        self._objects.insert(target_id, moved)

    def get_object(self, index: int) -> SceneObject | None:
        """The object at ``index``, or None when there is none."""
        if not 0 <= index < len(self._objects):
            return None
        return self._objects[index]

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(self._objects)