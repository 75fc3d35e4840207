import pytest

from meshforge.camera import Camera
from meshforge.lights import DistantLight, PointLight
from meshforge.mesh import SceneObject
from meshforge.scene import Scene, SpecialSceneObjects
from meshforge.vectors import Vector3


def _scene_with(count):
    scene = Scene()
    objects = [SceneObject() for _ in range(count)]
    for obj in objects:
        scene.add_object(obj)
    return scene, objects


def test_add_keeps_order():
    scene, objects = _scene_with(3)
    assert len(scene) == 3
    assert list(scene) == objects


def test_lights_are_tracked():
    scene = Scene()
    camera = Camera()
    light = DistantLight(Vector3(1.0, 0.0, 0.0), shadow_map_size=2)
    point = PointLight()
    for obj in (camera, light, point):
        scene.add_object(obj)
    assert scene.light_sources == [light, point]
    assert len(scene) == 3


def test_get_object():
    scene, objects = _scene_with(2)
    assert scene.get_object(1) is objects[1]
    assert scene.get_object(2) is None
    assert scene.get_object(-1) is None


def test_remove_object_by_identity():
    scene, objects = _scene_with(3)
    scene.remove_object(objects[1])
    assert list(scene) == [objects[0], objects[2]]


def test_remove_missing_object_raises():
    scene, _ = _scene_with(1)
    with pytest.raises(ValueError):
        scene.remove_object(SceneObject())


def test_remove_object_at():
    scene, objects = _scene_with(3)
    scene.remove_object_at(0)
    assert list(scene) == objects[1:]


@pytest.mark.parametrize("index", [-1, 3])
def test_remove_object_at_out_of_range(index):
    scene, _ = _scene_with(3)
    with pytest.raises(IndexError):
        scene.remove_object_at(index)
    assert len(scene) == 3


def test_move_object_forward_and_back():
    scene, objects = _scene_with(4)
    scene.move_object(0, 2)
    assert list(scene) == [objects[1], objects[2], objects[0], objects[3]]
    scene.move_object(2, 0)
    assert list(scene) == objects


def test_move_object_bad_target_leaves_order():
    scene, objects = _scene_with(3)
    with pytest.raises(IndexError):
        scene.move_object(1, 5)
    assert list(scene) == objects


def test_move_object_bad_source():
    scene, _ = _scene_with(2)
    with pytest.raises(IndexError):
        scene.move_object(2, 0)


def test_special_objects_start_empty():
    special = Scene().special_scene_objects
    assert special == SpecialSceneObjects(None, None, None)
    camera = Camera()
    special.default_camera = camera
    assert special.default_camera is camera