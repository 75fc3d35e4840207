# meshforge

A small, dependency-free toolkit for describing 3D scenes in Python: the
maths, the geometry and the bookkeeping a modeller or renderer is built on.

## What is in it

- `meshforge.vectors`: immutable `Vector2`, `Vector3` and `Vector4` with
  component-wise `+ - * /` (against a vector of the same kind or a number).
  `Vector3` adds `length()`, `normalize()` (the zero vector stays zero),
  `cross()`, `dot()` and `is_parallel()`. Conversion helpers such as
  `vector3_to_4` (w = 1) and `vector4_to_3`, plus `color_to_vector3` and
  `vector3_to_color`, which map channels 0–255 to and from 0.0–1.0.
- `meshforge.color`: an immutable `Color` stored as blue, green, red, alpha.
  Arithmetic touches only blue, green and red, keeps the left operand's
  alpha and clamps every channel to 0–255. Common colours are provided as
  `BLACK`, `WHITE`, `RED`, `GREEN`, `BLUE`, `PURPLE`, `ORANGE`, `GRAY` and
  `TRANSPARENT`.
- `meshforge.matrices`: row-major `Matrix3` and `Matrix4`, indexed as
  `m[row, col]`, with `row()`, `col()`, `inverse()` (raises `ValueError`
  for a singular matrix), `+`, `-`, matrix–matrix and matrix–vector `*`;
  `Matrix3` also has `transpose()`. Builders: `identity3`, `translation3`,
  `scaling3`, `rotation3`, `shearing3`, `identity4`, `translation4`,
  `scaling4`, `rotation_x`, `rotation_y`, `rotation_z`, `rotation4`
  (x, then y, then z), `matrix4_to_3`, `light_view`,
  `orthographic_projection` and `perspective_projection` (field of view in
  radians).
- `meshforge.transform`: `Transform` holds position, rotation angles (kept in
  radians; setters accept degrees with `in_radians=False`) and scales, and
  `matrix()` returns the model matrix translation × rotation × scale.
- `meshforge.display`: `DisplaySettings` with the `RenderMode`, `RasterMode`,
  `Shading` and `LightingModel` enums, and `ViewportDisplay`, which holds an
  object's colours and toggles selection of the whole object, a face, an
  edge or a vertex.
- `meshforge.mesh`: `SceneObject` (transform, viewport display, visibility),
  `Mesh` (vertices, triangle indices, normals, UVs, optional `Texture`,
  `triangles()` and `copy()`) and the abstract `RenderStrategy` interface.
- `meshforge.shapes`: `Cube`, `Cylinder` and `Grid` (with `GridOrientation`)
  built as triangle meshes centred on the origin; the cube also carries face
  and vertex normals.
- `meshforge.camera`: `Camera` with `view_matrix()`, `projection_matrix()`
  (vertical field of view `fov_y` in degrees), `set_perspective()` and
  `frustum()`, which returns the eight corners of the view frustum.
- `meshforge.uv`: `generate_planar_uv(mesh, Plane.XY)` projects the vertices
  onto a plane and fits their bounding box to the unit square.
- `meshforge.lights`: `Light`, `DistantLight` (normalised direction, view and
  orthographic projection matrices, an infinity-filled shadow-map buffer,
  `bbox_center()`), `PointLight` (one view matrix per cube-map face) and
  `SpotLight` (cone projection from `cutoff_angle`).
- `meshforge.scene`: `Scene` keeps objects in order, lets you remove or move
  them, returns `None` from `get_object()` for an index it does not have,
  and also lists every `Light` added to it in `light_sources`.
- `meshforge.objfile`: `load_objects(path)` reads an OBJ file into a list
  holding one `Mesh`; `save_object(mesh, path=None)` writes one and returns
  the path (a time-stamped `object<milliseconds>.obj` when no path is given).
- `meshforge.buffer`: `Buffer`, a fixed rows × cols grid with a default value
  (`buffer[y][x]`), and `HitDetectionManager`, whose `id_buffer` holds
  `IdBufferElement` records.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from meshforge.shapes import Cube
from meshforge.camera import Camera
from meshforge.scene import Scene
from meshforge.vectors import Vector3
from meshforge.objfile import save_object, load_objects

scene = Scene()

camera = Camera()
camera.transform.set_position(Vector3(0, 0, 300))
scene.add_object(camera)

cube = Cube(100)
cube.transform.set_scales(Vector3(0.5, 0.5, 0.5))
cube.transform.set_angle_y(45, in_radians=False)
scene.add_object(cube)

model = cube.transform.matrix()
view = camera.view_matrix()
projection = camera.projection_matrix()

save_object(cube, "cube.obj")
(loaded,) = load_objects("cube.obj")
print(len(loaded.vertices), len(scene))
```

## OBJ support

Only vertex (`v`) lines and triangular face (`f`) lines are read, and only
those are written. Face indices are 1-based; in `f 1/2/3`-style tokens only
the vertex index is used. Texture coordinates, normals, groups and materials
in a file are ignored.

## What it does not do

meshforge does not draw anything. There is no rasteriser, no wireframe or
shaded renderer, no image output and no window or editor interface:
`RenderStrategy` is only an interface for you to implement, and the shadow
maps on lights and the hit-detection buffer are containers that nothing in
the package fills. There is no command-line tool either; the package is
used as a library.