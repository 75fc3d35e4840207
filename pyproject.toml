[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshforge"
version = "0.1.0"
description = "Small 3D scene toolkit: vectors, matrices, transforms, primitive meshes, cameras, lights and OBJ files"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "mesh", "scene", "matrix", "obj", "camera", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
