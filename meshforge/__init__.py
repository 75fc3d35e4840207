"""Vectors, colours, matrices, transforms, meshes, cameras, lights, scenes and OBJ files for 3D modelling."""

__version__ = "0.1.0"