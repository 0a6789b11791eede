"""Vectors, matrices, quaternions, rigid transforms, meshes, PPM I/O and scene logic for a 3D viewer."""

__version__ = "0.1.0"

__all__ = ["cvec", "matrix4", "quat", "rigtform", "geometry", "ppm", "scene", "controls"]