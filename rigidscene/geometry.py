"""Vertex and index data for a plane, a cube and a sphere."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .cvec import PI, Vec, cross


@dataclass(frozen=True)
class GenericVertex:
    """A vertex with position, normal, texture coordinates and tangent frame."""

    pos: Vec
    normal: Vec
    tex: Vec
    tangent: Vec
    binormal: Vec

    @classmethod
    def of(cls, pos, normal, tex, tangent, binormal) -> GenericVertex:
        return cls(Vec(*pos), Vec(*normal), Vec(*tex), Vec(*tangent), Vec(*binormal))


def plane_buffer_sizes() -> tuple[int, int]:
    """Number of vertices and indices that ``make_plane`` produces."""
    return 4, 6


def make_plane(size: float) -> tuple[list[GenericVertex], list[int]]:
    """A square in the x-z plane facing +Y, centred on the origin."""
    h = size / 2.0
    tangent, binormal = (1, 0, 0), (0, 0, -1)
    corners = [((-h, -h), (0, 0)), ((-h, h), (0, 1)), ((h, h), (1, 1)), ((h, -h), (1, 0))]
    vertices = [
        GenericVertex.of((x, 0, z), (0, 1, 0), tex, tangent, binormal)
        for (x, z), tex in corners
    ]
    return vertices, [0, 1, 2, 0, 2, 3]


def cube_buffer_sizes() -> tuple[int, int]:
    """Number of vertices and indices that ``make_cube`` produces."""
    return 24, 36


# Each face: normal, tangent, binormal, and four (sign triple, tex) corners.
_CUBE_FACES = (
    ((1, 0, 0), (0, 1, 0), (0, 0, 1),
     (((1, -1, -1), (0, 0)), ((1, 1, -1), (1, 0)), ((1, 1, 1), (1, 1)), ((1, -1, 1), (0, 1)))),
    ((-1, 0, 0), (0, 0, 1), (0, 1, 0),
     (((-1, -1, -1), (0, 0)), ((-1, -1, 1), (1, 0)), ((-1, 1, 1), (1, 1)), ((-1, 1, -1), (0, 1)))),
    ((0, 1, 0), (0, 0, 1), (1, 0, 0),
     (((-1, 1, -1), (0, 0)), ((-1, 1, 1), (1, 0)), ((1, 1, 1), (1, 1)), ((1, 1, -1), (0, 1)))),
    ((0, -1, 0), (1, 0, 0), (0, 0, 1),
     (((-1, -1, -1), (0, 0)), ((1, -1, -1), (1, 0)), ((1, -1, 1), (1, 1)), ((-1, -1, 1), (0, 1)))),
    ((0, 0, 1), (1, 0, 0), (0, 1, 0),
     (((-1, -1, 1), (0, 0)), ((1, -1, 1), (1, 0)), ((1, 1, 1), (1, 1)), ((-1, 1, 1), (0, 1)))),
    ((0, 0, -1), (0, 1, 0), (1, 0, 0),
     (((-1, -1, -1), (0, 0)), ((-1, 1, -1), (1, 0)), ((1, 1, -1), (1, 1)), ((1, -1, -1), (0, 1)))),
)


def make_cube(size: float) -> tuple[list[GenericVertex], list[int]]:
    """An axis-aligned cube of edge ``size`` centred on the origin."""
    h = size / 2.0
    vertices = [
        GenericVertex.of(tuple(s * h for s in signs), normal, tex, tangent, binormal)
        for normal, tangent, binormal, corners in _CUBE_FACES
        for signs, tex in corners
    ]
    indices = [
        v + k for v in range(0, 24, 4) for k in (0, 1, 2, 0, 2, 3)
    ]
    return vertices, indices


def _check_sphere_args(slices: int, stacks: int) -> None:
    if slices <= 1:
        raise ValueError("a sphere needs more than one slice")
    if stacks < 2:
        raise ValueError("a sphere needs at least two stacks")


def sphere_buffer_sizes(slices: int, stacks: int) -> tuple[int, int]:
    """Number of vertices and indices that ``make_sphere`` produces."""
    _check_sphere_args(slices, stacks)
    return (slices + 1) * (stacks + 1), slices * stacks * 6


def make_sphere(
    radius: float, slices: int, stacks: int
) -> tuple[list[GenericVertex], list[int]]:
    """A UV sphere centred on the origin with its poles on the z axis."""
    _check_sphere_args(slices, stacks)
    rad_per_slice = 2 * PI / slices
    rad_per_stack = PI / stacks
    longitudes = [(math.sin(rad_per_slice * i), math.cos(rad_per_slice * i))
                  for i in range(slices + 1)]
    latitudes = [(math.sin(rad_per_stack * j), math.cos(rad_per_stack * j))
                 for j in range(stacks + 1)]

    vertices: list[GenericVertex] = []
    indices: list[int] = []
    row = stacks + 1
    for i, (long_sin, long_cos) in enumerate(longitudes):
        for j, (lat_sin, lat_cos) in enumerate(latitudes):
            n = Vec(long_cos * lat_sin, long_sin * lat_sin, lat_cos)
            t = Vec(-long_sin, long_cos, 0.0)
            vertices.append(
                GenericVertex(
                    n * radius, n, Vec(1.0 / slices * i, 1.0 / stacks * j), t, cross(n, t)
                )
            )
            if i < slices and j < stacks:
                a = row * i + j
                b = row * (i + 1) + j
                indices.extend((a, a + 1, b + 1, a, b + 1, b))
    return vertices, indices