"""Quaternions for representing rotations."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from .cvec import EPS2, PI, Vec, cross
from .cvec import dot as vdot
from .matrix4 import Matrix4


class Quat:
    """An immutable quaternion (w, x, y, z); the default is the identity."""

    __slots__ = ("_q",)

    def __init__(
        self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0
    ) -> None:
        self._q = (float(w), float(x), float(y), float(z))

    @classmethod
    def from_scalar_vector(cls, w: float, v: Vec) -> Quat:
        return cls(w, v[0], v[1], v[2])

    def __getitem__(self, i: int) -> float:
        return self._q[i]

    def __iter__(self) -> Iterator[float]:
        return iter(self._q)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return self._q == other._q

    def __hash__(self) -> int:
        return hash(self._q)

    def __repr__(self) -> str:
        return "Quat({}, {}, {}, {})".format(*self._q)

    def __add__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(*(a + b for a, b in zip(self._q, other._q)))

    def __sub__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(*(a - b for a, b in zip(self._q, other._q)))

    def __mul__(self, other):
        if isinstance(other, Real):
            return Quat(*(a * other for a in self._q))
        if isinstance(other, Quat):
            w1, w2 = self._q[0], other._q[0]
            u, v = Vec(*self._q[1:]), Vec(*other._q[1:])
            return Quat.from_scalar_vector(
                w1 * w2 - vdot(u, v), (v * w1 + u * w2) + cross(u, v)
            )
        if isinstance(other, Vec):
            if len(other) != 4:
                raise ValueError("a quaternion rotates only 4-vectors")
            r = self * (Quat(0, other[0], other[1], other[2]) * inv(self))
            return Vec(r[1], r[2], r[3], other[3])
        return NotImplemented

    def __truediv__(self, a: float) -> Quat:
        if not isinstance(a, Real):
            return NotImplemented
        inva = 1 / a
        return self * inva

    @classmethod
    def make_x_rotation(cls, ang: float) -> Quat:
        h = 0.5 * ang * PI / 180
        return cls(math.cos(h), math.sin(h), 0.0, 0.0)

    @classmethod
    def make_y_rotation(cls, ang: float) -> Quat:
        h = 0.5 * ang * PI / 180
        return cls(math.cos(h), 0.0, math.sin(h), 0.0)

    @classmethod
    def make_z_rotation(cls, ang: float) -> Quat:
        h = 0.5 * ang * PI / 180
        return cls(math.cos(h), 0.0, 0.0, math.sin(h))


def dot(q: Quat, p: Quat) -> float:
    return sum(a * b for a, b in zip(q, p))


def norm2(q: Quat) -> float:
    return dot(q, q)


def inv(q: Quat) -> Quat:
    """Multiplicative inverse."""
    n = norm2(q)
    if n <= EPS2:
        raise ValueError("cannot invert a quaternion of near-zero norm")
    return Quat(q[0], -q[1], -q[2], -q[3]) * (1.0 / n)


def normalize(q: Quat) -> Quat:
    return q / math.sqrt(norm2(q))


def quat_to_matrix(q: Quat) -> Matrix4:
    """Rotation matrix of ``q``; a zero quaternion gives the zero matrix."""
    n = norm2(q)
    if n < EPS2:
        return Matrix4.filled(0.0)
    t = 2 / n
    w, x, y, z = q
    return Matrix4(
        (
            1 - (y * y + z * z) * t, (x * y - w * z) * t, (x * z + y * w) * t, 0.0,
            (x * y + w * z) * t, 1 - (x * x + z * z) * t, (y * z - x * w) * t, 0.0,
            (x * z - y * w) * t, (y * z + x * w) * t, 1 - (x * x + y * y) * t, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    )