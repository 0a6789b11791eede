"""Fixed-length vectors of floats and the usual vector operations."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

PI = 3.14159265358979323846264338327950288
EPS = 1e-8
EPS2 = EPS * EPS
EPS3 = EPS * EPS * EPS


class Vec:
    """An immutable vector of one or more float components."""

    __slots__ = ("_d",)

    def __init__(self, *args: float) -> None:
        if not args:
            raise ValueError("a vector needs at least one component")
        self._d = tuple(float(a) for a in args)

    @classmethod
    def filled(cls, value: float, n: int) -> Vec:
        """Return an ``n``-vector whose components all equal ``value``."""
        if n < 1:
            raise ValueError("a vector needs at least one component")
        return cls(*([value] * n))

    def resized(self, n: int, fill: float = 0.0) -> Vec:
        """Truncate to ``n`` components, or extend with ``fill``."""
        if n < 1:
            raise ValueError("a vector needs at least one component")
        kept = self._d[:n]
        return Vec(*kept, *([fill] * (n - len(kept))))

    def __getitem__(self, i):
        if isinstance(i, slice):
            return Vec(*self._d[i])
        return self._d[i]

    def __len__(self) -> int:
        return len(self._d)

    def __iter__(self) -> Iterator[float]:
        return iter(self._d)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self._d == other._d

    def __hash__(self) -> int:
        return hash(self._d)

    def __repr__(self) -> str:
        return f"Vec({', '.join(repr(c) for c in self._d)})"

    def _same_length(self, other: Vec) -> None:
        if len(other) != len(self):
            raise ValueError(
                f"vector length mismatch: {len(self)} and {len(other)}"
            )

    def __neg__(self) -> Vec:
        return self * -1

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        self._same_length(other)
        return Vec(*(a + b for a, b in zip(self._d, other._d)))

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        self._same_length(other)
        return Vec(*(a - b for a, b in zip(self._d, other._d)))

    def __mul__(self, a: float) -> Vec:
        if not isinstance(a, Real):
            return NotImplemented
        return Vec(*(c * a for c in self._d))

    def __rmul__(self, a: float) -> Vec:
        return self.__mul__(a)

    def __truediv__(self, a: float) -> Vec:
        if not isinstance(a, Real):
            return NotImplemented
        inva = 1 / a
        return self * inva


def cross(a: Vec, b: Vec) -> Vec:
    """Cross product of two 3-vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("cross product needs two 3-vectors")
    return Vec(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def dot(a: Vec, b: Vec) -> float:
    """Dot product of two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError(f"vector length mismatch: {len(a)} and {len(b)}")
    return sum(x * y for x, y in zip(a, b))


def norm2(v: Vec) -> float:
    """Squared Euclidean length."""
    return dot(v, v)


def norm(v: Vec) -> float:
    """Euclidean length."""
    return math.sqrt(dot(v, v))


def normalize(v: Vec) -> Vec:
    """Return ``v`` scaled to unit length."""
    if dot(v, v) <= EPS2:
        raise ValueError("cannot normalize a vector of near-zero length")
    return v / norm(v)