"""4x4 matrices for affine and projective transforms."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator

from .cvec import EPS, EPS2, EPS3, PI, Vec


class Matrix4:
    """An immutable 4x4 matrix stored row-major; index with ``m[row, col]``."""

    __slots__ = ("_d",)

    def __init__(self, values: Iterable[float]) -> None:
        d = tuple(float(v) for v in values)
        if len(d) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(d)}")
        self._d = d

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(1.0 if i % 5 == 0 else 0.0 for i in range(16))

    @classmethod
    def filled(cls, a: float) -> Matrix4:
        return cls([a] * 16)

    @classmethod
    def from_column_major(cls, values: Iterable[float]) -> Matrix4:
        return transpose(cls(values))

    def to_column_major(self) -> list[float]:
        return list(transpose(self)._d)

    def __getitem__(self, key) -> float:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < 4 and 0 <= col < 4):
                raise IndexError(f"matrix index out of range: {key}")
            return self._d[row * 4 + col]
        return self._d[key]

    def __iter__(self) -> Iterator[float]:
        return iter(self._d)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._d == other._d

    def __hash__(self) -> int:
        return hash(self._d)

    def __repr__(self) -> str:
        rows = (self._d[r * 4:(r + 1) * 4] for r in range(4))
        return "Matrix4([" + ", ".join(repr(list(r)) for r in rows) + "])"

    def with_entry(self, row: int, col: int, value: float) -> Matrix4:
        """Return a copy with entry (row, col) replaced."""
        return _with_entries(self, {(row, col): value})

    def __add__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(a + b for a, b in zip(self._d, other._d))

    def __sub__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(a - b for a, b in zip(self._d, other._d))

    def __mul__(self, other):
        if isinstance(other, Matrix4):
            rows = [self._d[r * 4:(r + 1) * 4] for r in range(4)]
            cols = [other._d[c::4] for c in range(4)]
            return Matrix4(
                sum(a * b for a, b in zip(row, col)) for row in rows for col in cols
            )
        if isinstance(other, Vec):
            if len(other) != 4:
                raise ValueError("a 4x4 matrix multiplies only 4-vectors")
            return Vec(
                *(
                    sum(a * b for a, b in zip(self._d[r * 4:(r + 1) * 4], other))
                    for r in range(4)
                )
            )
        if isinstance(other, Real):
            return Matrix4(a * other for a in self._d)
        return NotImplemented

    @classmethod
    def make_x_rotation(cls, ang: float) -> Matrix4:
        rad = ang * PI / 180
        return cls.make_x_rotation_cs(math.cos(rad), math.sin(rad))

    @classmethod
    def make_y_rotation(cls, ang: float) -> Matrix4:
        rad = ang * PI / 180
        return cls.make_y_rotation_cs(math.cos(rad), math.sin(rad))

    @classmethod
    def make_z_rotation(cls, ang: float) -> Matrix4:
        rad = ang * PI / 180
        return cls.make_z_rotation_cs(math.cos(rad), math.sin(rad))

    @classmethod
    def make_x_rotation_cs(cls, c: float, s: float) -> Matrix4:
        return _with_entries(
            cls.identity(), {(1, 1): c, (2, 2): c, (1, 2): -s, (2, 1): s}
        )

    @classmethod
    def make_y_rotation_cs(cls, c: float, s: float) -> Matrix4:
        return _with_entries(
            cls.identity(), {(0, 0): c, (2, 2): c, (0, 2): s, (2, 0): -s}
        )

    @classmethod
    def make_z_rotation_cs(cls, c: float, s: float) -> Matrix4:
        return _with_entries(
            cls.identity(), {(0, 0): c, (1, 1): c, (0, 1): -s, (1, 0): s}
        )

    @classmethod
    def make_translation(cls, t: Vec) -> Matrix4:
        return _with_entries(cls.identity(), {(i, 3): t[i] for i in range(3)})

    @classmethod
    def make_scale(cls, s: Vec) -> Matrix4:
        return _with_entries(cls.identity(), {(i, i): s[i] for i in range(3)})

    @classmethod
    def make_frustum(
        cls,
        top: float,
        bottom: float,
        left: float,
        right: float,
        near_clip: float,
        far_clip: float,
    ) -> Matrix4:
        """Projection matrix for an arbitrary view frustum."""
        entries = {(3, 2): -1.0}
        if abs(right - left) > EPS:
            entries[0, 0] = -2.0 * near_clip / (right - left)
            entries[0, 2] = (right + left) / (right - left)
        if abs(top - bottom) > EPS:
            entries[1, 1] = -2.0 * near_clip / (top - bottom)
            entries[1, 2] = (top + bottom) / (top - bottom)
        if abs(far_clip - near_clip) > EPS:
            entries[2, 2] = (far_clip + near_clip) / (far_clip - near_clip)
            entries[2, 3] = -2.0 * far_clip * near_clip / (far_clip - near_clip)
        return _with_entries(cls.filled(0.0), entries)

    @classmethod
    def make_projection(
        cls, fovy: float, aspect_ratio: float, z_near: float, z_far: float
    ) -> Matrix4:
        """Perspective projection from a vertical field of view in degrees."""
        ang = fovy * 0.5 * PI / 180
        f = 0.0 if abs(math.sin(ang)) < EPS else 1 / math.tan(ang)
        entries = {(1, 1): f, (3, 2): -1.0}
        if abs(aspect_ratio) > EPS:
            entries[0, 0] = f / aspect_ratio
        if abs(z_far - z_near) > EPS:
            entries[2, 2] = (z_far + z_near) / (z_far - z_near)
            entries[2, 3] = -2.0 * z_far * z_near / (z_far - z_near)
        return _with_entries(cls.filled(0.0), entries)


def _with_entries(m: Matrix4, entries: dict[tuple[int, int], float]) -> Matrix4:
    d = list(m)
    for (row, col), value in entries.items():
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"matrix index out of range: {(row, col)}")
        d[row * 4 + col] = value
    return Matrix4(d)


def is_affine(m: Matrix4) -> bool:
    """True if the last row is (0, 0, 0, 1) within tolerance."""
    return abs(m[15] - 1) + abs(m[14]) + abs(m[13]) + abs(m[12]) < EPS


def norm2(m: Matrix4) -> float:
    """Sum of the squares of all entries."""
    return sum(a * a for a in m)


def inv(m: Matrix4) -> Matrix4:
    """Inverse of an affine matrix."""
    if not is_affine(m):
        raise ValueError("matrix is not affine")
    (a00, a01, a02, a03,
     a10, a11, a12, a13,
     a20, a21, a22, a23,
     _, _, _, _) = m
    det = (
        a00 * (a11 * a22 - a12 * a21)
        + a01 * (a12 * a20 - a10 * a22)
        + a02 * (a10 * a21 - a11 * a20)
    )
    if abs(det) <= EPS3:
        raise ValueError("matrix is singular")

    r00 = (a11 * a22 - a12 * a21) / det
    r10 = -(a10 * a22 - a12 * a20) / det
    r20 = (a10 * a21 - a11 * a20) / det
    r01 = -(a01 * a22 - a02 * a21) / det
    r11 = (a00 * a22 - a02 * a20) / det
    r21 = -(a00 * a21 - a01 * a20) / det
    r02 = (a01 * a12 - a02 * a11) / det
    r12 = -(a00 * a12 - a02 * a10) / det
    r22 = (a00 * a11 - a01 * a10) / det

    r03 = -(a03 * r00 + a13 * r01 + a23 * r02)
    r13 = -(a03 * r10 + a13 * r11 + a23 * r12)
    r23 = -(a03 * r20 + a13 * r21 + a23 * r22)
    return Matrix4(
        (r00, r01, r02, r03,
         r10, r11, r12, r13,
         r20, r21, r22, r23,
         0.0, 0.0, 0.0, 1.0)
    )


def transpose(m: Matrix4) -> Matrix4:
    return Matrix4(m[j, i] for i in range(4) for j in range(4))


def normal_matrix(m: Matrix4) -> Matrix4:
    """Matrix that transforms normals for the affine matrix ``m``."""
    invm = _with_entries(inv(m), {(0, 3): 0.0, (1, 3): 0.0, (2, 3): 0.0})
    return transpose(invm)


# Tolerance squared, for callers comparing matrices.
TOLERANCE2 = EPS2