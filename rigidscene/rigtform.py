"""Rigid body transforms: a rotation followed by a translation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .cvec import Vec
from .matrix4 import Matrix4
from .quat import Quat, quat_to_matrix
from .quat import inv as quat_inv


@dataclass(frozen=True)
class RigTForm:
    """A rigid transform; the default is the identity."""

    translation: Vec = field(default_factory=lambda: Vec(0.0, 0.0, 0.0))
    rotation: Quat = field(default_factory=Quat)

    def __post_init__(self) -> None:
        if len(self.translation) != 3:
            raise ValueError("translation must be a 3-vector")

    def __mul__(self, other):
        if isinstance(other, RigTForm):
            moved = self.translation.resized(4, 1.0) + self.rotation * other.translation.resized(4, 1.0)
            return RigTForm(moved.resized(3), self.rotation * other.rotation)
        if isinstance(other, Vec):
            if len(other) != 4:
                raise ValueError("a rigid transform applies only to 4-vectors")
            m = Matrix4.make_translation(self.translation) * quat_to_matrix(self.rotation)
            return m * other
        return NotImplemented


def inv(tform: RigTForm) -> RigTForm:
    """Inverse of a rigid transform."""
    rotation = quat_inv(tform.rotation)
    moved = rotation * tform.translation.resized(4, 1.0)
    return RigTForm(-moved.resized(3), rotation)


def trans_fact(tform: RigTForm) -> RigTForm:
    """The translation part alone."""
    return RigTForm(translation=tform.translation)


def lin_fact(tform: RigTForm) -> RigTForm:
    """The rotation part alone."""
    return RigTForm(rotation=tform.rotation)


def rig_tform_to_matrix(tform: RigTForm) -> Matrix4:
    return Matrix4.make_translation(tform.translation) * quat_to_matrix(tform.rotation)