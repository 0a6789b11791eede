import pytest

from rigidscene.cvec import Vec
from rigidscene.matrix4 import Matrix4
from rigidscene.matrix4 import inv as matrix_inv
from rigidscene.quat import Quat
from rigidscene.rigtform import (
    RigTForm,
    inv,
    lin_fact,
    rig_tform_to_matrix,
    trans_fact,
)


def assert_close(a, b):
    assert list(a) == pytest.approx(list(b), abs=1e-9)


A = RigTForm(Vec(1, -2, 0.5), Quat.make_x_rotation(30) * Quat.make_z_rotation(70))
B = RigTForm(Vec(-3, 0.25, 4), Quat.make_y_rotation(-45))


def test_default_is_identity():
    t = RigTForm()
    assert t.translation == Vec(0, 0, 0)
    assert t.rotation == Quat()
    assert rig_tform_to_matrix(t) == Matrix4.identity()


def test_translation_length_checked():
    with pytest.raises(ValueError):
        RigTForm(Vec(1, 2))


def test_pure_translation_moves_point():
    t = RigTForm(translation=Vec(1, 2, 3))
    assert t * Vec(0, 0, 0, 1) == Vec(1, 2, 3, 1)
    assert t * Vec(4, 5, 6, 0) == Vec(4, 5, 6, 0)


def test_apply_matches_matrix():
    v = Vec(0.5, 1.5, -2, 1)
    assert_close(A * v, rig_tform_to_matrix(A) * v)


def test_composition_matches_matrix_product():
    assert_close(
        rig_tform_to_matrix(A * B), rig_tform_to_matrix(A) * rig_tform_to_matrix(B)
    )


def test_inverse_round_trip():
    assert_close(rig_tform_to_matrix(A * inv(A)), Matrix4.identity())
    assert_close(rig_tform_to_matrix(inv(A) * A), Matrix4.identity())


def test_inverse_matches_matrix_inverse():
    assert_close(rig_tform_to_matrix(inv(B)), matrix_inv(rig_tform_to_matrix(B)))


def test_factors():
    assert trans_fact(A).rotation == Quat()
    assert trans_fact(A).translation == A.translation
    assert lin_fact(A).translation == Vec(0, 0, 0)
    assert lin_fact(A).rotation == A.rotation
    assert_close(rig_tform_to_matrix(trans_fact(A) * lin_fact(A)), rig_tform_to_matrix(A))


def test_vector_length_checked():
    with pytest.raises(ValueError):
        A * Vec(1, 2, 3)