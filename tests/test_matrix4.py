import pytest

from rigidscene.cvec import Vec
from rigidscene.matrix4 import (
    Matrix4,
    inv,
    is_affine,
    norm2,
    normal_matrix,
    transpose,
)


def assert_close(a, b):
    assert list(a) == pytest.approx(list(b), abs=1e-9)


SAMPLE = Matrix4(range(1, 17))


def test_needs_sixteen_values():
    with pytest.raises(ValueError):
        Matrix4([1, 2, 3])


def test_index_out_of_range():
    assert SAMPLE[3, 3] == 16
    assert SAMPLE[0, 0] == 1
    pytest.raises(IndexError, SAMPLE.__getitem__, (4, 0))
    pytest.raises(IndexError, SAMPLE.__getitem__, (0, 4))


def test_row_major_indexing():
    values = list(range(16))
    m = Matrix4(values)
    assert m[2, 1] == values[9]
    assert m[9] == values[9]


def test_identity_is_neutral():
    assert Matrix4.identity() * SAMPLE == SAMPLE
    assert SAMPLE * Matrix4.identity() == SAMPLE


def test_column_major_round_trip():
    values = [float(v) for v in range(16)]
    m = Matrix4.from_column_major(values)
    assert m[1, 0] == values[1]
    assert m.to_column_major() == values


def test_transpose_twice():
    assert transpose(transpose(SAMPLE)) == SAMPLE
    assert transpose(SAMPLE)[0, 3] == SAMPLE[3, 0]


def test_with_entry_leaves_original():
    m = Matrix4.identity()
    n = m.with_entry(0, 3, 5.0)
    assert n[0, 3] == 5.0
    assert m == Matrix4.identity()


def test_add_sub_and_scale():
    other = Matrix4.filled(2.5)
    assert (SAMPLE + other) - other == SAMPLE
    assert SAMPLE + SAMPLE == SAMPLE * 2


def test_translation_moves_points_not_directions():
    t = Matrix4.make_translation(Vec(1, 2, 3))
    assert t * Vec(0, 0, 0, 1) == Vec(1, 2, 3, 1)
    assert t * Vec(4, 5, 6, 0) == Vec(4, 5, 6, 0)


def test_scale():
    assert Matrix4.make_scale(Vec(2, 3, 4)) * Vec(1, 1, 1, 1) == Vec(2, 3, 4, 1)


def test_vector_length_checked():
    with pytest.raises(ValueError):
        SAMPLE * Vec(1, 2, 3)


@pytest.mark.parametrize(
    "make", [Matrix4.make_x_rotation, Matrix4.make_y_rotation, Matrix4.make_z_rotation]
)
def test_rotations_orthonormal_and_composable(make):
    r = make(37.0)
    assert_close(r * transpose(r), Matrix4.identity())
    assert_close(make(30.0) * make(60.0), make(90.0))


def test_z_rotation_quarter_turn():
    assert_close(Matrix4.make_z_rotation(90) * Vec(1, 0, 0, 0), Vec(0, 1, 0, 0))


def test_inverse_round_trip():
    m = (
        Matrix4.make_translation(Vec(1, -2, 3))
        * Matrix4.make_y_rotation(25)
        * Matrix4.make_scale(Vec(2, 0.5, 3))
    )
    assert_close(m * inv(m), Matrix4.identity())
    assert_close(inv(m) * m, Matrix4.identity())


def test_inverse_of_non_affine():
    with pytest.raises(ValueError):
        inv(Matrix4.filled(1.0))


def test_inverse_of_singular():
    with pytest.raises(ValueError):
        inv(Matrix4.make_scale(Vec(0, 1, 1)))


def test_normal_matrix():
    r = Matrix4.make_x_rotation(40)
    assert_close(normal_matrix(r), r)
    assert_close(
        normal_matrix(Matrix4.make_translation(Vec(3, 4, 5))), Matrix4.identity()
    )


def test_is_affine():
    assert is_affine(Matrix4.make_translation(Vec(1, 2, 3)))
    assert not is_affine(Matrix4.make_projection(60, 1, -0.1, -50))


def test_norm2():
    assert norm2(SAMPLE - SAMPLE) == 0
    assert norm2(transpose(SAMPLE)) == norm2(SAMPLE)
    assert norm2(SAMPLE * 2) == pytest.approx(4 * norm2(SAMPLE))


def test_projection_layout():
    p = Matrix4.make_projection(60, 1.5, -0.1, -50)
    assert p[3, 2] == -1.0
    assert p[3, 3] == 0.0
    assert p[0, 0] == pytest.approx(p[1, 1] / 1.5)


def test_projection_degenerate_inputs():
    assert Matrix4.make_projection(0, 1, -0.1, -50)[1, 1] == 0.0
    assert Matrix4.make_projection(60, 0, -0.1, -50)[0, 0] == 0.0
    same = Matrix4.make_projection(60, 1, -1, -1)
    assert same[2, 2] == 0.0 and same[2, 3] == 0.0


def test_frustum():
    f = Matrix4.make_frustum(1, -1, -2, 2, -0.1, -50)
    assert f[0, 2] == 0.0
    assert f[1, 2] == 0.0
    assert f[3, 2] == -1.0
    flat = Matrix4.make_frustum(1, 1, 2, 2, -0.1, -50)
    assert flat[0, 0] == 0.0 and flat[1, 1] == 0.0