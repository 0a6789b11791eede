import math

import pytest

from rigidscene.cvec import Vec, cross, dot, norm, norm2, normalize


def test_components_and_indexing():
    v = Vec(1, 2, 3)
    assert v[1] == 2.0
    assert len(v) == 3
    assert list(v) == [1.0, 2.0, 3.0]


def test_empty_vector_rejected():
    with pytest.raises(ValueError):
        Vec()


def test_filled():
    assert Vec.filled(7, 3) == Vec(7, 7, 7)


def test_resized_truncates():
    assert Vec(1, 2, 3, 4).resized(2) == Vec(1, 2)


def test_resized_extends_with_fill():
    assert Vec(1, 2).resized(4, 9) == Vec(1, 2, 9, 9)
    assert Vec(1, 2).resized(3) == Vec(1, 2, 0)


def test_add_sub_round_trip():
    a, b = Vec(1.5, -2, 3), Vec(4, 5, -6.25)
    assert (a + b) - b == a


def test_negation():
    a = Vec(1, -2, 3)
    assert -a + a == Vec.filled(0, 3)


def test_scalar_multiplication_commutes():
    a = Vec(1, 2, 3)
    assert 2 * a == a * 2
    assert list((a * 3) / 3) == pytest.approx(list(a))


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Vec(1, 2) / 0


def test_length_mismatch():
    with pytest.raises(ValueError):
        Vec(1, 2) + Vec(1, 2, 3)
    with pytest.raises(ValueError):
        dot(Vec(1, 2), Vec(1, 2, 3))


def test_cross_of_axes():
    assert cross(Vec(1, 0, 0), Vec(0, 1, 0)) == Vec(0, 0, 1)


def test_cross_orthogonal_and_anticommutative():
    a, b = Vec(1, 2, 3), Vec(-4, 0.5, 2)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0, abs=1e-12)
    assert dot(c, b) == pytest.approx(0, abs=1e-12)
    assert cross(b, a) == -c


def test_cross_requires_three_components():
    with pytest.raises(ValueError):
        cross(Vec(1, 2), Vec(3, 4))


def test_norms_agree():
    v = Vec(3, -1, 2, 5)
    assert norm2(v) == dot(v, v)
    assert norm(v) ** 2 == pytest.approx(norm2(v))


def test_normalize_unit_length_and_direction():
    v = Vec(3, 4, 12)
    u = normalize(v)
    assert norm(u) == pytest.approx(1.0)
    assert list(cross(u, v)) == pytest.approx([0, 0, 0], abs=1e-12)
    assert v == Vec(3, 4, 12)


def test_normalize_zero_vector():
    with pytest.raises(ValueError):
        normalize(Vec(0, 0, 0))