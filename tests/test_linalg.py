import numpy as np
import pytest

from gf2codes.linalg import (
    dot,
    eye,
    identity,
    is_solution,
    matmul,
    matmul_fancy,
    mod2,
    vec_mat_mul,
    weight,
)


def test_mod2_scalar_and_array():
    assert mod2(7) == 1
    assert np.array_equal(mod2(np.array([0, 1, 2, 3, -1])), [0, 1, 0, 1, 1])


def test_identity_is_multiplicative_unit():
    m = np.arange(9).reshape(3, 3)
    assert np.array_equal(identity(3) @ m, m)
    assert np.array_equal(identity(3), np.eye(3, dtype=int))


def test_eye_has_single_one():
    v = eye(5, 2)
    assert v.shape == (5,)
    assert v[2] == 1
    assert weight(v) == 1


def test_dot():
    assert dot([1, 2, 3], [4, 5, 6]) == 32


def test_vec_mat_mul_matches_numpy():
    a = np.array([1, 0, 1])
    m = np.arange(12).reshape(3, 4)
    assert np.array_equal(vec_mat_mul(a, m), a @ m)


def test_vec_mat_mul_dimension_mismatch():
    with pytest.raises(ValueError):
        vec_mat_mul([1, 1], np.ones((3, 4), dtype=int))


def test_weight_is_sum():
    v = np.array([1, 0, 1, 1, 0])
    assert weight(v) == int(v.sum())


def test_is_solution():
    g = identity(3)
    assert is_solution(np.zeros(3, dtype=int), g)
    assert not is_solution(eye(3, 1), g)
    assert is_solution([1, 1, 0], [[1, 1, 0], [0, 1, 1]]) is False
    assert is_solution([1, 1, 1, 1], [[1, 1, 0, 0], [0, 0, 1, 1]])


def test_matmul_matches_numpy():
    u = np.arange(6).reshape(2, 3)
    v = np.arange(12).reshape(3, 4)
    assert np.array_equal(matmul(u, v), u @ v)


def test_matmul_mismatch_message():
    with pytest.raises(ValueError, match="dimensions must match"):
        matmul(np.ones((2, 3), dtype=int), np.ones((2, 3), dtype=int))


def test_matmul_fancy_row_vector():
    u = np.array([1, 1, 0])
    v = np.arange(12).reshape(3, 4)
    res = matmul_fancy(u, v)
    assert res.shape == (1, 4)
    assert np.array_equal(res[0], u @ v)


def test_matmul_fancy_column_vector():
    u = np.arange(12).reshape(4, 3)
    v = np.array([1, 0, 1])
    res = matmul_fancy(u, v)
    assert res.shape == (4, 1)
    assert np.array_equal(res[:, 0], u @ v)


def test_matmul_fancy_two_vectors_and_matrices():
    assert int(matmul_fancy([1, 2], [3, 4])) == dot([1, 2], [3, 4])
    u = np.arange(4).reshape(2, 2)
    assert np.array_equal(matmul_fancy(u, u), u @ u)