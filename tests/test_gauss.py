import numpy as np
import pytest

from gf2codes.gauss import gauss_solve, gauss_solve_nonhomogeneous, orthogonal, solve
from gf2codes.linalg import identity


@pytest.fixture
def example_generator():
    return np.array([[1, 1, 0, 0], [1, 0, 1, 0], [1, 0, 0, 1]])


def test_gauss_solve_gives_identity_prefix(example_generator):
    reduced = gauss_solve(example_generator)
    assert np.array_equal(reduced[:, :3], identity(3))
    assert set(np.unique(reduced)) <= {0, 1}


def test_gauss_solve_does_not_modify_input(example_generator):
    before = example_generator.copy()
    gauss_solve(example_generator)
    assert np.array_equal(example_generator, before)


def test_gauss_solve_preserves_row_space(example_generator):
    reduced = gauss_solve(example_generator)
    assert np.array_equal(reduced, [[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1]])
    h = orthogonal(example_generator)
    assert np.array_equal((reduced @ h.T) % 2, np.zeros((3, 1), dtype=int))


def test_orthogonal_shape_and_property(example_generator):
    h = orthogonal(example_generator)
    assert h.shape == (1, 4)
    assert np.array_equal(h[:, 3:], identity(1))
    assert np.all((example_generator @ h.T) % 2 == 0)


def test_orthogonal_of_random_systematic_code():
    rng = np.random.default_rng(5)
    a = rng.integers(0, 2, size=(4, 3))
    g = np.hstack([identity(4), a])
    h = orthogonal(g)
    assert h.shape == (3, 7)
    assert np.all((g @ h.T) % 2 == 0)


def test_gauss_solve_nonhomogeneous_solves_system():
    system = np.array([[1, 1, 1], [0, 1, 1]])
    reduced = gauss_solve_nonhomogeneous(system)
    assert np.array_equal(reduced[:, :2], identity(2))
    x = reduced[:, 2]
    assert np.array_equal((system[:, :2] @ x) % 2, system[:, 2])


@pytest.mark.parametrize("message", [[0, 0, 0], [1, 0, 0], [0, 1, 1], [1, 1, 1]])
def test_solve_recovers_message(example_generator, message):
    codeword = (np.array(message) @ example_generator) % 2
    assert np.array_equal(solve(example_generator, codeword), message)


def test_solve_systematic_random():
    rng = np.random.default_rng(11)
    g = np.hstack([identity(5), rng.integers(0, 2, size=(5, 4))])
    for _ in range(10):
        x = rng.integers(0, 2, size=5)
        assert np.array_equal(solve(g, (x @ g) % 2), x)


def test_solve_rejects_wrong_length(example_generator):
    with pytest.raises(ValueError):
        solve(example_generator, [1, 0, 1])