"""Basic vector and matrix operations over integer arrays used for binary codes."""

from __future__ import annotations

import numpy as np


def mod2(x):
    """Reduce an integer or an integer array to its lowest bit."""
    return x & 1


def identity(n: int) -> np.ndarray:
    """Return the ``n`` x ``n`` integer identity matrix."""
    return np.identity(n, dtype=int)


def eye(n: int, i: int) -> np.ndarray:
    """Return the length-``n`` unit vector with a one at position ``i``."""
    vec = np.zeros(n, dtype=int)
    vec[i] = 1
    return vec


def dot(a, b) -> int:
    """Return the integer dot product of two vectors."""
    return int(np.dot(np.asarray(a, dtype=int), np.asarray(b, dtype=int)))


def vec_mat_mul(a, m) -> np.ndarray:
    """Multiply a ``[k]`` vector by a ``[k, n]`` matrix, giving a ``[n]`` vector."""
    vec = np.asarray(a, dtype=int)
    mat = np.asarray(m, dtype=int)
    if vec.ndim != 1 or mat.ndim != 2 or vec.shape[0] != mat.shape[0]:
        raise ValueError(f"dimensions must match: {vec.shape} and {mat.shape}")
    return vec @ mat


def weight(a) -> int:
    """Return the sum of the entries of a vector (its Hamming weight for 0/1 data)."""
    return int(np.sum(np.asarray(a, dtype=int)))


def is_solution(v, g) -> bool:
    """Return True when ``v`` has an even dot product with every row of ``g``."""
    vec = np.asarray(v, dtype=int)
    return all(dot(row, vec) % 2 == 0 for row in np.asarray(g, dtype=int))


def matmul(u, v) -> np.ndarray:
    """Multiply two matrices, raising ValueError when the inner dimensions differ."""
    left = np.asarray(u, dtype=int)
    right = np.asarray(v, dtype=int)
    n, m1 = left.shape
    m2, k = right.shape
    if m1 != m2:
        raise ValueError(f"dimensions must match: [{n}, {m1}] and [{m2}, {k}]")
    return left @ right


def matmul_fancy(u, v) -> np.ndarray:
    """Multiply vectors or matrices, treating a vector on the left as a row and on the right as a column."""
    left = np.asarray(u, dtype=int)
    right = np.asarray(v, dtype=int)
    if left.ndim not in (1, 2) or right.ndim not in (1, 2):
        raise ValueError("operands must be vectors or matrices")
    if left.ndim == 1 and right.ndim == 1:
        return np.asarray(dot(left, right))
    if left.ndim == 1:
        return matmul(left[np.newaxis, :], right)
    if right.ndim == 1:
        return matmul(left, right[:, np.newaxis])
    return matmul(left, right)