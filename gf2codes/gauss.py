"""Gaussian elimination over GF(2) and derived operations on generator matrices."""

from __future__ import annotations

import numpy as np

from gf2codes.linalg import identity


def _eliminate(a: np.ndarray, columns: int) -> np.ndarray:
    rows = a.shape[0]
    for j in range(columns):
        candidates = np.flatnonzero(a[j:, j] == 1)
        if candidates.size:
            pivot = j + int(candidates[0])
            if pivot != j:
                a[[j, pivot]] = a[[pivot, j]]
        mask = a[:, j] == 1
        mask[j] = False
        a[mask] = (a[mask] - a[j]) & 1
        if j + 1 >= rows and j + 1 < columns:
            # no further pivot rows exist
            continue
    return a


def gauss_solve(a) -> np.ndarray:
    """Return the reduced row-echelon form over GF(2) of an ``[n, m]`` matrix with ``n <= m``."""
    work = np.array(a, dtype=int)
    n, m = work.shape
    return _eliminate(work, min(n, m))


def gauss_solve_nonhomogeneous(a) -> np.ndarray:
    """Reduce an augmented ``[n, m]`` system over GF(2), leaving the last column as right-hand side."""
    work = np.array(a, dtype=int)
    n, m = work.shape
    return _eliminate(work, min(n, m - 1))


def orthogonal(g) -> np.ndarray:
    """Return a check matrix ``[m - n, m]`` whose rows are orthogonal to the rows of ``g``."""
    reduced = gauss_solve(g)
    n, m = reduced.shape
    h = np.zeros((m - n, m), dtype=int)
    h[:, :n] = reduced[:, n:].T
    h[:, n:] = identity(m - n)
    return h


def solve(g, b) -> np.ndarray:
    """Find the message ``x`` with ``x @ g == b`` over GF(2)."""
    gen = np.asarray(g, dtype=int)
    rhs = np.asarray(b, dtype=int)
    n, m = gen.shape
    if rhs.ndim != 1 or rhs.shape[0] != m:
        raise ValueError(f"vector of length {m} expected, got shape {rhs.shape}")
    augmented = np.zeros((m, n + 1), dtype=int)
    augmented[:, :n] = gen.T
    augmented[:, n] = rhs
    reduced = gauss_solve_nonhomogeneous(augmented)
    return reduced[:n, n].copy()