"""The extended Golay code and distance computations for binary linear codes."""

from __future__ import annotations

import numpy as np

from gf2codes.hadamard import hadamard_paley, matrix_to_code
from gf2codes.linalg import identity, is_solution

_CHUNK = 1 << 16


def golay24() -> np.ndarray:
    """Return a ``[12, 24]`` generator matrix of the extended binary Golay code."""
    g = np.ones((12, 24), dtype=int)
    g[:, :12] = identity(12)
    a = matrix_to_code(hadamard_paley(12))
    complement = (a[1:12, 1:12] == 0).astype(int)
    g[1:12, 12:23] = complement.T
    g[0, 23] = 0
    return g


def is_self_orthogonal(g) -> bool:
    """Return True when every row of ``g`` is orthogonal to all rows of ``g``."""
    rows = np.asarray(g, dtype=int)
    return all(is_solution(row, rows) for row in rows)


def num_to_bool_vec(n: int, length: int) -> np.ndarray:
    """Return the ``length`` lowest binary digits of ``n``, least significant first."""
    sign = -1 if n < 0 else 1
    rest = abs(n)
    bits = []
    for _ in range(length):
        bits.append(sign * (rest % 2))
        rest //= 2
    return np.array(bits, dtype=int)


def find_distance(g) -> int:
    """Return the minimum nonzero weight among all codewords, capped at the number of rows."""
    gen = np.asarray(g, dtype=int)
    k, _ = gen.shape
    best = k
    total = 1 << k
    shifts = np.arange(k)
    for start in range(0, total, _CHUNK):
        numbers = np.arange(start, min(start + _CHUNK, total), dtype=np.int64)
        coefs = (numbers[:, np.newaxis] >> shifts) & 1
        weights = ((coefs @ gen) % 2).sum(axis=1)
        nonzero = weights[weights != 0]
        if nonzero.size:
            best = min(best, int(nonzero.min()))
    return best


def code_info(g) -> tuple[int, int, int]:
    """Return ``(length, dimension, distance)`` for the code generated by ``g``."""
    d = find_distance(g)
    n, m = np.asarray(g).shape
    return m, n, d


def format_code_info(g, name: str) -> str:
    """Describe a code as ``name: [length, dimension, distance]``."""
    length, dimension, distance = code_info(g)
    return f"{name}: [{length}, {dimension}, {distance}]"