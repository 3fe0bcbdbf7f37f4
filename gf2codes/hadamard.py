"""Hadamard matrix constructions and their conversion to binary form."""

from __future__ import annotations

import numpy as np

from gf2codes.linalg import identity
from gf2codes.prime import is_power_of_two, is_prime


def hadamard_paley(n: int) -> np.ndarray:
    """Build an ``n`` x ``n`` Hadamard matrix by Paley's construction; ``n - 1`` must be a prime of the form 4k+3."""
    p = n - 1
    if not (is_prime(p) and p % 4 == 3):
        raise ValueError(f"n - 1 = {p} must be a prime congruent to 3 mod 4")
    chi = -np.ones(p, dtype=int)
    chi[0] = 0
    chi[sorted({(i * i) % p for i in range(1, p)})] = 1
    offsets = (np.arange(p)[np.newaxis, :] - np.arange(p)[:, np.newaxis]) % p
    result = np.ones((n, n), dtype=int)
    result[1:, 1:] = chi[offsets] - identity(p)
    return result


def hadamard_sylvester(n: int) -> np.ndarray:
    """Build an ``n`` x ``n`` Hadamard matrix by Sylvester's doubling; ``n`` must be a power of two."""
    if n == 1:
        return np.ones((1, 1), dtype=int)
    if not is_power_of_two(n):
        raise ValueError("power of two needed")
    half = hadamard_sylvester(n // 2)
    return np.block([[half, half], [half, -half]])


def matrix_to_code(a) -> np.ndarray:
    """Map positive entries to 1 and all others to 0."""
    return (np.asarray(a) > 0).astype(int)