"""Enumeration of binary error patterns by increasing weight."""

from __future__ import annotations

from itertools import combinations
from typing import Iterator

import numpy as np


def _generate(size: int, max_count: int) -> Iterator[np.ndarray]:
    for ones in range(max_count + 1):
        for positions in combinations(range(size), ones):
            vec = np.zeros(size, dtype=int)
            vec[list(positions)] = 1
            yield vec


def error_vectors(size: int, max_count: int) -> Iterator[np.ndarray]:
    """Yield every length-``size`` 0/1 vector with at most ``max_count`` ones.

    Vectors come by increasing weight, and within one weight in descending
    lexicographic order.
    """
    if max_count > size:
        raise ValueError("max_count > size")
    return _generate(size, max_count)