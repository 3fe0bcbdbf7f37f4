"""Syndrome-table decoding of binary linear codes."""

from __future__ import annotations

import numpy as np

from gf2codes.code import LinearCode
from gf2codes.errorvectors import error_vectors
from gf2codes.gauss import solve
from gf2codes.linalg import mod2


class DecodingError(ValueError):
    """Raised when a received word has a syndrome outside the correction table."""


class SyndromeDecoder:
    """Corrects up to ``(d - 1) // 2`` bit errors using a table of syndromes."""

    def __init__(self, code: LinearCode) -> None:
        self.code = code
        self.correctable = max(0, (code.distance() - 1) // 2)
        self._table: dict[tuple[int, ...], np.ndarray] = {}
        for error in error_vectors(code.length(), self.correctable):
            self._table.setdefault(self._syndrome(error), error)

    def _syndrome(self, word: np.ndarray) -> tuple[int, ...]:
        return tuple(int(x) for x in mod2(self.code.check @ word))

    def decode(self, received) -> np.ndarray:
        """Correct ``received`` and return the message it encodes."""
        word = np.asarray(received, dtype=int)
        if word.ndim != 1 or word.shape[0] != self.code.length():
            raise ValueError(f"word of length {self.code.length()} expected, got shape {word.shape}")
        error = self._table.get(self._syndrome(word))
        if error is None:
            raise DecodingError("failed decoding")
        corrected = mod2(word + error)
        return solve(self.code.generator, corrected)