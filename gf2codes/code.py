"""Binary linear codes described by a generator or a parity-check matrix."""

from __future__ import annotations

from typing import TextIO

import numpy as np

from gf2codes.errorvectors import error_vectors
from gf2codes.gauss import orthogonal
from gf2codes.golay import find_distance, is_self_orthogonal
from gf2codes.linalg import matmul_fancy, mod2
from gf2codes.matrix import read_array, write_array


def _read_word(stream: TextIO) -> str:
    """Read one whitespace-delimited word, consuming the character that ends it."""
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


class LinearCode:
    """A binary linear code with its generator matrix and a matching check matrix."""

    def __init__(self, generator) -> None:
        gen = np.array(generator, dtype=int)
        if gen.ndim != 2:
            raise ValueError(f"generator must be a matrix, got shape {gen.shape}")
        self._setup(gen, orthogonal(gen))

    def _setup(self, generator: np.ndarray, check: np.ndarray) -> None:
        self.generator = generator
        self.check = check
        self._distance: int | None = None
        self._radius: int | None = None

    @classmethod
    def from_stream(cls, stream: TextIO) -> "LinearCode":
        """Read a code written as ``generator`` or ``check`` followed by a serialized matrix."""
        kind = _read_word(stream)
        if kind == "generator":
            return cls(read_array(stream))
        if kind == "check":
            check = read_array(stream)
            if check.ndim != 2:
                raise ValueError(f"check must be a matrix, got shape {check.shape}")
            code = cls.__new__(cls)
            code._setup(orthogonal(check), check)
            return code
        raise ValueError("invalid type of input for code")

    def serialize_generator(self, stream: TextIO) -> None:
        """Write the code to ``stream`` in terms of its generator matrix."""
        stream.write("generator\n")
        write_array(self.generator, stream)

    def serialize_check(self, stream: TextIO) -> None:
        """Write the code to ``stream`` in terms of its check matrix."""
        stream.write("check\n")
        write_array(self.check, stream)

    def block_length(self) -> int:
        """Number of message bits in one block (rows of the generator)."""
        return int(self.generator.shape[0])

    def length(self) -> int:
        """Number of bits in one codeword (columns of the generator)."""
        return int(self.generator.shape[1])

    def encode(self, words) -> np.ndarray:
        """Encode a message vector or a matrix of message rows; the result has one codeword per row."""
        return mod2(matmul_fancy(words, self.generator))

    def is_self_orthogonal(self) -> bool:
        """Return True when every codeword is orthogonal to every other."""
        return is_self_orthogonal(self.generator)

    def distance(self) -> int:
        """Minimum distance of the code, computed once and cached."""
        if self._distance is None:
            self._distance = find_distance(self.generator)
        return self._distance

    def coverage_radius(self) -> int:
        """Largest weight of an error pattern needed to reach every syndrome.

        Error patterns of weight up to the block length are considered.
        """
        if self._radius is None:
            syndromes: set[tuple[int, ...]] = set()
            total = 1 << self.check.shape[0]
            radius = 0
            for error in error_vectors(self.length(), self.block_length()):
                key = tuple(int(x) for x in mod2(self.check @ error))
                if key not in syndromes:
                    syndromes.add(key)
                    radius = max(radius, int(error.sum()))
                    if len(syndromes) == total:
                        break
            self._radius = radius
        return self._radius