"""Text serialization and pretty-printing of integer arrays.

The serialized form lists the dimensions, each followed by a space, then the
marker ``%%%`` and then every element in row-major order, each followed by a
space: a 2x2 identity becomes ``"2 2 %%%1 0 0 1 "``.
"""

from __future__ import annotations

import io
import math
from typing import TextIO

import numpy as np

_MARKER = "%%%"


class _CharReader:
    """Reads a text stream one character at a time with one-character lookahead."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def peek(self) -> str:
        if not self._pending:
            self._pending = self._stream.read(1)
        return self._pending

    def take(self) -> str:
        char = self.peek()
        self._pending = ""
        return char

    def skip_whitespace(self) -> None:
        while self.peek() and self.peek().isspace():
            self.take()

    def read_int(self) -> int:
        self.skip_whitespace()
        chars = []
        if self.peek() in ("-", "+"):
            chars.append(self.take())
        while self.peek() and self.peek().isdigit():
            chars.append(self.take())
        if not chars or not chars[-1].isdigit():
            found = self.peek() or "end of input"
            raise ValueError(f"expected an integer, found {found!r}")
        return int("".join(chars))


def write_array(array, stream: TextIO) -> None:
    """Write ``array`` to ``stream`` in the serialized text form."""
    stream.write(dumps(array))


def read_array(stream: TextIO) -> np.ndarray:
    """Read one serialized array from ``stream``, consuming only what it needs."""
    reader = _CharReader(stream)
    shape = []
    while True:
        reader.skip_whitespace()
        char = reader.peek()
        if char == "%":
            break
        if not char:
            raise ValueError("unexpected end of input before the data marker")
        shape.append(reader.read_int())
    if any(dim < 0 for dim in shape):
        raise ValueError(f"negative dimension in shape {tuple(shape)}")
    while reader.peek() == "%" or (reader.peek() and reader.peek().isspace()):
        reader.take()
    count = math.prod(shape)
    values = [reader.read_int() for _ in range(count)]
    return np.array(values, dtype=int).reshape(shape)


def dumps(array) -> str:
    """Return the serialized text form of ``array``."""
    arr = np.asarray(array, dtype=int)
    dims = "".join(f"{dim} " for dim in arr.shape)
    data = "".join(f"{int(value)} " for value in arr.ravel())
    return f"{dims}{_MARKER}{data}"


def loads(text: str) -> np.ndarray:
    """Parse an array from its serialized text form."""
    return read_array(io.StringIO(text))


def _format_shape(shape) -> str:
    return "(" + ", ".join(str(dim) for dim in shape) + ")"


def _format_body(arr: np.ndarray, space: int) -> str:
    if arr.ndim == 0:
        return str(int(arr)).rjust(space)
    broken = arr.ndim == 2 and arr.shape[0] > 1
    separator = ",\n" if broken else ","
    inner = separator.join(_format_body(sub, space) for sub in arr)
    if broken:
        return "[\n" + inner + "\n]"
    return "[" + inner + "]"


def format_array(array, space: int = 2) -> str:
    """Render ``array`` with a shape header, each element right-aligned in ``space`` columns."""
    arr = np.asarray(array, dtype=int)
    return f"NDArray{_format_shape(arr.shape)}\n{_format_body(arr, space)}\n"