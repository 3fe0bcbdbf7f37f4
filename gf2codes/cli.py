"""Command-line entry points: encoder, decoder, noisy channel and a demonstration."""

from __future__ import annotations

import os
import random
import sys
from typing import Iterator, TextIO

import numpy as np

from gf2codes.code import LinearCode
from gf2codes.decoder import DecodingError, SyndromeDecoder
from gf2codes.gauss import gauss_solve, orthogonal
from gf2codes.golay import code_info, format_code_info, golay24, is_self_orthogonal
from gf2codes.hadamard import hadamard_paley, hadamard_sylvester, matrix_to_code
from gf2codes.linalg import eye
from gf2codes.matrix import format_array, read_array, write_array


def _args(argv) -> list[str]:
    return sys.argv[1:] if argv is None else list(argv)


def _load_code(path: str | None) -> LinearCode:
    if path is None:
        return LinearCode.from_stream(sys.stdin)
    with open(path, encoding="utf-8") as stream:
        return LinearCode.from_stream(stream)


def _blocks(stream: TextIO, size: int) -> Iterator[np.ndarray]:
    """Yield vectors of ``size`` bits read from the 0 and 1 characters of ``stream``."""
    bits: list[int] = []
    for line in stream:
        for char in line:
            if char in "01":
                bits.append(int(char))
                if len(bits) == size:
                    yield np.array(bits, dtype=int)
                    bits = []


def _bits_text(vector) -> str:
    return "".join(str(int(x)) for x in np.ravel(vector))


def _load_or_report(path: str | None) -> LinearCode | None:
    try:
        return _load_code(path)
    except (OSError, ValueError) as exc:
        print(f"cannot read code: {exc}", file=sys.stderr)
        return None


def encode_main(argv=None) -> int:
    """Encode blocks of message bits from standard input."""
    args = _args(argv)
    if len(args) > 1:
        print("only one argument needed", file=sys.stderr)
        return 1
    code = _load_or_report(args[0] if args else None)
    if code is None:
        return 1
    for block in _blocks(sys.stdin, code.block_length()):
        word = _bits_text(code.encode(block)[0])
        print(word, flush=True)
        print(f"sent: \n{word}", file=sys.stderr)
    return 0


def decode_main(argv=None) -> int:
    """Decode received words from standard input, reporting to standard error."""
    args = _args(argv)
    if len(args) > 1:
        print("only one argument needed", file=sys.stderr)
        return 1
    code = _load_or_report(args[0] if args else None)
    if code is None:
        return 1
    sys.stderr.write(format_array(code.generator))
    print(
        f"initializing decoder for [{code.length()}, {code.block_length()}, {code.distance()}]-code",
        file=sys.stderr,
    )
    decoder = SyndromeDecoder(code)
    print("initialization done", file=sys.stderr)
    for block in _blocks(sys.stdin, code.length()):
        print(f"received: \n{_bits_text(block)}", file=sys.stderr)
        try:
            message = decoder.decode(block)
        except DecodingError:
            print("failed decoding\n", file=sys.stderr)
            print("error", file=sys.stderr)
            continue
        print(f"decoded: \n{_bits_text(message)}", file=sys.stderr)
    return 0


def noisy_main(argv=None) -> int:
    """Copy codewords from standard input, flipping a number of random bits in each."""
    args = _args(argv)
    if len(args) not in (1, 2):
        print("1 or 2 arguments needed", file=sys.stderr)
        return 1
    try:
        error_count = int(args[0])
    except ValueError:
        print(f"invalid error count: {args[0]!r}", file=sys.stderr)
        return 1
    code = _load_or_report(args[1] if len(args) == 2 else None)
    if code is None:
        return 1
    length = code.length()
    for block in _blocks(sys.stdin, length):
        for _ in range(error_count):
            pos = random.randrange(length)
            block[pos] = 1 - block[pos]
        sys.stdout.write(_bits_text(block))
        sys.stdout.flush()
    return 0


def _show(array, space: int = 2) -> None:
    sys.stdout.write(format_array(array, space))


def _save(array, path: str) -> None:
    with open(path, "w", encoding="utf-8") as stream:
        write_array(array, stream)


def _demo_hadamard() -> None:
    print("------------ Hadamard Matrices ------------------")
    a = matrix_to_code(hadamard_paley(12))
    _show(a, 1)
    b = matrix_to_code(hadamard_sylvester(16))
    _show(b, 1)

    m = b[8:16, 0:16].copy()
    _show(m)
    m = gauss_solve(m)
    print(code_info(m))

    c = matrix_to_code(hadamard_paley(20))
    _show(c, 1)
    d = matrix_to_code(hadamard_paley(24))
    _show(d, 1)

    _save(a, "hadamard_12.txt")
    with open("hadamard_12.txt", encoding="utf-8") as stream:
        loaded = read_array(stream)
    if loaded.shape != a.shape or not np.array_equal(loaded, a):
        raise RuntimeError("hadamard_12.txt does not read back as written")
    _save(b, "hadamard_16.txt")
    _save(c, "hadamard_24.txt")


def _demo_gauss() -> None:
    print("------------- Gauss Elimination -----------------")
    g = np.array([[1, 1, 0, 0], [1, 0, 1, 0], [1, 0, 0, 1]], dtype=int)
    _show(g)
    _show(orthogonal(g))


def _demo_golay() -> None:
    print("--------------- Golay Codes -------------------")
    g = golay24()
    _show(g)
    _save(g, "golay24.txt")
    print("is G orthogonal to G? :" + ("true" if is_self_orthogonal(g) else "false"))
    h = gauss_solve(orthogonal(g))
    same = h.shape == g.shape and np.array_equal(h, g)
    print("H =?= G : " + ("true" if same else "false"))
    n, m, k = code_info(g)
    print(f"G: [{n}, {m}, {k}]")
    n, m, k = code_info(g[0:12, 0:23])
    print(f"G*: [{n}, {m}, {k}]")


def _demo_k() -> None:
    if not os.path.exists("K.txt"):
        print("K.txt not found, skipping", file=sys.stderr)
        return
    with open("K.txt", encoding="utf-8") as stream:
        k = read_array(stream)
    _show(k)
    k = gauss_solve(k)
    _show(k)
    print(format_code_info(k, "K"))
    k_orthogonal = orthogonal(k)
    _show(k_orthogonal)
    print(format_code_info(k_orthogonal, "K_orthogonal"))


def _demo_test_code() -> None:
    path = os.path.join("codes", "test.txt")
    if not os.path.exists(path):
        print(f"{path} not found, skipping", file=sys.stderr)
        return
    with open(path, encoding="utf-8") as stream:
        code = LinearCode.from_stream(stream)
    _show(code.check)
    _show(code.generator)
    with open(os.path.join("codes", "test_gen.txt"), "w", encoding="utf-8") as out:
        code.serialize_generator(out)
    with open(os.path.join("codes", "test_check.txt"), "w", encoding="utf-8") as out:
        code.serialize_check(out)
    _show(code.encode(eye(code.block_length(), 1)))


def demo_main(argv=None) -> int:
    """Run the demonstration, writing matrix files into the current directory."""
    _demo_hadamard()
    _demo_gauss()
    _demo_golay()
    _demo_k()
    _demo_test_code()
    return 0