# gf2codes

Tools for binary linear codes over GF(2):

- Hadamard matrices from the Paley construction (`hadamard_paley`) and the
  Sylvester construction (`hadamard_sylvester`). `matrix_to_code` turns them
  into 0/1 matrices.
- The extended Golay code: `golay24()` returns a 12 x 24 generator matrix.
- Gauss–Jordan elimination mod 2 (`gauss_solve`,
  `gauss_solve_nonhomogeneous`). `orthogonal` finds a parity-check matrix for
  a generator matrix, or the reverse. `solve` recovers a message from a
  codeword.
- Code parameters: `find_distance`, `code_info` and `format_code_info` in
  `gf2codes.golay`. `LinearCode.distance` and `LinearCode.coverage_radius`
  give the same for a code object.
- Encoding with `LinearCode.encode`. Syndrome-table decoding with
  `SyndromeDecoder` corrects up to `(d - 1) // 2` bit errors.

Matrices are NumPy integer arrays.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Code files

A code is stored as a text file. The first word is `generator` or `check` and
says which matrix follows. Next come the matrix dimensions, each followed by a
space, then the `%%%` marker, then the entries in row-major order:

```
generator
4 7 %%%1 0 0 0 1 1 0 0 1 0 0 1 0 1 0 0 1 0 0 1 1 0 0 0 1 1 1 1
```

The file gives one matrix and the other is computed from it.
`LinearCode.from_stream` reads such a file. `serialize_generator` and
`serialize_check` write one.

`gf2codes.matrix` reads and writes the bare matrix format, without the leading
word, through `read_array`, `write_array`, `loads` and `dumps`. It also has
`format_array`, which renders a matrix for display.

## Command-line tools

Each tool reads the code from the file named on its command line. With no file
it reads the code from standard input. The bits to process always come from
standard input, and any character other than `0` or `1` is skipped.

Encode message blocks. Each block of `k` bits (`k` = rows of the generator)
becomes one codeword line on standard output. A copy of each codeword also
goes to standard error.

```
echo 1011 | gf2-encode code.txt
```

Simulate a noisy channel. The first argument is the number of bit flips to
apply to each codeword. The flip positions are chosen at random and may
repeat. The code file comes second:

```
gf2-encode code.txt < message.txt | gf2-noisy 1 code.txt
```

Decode received words with a syndrome table. The generator matrix, the
received words and the decoded messages are written to standard error. A word
whose syndrome is not in the table is reported as `error`.

```
gf2-encode code.txt < message.txt | gf2-noisy 1 code.txt | gf2-decode code.txt
```

Run the demonstration:

```
gf2-demo
```

The demonstration prints Hadamard and Golay matrices and their code
parameters. It writes `hadamard_12.txt`, `hadamard_16.txt`,
`hadamard_24.txt` and `golay24.txt` into the current directory.
`hadamard_24.txt` holds the 20 x 20 Paley matrix.

The demonstration also uses two optional input files:

- If `K.txt` is present, it reduces that matrix and reports its parameters.
- If `codes/test.txt` is present, it loads that code, writes
  `codes/test_gen.txt` and `codes/test_check.txt`, and encodes a unit message.

If either file is missing, that step is skipped.

## Library use

```python
from gf2codes.code import LinearCode
from gf2codes.decoder import SyndromeDecoder
from gf2codes.golay import golay24, code_info

g = golay24()
print(code_info(g))          # (24, 12, 8)

code = LinearCode(g)
word = code.encode([[1, 0, 1, 1, 0, 0, 0, 1, 0, 0, 1, 0]])[0]
word[3] ^= 1                 # one bit error
decoder = SyndromeDecoder(code)
print(decoder.decode(word))  # the original 12 message bits
```

`SyndromeDecoder.decode` raises `DecodingError`, a subclass of `ValueError`,
when the syndrome of the received word is not in its table.

## Limitations

- All computations are exhaustive. `find_distance` enumerates all `2**k`
  codewords. The syndrome table and the covering radius enumerate error
  patterns. Only codes of modest dimension are practical.
- `find_distance` reports at most the number of generator rows. A code whose
  true minimum distance is larger is reported with that cap.
- The noisy channel flips bits uniformly at random. It models no other kind of
  channel.