"""Binary linear codes over GF(2): Hadamard and Golay constructions, encoding and syndrome decoding."""

__version__ = "1.0.0"

__all__ = [
    "prime",
    "matrix",
    "linalg",
    "hadamard",
    "gauss",
    "golay",
    "errorvectors",
    "code",
    "decoder",
    "cli",
]