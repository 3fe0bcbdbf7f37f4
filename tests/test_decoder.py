import itertools

import numpy as np
import pytest

from gf2codes.code import LinearCode
from gf2codes.decoder import DecodingError, SyndromeDecoder
from gf2codes.golay import golay24

HAMMING = [
    [1, 0, 0, 0, 1, 1, 0],
    [0, 1, 0, 0, 1, 0, 1],
    [0, 0, 1, 0, 0, 1, 1],
    [0, 0, 0, 1, 1, 1, 1],
]


@pytest.fixture(scope="module")
def hamming_decoder():
    return SyndromeDecoder(LinearCode(HAMMING))


def test_correctable_count(hamming_decoder):
    assert hamming_decoder.correctable == 1


def test_clean_words_decode(hamming_decoder):
    code = hamming_decoder.code
    for message in itertools.product([0, 1], repeat=4):
        word = code.encode(list(message))[0]
        assert list(hamming_decoder.decode(word)) == list(message)


def test_single_errors_are_corrected(hamming_decoder):
    code = hamming_decoder.code
    for message in itertools.product([0, 1], repeat=4):
        word = code.encode(list(message))[0]
        for pos in range(7):
            received = word.copy()
            received[pos] ^= 1
            assert list(hamming_decoder.decode(received)) == list(message)


def test_received_is_not_modified(hamming_decoder):
    received = np.array([1, 0, 0, 0, 1, 1, 1])
    hamming_decoder.decode(received)
    assert list(received) == [1, 0, 0, 0, 1, 1, 1]


def test_repetition_code_majority():
    decoder = SyndromeDecoder(LinearCode([[1, 1, 1]]))
    assert list(decoder.decode([1, 0, 1])) == [1]
    assert list(decoder.decode([0, 1, 0])) == [0]


def test_uncorrectable_golay_error_raises():
    code = LinearCode(golay24())
    decoder = SyndromeDecoder(code)
    word = code.encode(np.zeros(12, dtype=int))[0]
    word[[0, 5, 13, 20]] ^= 1
    with pytest.raises(DecodingError):
        decoder.decode(word)


def test_wrong_length_raises(hamming_decoder):
    with pytest.raises(ValueError):
        hamming_decoder.decode([1, 0, 1])