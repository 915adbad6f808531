import random

import pytest

from hqc.parsing import load_words, store_words


@pytest.mark.parametrize("length", [0, 1, 7, 8, 9, 16, 2209])
def test_round_trip(length):
    data = random.Random(length).randbytes(length)
    count = (length + 7) // 8
    words = load_words(data, count)
    assert len(words) == count
    assert store_words(words, length) == data


def test_load_pads_missing_bytes_with_zero():
    assert load_words(b"\x01", 3) == [1, 0, 0]


def test_load_is_little_endian():
    assert load_words(b"\x00" * 7 + b"\x80", 1) == [1 << 63]


def test_load_ignores_bytes_beyond_count():
    data = random.Random(1).randbytes(16)
    assert load_words(data, 1) == load_words(data[:8], 1)


def test_store_truncates_partial_word():
    word = random.Random(2).getrandbits(64)
    assert store_words([word], 3) == store_words([word], 8)[:3]


def test_store_pads_when_words_run_out():
    assert store_words([], 4) == bytes(4)


def test_words_within_64_bits():
    data = random.Random(3).randbytes(100)
    assert all(0 <= w < (1 << 64) for w in load_words(data, 13))


def test_store_then_load_words():
    words = [random.Random(4).getrandbits(64) for _ in range(5)]
    assert load_words(store_words(words, 40), 5) == words