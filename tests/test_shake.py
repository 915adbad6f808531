import hashlib

import pytest

from hqc.shake import Shake256


def test_empty_input_matches_standard_shake256():
    state = Shake256()
    assert state.read(32) == hashlib.shake_256(b"").digest(32)


def test_write_returns_length():
    state = Shake256()
    assert state.write(b"abcdef") == 6


def test_successive_reads_form_one_stream():
    one = Shake256()
    one.write(b"seed material")
    whole = one.read(100)

    two = Shake256()
    two.write(b"seed material")
    parts = two.read(7) + two.read(0) + two.read(40) + two.read(53)
    assert parts == whole


def test_split_writes_equal_single_write():
    a = Shake256()
    a.write(b"hello ")
    a.write(b"world")
    b = Shake256()
    b.write(b"hello world")
    assert a.read(64) == b.read(64)


def test_constructor_data_is_absorbed():
    a = Shake256(b"abc")
    b = Shake256()
    b.write(b"abc")
    assert a.read(16) == b.read(16)


def test_write_after_read_raises():
    state = Shake256()
    state.write(b"x")
    state.read(1)
    with pytest.raises(RuntimeError):
        state.write(b"y")


def test_negative_read_raises():
    with pytest.raises(ValueError):
        Shake256().read(-1)


def test_reset_returns_to_fresh_state():
    state = Shake256()
    state.write(b"something")
    state.read(10)
    state.reset()
    state.write(b"other")
    assert state.read(24) == Shake256(b"other").read(24)


def test_read_zero_is_empty():
    assert Shake256(b"data").read(0) == b""