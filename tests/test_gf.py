import pytest

from hqc.gf import (
    GF_EXP,
    GF_LOG,
    build_exp_log_tables,
    carryless_mul,
    gf_inverse,
    gf_mul,
    gf_reduce,
    gf_square,
    trailing_zero_bits,
)


def test_gf_mul_exhaustive():
    for a in range(256):
        for b in range(256):
            r = gf_mul(a, b)
            assert r < 256
            assert r == gf_mul(b, a)
        assert gf_mul(a, 1) == a
        assert gf_mul(a, 0) == 0


def test_gf_square_matches_mul():
    for a in range(256):
        assert gf_square(a) == gf_mul(a, a)


def test_gf_inverse():
    for a in range(1, 256):
        assert gf_mul(a, gf_inverse(a)) == 1
    assert gf_inverse(0) == 0


def test_gf_inverse_via_exp_log():
    for i in range(1, 255):
        assert gf_inverse(GF_EXP[i]) == GF_EXP[255 - i]


def test_tables_consistent():
    exp, log = build_exp_log_tables()
    assert exp == GF_EXP
    assert log == GF_LOG
    assert len(exp) == 258
    for i in range(255):
        assert GF_LOG[GF_EXP[i]] == i
    for i in range(257):
        assert GF_EXP[i + 1] == gf_mul(GF_EXP[i], 2)


def test_tables_order_and_wraparound():
    exp, _ = build_exp_log_tables()
    assert exp[0] == 1
    assert exp[255] == 1
    assert exp[256] == 2
    assert exp[257] == 4
    assert exp[8] == 0x1D


def test_exp_table_is_permutation_of_nonzero():
    exp, _ = build_exp_log_tables()
    assert sorted(exp[:255]) == list(range(1, 256))


@pytest.mark.parametrize("value, expected", [(0x11C, 2), (1, 0), (8, 3), (0, 14)])
def test_trailing_zero_bits(value, expected):
    assert trailing_zero_bits(value) == expected


def test_gf_reduce_high_bit():
    assert gf_reduce(0x100, 14) == 0x1D


def test_gf_reduce_small_degree_unchanged():
    assert gf_reduce(5, 3) == 5


def test_carryless_mul_known_value():
    assert carryless_mul(3, 5) == 15
    assert carryless_mul(0x80, 0x80) == 0x4000


def test_gf_mul_distributive():
    for a in (3, 77, 200):
        for b in (5, 19, 255):
            for c in (0, 1, 128):
                assert gf_mul(a, b ^ c) == gf_mul(a, b) ^ gf_mul(a, c)