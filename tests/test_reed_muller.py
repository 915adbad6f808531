import pytest

from hqc.params import PARAMS_128, all_params
from hqc.reed_muller import (
    encode_word,
    expand_and_sum,
    find_peaks,
    hadamard,
    rm_decode,
    rm_encode,
)


def _replicate(word, mult):
    return list(word) * mult


@pytest.mark.parametrize("params", all_params(), ids=lambda p: p.name)
def test_round_trip_all_bytes(params):
    mult = params.multiplicity
    for b in range(256):
        cdw = _replicate(encode_word(b), mult)
        transform = hadamard(expand_and_sum(cdw, mult))
        transform[0] = (transform[0] - 64 * mult) & 0xFFFF
        assert find_peaks(transform) == b


@pytest.mark.parametrize("params", all_params(), ids=lambda p: p.name)
def test_concrete_vector(params):
    mult = params.multiplicity
    cdw = _replicate(encode_word(0x71), mult)
    assert cdw[0] == 0xAAAA55555555AAAA
    assert cdw[1] == 0x5555AAAAAAAA5555
    for c in range(1, mult):
        assert cdw[2 * c] == cdw[0]
        assert cdw[2 * c + 1] == cdw[1]


@pytest.mark.parametrize("params", all_params(), ids=lambda p: p.name)
def test_codeword_weights(params):
    mult = params.multiplicity
    for b in range(256):
        cdw = _replicate(encode_word(b), mult)
        weight = sum(bin(w).count("1") for w in cdw)
        if b == 0:
            want = 0
        elif b == 0x80:
            want = 128 * mult
        else:
            want = 64 * mult
        assert weight == want, f"byte {b:#04x}"


def test_encode_zero():
    assert encode_word(0x00) == (0, 0)


def test_expand_and_sum_counts_copies():
    words = [1, 1 << 63, 1, 0, 0, 1 << 63]
    counts = expand_and_sum(words, 3)
    assert counts[0] == 2
    assert counts[127] == 2
    assert sum(counts) == 4


@pytest.mark.parametrize("params", all_params(), ids=lambda p: p.name)
def test_rm_encode_decode_round_trip(params):
    message = bytes((i * 53 + 7) & 0xFF for i in range(params.n1))
    codeword = rm_encode(params, message)
    assert len(codeword) == params.vec_n1n2_size64
    assert rm_decode(params, codeword) == message


def test_rm_decode_corrects_errors():
    params = PARAMS_128
    message = bytes((i * 29 + 3) & 0xFF for i in range(params.n1))
    codeword = rm_encode(params, message)
    block = 2 * params.multiplicity
    # Flip 40 bits inside every 384-bit block, well under half the minimum distance.
    for i in range(params.n1):
        for bit in range(40):
            pos = (bit * 7 + i) % (64 * block)
            codeword[i * block + pos // 64] ^= 1 << (pos % 64)
    assert rm_decode(params, codeword) == message