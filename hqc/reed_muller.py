"""Duplicated Reed-Muller RM(1,7) code: each byte becomes 128 bits, repeated."""

from __future__ import annotations

from collections.abc import Sequence

from .params import Params

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF


def _bit_mask(x: int) -> int:
    """All 32 bits set if bit 0 of x is set, else zero."""
    return _MASK32 if x & 1 else 0


def encode_word(message: int) -> tuple[int, int]:
    """Encode one byte into a 128-bit RM(1,7) codeword, as two 64-bit words."""
    word = _bit_mask(message >> 7)
    word ^= _bit_mask(message) & 0xAAAAAAAA
    word ^= _bit_mask(message >> 1) & 0xCCCCCCCC
    word ^= _bit_mask(message >> 2) & 0xF0F0F0F0
    word ^= _bit_mask(message >> 3) & 0xFF00FF00
    word ^= _bit_mask(message >> 4) & 0xFFFF0000

    low = word
    word ^= _bit_mask(message >> 5)
    low |= word << 32

    word ^= _bit_mask(message >> 6)
    high = word << 32
    word ^= _bit_mask(message >> 5)
    high |= word
    return low, high


def hadamard(values: Sequence[int]) -> list[int]:
    """Apply the 128-point Hadamard transform with 16-bit wrapping arithmetic."""
    current = [v & _MASK16 for v in values]
    for _ in range(7):
        pairs = list(zip(current[0::2], current[1::2]))
        current = [(a + b) & _MASK16 for a, b in pairs] + [(a - b) & _MASK16 for a, b in pairs]
    return current


def expand_and_sum(words: Sequence[int], multiplicity: int) -> list[int]:
    """Count, for each of the 128 positions, how many of the copies have that bit set."""
    return [
        sum((words[2 * c + (pos >> 6)] >> (pos & 63)) & 1 for c in range(multiplicity))
        for pos in range(128)
    ]


def find_peaks(transform: Sequence[int]) -> int:
    """Decode a byte from the position and sign of the largest transform magnitude."""
    peak_abs = 0
    peak = 0
    pos = 0
    for i, t in enumerate(transform):
        t &= _MASK16
        magnitude = ((-t) & _MASK16) if t & 0x8000 else t
        if ((peak_abs - magnitude) & _MASK16) >> 15:
            peak = t
            pos = i
            peak_abs = magnitude
    if not peak & 0x8000:
        pos |= 128
    return pos & 0xFF


def rm_encode(params: Params, message: Sequence[int]) -> list[int]:
    """Encode ``n1`` bytes into a concatenated codeword of ``vec_n1n2_size64`` words."""
    words: list[int] = []
    for byte in message[: params.vec_n1_size_bytes]:
        words.extend(encode_word(byte) * params.multiplicity)
    size = params.vec_n1n2_size64
    return (words + [0] * max(0, size - len(words)))[:size]


def rm_decode(params: Params, codeword: Sequence[int]) -> bytes:
    """Decode a concatenated codeword back into ``n1`` bytes."""
    mult = params.multiplicity
    block = 2 * mult
    decoded = bytearray()
    for i in range(params.vec_n1_size_bytes):
        transform = hadamard(expand_and_sum(codeword[i * block:(i + 1) * block], mult))
        # Remove the bias that the 0/1 representation leaves in the first entry.
        transform[0] = (transform[0] - 64 * mult) & _MASK16
        decoded.append(find_peaks(transform))
    return bytes(decoded)