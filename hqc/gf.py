"""Arithmetic in GF(2^8) built on the primitive polynomial x^8 + x^4 + x^3 + x^2 + 1."""

from __future__ import annotations

PARAM_M = 8
GF_POLY = 0x11D
GF_POLY_WT = 5
GF_POLY_M2 = 4
GF_MUL_ORDER = 255

_TRAILING_ZERO_LIMIT = 14
_BYTE_MASK = 0xFF
_WORD16_MASK = 0xFFFF


def trailing_zero_bits(a: int) -> int:
    """Count the trailing zero bits of ``a``, looking at its low 14 bits only."""
    count = 0
    for i in range(_TRAILING_ZERO_LIMIT):
        if (a >> i) & 1:
            break
        count += 1
    return count


def _reduction_taps() -> tuple[int, ...]:
    remainder = GF_POLY ^ 1
    taps = []
    for _ in range(GF_POLY_WT - 2):
        tap = trailing_zero_bits(remainder)
        taps.append(tap)
        remainder ^= 1 << tap
    return tuple(taps)


_REDUCTION_TAPS = _reduction_taps()


def gf_reduce(x: int, deg_x: int) -> int:
    """Reduce the polynomial ``x`` of degree at most ``deg_x`` modulo the field polynomial."""
    if deg_x < PARAM_M - 1:
        return x & _WORD16_MASK
    steps = -(-(deg_x - (PARAM_M - 1)) // GF_POLY_M2)
    for _ in range(steps):
        overflow = x >> PARAM_M
        x = (x & _BYTE_MASK) ^ overflow
        for tap in _REDUCTION_TAPS:
            x ^= overflow << tap
    return x & _WORD16_MASK


def carryless_mul(a: int, b: int) -> int:
    """Return the 16-bit carryless product of two bytes."""
    a &= _BYTE_MASK
    b &= _BYTE_MASK
    product = 0
    for i in range(8):
        if (b >> i) & 1:
            product ^= a << i
    return product


def gf_mul(a: int, b: int) -> int:
    """Multiply two field elements."""
    return gf_reduce(carryless_mul(a, b), 2 * (PARAM_M - 1))


def gf_square(a: int) -> int:
    """Square a field element."""
    spread = 0
    for i in range(PARAM_M):
        if (a >> i) & 1:
            spread |= 1 << (2 * i)
    return gf_reduce(spread, 2 * (PARAM_M - 1))


def gf_inverse(a: int) -> int:
    """Return the multiplicative inverse of ``a``; the inverse of 0 is 0."""
    inv = gf_square(a)  # a^2
    tmp1 = gf_mul(inv, a)  # a^3
    inv = gf_square(inv)  # a^4
    tmp2 = gf_mul(inv, tmp1)  # a^7
    tmp1 = gf_mul(inv, tmp2)  # a^11
    inv = gf_mul(tmp1, inv)  # a^15
    inv = gf_square(inv)  # a^30
    inv = gf_square(inv)  # a^60
    inv = gf_square(inv)  # a^120
    inv = gf_mul(inv, tmp2)  # a^127
    return gf_square(inv)  # a^254


def build_exp_log_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Build the power table (258 entries, wrapping past 255) and the log table (256 entries)."""
    exp = []
    value = 1
    for _ in range(GF_MUL_ORDER + 3):
        exp.append(value)
        value <<= 1
        if value & 0x100:
            value ^= GF_POLY
    log = [0] * (1 << PARAM_M)
    for power, element in enumerate(exp[:GF_MUL_ORDER]):
        log[element] = power
    return tuple(exp), tuple(log)


GF_EXP, GF_LOG = build_exp_log_tables()