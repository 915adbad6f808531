"""Additive FFT over GF(2^8) used to find the roots of the error-locator polynomial."""

from __future__ import annotations

from collections.abc import Sequence

from .gf import GF_LOG, GF_MUL_ORDER, PARAM_M, gf_inverse, gf_mul, gf_square
from .params import Params


def compute_fft_betas() -> list[int]:
    """Return the canonical basis 1 << (PARAM_M - 1 - i) for i in [0, PARAM_M - 2]."""
    return [1 << (PARAM_M - 1 - i) for i in range(PARAM_M - 1)]


def compute_subset_sums(values: Sequence[int]) -> list[int]:
    """Return the XOR of every subset of ``values``, indexed by the subset's bit pattern."""
    sums = [0]
    for value in values:
        sums += [value ^ s for s in sums]
    return sums


def radix(f: Sequence[int], mf: int) -> tuple[list[int], list[int]]:
    """Split f(x) = f0(x^2 + x) + x * f1(x^2 + x) for a polynomial of 2^mf coefficients."""
    if mf < 1:
        raise ValueError("radix decomposition needs mf >= 1")
    size = 1 << mf
    f = list(f[:size]) + [0] * max(0, size - len(f))
    half = size >> 1
    f0 = [0] * half
    f1 = [0] * half

    if mf == 1:
        f0[0] = f[0]
        f1[0] = f[1]
    elif mf == 2:
        f0[0] = f[0]
        f0[1] = f[2] ^ f[3]
        f1[0] = f[1] ^ f0[1]
        f1[1] = f[3]
    elif mf == 3:
        f0[0] = f[0]
        f0[2] = f[4] ^ f[6]
        f0[3] = f[6] ^ f[7]
        f1[1] = f[3] ^ f[5] ^ f[7]
        f1[2] = f[5] ^ f[6]
        f1[3] = f[7]
        f0[1] = f[2] ^ f0[2] ^ f1[1]
        f1[0] = f[1] ^ f0[1]
    elif mf == 4:
        f0[4] = f[8] ^ f[12]
        f0[6] = f[12] ^ f[14]
        f0[7] = f[14] ^ f[15]
        f1[5] = f[11] ^ f[13]
        f1[6] = f[13] ^ f[14]
        f1[7] = f[15]
        f0[5] = f[10] ^ f[12] ^ f1[5]
        f1[4] = f[9] ^ f[13] ^ f0[5]

        f0[0] = f[0]
        f1[3] = f[7] ^ f[11] ^ f[15]
        f0[3] = f[6] ^ f[10] ^ f[14] ^ f1[3]
        f0[2] = f[4] ^ f0[4] ^ f0[3] ^ f1[3]
        f1[1] = f[3] ^ f[5] ^ f[9] ^ f[13] ^ f1[3]
        f1[2] = f[3] ^ f1[1] ^ f0[3]
        f0[1] = f[2] ^ f0[2] ^ f1[1]
        f1[0] = f[1] ^ f0[1]
    else:
        return _radix_big(f, mf)
    return f0, f1


def _radix_big(f: list[int], mf: int) -> tuple[list[int], list[int]]:
    n = 1 << (mf - 2)
    top = f[3 * n:4 * n]
    q = [t ^ mid for t, mid in zip(top, f[2 * n:3 * n])] + list(top)
    r = f[:n] + [lo ^ qi for lo, qi in zip(f[n:2 * n], q[:n])]

    q0, q1 = radix(q, mf - 1)
    r0, r1 = radix(r, mf - 1)
    return r0[:n] + q0[:n], r1[:n] + q1[:n]


def _fft_rec(f: Sequence[int], f_coeffs: int, m: int, mf: int, betas: Sequence[int]) -> list[int]:
    """Evaluate f at all 2^m subset sums of ``betas``."""
    if mf == 1:
        w = [f[0]]
        for beta in betas[:m]:
            term = gf_mul(beta, f[1])
            w += [x ^ term for x in w]
        return w

    f = list(f)
    beta_m = betas[m - 1]
    if beta_m != 1:
        power = 1
        for i in range(1, 1 << mf):
            power = gf_mul(power, beta_m)
            f[i] = gf_mul(power, f[i])

    f0, f1 = radix(f, mf)

    inv_beta_m = gf_inverse(beta_m)
    gammas = [gf_mul(beta, inv_beta_m) for beta in betas[:m - 1]]
    deltas = [gf_square(g) ^ g for g in gammas]
    gammas_sums = compute_subset_sums(gammas)

    u = _fft_rec(f0, (f_coeffs + 1) // 2, m - 1, mf - 1, deltas)
    k = 1 << (m - 1)

    if f_coeffs <= 3:
        # f1 is a constant: no second recursion needed.
        c = f1[0]
        low = [u[0]] + [u[i] ^ gf_mul(gammas_sums[i], c) for i in range(1, k)]
        return low + [x ^ c for x in low]

    v = _fft_rec(f1, f_coeffs // 2, m - 1, mf - 1, deltas)
    low = [u[0]] + [u[i] ^ gf_mul(gammas_sums[i], v[i]) for i in range(1, k)]
    return low + [vi ^ li for vi, li in zip(v[:k], low)]


def fft(params: Params, f: Sequence[int], f_coeffs: int) -> list[int]:
    """Evaluate the polynomial f (``f_coeffs`` coefficients) at all 256 field elements."""
    betas = compute_fft_betas()
    betas_sums = compute_subset_sums(betas)

    f0, f1 = radix(f, params.fft)
    deltas = [gf_square(b) ^ b for b in betas]

    u = _fft_rec(f0, (f_coeffs + 1) // 2, PARAM_M - 1, params.fft - 1, deltas)
    v = _fft_rec(f1, f_coeffs // 2, PARAM_M - 1, params.fft - 1, deltas)

    k = 1 << (PARAM_M - 1)
    low = [u[0]] + [u[i] ^ gf_mul(betas_sums[i], v[i]) for i in range(1, k)]
    return low + [vi ^ li for vi, li in zip(v[:k], low)]


def retrieve_error_poly(w: Sequence[int]) -> list[int]:
    """Turn FFT evaluations into an error vector: a 1 at the inverse of every root."""
    gammas_sums = compute_subset_sums(compute_fft_betas())
    k = 1 << (PARAM_M - 1)
    error_poly = [0] * (1 << PARAM_M)

    error_poly[0] ^= int(w[0] == 0)
    error_poly[0] ^= int(w[k] == 0)

    for i in range(1, k):
        index = GF_MUL_ORDER - GF_LOG[gammas_sums[i]]
        error_poly[index] ^= int(w[i] == 0)
        index = GF_MUL_ORDER - GF_LOG[gammas_sums[i] ^ 1]
        error_poly[index] ^= int(w[k + i] == 0)
    return error_poly