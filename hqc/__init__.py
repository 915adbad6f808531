"""Building blocks of the HQC post-quantum KEM: field arithmetic, polynomials, FFT, Reed-Muller coding and hashing."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "fft",
    "gf",
    "gf2x",
    "hashing",
    "params",
    "parsing",
    "reed_muller",
    "shake",
]