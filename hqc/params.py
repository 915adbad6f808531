"""Parameter sets for the three HQC security levels."""

from __future__ import annotations

from dataclasses import dataclass, field

from .gf import GF_EXP, GF_MUL_ORDER


def ceil_div(a: int, b: int) -> int:
    """Return ceil(a / b) for non-negative integers."""
    return (a + b - 1) // b


@dataclass(frozen=True)
class Params:
    """All parameters of one HQC security level, with derived sizes."""

    name: str
    n: int
    n1: int
    n2: int
    n1n2: int
    omega: int
    omega_e: int
    omega_r: int
    delta: int
    k: int
    g: int
    fft: int
    m: int
    gf_poly: int
    seed_len: int
    salt_len: int
    n_mu: int
    rejection_threshold: int
    security_bytes: int
    rs_poly_coefs: tuple[int, ...]
    _alpha_ij_pow: tuple[tuple[int, ...], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        table = tuple(
            tuple(GF_EXP[((i + 1) * (j + 1)) % GF_MUL_ORDER] for j in range(self.n1 - 1))
            for i in range(2 * self.delta)
        )
        object.__setattr__(self, "_alpha_ij_pow", table)

    @property
    def vec_n_size64(self) -> int:
        return ceil_div(self.n, 64)

    @property
    def vec_n1n2_size64(self) -> int:
        return ceil_div(self.n1n2, 64)

    @property
    def vec_n_size_bytes(self) -> int:
        return ceil_div(self.n, 8)

    @property
    def vec_n1n2_size_bytes(self) -> int:
        return ceil_div(self.n1n2, 8)

    @property
    def red_mask(self) -> int:
        bits = self.n % 64
        return (1 << 64) - 1 if bits == 0 else (1 << bits) - 1

    @property
    def multiplicity(self) -> int:
        return ceil_div(self.n2, 128)

    @property
    def vec_k_size_bytes(self) -> int:
        return self.k

    @property
    def vec_n1_size_bytes(self) -> int:
        return self.n1

    @property
    def vec_k_size64(self) -> int:
        return ceil_div(self.k, 8)

    @property
    def vec_n1_size64(self) -> int:
        return ceil_div(self.n1, 8)

    def alpha_ij_pow(self) -> tuple[tuple[int, ...], ...]:
        """Table of alpha^((i+1)*(j+1)), 2*delta rows by n1-1 columns."""
        return self._alpha_ij_pow

    def validate(self) -> None:
        """Check the internal consistency of the parameters; raise ValueError if broken."""
        if self.n1 * self.n2 != self.n1n2:
            raise ValueError("n1*n2 != n1n2")
        if self.g != 2 * self.delta + 1:
            raise ValueError("g != 2*delta+1")
        if self.n <= self.n1n2:
            raise ValueError("n must be > n1n2")
        if self.n % 64 == 0:
            raise ValueError("n must not be divisible by 64")
        if (1 << self.fft) < self.delta + 1:
            raise ValueError("(1<<fft) must be >= delta+1")
        if len(self.rs_poly_coefs) != self.g:
            raise ValueError("rs_poly_coefs length must equal g")
        if self.seed_len != 32:
            raise ValueError("seed_len must be 32")
        if self.n_mu != (1 << 32) // self.n:
            raise ValueError("n_mu does not match floor(2^32 / n)")
        if self.rejection_threshold != ((1 << 24) // self.n) * self.n:
            raise ValueError("rejection_threshold does not match floor(2^24 / n) * n")
        if self.security_bytes != self.k:
            raise ValueError("security_bytes must equal k")
        table = self.alpha_ij_pow()
        if len(table) != 2 * self.delta:
            raise ValueError("alpha_ij_pow row count != 2*delta")
        if any(len(row) != self.n1 - 1 for row in table):
            raise ValueError("alpha_ij_pow column count != n1-1")


PARAMS_128 = Params(
    name="HQC-128",
    n=17669, n1=46, n2=384, n1n2=17664,
    omega=66, omega_e=75, omega_r=75,
    delta=15, k=16, g=31, fft=4,
    m=8, gf_poly=0x11D, seed_len=32, salt_len=16,
    n_mu=243079, rejection_threshold=16767881, security_bytes=16,
    rs_poly_coefs=(
        89, 69, 153, 116, 176, 117, 111, 75, 73, 233, 242, 233, 65, 210, 21, 139,
        103, 173, 67, 118, 105, 210, 174, 110, 74, 69, 228, 82, 255, 181, 1,
    ),
)

PARAMS_192 = Params(
    name="HQC-192",
    n=35851, n1=56, n2=640, n1n2=35840,
    omega=100, omega_e=114, omega_r=114,
    delta=16, k=24, g=33, fft=5,
    m=8, gf_poly=0x11D, seed_len=32, salt_len=16,
    n_mu=119800, rejection_threshold=16742417, security_bytes=24,
    rs_poly_coefs=(
        45, 216, 239, 24, 253, 104, 27, 40, 107, 50, 163, 210, 227, 134, 224, 158,
        119, 13, 158, 1, 238, 164, 82, 43, 15, 232, 246, 142, 50, 189, 29, 232, 1,
    ),
)

PARAMS_256 = Params(
    name="HQC-256",
    n=57637, n1=90, n2=640, n1n2=57600,
    omega=131, omega_e=149, omega_r=149,
    delta=29, k=32, g=59, fft=5,
    m=8, gf_poly=0x11D, seed_len=32, salt_len=16,
    n_mu=74517, rejection_threshold=16772367, security_bytes=32,
    rs_poly_coefs=(
        49, 167, 49, 39, 200, 121, 124, 91, 240, 63, 148, 71, 150, 123, 87, 101,
        32, 215, 159, 71, 201, 115, 97, 210, 186, 183, 141, 217, 123, 12, 31, 243,
        180, 219, 152, 239, 99, 141, 4, 246, 191, 144, 8, 232, 47, 27, 141, 178,
        130, 64, 124, 47, 39, 188, 216, 48, 199, 187, 1,
    ),
)


def all_params() -> tuple[Params, Params, Params]:
    """Return the HQC-128, HQC-192 and HQC-256 parameter sets, in that order."""
    return PARAMS_128, PARAMS_192, PARAMS_256


for _p in all_params():
    _p.validate()
del _p