"""Domain-separated SHA-3 hash functions of the KEM."""

from __future__ import annotations

import hashlib

G_FCT_DOMAIN = 0
H_FCT_DOMAIN = 1
I_FCT_DOMAIN = 2
J_FCT_DOMAIN = 3

_SPEC_VERSION = "v5.0.0"


def _digest(factory, domain: int, *parts: bytes) -> bytes:
    state = factory()
    for part in parts:
        state.update(memoryview(part))
    state.update(bytes((domain,)))
    return state.digest()


def hash_g(h_ek: bytes, m: bytes, salt: bytes) -> bytes:
    """G(h_ek, m, salt): 64 bytes, the shared key followed by the encryption seed theta."""
    return _digest(hashlib.sha3_512, G_FCT_DOMAIN, h_ek, m, salt)


def hash_h(pk: bytes) -> bytes:
    """H(pk): the 32-byte hash of a serialized public key."""
    return _digest(hashlib.sha3_256, H_FCT_DOMAIN, pk)


def hash_i(seed: bytes) -> bytes:
    """I(seed): 64 bytes, seed_dk followed by seed_ek."""
    return _digest(hashlib.sha3_512, I_FCT_DOMAIN, seed)


def hash_j(h_ek: bytes, sigma: bytes, u_bytes: bytes, v_bytes: bytes, salt: bytes) -> bytes:
    """J(h_ek, sigma, u, v, salt): the 32-byte implicit-rejection key."""
    return _digest(hashlib.sha3_256, J_FCT_DOMAIN, h_ek, sigma, u_bytes, v_bytes, salt)


def version() -> str:
    """Return the specification version this implementation follows."""
    return _SPEC_VERSION