"""Exceptions raised by key parsing, encapsulation and decapsulation."""

from __future__ import annotations


class HqcError(Exception):
    """Base class for every error raised by this package."""


class InvalidKeySizeError(HqcError, ValueError):
    """A key or seed byte string has the wrong length."""

    def __init__(self, message: str = "hqc: invalid key size") -> None:
        super().__init__(message)


class InvalidCiphertextSizeError(HqcError, ValueError):
    """A ciphertext byte string has the wrong length."""

    def __init__(self, message: str = "hqc: invalid ciphertext size") -> None:
        super().__init__(message)


class DestroyedKeyError(HqcError):
    """An operation was attempted on a key whose secret material was destroyed."""

    def __init__(self, message: str = "hqc: key has been destroyed") -> None:
        super().__init__(message)


class KeyMismatchError(HqcError, ValueError):
    """The public key embedded in a secret key does not match its seed."""

    def __init__(
        self, message: str = "hqc: secret key internal consistency check failed"
    ) -> None:
        super().__init__(message)