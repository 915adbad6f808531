"""An incremental SHAKE256 state: absorb with write, then squeeze with read."""

from __future__ import annotations

import hashlib


class Shake256:
    """SHAKE256 with an absorb phase followed by a squeeze phase.

    Successive reads return successive parts of the output stream. Writing
    after the first read is an error, as in the sponge construction.
    """

    def __init__(self, data: bytes = b"") -> None:
        self._state = hashlib.shake_256()
        self._offset = 0
        self._squeezing = False
        if data:
            self.write(data)

    def write(self, data: bytes) -> int:
        """Absorb ``data`` and return the number of bytes absorbed."""
        if self._squeezing:
            raise RuntimeError("shake: write after read")
        view = memoryview(data)
        self._state.update(view)
        return view.nbytes

    def read(self, size: int) -> bytes:
        """Squeeze the next ``size`` bytes of output."""
        if size < 0:
            raise ValueError("shake: negative read size")
        self._squeezing = True
        end = self._offset + size
        out = self._state.digest(end)[self._offset:end] if size else b""
        self._offset = end
        return out

    def reset(self) -> None:
        """Discard everything absorbed and squeezed, returning to a fresh state."""
        self._state = hashlib.shake_256()
        self._offset = 0
        self._squeezing = False