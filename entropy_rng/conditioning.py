"""Hash conditioning shared by the generator backends.

Pools compress whatever arrives into SHA-256d digests (SHA-256 applied
twice, which sidesteps length-extension on the pool contents).
"""

from __future__ import annotations

import hashlib


def sha256d(*chunks: bytes) -> bytes:
    """SHA-256d over the concatenation of *chunks*."""
    h = hashlib.sha256()
    for c in chunks:
        h.update(c)
    return hashlib.sha256(h.digest()).digest()


def blocks_for(n_bytes: int, block: int) -> int:
    """Number of *block*-sized blocks needed to cover *n_bytes*."""
    return -(-n_bytes // block)


class Sha256dPool:
    """Running SHA-256d accumulator for one entropy pool."""

    __slots__ = ("_h", "size")

    def __init__(self) -> None:
        self._h = hashlib.sha256()
        self.size = 0

    def feed(self, header: bytes, data: bytes) -> None:
        """Hash *header* and *data*; only *data* counts towards ``size``."""
        self._h.update(header)
        self._h.update(data)
        self.size += len(data)

    def digest(self) -> bytes:
        return hashlib.sha256(self._h.digest()).digest()

    def drain(self) -> bytes:
        """Return the pool digest and empty the pool."""
        d = self.digest()
        self._h = hashlib.sha256()
        self.size = 0
        return d
