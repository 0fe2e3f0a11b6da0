"""HMAC_DRBG (NIST SP 800-90A, section 10.1.2).

Deterministic: the same seed always yields the same stream, which makes
it the backend for test vectors and reproducible simulations. There is
no automatic reseed; accumulated fragments are folded into a running
hash whose digest is mixed in at the next explicit ``reseed``.
"""

from __future__ import annotations

import hashlib
import hmac
import logging

from entropy_rng.conditioning import blocks_for
from entropy_rng.errors import UnseededGenerator
from entropy_rng.generators.base import Generator, Sink, TimeSource

log = logging.getLogger(__name__)

RESEED_INTERVAL = 1 << 48
MAX_REQUEST = 1 << 16  # bytes per request (2**19 bits)


class HmacDrbg(Generator):
    """HMAC_DRBG over a hashlib hash.

    Parameters
    ----------
    hash_name:
        Any name ``hashlib.new`` accepts, e.g. ``"sha256"`` or ``"sha512"``.
    """

    name = "hmac_drbg"
    description = "HMAC_DRBG (SP 800-90A) over a selectable hash"
    pools = 0

    def __init__(
        self,
        time_source: TimeSource | None = None,
        strict: bool = False,
        hash_name: str = "sha256",
    ) -> None:
        super().__init__(time_source, strict)
        self.hash_name = hash_name
        self.block = hashlib.new(hash_name).digest_size
        self._k = b"\x00" * self.block
        self._v = b"\x01" * self.block
        self._seeded = False
        self._requests = 0
        self._pending = hashlib.new(hash_name)
        self._pending_fragments = 0
        self._pending_bytes = 0

    def _hmac(self, key: bytes, data: bytes) -> bytes:
        return hmac.new(key, data, self.hash_name).digest()

    def _update(self, provided: bytes = b"") -> None:
        self._k = self._hmac(self._k, self._v + b"\x00" + provided)
        self._v = self._hmac(self._k, self._v)
        if provided:
            self._k = self._hmac(self._k, self._v + b"\x01" + provided)
            self._v = self._hmac(self._k, self._v)

    # ── seeding ──

    @property
    def seeded(self) -> bool:
        if self.strict and self._requests >= RESEED_INTERVAL:
            return False
        return self._seeded

    def reseed(self, data: bytes) -> None:
        data = self._as_bytes(data)
        if self._pending_fragments:
            data = self._pending.digest() + data
            self._pending = hashlib.new(self.hash_name)
            self._pending_fragments = 0
            self._pending_bytes = 0
        self._update(data)
        self._seeded = True
        self._requests = 0
        self.reseed_count += 1
        self.last_reseed = self.time_source()
        log.debug("%s: reseeded with %d byte(s)", self.name, len(data))

    def accumulate(self, source: int) -> Sink:
        self._check_source(source)

        def add(data: bytes) -> None:
            data = self._as_bytes(data)
            if len(data) > 255:
                data = hashlib.new(self.hash_name, data).digest()
            self._pending.update(bytes((source, len(data))))
            self._pending.update(data)
            self._pending_fragments += 1
            self._pending_bytes += len(data)

        return add

    # ── output ──

    def generate(self, n_bytes: int) -> bytes:
        self._check_size(n_bytes)
        if not self.seeded:
            raise UnseededGenerator(self.name)
        if self.strict and n_bytes > MAX_REQUEST:
            raise ValueError(f"strict HMAC_DRBG requests are limited to {MAX_REQUEST} bytes")
        if self.strict:
            temp = b""
            while len(temp) < n_bytes:
                self._v = self._hmac(self._k, self._v)
                temp += self._v
            out = temp[:n_bytes]
        else:
            buf = bytearray(blocks_for(n_bytes, self.block) * self.block)
            view = memoryview(buf)
            for i in range(0, len(buf), self.block):
                self._v = self._hmac(self._k, self._v)
                view[i: i + self.block] = self._v
            out = bytes(view[:n_bytes])
        self._update()
        self._requests += 1
        return out

    @property
    def state(self) -> dict:
        s = super().state
        s.update({
            "hash": self.hash_name,
            "pending_bytes": self._pending_bytes,
            "key_id": hashlib.sha256(self._k).hexdigest()[:16],
        })
        return s
