"""Fortuna: pool-based CSPRNG (Ferguson & Schneier).

Architecture:
1. Entropy fragments land in one of ``pools`` SHA-256d pools
2. Once pool 0 holds ``MIN_POOL_SIZE`` bytes, an automatic reseed folds
   pool digests into the key (pool i joins every 2**i-th reseed)
3. Automatic reseeds are throttled to one per ``MIN_RESEED_INTERVAL_NS``
4. Output is AES-256-CTR keystream; the key is replaced after every
   request, so captured state never reveals earlier output
"""

from __future__ import annotations

import hashlib
import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from entropy_rng.conditioning import Sha256dPool, blocks_for, sha256d
from entropy_rng.errors import UnseededGenerator
from entropy_rng.generators.base import Generator, Sink, TimeSource

log = logging.getLogger(__name__)

MIN_POOL_SIZE = 64
MIN_RESEED_INTERVAL_NS = 1_000_000_000
MAX_REQUEST = 1 << 20  # bytes per request before re-keying

_KEY_SIZE = 32
_CTR_MOD = 1 << 128


class Fortuna(Generator):
    """Fortuna generator with AES-256-CTR output and SHA-256d pools.

    Usage::

        g = Fortuna()
        g.reseed(os.urandom(32))
        g.generate(32)
    """

    name = "fortuna"
    description = "Fortuna: 32 SHA-256d entropy pools, AES-256-CTR output"
    block = algorithms.AES.block_size // 8
    pools = 32

    def __init__(
        self,
        time_source: TimeSource | None = None,
        strict: bool = False,
        pools: int | None = None,
    ) -> None:
        super().__init__(time_source, strict)
        if pools is not None:
            if pools < 1:
                raise ValueError(f"pools must be >= 1, got {pools}")
            self.pools = pools
        self._secret = bytes(_KEY_SIZE)
        self._ctr = 0
        self._pools = [Sha256dPool() for _ in range(self.pools)]

    # ── seeding ──

    @property
    def seeded(self) -> bool:
        return self._ctr != 0

    def _rekey(self, *material: bytes) -> None:
        self._secret = sha256d(self._secret, *material)
        self._ctr = (self._ctr + 1) % _CTR_MOD or 1

    def reseed(self, data: bytes) -> None:
        self._rekey(self._as_bytes(data))
        self.last_reseed = self.time_source()

    def _throttled(self, now: int) -> bool:
        return self.last_reseed is not None and now - self.last_reseed < MIN_RESEED_INTERVAL_NS

    def _maybe_pool_reseed(self) -> bool:
        if self._pools[0].size < MIN_POOL_SIZE:
            return False
        now = self.time_source()
        if self._throttled(now):
            log.debug("fortuna: pool reseed throttled (%d ns since last)", now - self.last_reseed)
            return False
        self.reseed_count += 1
        digests = [
            pool.drain()
            for i, pool in enumerate(self._pools)
            if self.reseed_count % (1 << i) == 0
        ]
        self._rekey(*digests)
        self.last_reseed = now
        log.debug("fortuna: pool reseed #%d from %d pool(s)", self.reseed_count, len(digests))
        return True

    def accumulate(self, source: int) -> Sink:
        self._check_source(source)
        index = source % self.pools

        def add(data: bytes) -> None:
            nonlocal index
            data = self._as_bytes(data)
            if len(data) > 255:
                data = hashlib.sha256(data).digest()
            self._pools[index].feed(bytes((source, len(data))), data)
            index = (index + 1) % self.pools
            self._maybe_pool_reseed()

        return add

    # ── output ──

    def _keystream(self, n_blocks: int) -> bytes:
        encryptor = Cipher(
            algorithms.AES(self._secret), modes.CTR(self._ctr.to_bytes(16, "big"))
        ).encryptor()
        zeros = bytes(n_blocks * self.block)
        if self.strict:
            out = b"".join(
                encryptor.update(zeros[i: i + self.block])
                for i in range(0, len(zeros), self.block)
            )
        else:
            buf = bytearray(len(zeros) + self.block - 1)
            written = encryptor.update_into(zeros, buf)
            out = bytes(buf[:written])
            buf[:] = bytes(len(buf))
        self._ctr = (self._ctr + n_blocks) % _CTR_MOD or 1
        return out

    def _generate_rekey(self, n_bytes: int) -> bytes:
        n_blocks = blocks_for(n_bytes, self.block) + blocks_for(_KEY_SIZE, self.block)
        stream = self._keystream(n_blocks)
        self._secret = stream[-_KEY_SIZE:]
        return stream[:n_bytes]

    def generate(self, n_bytes: int) -> bytes:
        self._check_size(n_bytes)
        self._maybe_pool_reseed()
        if not self.seeded:
            raise UnseededGenerator(self.name)
        out = bytearray()
        remaining = n_bytes
        while remaining > 0:
            chunk = min(remaining, MAX_REQUEST)
            out += self._generate_rekey(chunk)
            remaining -= chunk
        return bytes(out)

    @property
    def state(self) -> dict:
        s = super().state
        s.update({
            "pools": self.pools,
            "pool0_size": self._pools[0].size,
            "key_id": hashlib.sha256(self._secret).hexdigest()[:16],
        })
        return s
