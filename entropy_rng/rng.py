"""Generator handle: one backend plus seeding, timing and strict metadata.

Usage::

    from entropy_rng import create, Fortuna

    g = create(Fortuna, seed=os.urandom(32))
    g.generate(16)

A handle carries no lock. Share it across threads only behind the
caller's own mutual exclusion.
"""

from __future__ import annotations

import time

from entropy_rng.errors import UnseededGenerator
from entropy_rng.generators import Fortuna, Generator, generator_class
from entropy_rng.generators.base import Sink, TimeSource


class Rng:
    """Uniform wrapper around a single generator backend.

    The backend is owned exclusively by the handle; callers go through
    ``generate``, ``reseed`` and ``accumulate`` rather than touching it.
    """

    def __init__(self, backend: Generator, time_source: TimeSource | None = None) -> None:
        self._g = backend
        self.time_source = time_source or backend.time_source
        self.created = self.time_source()

    def __repr__(self) -> str:
        return f"<Rng {self._g.name} seeded={self.seeded} strict={self.strict}>"

    # ── metadata ──

    @property
    def name(self) -> str:
        return self._g.name

    @property
    def block(self) -> int:
        return self._g.block

    @property
    def pools(self) -> int:
        return self._g.pools

    @property
    def strict(self) -> bool:
        return self._g.strict

    @property
    def seeded(self) -> bool:
        return self._g.seeded

    @property
    def last_reseed(self) -> int | None:
        """Timestamp of the last applied reseed, explicit or automatic."""
        return self._g.last_reseed

    @property
    def state(self) -> dict:
        s = self._g.state
        s["created"] = self.created
        return s

    # ── operations ──

    def generate(self, n_bytes: int) -> bytes:
        """Return exactly *n_bytes* random bytes.

        Raises ``UnseededGenerator`` without touching the backend when the
        handle has not been seeded.
        """
        if not self._g.seeded:
            raise UnseededGenerator(self._g.name)
        return self._g.generate(n_bytes)

    def reseed(self, data: bytes) -> None:
        """Mix *data* in immediately; never subject to reseed throttling."""
        self._g.reseed(data)

    def accumulate(self, source: int) -> Sink:
        """Sink for entropy fragments from channel *source*.

        Pool-based backends may reseed from it, at most once per second.
        """
        return self._g.accumulate(source)


def create(
    generator: type[Generator] | str = Fortuna,
    *,
    state: Generator | None = None,
    seed: bytes | None = None,
    strict: bool = False,
    time_source: TimeSource | None = None,
    **options,
) -> Rng:
    """Instantiate a handle around a fresh (or supplied) backend.

    Parameters
    ----------
    generator:
        Backend class, or its registered name (``"fortuna"``, ``"hmac_drbg"``).
    state:
        Existing backend instance to wrap instead of creating one.
    seed:
        Bytes for an immediate explicit reseed.
    strict:
        Reference-conformant output assembly; see ``Generator``.
    time_source:
        Integer nanosecond clock used for reseed throttling.
    options:
        Backend-specific keywords, e.g. ``pools=`` or ``hash_name=``.
    """
    cls = generator_class(generator) if isinstance(generator, str) else generator
    if state is None:
        state = cls(time_source=time_source or time.monotonic_ns, strict=strict, **options)
    elif not isinstance(state, cls):
        raise TypeError(f"state is a {type(state).__name__}, expected {cls.__name__}")
    g = Rng(state, time_source)
    if seed is not None:
        g.reseed(seed)
    return g
