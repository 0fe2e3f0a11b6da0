"""NumPy-compatible random generator backed by an ``Rng`` handle.

Usage::

    from entropy_rng import create
    from entropy_rng.numpy_compat import RngGenerator

    rng = RngGenerator.from_handle(create(seed=os.urandom(32)))
    rng.random(10)
    rng.integers(0, 256, size=100)
"""

from __future__ import annotations

import numpy as np

from entropy_rng.rng import Rng


class RngBitGenerator:
    """A BitGenerator-like object drawing from an ``Rng`` handle.

    Not a true numpy BitGenerator subclass (that requires C capsules),
    but compatible with our RngGenerator wrapper.

    Parameters
    ----------
    g : Rng or None
        Handle to draw from. If None, the process default generator is
        resolved on every refill.
    """

    def __init__(self, g: Rng | None = None, buffer_size: int = 4096):
        self._g = g
        self._buf = bytearray()
        self._buffer_size = buffer_size

    @property
    def handle(self) -> Rng:
        if self._g is not None:
            return self._g
        from entropy_rng.registry import default_generator
        return default_generator()

    def _take(self, n: int) -> bytes:
        if len(self._buf) < n:
            self._buf.extend(self.handle.generate(max(n - len(self._buf), self._buffer_size)))
        out = bytes(self._buf[:n])
        del self._buf[:n]
        return out

    def random_raw(self, n: int = 1) -> np.ndarray:
        raw = self._take(n * 8)
        return np.frombuffer(raw, dtype=np.uint64)[:n].copy()

    @property
    def state(self) -> dict:
        return {
            "bit_generator": "RngBitGenerator",
            "generator": self.handle.name,
            "buffer_size": len(self._buf),
        }


class RngGenerator:
    """NumPy Generator-compatible RNG keyed from a CSPRNG handle.

    Distribution draws (``random``, ``integers``, ``normal`` and the rest
    of ``DISTRIBUTIONS``) come from a PCG64 ``numpy.random.Generator``,
    not from the CSPRNG itself. PCG64 is re-keyed with 256 bits from the
    handle every ``reseed_every`` draws. Only ``bytes`` reads the handle
    directly; use it, not the distributions, for key material.
    """

    DISTRIBUTIONS = frozenset({
        "random", "integers", "standard_normal", "normal", "uniform",
        "choice", "shuffle", "permutation",
    })

    def __init__(self, bit_generator: RngBitGenerator | None = None, reseed_every: int = 100):
        self._bg = bit_generator or RngBitGenerator()
        self._reseed_every = reseed_every
        self._draws = 0
        self._pcg = self._rekeyed()

    @classmethod
    def from_handle(cls, g: Rng, **kwargs) -> "RngGenerator":
        return cls(RngBitGenerator(g), **kwargs)

    def _rekeyed(self) -> np.random.Generator:
        entropy = int.from_bytes(self._bg._take(32), "little")
        return np.random.Generator(np.random.PCG64(np.random.SeedSequence(entropy)))

    def _current(self) -> np.random.Generator:
        self._draws += 1
        if self._draws >= self._reseed_every:
            self._pcg = self._rekeyed()
            self._draws = 0
        return self._pcg

    def __getattr__(self, name: str):
        if name not in self.DISTRIBUTIONS:
            raise AttributeError(f"{type(self).__name__!r} has no attribute {name!r}")

        def draw(*args, **kwargs):
            return getattr(self._current(), name)(*args, **kwargs)

        draw.__name__ = name
        return draw

    def bytes(self, length: int) -> bytes:
        """Random bytes straight from the CSPRNG handle."""
        return self._bg._take(length)

    @property
    def bit_generator(self) -> RngBitGenerator:
        return self._bg
