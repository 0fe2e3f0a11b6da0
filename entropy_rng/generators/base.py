"""Abstract base class for all generator backends."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Callable

TimeSource = Callable[[], int]
Sink = Callable[[bytes], None]


class Generator(ABC):
    """Base class for a CSPRNG backend.

    Every backend declares ``name``, ``block`` and ``pools`` and implements
    ``generate``, ``reseed``, ``accumulate`` and ``seeded``. State is
    private to the backend; ``state`` reports non-secret fingerprints only.

    Parameters
    ----------
    time_source:
        Zero-argument callable returning integer nanoseconds. Used to
        throttle automatic reseeds. Defaults to ``time.monotonic_ns``.
    strict:
        Assemble output exactly as the reference construction does,
        block by block, instead of filling a preallocated buffer.
    """

    name: str = "unnamed"
    description: str = ""
    block: int = 0
    pools: int = 0

    def __init__(self, time_source: TimeSource | None = None, strict: bool = False) -> None:
        self.time_source = time_source or time.monotonic_ns
        self.strict = strict
        self.last_reseed: int | None = None
        self.reseed_count = 0

    @abstractmethod
    def generate(self, n_bytes: int) -> bytes:
        """Return exactly *n_bytes* uniformly distributed bytes.

        Raises ``UnseededGenerator`` if ``seeded`` is False.
        """
        ...

    @abstractmethod
    def reseed(self, data: bytes) -> None:
        """Mix *data* into the state. One call leaves the generator seeded."""
        ...

    @abstractmethod
    def accumulate(self, source: int) -> Sink:
        """Return a sink for small entropy fragments from channel *source*.

        The sink is reusable and cheap enough to call from event loops.
        """
        ...

    @property
    @abstractmethod
    def seeded(self) -> bool:
        """True iff ``generate`` will not raise ``UnseededGenerator``."""
        ...

    @property
    def state(self) -> dict:
        return {
            "generator": self.name,
            "seeded": self.seeded,
            "strict": self.strict,
            "reseed_count": self.reseed_count,
            "last_reseed": self.last_reseed,
        }

    # ── helpers available to subclasses ──

    @staticmethod
    def _check_size(n_bytes: int) -> None:
        if not isinstance(n_bytes, int):
            raise TypeError(f"byte count must be an int, not {type(n_bytes).__name__}")
        if n_bytes < 0:
            raise ValueError(f"byte count must be non-negative, got {n_bytes}")

    @staticmethod
    def _check_source(source: int) -> None:
        if not 0 <= source <= 255:
            raise ValueError(f"source tag must be in 0..255, got {source}")

    @staticmethod
    def _as_bytes(data) -> bytes:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"entropy must be bytes-like, not {type(data).__name__}")
        return bytes(data)
