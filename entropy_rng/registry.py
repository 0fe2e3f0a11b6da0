"""Process-wide default generator.

A write-once cell: it starts unset, may be set exactly once, and is
never cleared. Concurrent ``set_default_generator`` calls produce one
winner; every other caller gets ``DefaultGeneratorAlreadySet``.
"""

from __future__ import annotations

import logging
import threading

from entropy_rng.errors import DefaultGeneratorAlreadySet, NoDefaultGenerator
from entropy_rng.rng import Rng

log = logging.getLogger(__name__)


class DefaultCell:
    """Lock-guarded write-once slot holding one ``Rng``."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Rng | None = None

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def set(self, g: Rng) -> None:
        if not isinstance(g, Rng):
            raise TypeError(f"expected an Rng handle, got {type(g).__name__}")
        with self._lock:
            if self._value is not None:
                raise DefaultGeneratorAlreadySet()
            self._value = g
        log.debug("default generator installed: %r", g)

    def get(self) -> Rng:
        g = self._value
        if g is None:
            raise NoDefaultGenerator()
        return g


_cell = DefaultCell()


def set_default_generator(g: Rng) -> None:
    """Install *g* as the process default. May succeed only once."""
    _cell.set(g)


def default_generator() -> Rng:
    """Return the installed default generator or raise ``NoDefaultGenerator``."""
    return _cell.get()
