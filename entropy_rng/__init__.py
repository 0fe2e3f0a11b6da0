"""
entropy-rng: pluggable CSPRNG core.

Interchangeable generator backends (Fortuna, HMAC_DRBG) behind one
handle type, a write-once process default generator, and an
accumulation protocol for feeding entropy in small fragments.

Don't forget to seed. Entropy collectors push bytes in through
``accumulate``/``reseed``; consumers pull with ``generate``.

Example::

    import os
    import entropy_rng as rng

    rng.set_default_generator(rng.create(seed=os.urandom(32)))
    key = rng.generate(32)
"""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "Amenti Labs"

from entropy_rng import registry
from entropy_rng.errors import (
    DefaultGeneratorAlreadySet,
    ErrorKind,
    NoDefaultGenerator,
    RngError,
    UnseededGenerator,
)
from entropy_rng.generators import ALL_GENERATORS, Fortuna, Generator, HmacDrbg
from entropy_rng.generators.base import Sink
from entropy_rng.registry import default_generator, set_default_generator
from entropy_rng.rng import Rng, create

__all__ = [
    "ALL_GENERATORS",
    "DefaultGeneratorAlreadySet",
    "ErrorKind",
    "Fortuna",
    "Generator",
    "HmacDrbg",
    "NoDefaultGenerator",
    "Rng",
    "RngError",
    "UnseededGenerator",
    "accumulate",
    "accumulate_with",
    "block",
    "block_with",
    "create",
    "default_generator",
    "generate",
    "generate_with",
    "pools",
    "pools_with",
    "reseed",
    "reseed_with",
    "seeded",
    "seeded_with",
    "set_default_generator",
    "strict",
    "strict_with",
    "__version__",
]


# ── explicit handle ──

def generate_with(g: Rng, n_bytes: int) -> bytes:
    return g.generate(n_bytes)


def reseed_with(g: Rng, data: bytes) -> None:
    g.reseed(data)


def accumulate_with(g: Rng, source: int) -> Sink:
    return g.accumulate(source)


def block_with(g: Rng) -> int:
    return g.block


def seeded_with(g: Rng) -> bool:
    return g.seeded


def pools_with(g: Rng) -> int:
    return g.pools


def strict_with(g: Rng) -> bool:
    return g.strict


# ── default generator ──
# Each of these raises NoDefaultGenerator before set_default_generator().

def generate(n_bytes: int) -> bytes:
    """*n_bytes* random bytes from the default generator."""
    return registry.default_generator().generate(n_bytes)


def reseed(data: bytes) -> None:
    registry.default_generator().reseed(data)


def accumulate(source: int) -> Sink:
    return registry.default_generator().accumulate(source)


def block() -> int:
    return registry.default_generator().block


def seeded() -> bool:
    return registry.default_generator().seeded


def pools() -> int:
    return registry.default_generator().pools


def strict() -> bool:
    return registry.default_generator().strict
