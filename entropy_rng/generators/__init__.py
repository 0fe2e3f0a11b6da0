"""Generator backend implementations."""

from entropy_rng.generators.base import Generator
from entropy_rng.generators.fortuna import Fortuna
from entropy_rng.generators.hmac_drbg import HmacDrbg

ALL_GENERATORS: list[type[Generator]] = [
    Fortuna,
    HmacDrbg,
]


def generator_class(name: str) -> type[Generator]:
    """Look up a backend class by its ``name``."""
    for cls in ALL_GENERATORS:
        if cls.name == name:
            return cls
    known = ", ".join(cls.name for cls in ALL_GENERATORS)
    raise ValueError(f"unknown generator {name!r} (known: {known})")


__all__ = ["Generator", "Fortuna", "HmacDrbg", "ALL_GENERATORS", "generator_class"]
