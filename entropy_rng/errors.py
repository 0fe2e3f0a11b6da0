"""Generator errors.

A small, typed hierarchy. Catch ``RngError`` to handle every
generator-contract failure, or one of the concrete classes for finer
control. Each class carries a ``kind`` so callers can dispatch on it
without ``isinstance`` chains.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    UNSEEDED = "unseeded_generator"
    NO_DEFAULT = "no_default_generator"
    DEFAULT_ALREADY_SET = "default_generator_already_set"


class RngError(Exception):
    """Base class for all generator errors."""

    kind: ErrorKind


class UnseededGenerator(RngError):
    """Raised when output is requested from a generator that was never seeded.

    Reseed it, or accumulate enough entropy for a pool reseed, and retry.
    """

    kind = ErrorKind.UNSEEDED

    def __init__(self, generator: str = "generator") -> None:
        super().__init__(f"{generator} is not seeded")
        self.generator = generator


class NoDefaultGenerator(RngError):
    """Raised when the default generator is used before it was installed."""

    kind = ErrorKind.NO_DEFAULT

    def __init__(self) -> None:
        super().__init__("no default generator; call set_default_generator() first")


class DefaultGeneratorAlreadySet(RngError):
    """Raised on a second ``set_default_generator`` call."""

    kind = ErrorKind.DEFAULT_ALREADY_SET

    def __init__(self) -> None:
        super().__init__("default generator is already set")
