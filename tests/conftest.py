"""Shared fixtures."""

import pytest

from entropy_rng import registry


class FakeClock:
    """Integer nanosecond clock that only moves when told to."""

    def __init__(self, start: int = 0):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int) -> None:
        self.now += ns


@pytest.fixture
def clock():
    return FakeClock(start=5_000_000_000)


@pytest.fixture
def fresh_registry(monkeypatch):
    """Give the test its own unset default-generator cell."""
    cell = registry.DefaultCell()
    monkeypatch.setattr(registry, "_cell", cell)
    return cell
