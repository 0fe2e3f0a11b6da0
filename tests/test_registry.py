"""Tests for the default-generator registry."""

import threading

import pytest

from entropy_rng import create, registry
from entropy_rng.errors import DefaultGeneratorAlreadySet, NoDefaultGenerator


class TestRegistry:
    def test_unset(self, fresh_registry):
        assert not fresh_registry.is_set
        with pytest.raises(NoDefaultGenerator):
            registry.default_generator()

    def test_set_then_get(self, fresh_registry):
        g = create(seed=b"s")
        registry.set_default_generator(g)
        assert registry.default_generator() is g
        assert registry.default_generator() is g

    def test_second_set_rejected(self, fresh_registry):
        g = create()
        registry.set_default_generator(g)
        with pytest.raises(DefaultGeneratorAlreadySet):
            registry.set_default_generator(create())
        with pytest.raises(DefaultGeneratorAlreadySet):
            registry.set_default_generator(g)
        assert registry.default_generator() is g

    def test_rejects_non_handle(self, fresh_registry):
        with pytest.raises(TypeError):
            registry.set_default_generator(object())
        assert not fresh_registry.is_set

    def test_concurrent_set_single_winner(self, fresh_registry):
        n = 16
        handles = [create() for _ in range(n)]
        barrier = threading.Barrier(n)
        won, lost = [], []

        def worker(g):
            barrier.wait()
            try:
                registry.set_default_generator(g)
                won.append(g)
            except DefaultGeneratorAlreadySet:
                lost.append(g)

        threads = [threading.Thread(target=worker, args=(g,)) for g in handles]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(won) == 1
        assert len(lost) == n - 1
        assert registry.default_generator() is won[0]
