"""Tests for the Fortuna backend."""

import os

import pytest

from entropy_rng.errors import UnseededGenerator
from entropy_rng.generators.fortuna import MAX_REQUEST, MIN_POOL_SIZE, Fortuna

MS = 1_000_000
SECOND = 1_000 * MS


def _fragments(n, size=64):
    return [bytes([i + 1]) * size for i in range(n)]


class TestSeeding:
    def test_create_unseeded(self):
        g = Fortuna()
        assert not g.seeded
        assert g.pools == 32
        assert g.block == 16

    def test_generate_unseeded_fails_repeatably(self):
        g = Fortuna()
        for _ in range(2):
            with pytest.raises(UnseededGenerator):
                g.generate(16)
        assert not g.seeded

    def test_single_reseed_seeds(self):
        g = Fortuna()
        g.reseed(b"seed material")
        assert g.seeded

    def test_accumulate_three_pools(self):
        g = Fortuna(pools=3)
        add = g.accumulate(1)
        for frag in _fragments(3):
            add(frag)
        assert g.seeded
        a = g.generate(32)
        b = g.generate(32)
        assert len(a) == len(b) == 32
        assert a != b

    def test_accumulate_below_threshold(self):
        g = Fortuna(pools=3)
        add = g.accumulate(1)
        # source 1 starts at pool 1, so pool 0 is still empty
        for frag in _fragments(2):
            add(frag)
        assert not g.seeded

    def test_pool0_needs_min_size(self):
        g = Fortuna(pools=1)
        g.accumulate(0)(bytes(MIN_POOL_SIZE - 1))
        assert not g.seeded
        g.accumulate(0)(b"\x01")
        assert g.seeded

    def test_bad_pool_count(self):
        with pytest.raises(ValueError):
            Fortuna(pools=0)


class TestThrottle:
    def test_second_auto_reseed_throttled(self, clock):
        g = Fortuna(time_source=clock, pools=1)
        add = g.accumulate(0)
        add(bytes(64))
        assert g.reseed_count == 1
        clock.advance(10 * MS)
        add(bytes(range(64)))
        assert g.reseed_count == 1
        assert g.state["pool0_size"] == 64

    def test_reseed_after_interval(self, clock):
        g = Fortuna(time_source=clock, pools=1)
        add = g.accumulate(0)
        add(bytes(64))
        clock.advance(10 * MS)
        add(bytes(range(64)))
        clock.advance(SECOND)
        g.generate(16)
        assert g.reseed_count == 2
        assert g.last_reseed == clock.now

    def test_explicit_reseed_ignores_throttle(self, clock):
        g = Fortuna(time_source=clock, pools=1)
        g.accumulate(0)(bytes(64))
        clock.advance(10 * MS)
        before = g.state["key_id"]
        g.reseed(b"deliberate")
        assert g.state["key_id"] != before
        assert g.last_reseed == clock.now

    def test_pool_schedule(self, clock):
        g = Fortuna(time_source=clock, pools=2)
        add = g.accumulate(0)
        add(bytes(64))  # pool 0
        add(bytes(16))  # pool 1
        assert g.reseed_count == 1
        # first reseed drains pool 0 only
        assert g._pools[1].size == 16
        clock.advance(SECOND)
        add(bytes(64))
        assert g.reseed_count == 2
        assert g._pools[1].size == 0


class TestOutput:
    def test_exact_length(self):
        g = Fortuna()
        g.reseed(os.urandom(32))
        for n in (0, 1, 15, 16, 17, 1000):
            assert len(g.generate(n)) == n

    def test_large_request_rekeys(self):
        g = Fortuna()
        g.reseed(os.urandom(32))
        assert len(g.generate(MAX_REQUEST + 5)) == MAX_REQUEST + 5

    def test_deterministic_for_seed(self):
        a, b = Fortuna(), Fortuna()
        a.reseed(b"same")
        b.reseed(b"same")
        assert a.generate(64) == b.generate(64)

    def test_strict_matches_relaxed(self):
        a, b = Fortuna(strict=True), Fortuna(strict=False)
        a.reseed(b"same")
        b.reseed(b"same")
        assert a.generate(100) == b.generate(100)
        assert a.generate(7) == b.generate(7)

    def test_key_changes_after_generate(self):
        g = Fortuna()
        g.reseed(b"k")
        before = g.state["key_id"]
        g.generate(32)
        assert g.state["key_id"] != before

    @pytest.mark.parametrize("strict", [False, True])
    def test_output_not_retained_in_state(self, strict):
        g = Fortuna(strict=strict)
        g.reseed(b"seed")
        out = g.generate(32)
        for value in vars(g).values():
            if isinstance(value, (bytes, bytearray)):
                assert out[:16] not in bytes(value)

    def test_negative_size(self):
        g = Fortuna()
        g.reseed(b"k")
        with pytest.raises(ValueError):
            g.generate(-1)


class TestAccumulate:
    def test_long_fragment_hashed(self):
        g = Fortuna(pools=1)
        g.accumulate(3)(bytes(1000))
        assert g.state["pool0_size"] == 32

    def test_bad_source(self):
        with pytest.raises(ValueError):
            Fortuna().accumulate(256)

    def test_rejects_non_bytes(self):
        add = Fortuna().accumulate(0)
        with pytest.raises(TypeError):
            add("text")
