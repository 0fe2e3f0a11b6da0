"""Tests for NumPy Generator compatibility."""

import numpy as np
import pytest

import entropy_rng
from entropy_rng.numpy_compat import RngBitGenerator, RngGenerator


@pytest.fixture
def rng():
    """RngGenerator over a deterministic HMAC_DRBG handle."""
    return RngGenerator.from_handle(entropy_rng.create("hmac_drbg", seed=b"numpy"))


def test_creation(rng):
    assert rng is not None
    assert rng.bit_generator is not None


def test_random_floats(rng):
    vals = rng.random(10)
    assert vals.shape == (10,)
    assert np.all(vals >= 0) and np.all(vals < 1)


def test_integers(rng):
    vals = rng.integers(0, 256, size=100)
    assert vals.shape == (100,)
    assert np.all(vals >= 0) and np.all(vals < 256)


def test_standard_normal(rng):
    vals = rng.standard_normal(1000)
    assert vals.shape == (1000,)
    assert abs(np.mean(vals)) < 0.5
    assert 0.5 < np.std(vals) < 2.0


def test_bytes(rng):
    data = rng.bytes(32)
    assert len(data) == 32
    assert isinstance(data, bytes)


def test_choice(rng):
    vals = rng.choice([1, 2, 3, 4, 5], size=10)
    assert len(vals) == 10
    assert all(v in [1, 2, 3, 4, 5] for v in vals)


def test_shuffle_and_permutation(rng):
    arr = np.arange(10)
    rng.shuffle(arr)
    assert set(arr) == set(range(10))
    assert set(rng.permutation(10)) == set(range(10))


def test_reproducible_from_seed():
    a = RngGenerator.from_handle(entropy_rng.create("hmac_drbg", seed=b"same"))
    b = RngGenerator.from_handle(entropy_rng.create("hmac_drbg", seed=b"same"))
    assert np.array_equal(a.random(5), b.random(5))


def test_random_raw():
    bg = RngBitGenerator(entropy_rng.create(seed=b"raw"), buffer_size=64)
    vals = bg.random_raw(20)
    assert vals.dtype == np.uint64
    assert vals.shape == (20,)


def test_unseeded_handle_propagates():
    with pytest.raises(entropy_rng.UnseededGenerator):
        RngGenerator.from_handle(entropy_rng.create())


def test_default_generator_fallback(fresh_registry):
    entropy_rng.set_default_generator(entropy_rng.create(seed=b"default"))
    bg = RngBitGenerator()
    assert bg.state["generator"] == "fortuna"
    assert len(bg._take(8)) == 8


def test_bit_generator_state(rng):
    state = rng.bit_generator.state
    assert state["bit_generator"] == "RngBitGenerator"
    assert state["generator"] == "hmac_drbg"


def test_distributions_rekey_from_handle():
    g = entropy_rng.create("hmac_drbg", seed=b"rekey")
    rng = RngGenerator.from_handle(g, reseed_every=3)
    rng.bit_generator._buf.clear()
    before = g.state["key_id"]
    rng.random()
    rng.random()
    assert g.state["key_id"] == before
    # third draw re-keys PCG64 from the handle
    rng.random()
    assert g.state["key_id"] != before


def test_documents_pcg64_draws():
    assert "PCG64" in RngGenerator.__doc__
    assert "bytes" not in RngGenerator.DISTRIBUTIONS


def test_unknown_attribute():
    rng = RngGenerator.from_handle(entropy_rng.create("hmac_drbg", seed=b"x"))
    with pytest.raises(AttributeError):
        rng.gamma(1.0)
