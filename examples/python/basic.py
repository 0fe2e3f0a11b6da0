#!/usr/bin/env python3
"""Basic use of entropy-rng.

Installs a Fortuna default generator fed from a simulated jitter source,
draws random bytes, and shows a deterministic HMAC_DRBG side by side.

Usage:
    pip install -e .
    python examples/python/basic.py
"""

import os
import time

import entropy_rng as rng

print(f"entropy-rng v{rng.__version__}")

# Process default: Fortuna, seeded explicitly from the OS
g = rng.create(rng.Fortuna, seed=os.urandom(32))
rng.set_default_generator(g)
print(f"\nDefault generator: {g!r}")

# An entropy collector pushes small fragments into its own channel
add = rng.accumulate(source=1)
for _ in range(200):
    add(time.perf_counter_ns().to_bytes(8, "little"))

data = rng.generate(64)
print(f"\n64 random bytes (hex): {data.hex()}")

# Deterministic backend: same seed, same stream
a = rng.create("hmac_drbg", seed=b"example seed", strict=True)
b = rng.create("hmac_drbg", seed=b"example seed", strict=True)
print(f"\nHMAC_DRBG a: {rng.generate_with(a, 16).hex()}")
print(f"HMAC_DRBG b: {rng.generate_with(b, 16).hex()}")

for key, value in g.state.items():
    print(f"  {key}: {value}")
