"""Generator configuration.

Dataclass form of the creation-time options, with validation, so callers
(and the CLI) can carry a generator recipe around before building it.
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from entropy_rng.generators import generator_class
from entropy_rng.generators.base import TimeSource
from entropy_rng.rng import Rng, create


@dataclass
class GeneratorConfig:
    """
    generator: backend name ("fortuna" or "hmac_drbg")
    seed:      optional bytes for an immediate reseed
    strict:    reference-conformant output assembly
    pools:     Fortuna pool count (None = backend default)
    hash_name: HMAC_DRBG hash (any hashlib name)
    """

    generator: str = "fortuna"
    seed: Optional[bytes] = None
    strict: bool = False
    pools: Optional[int] = None
    hash_name: str = "sha256"

    def validate(self) -> None:
        generator_class(self.generator)
        if self.seed is not None and not isinstance(self.seed, (bytes, bytearray)):
            raise ValueError("seed must be bytes")
        if self.pools is not None:
            if self.generator != "fortuna":
                raise ValueError("pools only applies to the fortuna generator")
            if not 1 <= self.pools <= 255:
                raise ValueError("pools must be in 1..255")
        if self.hash_name not in hashlib.algorithms_available:
            raise ValueError(f"Unsupported hash: {self.hash_name}")

    def options(self) -> Dict[str, Any]:
        if self.generator == "fortuna":
            return {} if self.pools is None else {"pools": self.pools}
        return {"hash_name": self.hash_name}

    def build(self, time_source: TimeSource | None = None) -> Rng:
        self.validate()
        return create(
            self.generator,
            seed=None if self.seed is None else bytes(self.seed),
            strict=self.strict,
            time_source=time_source,
            **self.options(),
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["seed"] = None if self.seed is None else bytes(self.seed).hex()
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GeneratorConfig":
        seed = d.get("seed")
        return cls(
            generator=d.get("generator", "fortuna"),
            seed=bytes.fromhex(seed) if isinstance(seed, str) else seed,
            strict=bool(d.get("strict", False)),
            pools=d.get("pools"),
            hash_name=d.get("hash_name", "sha256"),
        )
