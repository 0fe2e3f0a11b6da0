"""Output statistics for generated byte streams.

Sanity checks only: a CSPRNG that fails these is broken, but passing
them says nothing about unpredictability.
"""

from __future__ import annotations

import zlib

import numpy as np

from entropy_rng.rng import Rng


def _as_array(data: bytes | np.ndarray) -> np.ndarray:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(data), dtype=np.uint8)
    return np.asarray(data).astype(np.uint8).flatten()


def shannon_entropy(data: bytes | np.ndarray) -> float:
    """Shannon entropy in bits per byte."""
    arr = _as_array(data)
    if len(arr) == 0:
        return 0.0
    counts = np.bincount(arr, minlength=256)
    probs = counts[counts > 0] / len(arr)
    return float(-np.sum(probs * np.log2(probs)))


def min_entropy(data: bytes | np.ndarray) -> float:
    """Min-entropy (NIST SP 800-90B) in bits per byte."""
    arr = _as_array(data)
    if len(arr) == 0:
        return 0.0
    p_max = np.bincount(arr, minlength=256).max() / len(arr)
    return float(-np.log2(p_max))


def compression_ratio(data: bytes | np.ndarray) -> float:
    """zlib level-9 ratio.  ≈1.0 means incompressible."""
    raw = _as_array(data).tobytes()
    if len(raw) < 10:
        return 0.0
    return len(zlib.compress(raw, 9)) / len(raw)


def chi_squared_uniformity(data: bytes | np.ndarray) -> dict:
    """Chi-squared test of the byte histogram against uniform."""
    arr = _as_array(data)
    hist = np.bincount(arr, minlength=256)
    expected = max(len(arr) / 256, 1e-15)
    chi2 = float(np.sum((hist - expected) ** 2 / expected))
    return {"chi2": chi2, "uniform": chi2 < 293}  # p=0.05 for 255 df


def serial_correlation(data: bytes | np.ndarray, lag: int = 1) -> float:
    arr = _as_array(data).astype(float)
    if len(arr) < lag + 2:
        return 0.0
    centered = arr - arr.mean()
    var = np.mean(centered ** 2)
    if var < 1e-15:
        return 0.0
    return float(np.mean(centered[:-lag] * centered[lag:]) / var)


def full_report(data: bytes | np.ndarray, label: str = "") -> dict:
    """Run every check and grade the sample A–F."""
    arr = _as_array(data)
    sh = shannon_entropy(arr)
    me = min_entropy(arr)
    cr = compression_ratio(arr)
    chi = chi_squared_uniformity(arr)
    sc = serial_correlation(arr)

    score = (sh / 8.0) * 40 + min(cr, 1.0) * 20 + (20 if chi["uniform"] else 0) \
        + max(0.0, 1.0 - abs(sc) * 10) * 20
    grade = (
        "A" if score >= 80 else
        "B" if score >= 60 else
        "C" if score >= 40 else
        "D" if score >= 20 else "F"
    )
    return {
        "label": label,
        "samples": len(arr),
        "shannon_entropy": round(sh, 4),
        "min_entropy": round(me, 4),
        "compression_ratio": round(cr, 4),
        "chi_squared": chi,
        "serial_correlation": round(sc, 6),
        "quality_score": round(score, 1),
        "grade": grade,
    }


def output_report(g: Rng, n_bytes: int = 65536) -> dict:
    """Draw *n_bytes* from *g* and report on them."""
    return full_report(g.generate(n_bytes), label=g.name)
