"""CLI for entropy-rng."""

from __future__ import annotations

import base64
import os
import sys
import time

import click

from entropy_rng import __version__


@click.group()
@click.version_option(__version__)
def main() -> None:
    """entropy-rng — pluggable CSPRNG core."""


def _make_rng(generator: str, seed_hex: str | None, strict: bool):
    from entropy_rng.config import GeneratorConfig

    try:
        seed = bytes.fromhex(seed_hex) if seed_hex else os.urandom(32)
        return GeneratorConfig(generator=generator, seed=seed, strict=strict).build()
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


_generator_option = click.option(
    "--generator", "-g", default="fortuna", show_default=True,
    help="Backend name (see 'info').",
)


# ────────────────────────────────────────────────────────────
# Discovery
# ────────────────────────────────────────────────────────────


@main.command()
def info() -> None:
    """List the available generator backends."""
    from entropy_rng.generators import ALL_GENERATORS

    click.echo(f"{len(ALL_GENERATORS)} generator backend(s):\n")
    for cls in ALL_GENERATORS:
        g = cls()
        click.echo(f"  {cls.name:<12} block={g.block:<3} pools={g.pools:<3} {cls.description}")


# ────────────────────────────────────────────────────────────
# Output
# ────────────────────────────────────────────────────────────


@main.command()
@click.argument("n_bytes", type=click.IntRange(min=0))
@_generator_option
@click.option("--seed", "seed_hex", default=None,
              help="Hex seed (default: 32 bytes from os.urandom).")
@click.option("--strict", is_flag=True, help="Reference-conformant output assembly.")
@click.option("--format", "fmt", type=click.Choice(["hex", "raw", "base64"]), default="hex",
              help="Output format.")
def generate(n_bytes: int, generator: str, seed_hex: str | None, strict: bool, fmt: str) -> None:
    """Write N_BYTES random bytes to stdout.

    Examples:

        entropy-rng generate 32

        entropy-rng generate 64 -g hmac_drbg --seed 00ff --strict

        entropy-rng generate 1048576 --format raw > /tmp/random.bin
    """
    g = _make_rng(generator, seed_hex, strict)
    data = g.generate(n_bytes)
    if fmt == "raw":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    elif fmt == "base64":
        click.echo(base64.b64encode(data).decode())
    else:
        click.echo(data.hex())


# ────────────────────────────────────────────────────────────
# Verification & benchmarking
# ────────────────────────────────────────────────────────────


@main.command()
@click.option("--relaxed", is_flag=True, help="Run in non-strict mode.")
def vectors(relaxed: bool) -> None:
    """Run the built-in HMAC_DRBG known-answer tests."""
    from entropy_rng.vectors import check_all

    results = check_all(strict=not relaxed)
    failed = 0
    for v, ok in results:
        click.echo(f"  {'PASS' if ok else 'FAIL'}  {v.name}")
        failed += not ok
    click.echo(f"\n{len(results) - failed}/{len(results)} vectors passed")
    if failed:
        sys.exit(1)


@main.command()
@click.option("--bytes", "n_bytes", default=1 << 20, show_default=True,
              help="Bytes to generate per backend.")
def bench(n_bytes: int) -> None:
    """Benchmark every backend: throughput and output quality."""
    from entropy_rng.generators import ALL_GENERATORS
    from entropy_rng.stats import full_report

    click.echo(f"Benchmarking {len(ALL_GENERATORS)} generators ({n_bytes:,} bytes each)...\n")
    click.echo(f"{'Generator':<12} {'MB/s':>8} {'Grade':>5} {'Shannon':>8} {'Compress':>9}")
    click.echo("-" * 46)
    for cls in ALL_GENERATORS:
        g = _make_rng(cls.name, None, strict=False)
        t0 = time.perf_counter()
        data = g.generate(n_bytes)
        elapsed = max(time.perf_counter() - t0, 1e-9)
        r = full_report(data, label=cls.name)
        click.echo(
            f"{cls.name:<12} {n_bytes / elapsed / 1e6:>8.1f} {r['grade']:>5} "
            f"{r['shannon_entropy']:>8.3f} {r['compression_ratio']:>9.3f}"
        )


if __name__ == "__main__":
    main()
