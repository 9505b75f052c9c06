"""RNG utilities.

Design goals
- Every draw gets a generator nobody else holds, so concurrent callers never
  share a stream.
- Optional run seed for deterministic runs. Each named stream derives its own
  seed from (run seed, label), so reports stay stable across re-runs.

We intentionally avoid Python's built-in hash() (salted per process). Instead we
use BLAKE2b to build a stable 64-bit integer.
"""

from __future__ import annotations

import hashlib
import os
import random
from dataclasses import dataclass


@dataclass(frozen=True)
class SeedContext:
    """Holds the effective run seed, if any."""

    run_seed: int | None


def make_run_seed(user_seed: int | None) -> SeedContext:
    """Create a SeedContext.

    If user_seed is None, the run is intentionally non-deterministic.
    """

    if user_seed is None:
        return SeedContext(run_seed=None)
    if user_seed < 0:
        raise ValueError("seed must be >= 0")
    return SeedContext(run_seed=int(user_seed))


def _stable_u64(data: bytes) -> int:
    # 8 bytes = 64-bit. Fixed personalization keeps streams distinct from other tools.
    h = hashlib.blake2b(data, digest_size=8, person=b"wrange01")
    return int.from_bytes(h.digest(), byteorder="little", signed=False)


def stream_seed(seed_ctx: SeedContext, label: str) -> int:
    """Compute a deterministic 64-bit seed for a named stream.

    If run_seed is None, OS entropy replaces the run seed, so every call yields
    an unrelated seed.
    """

    norm = label.encode("utf-8", errors="surrogatepass")

    if seed_ctx.run_seed is None:
        base = int.from_bytes(os.urandom(8), "little")
    else:
        base = seed_ctx.run_seed % (1 << 64)

    mixed = base.to_bytes(8, "little", signed=False) + b"\x00" + norm
    return _stable_u64(mixed)


def rng_for_stream(seed_ctx: SeedContext, label: str) -> random.Random:
    """Create a generator for one named stream."""

    return random.Random(stream_seed(seed_ctx, label))


def fresh_rng() -> random.Random:
    """Entropy-backed generator owned by a single call."""

    return rng_for_stream(SeedContext(run_seed=None), "fresh")
