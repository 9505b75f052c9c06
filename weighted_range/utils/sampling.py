"""Sampling helpers shared by the bucket model and the sampler.

These helpers intentionally stay small and dependency-free.
"""

from __future__ import annotations

import math
import random
from typing import Iterable


def gaussian_density(x: float, mean: float, std_dev: float) -> float:
    """Normal probability density at x."""

    return math.exp(-((x - mean) ** 2) / (2 * std_dev**2)) / (std_dev * math.sqrt(2 * math.pi))


def uniform_index(rng: random.Random, size: int) -> int:
    """Uniformly random index in [0, size)."""

    if size <= 0:
        raise ValueError("size must be > 0")
    return rng.randrange(size)


def empty_tally(lo: int, hi: int) -> dict[int, int]:
    """Zero count for every value in [lo, hi]."""

    return {v: 0 for v in range(lo, hi + 1)}


def tally_into(counts: dict[int, int], values: Iterable[int]) -> dict[int, int]:
    for v in values:
        counts[v] += 1
    return counts
