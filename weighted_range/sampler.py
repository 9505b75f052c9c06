"""Weighted range sampling and distribution reports.

Module-level functions take an explicit SamplerConfig and an optional injected
generator (anything with random.Random's randrange). Without one, each call
creates its own entropy-seeded generator, so calls never share a stream.

WeightedRangeSampler binds a config to an optional run seed for callers that
want reproducible reports.
"""

from __future__ import annotations

import itertools
import logging
import random
import threading

from .buckets import BucketModel, build_bucket_model
from .config import DEFAULT_GRANULARITY, InvalidConfiguration, SamplerConfig, configure
from .utils.rng import SeedContext, fresh_rng, make_run_seed, rng_for_stream
from .utils.sampling import empty_tally, uniform_index

log = logging.getLogger(__name__)


def distribution(config: SamplerConfig) -> dict[int, float]:
    """Exact selection percentage per value; values with no slots are omitted."""

    model = build_bucket_model(config)
    total = model.total
    return {v: q / total * 100 for v, q in model.nonzero()}


def format_distribution(dist: dict[int, float]) -> str:
    return "\n".join(f"{v}: {pct:,.3f}" for v, pct in dist.items())


def distribution_as_text(config: SamplerConfig) -> str:
    """One "value: percentage" line per value, three decimals."""

    return format_distribution(distribution(config))


def draw_from_model(model: BucketModel, *, rng: random.Random | None = None) -> int:
    """Draw from an already built model (for callers caching the model)."""

    rng = rng if rng is not None else fresh_rng()
    return model.value_at(uniform_index(rng, model.total))


def draw(config: SamplerConfig, *, rng: random.Random | None = None) -> int:
    """Single weighted-random value."""

    return draw_from_model(build_bucket_model(config), rng=rng)


def draw_with(
    min_value: int,
    max_value: int,
    center: int,
    strength: int,
    spread: int,
    granularity: int = DEFAULT_GRANULARITY,
    *,
    rng: random.Random | None = None,
) -> int:
    """Single draw from ad hoc parameters; nothing is stored."""

    return draw(configure(min_value, max_value, center, strength, spread, granularity), rng=rng)


def draw_many(config: SamplerConfig, times: int, *, rng: random.Random | None = None) -> dict[int, int]:
    """Tally `times` independent draws.

    Every value of [min, max] is a key, zero counts included.
    """

    config.validate()
    if isinstance(times, bool) or not isinstance(times, int) or times < 0:
        raise InvalidConfiguration(f"times must be a non-negative integer, got {times!r}")

    rng = rng if rng is not None else fresh_rng()
    counts = empty_tally(config.min_value, config.max_value)
    for _ in range(times):
        counts[draw(config, rng=rng)] += 1

    log.debug("Tallied %d draws over [%d, %d]", times, config.min_value, config.max_value)
    return counts


def format_tally(counts: dict[int, int]) -> str:
    return "\n".join(f"{v}: {n}" for v, n in counts.items())


def draw_many_as_text(config: SamplerConfig, times: int, *, rng: random.Random | None = None) -> str:
    """One "value: count" line per value of the range."""

    return format_tally(draw_many(config, times, rng=rng))


class WeightedRangeSampler:
    """A config plus a seed policy.

    With seed=None every call is independently entropy-seeded. With a seed, each
    call derives its generator from (seed, call kind, call number), so a fresh
    sampler built with the same seed reproduces the same sequence of calls.
    """

    def __init__(self, config: SamplerConfig, *, seed: int | None = None):
        self._config = config.validate()
        self._seed_ctx: SeedContext = make_run_seed(seed)
        self._calls = itertools.count()
        self._lock = threading.Lock()

    @property
    def config(self) -> SamplerConfig:
        return self._config

    @property
    def seed(self) -> int | None:
        return self._seed_ctx.run_seed

    def _next_rng(self, label: str) -> random.Random:
        if self._seed_ctx.run_seed is None:
            return fresh_rng()
        with self._lock:
            n = next(self._calls)
        return rng_for_stream(self._seed_ctx, f"{label}:{n}")

    def bucket_model(self) -> BucketModel:
        return build_bucket_model(self._config)

    def distribution(self) -> dict[int, float]:
        return distribution(self._config)

    def distribution_as_text(self) -> str:
        return distribution_as_text(self._config)

    def draw(self) -> int:
        return draw(self._config, rng=self._next_rng("draw"))

    def draw_many(self, times: int) -> dict[int, int]:
        return draw_many(self._config, times, rng=self._next_rng("draw_many"))

    def draw_many_as_text(self, times: int) -> str:
        return format_tally(self.draw_many(times))
