"""Bucket model: the discrete weighted multiset every draw samples from.

Each value in [min, max] owns a quota of slots. All values start with the same
uniform floor (baseQuota); values in the biased region additionally share an
extra pool of slots in proportion to a normal density centered on `center`.
Drawing a slot uniformly therefore draws a value with probability
quota / total.

The biased region is treated as roughly +-3 standard deviations, so the
standard deviation is (biased span) / 6. Fractional shares of the extra pool are
converted to whole slots with round-half-to-even.

The model is a pure function of the config and is cheap to rebuild. It is kept
as per-value quotas plus cumulative counts rather than an expanded list, and
value_at() bisects the cumulative counts.
"""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass

from .config import SamplerConfig
from .utils.sampling import gaussian_density

log = logging.getLogger(__name__)

# The biased region spans this many standard deviations.
BIASED_REGION_STD_DEVS = 6.0


@dataclass(frozen=True)
class BucketModel:
    min_value: int
    max_value: int
    quotas: tuple[int, ...]
    cumulative: tuple[int, ...]

    @property
    def total(self) -> int:
        return self.cumulative[-1] if self.cumulative else 0

    def quota(self, value: int) -> int:
        if value < self.min_value or value > self.max_value:
            return 0
        return self.quotas[value - self.min_value]

    def value_at(self, index: int) -> int:
        """Value at `index` of the flat sequence (each value repeated quota times)."""

        if index < 0 or index >= self.total:
            raise IndexError(f"bucket index {index} out of range [0, {self.total})")
        return self.min_value + bisect.bisect_right(self.cumulative, index)

    def nonzero(self) -> list[tuple[int, int]]:
        return [(self.min_value + i, q) for i, q in enumerate(self.quotas) if q > 0]

    def expand(self) -> list[int]:
        out: list[int] = []
        for v, q in self.nonzero():
            out.extend([v] * q)
        return out


def base_quota(granularity: int, strength: int) -> int:
    """Uniform floor every value receives, whatever the bias."""

    return (granularity * (100 - strength)) // 100


def compute_quotas(config: SamplerConfig) -> list[int]:
    config.validate()

    lo = config.min_value
    total_span = config.span
    biased_lo, biased_hi = config.biased_range
    biased_min_idx = biased_lo - lo
    biased_max_idx = biased_hi - lo
    biased_span = biased_max_idx - biased_min_idx + 1

    floor_quota = base_quota(config.granularity, config.strength)
    extra_pool = (config.granularity - floor_quota) * total_span

    quotas = [floor_quota] * total_span

    std_dev = biased_span / BIASED_REGION_STD_DEVS
    densities = [gaussian_density(lo + i, config.center, std_dev) for i in range(total_span)]
    total_probability = sum(densities)

    # Only the biased region shares the extra pool; the tails keep the floor.
    for i in range(biased_min_idx, biased_max_idx + 1):
        quotas[i] += round(extra_pool * densities[i] / total_probability)

    return quotas


def build_bucket_model(config: SamplerConfig) -> BucketModel:
    quotas = compute_quotas(config)

    cumulative: list[int] = []
    acc = 0
    for q in quotas:
        acc += q
        cumulative.append(acc)

    model = BucketModel(
        min_value=config.min_value,
        max_value=config.max_value,
        quotas=tuple(quotas),
        cumulative=tuple(cumulative),
    )
    log.debug(
        "Built bucket model for [%d, %d] center=%d: %d slots",
        config.min_value,
        config.max_value,
        config.center,
        model.total,
    )
    return model
