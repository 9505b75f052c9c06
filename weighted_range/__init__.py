"""weighted_range

Integer random values over an inclusive range, biased toward a center value by
a normal-shaped envelope on top of a uniform floor.

Primary entrypoints:
- weighted_range.configure / draw / draw_many / distribution
- python -m weighted_range.cli
- console script: weighted-range
"""

from __future__ import annotations

from .buckets import BucketModel, build_bucket_model
from .config import InvalidConfiguration, SamplerConfig, configure
from .sampler import (
    WeightedRangeSampler,
    distribution,
    distribution_as_text,
    draw,
    draw_from_model,
    draw_many,
    draw_many_as_text,
    draw_with,
)

__all__ = [
    "__version__",
    "BucketModel",
    "InvalidConfiguration",
    "SamplerConfig",
    "WeightedRangeSampler",
    "build_bucket_model",
    "configure",
    "distribution",
    "distribution_as_text",
    "draw",
    "draw_from_model",
    "draw_many",
    "draw_many_as_text",
    "draw_with",
]

__version__ = "0.1.0"
