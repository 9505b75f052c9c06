"""Sampler configuration and validation.

A SamplerConfig is an immutable value: build it once with configure(), pass it
to every operation. Operations re-validate on use, so a config assembled by hand
(or via dataclasses.replace) still fails fast before any computation.

Limits:
- min_value < max_value (both inclusive)
- min_value <= center <= max_value
- strength in 0..100 (percent; 0 = uniform, 100 = maximal bias)
- spread >= 0 (half-width of the biased region, in value units)
- granularity in 10..100 (quota resolution; default 100)
"""

from __future__ import annotations

from dataclasses import dataclass, replace

MIN_GRANULARITY = 10
MAX_GRANULARITY = 100
DEFAULT_GRANULARITY = 100

MIN_STRENGTH = 0
MAX_STRENGTH = 100


class InvalidConfiguration(ValueError):
    """Raised for any configuration the sampler cannot work with."""


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass; True/False as a bound is always a mistake.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class SamplerConfig:
    min_value: int
    max_value: int
    center: int
    strength: int
    spread: int
    granularity: int = DEFAULT_GRANULARITY

    def validate(self) -> "SamplerConfig":
        """Raise InvalidConfiguration on the first violated limit; return self."""

        for name in ("min_value", "max_value", "center", "strength", "spread", "granularity"):
            _require_int(name, getattr(self, name))

        if self.min_value >= self.max_value:
            raise InvalidConfiguration("the max must be larger than the min")
        if self.center < self.min_value or self.center > self.max_value:
            raise InvalidConfiguration("the center must be contained within the range of values")
        if self.granularity < MIN_GRANULARITY or self.granularity > MAX_GRANULARITY:
            raise InvalidConfiguration(
                f"granularity should be between {MIN_GRANULARITY} and {MAX_GRANULARITY}"
            )
        if self.strength < MIN_STRENGTH or self.strength > MAX_STRENGTH:
            raise InvalidConfiguration(f"strength should be between {MIN_STRENGTH} and {MAX_STRENGTH}")
        if self.spread < 0:
            raise InvalidConfiguration("spread must be >= 0")
        return self

    @property
    def span(self) -> int:
        """Count of representable values."""

        return self.max_value - self.min_value + 1

    @property
    def biased_range(self) -> tuple[int, int]:
        """Inclusive bounds of the values that receive extra weight."""

        return (
            max(self.center - self.spread, self.min_value),
            min(self.center + self.spread, self.max_value),
        )

    def replace(self, **changes: int) -> "SamplerConfig":
        """Validated copy with some fields changed."""

        return replace(self, **changes).validate()


def configure(
    min_value: int,
    max_value: int,
    center: int,
    strength: int,
    spread: int,
    granularity: int = DEFAULT_GRANULARITY,
) -> SamplerConfig:
    """Build and validate a reusable SamplerConfig."""

    return SamplerConfig(
        min_value=min_value,
        max_value=max_value,
        center=center,
        strength=strength,
        spread=spread,
        granularity=granularity,
    ).validate()
