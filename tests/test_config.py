from __future__ import annotations

import pytest

from weighted_range.config import DEFAULT_GRANULARITY, InvalidConfiguration, SamplerConfig, configure


def test_configure_defaults_granularity():
    cfg = configure(1, 10, 7, 70, 3)
    assert cfg.granularity == DEFAULT_GRANULARITY == 100
    assert cfg.span == 10
    assert cfg.biased_range == (4, 10)


def test_biased_range_clamped_to_bounds():
    assert configure(1, 10, 2, 50, 5).biased_range == (1, 7)
    assert configure(1, 10, 5, 50, 100).biased_range == (1, 10)


@pytest.mark.parametrize(
    "args, kwargs",
    [
        ((5, 5, 5, 50, 1), {}),  # min == max
        ((10, 1, 5, 50, 1), {}),  # min > max
        ((1, 10, 20, 50, 1), {}),  # center above range
        ((1, 10, 0, 50, 1), {}),  # center below range
        ((1, 10, 5, 50, 1), {"granularity": 5}),
        ((1, 10, 5, 50, 1), {"granularity": 101}),
        ((1, 10, 5, -1, 1), {}),
        ((1, 10, 5, 101, 1), {}),
        ((1, 10, 5, 50, -1), {}),
        ((1.5, 10, 5, 50, 1), {}),
        ((1, 10, True, 50, 1), {}),
    ],
)
def test_invalid_configurations(args, kwargs):
    with pytest.raises(InvalidConfiguration):
        configure(*args, **kwargs)


def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError, match="max must be larger"):
        configure(5, 5, 5, 50, 1)


def test_granularity_limits_are_inclusive():
    assert configure(1, 10, 5, 50, 1, granularity=10).granularity == 10
    assert configure(1, 10, 5, 50, 1, granularity=100).granularity == 100


def test_hand_built_config_validates_on_demand():
    cfg = SamplerConfig(min_value=3, max_value=1, center=2, strength=50, spread=1)
    with pytest.raises(InvalidConfiguration):
        cfg.validate()


def test_replace_returns_validated_copy():
    cfg = configure(1, 10, 7, 70, 3)
    stronger = cfg.replace(strength=90)
    assert stronger.strength == 90
    assert cfg.strength == 70
    with pytest.raises(InvalidConfiguration):
        cfg.replace(center=11)
