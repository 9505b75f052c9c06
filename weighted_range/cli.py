"""Command line interface for weighted_range."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_GRANULARITY, configure
from .sampler import WeightedRangeSampler, format_tally
from .utils.image import render_histogram_png


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="weighted-range",
        description=(
            "Show the exact distribution of a center-weighted integer range, then\n"
            "tally repeated draws from it."
        ),
    )

    p.add_argument("min", type=int, help="Inclusive lower bound")
    p.add_argument("max", type=int, help="Inclusive upper bound (> min)")
    p.add_argument("center", type=int, help="Value to bias toward (min..max)")
    p.add_argument("strength", type=int, help="Bias strength in percent (0..100)")
    p.add_argument("spread", type=int, help="Half-width of the biased region (>= 0)")

    p.add_argument(
        "--granularity",
        type=int,
        default=DEFAULT_GRANULARITY,
        help=f"Quota resolution (10..100, default {DEFAULT_GRANULARITY})",
    )
    p.add_argument("--times", type=int, default=1000, help="Number of draws to tally (default 1000)")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible draws")
    p.add_argument("--histogram", type=Path, default=None, help="Write a PNG bar chart of the tally here")
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = _build_parser()
    ns = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    log = logging.getLogger(__name__)

    try:
        config = configure(ns.min, ns.max, ns.center, ns.strength, ns.spread, ns.granularity)
        sampler = WeightedRangeSampler(config, seed=ns.seed)

        print(sampler.distribution_as_text())
        print()
        counts = sampler.draw_many(ns.times)
        print(format_tally(counts))

        if ns.histogram is not None:
            path = render_histogram_png(counts, ns.histogram)
            log.info("Histogram written: %s", path)
        return 0
    except Exception as e:
        log.error(str(e))
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
