"""
Solar production chart from a daily CSV.

Usage:
  solarseries PV_Elec_Gas3.csv                           # last 30 days
  solarseries PV_Elec_Gas3.csv -g monthly --out month.png
  solarseries PV_Elec_Gas3.csv -g weekly --bucketing contiguous --json
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import matplotlib

matplotlib.use("Agg")

from . import canon, exceptions, ingest, render, transform  # noqa: E402
from .config import SeriesConfig  # noqa: E402

logger = logging.getLogger("solarseries")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solarseries",
        description="Aggregate daily solar production and draw it as a bar chart.",
    )
    parser.add_argument("csv", help="CSV with 'date' and 'kWh electricity/day' columns.")
    parser.add_argument(
        "-g",
        "--granularity",
        choices=canon.GRANULARITIES,
        default=canon.DEFAULT_GRANULARITY,
        help="Aggregation window (default: daily).",
    )
    parser.add_argument(
        "--bucketing",
        choices=canon.BUCKETINGS,
        default=canon.DEFAULT_BUCKETING,
        help="calendar keys (default) or legacy contiguous runs.",
    )
    parser.add_argument(
        "--strict-values",
        action="store_true",
        help="Reject unparsable kWh values instead of treating them as NaN.",
    )
    parser.add_argument("--out", help="Write the bar chart to this image file.")
    parser.add_argument("--json", action="store_true", help="Print the series as JSON.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def run(args: argparse.Namespace) -> int:
    cfg = SeriesConfig(
        bucketing=args.bucketing,
        on_bad_value="raise" if args.strict_values else "nan",
    )
    try:
        rows = ingest.read_csv(args.csv)
        series = transform.aggregate(rows, args.granularity, config=cfg)
    except (OSError, UnicodeDecodeError, exceptions.SolarSeriesError) as exc:
        logger.error("Failed to build %s series: %s", args.granularity, exc)
        return 1

    if series.is_empty:
        logger.info("No data in %s; nothing to chart.", args.csv)

    if args.json:
        print(series.model_dump_json(indent=2))
    else:
        print(series.title)
        for point in series.points:
            print(f"  {point.label:>12}  {point.value:10.3f}")

    if args.out:
        render.save_chart(series, args.out)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
