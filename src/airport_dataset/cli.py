"""CLI for building the airport dataset."""

import argparse
import logging
import sys
from pathlib import Path

from airport_dataset.config import Config, parse_endpoint_list
from airport_dataset.errors import AirportDatasetError
from airport_dataset.service import DatasetService


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Build an ICAO-keyed airport dataset from OpenStreetMap and OurAirports"
    )
    parser.add_argument(
        "--out",
        "-o",
        help="Output JSON path (default: $DATASET_OUT)",
    )
    parser.add_argument(
        "--version",
        "-v",
        help="Dataset version label (default: $DATASET_VERSION or today's date)",
    )
    parser.add_argument(
        "--overpass",
        help="Single Overpass interpreter URL",
    )
    parser.add_argument(
        "--overpass-list",
        help="Comma-separated Overpass URLs, tried in order (wins over --overpass)",
    )
    parser.add_argument(
        "--ourairports",
        help="OurAirports airports.csv URL",
    )
    parser.add_argument(
        "--cache",
        help="OurAirports cache file; read if present, written after download",
    )
    parser.add_argument(
        "--retries",
        type=int,
        help="Max retries per Overpass endpoint",
    )
    parser.add_argument(
        "--retry-base-ms",
        type=int,
        help="Base backoff delay in milliseconds",
    )
    parser.add_argument(
        "--stats",
        "-s",
        action="store_true",
        help="Print field coverage statistics",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def build_config(args, base: Config) -> Config:
    """Apply CLI flags on top of the environment-derived config."""
    endpoints = parse_endpoint_list(args.overpass_list) or parse_endpoint_list(args.overpass)
    return base.with_overrides(
        endpoints=endpoints or None,
        ourairports_url=args.ourairports,
        cache_path=Path(args.cache) if args.cache else None,
        out_path=Path(args.out) if args.out else None,
        version=args.version,
        max_retries=args.retries,
        retry_base_ms=args.retry_base_ms,
    )


def print_stats(stats) -> None:
    print(f"\nTotal airports: {stats.total_airports}")
    if stats.field_coverage:
        print("\nField coverage:")
        print(stats.coverage_dataframe().to_string(index=False))
    if stats.by_country:
        print("\nTop countries:")
        print(stats.country_dataframe().head(20).to_string(index=False))
    if stats.by_local_lang:
        print("\nBy local language:")
        for lang, count in sorted(stats.by_local_lang.items(), key=lambda x: -x[1]):
            print(f"  {lang}: {count}")
    print()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args, Config.from_env())
    except AirportDatasetError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if config.out_path is None:
        print("Error: Missing --out", file=sys.stderr)
        sys.exit(1)

    service = DatasetService(config)
    try:
        dataset = service.build()
    except AirportDatasetError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    out_path = service.write(dataset, config.out_path)
    if args.stats:
        print_stats(service.statistics(dataset))
    print(f"Wrote {len(dataset)} airports to {out_path}")


if __name__ == "__main__":
    main()
