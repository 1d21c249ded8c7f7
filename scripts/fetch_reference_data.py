#!/usr/bin/env python3
"""
Download the OurAirports airports.csv into the local cache so later dataset
builds skip the download.

Usage:
    uv run python scripts/fetch_reference_data.py
    uv run python scripts/fetch_reference_data.py --cache data/ourairports.csv --force
"""

import argparse
import sys
from pathlib import Path

from airport_dataset.config import Config
from airport_dataset.errors import AirportDatasetError
from airport_dataset.sources.ourairports import OurAirportsSource


def main() -> None:
    parser = argparse.ArgumentParser(description="Prime the OurAirports cache")
    parser.add_argument(
        "--cache", type=str, default=None,
        help="Cache file (default: $OURAIRPORTS_CACHE or data/ourairports.csv)",
    )
    parser.add_argument(
        "--url", type=str, default=None,
        help="airports.csv URL (default: $OURAIRPORTS_URL or ourairports.com)",
    )
    parser.add_argument(
        "--force", action="store_true",
        help="Re-download even if the cache already exists",
    )
    args = parser.parse_args()

    config = Config.from_env()
    cache_path = Path(args.cache) if args.cache else config.cache_path
    if args.force and cache_path.exists():
        cache_path.unlink()

    source = OurAirportsSource(url=args.url or config.ourairports_url, cache_path=cache_path)
    print(f"Fetching {source.url}...")
    try:
        index = source.load_index()
    except AirportDatasetError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Cached {len(index)} airports to {cache_path}")


if __name__ == "__main__":
    main()
