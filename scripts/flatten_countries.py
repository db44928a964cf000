from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from src.collector.loader import CountryLoaderError, load_countries, load_countries_file  # noqa: E402
from src.transforms.countries import FLAT_FIELDS, flatten_countries  # noqa: E402
from src.transforms.formatting import format_number  # noqa: E402
from src.transforms.table import render_table, sort_countries, summarize_countries  # noqa: E402
from src.utils.config import load_source_config  # noqa: E402
from src.utils.logging import get_logger, setup_logging  # noqa: E402


logger = get_logger(component="flatten_countries")


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from e
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Flatten REST Countries records into table rows")
    parser.add_argument("--input", type=str, default=None, help="Local countries.json (skips config source)")
    parser.add_argument("--remote", action="store_true", help="Always fetch from the configured URL")
    parser.add_argument("--config", type=str, default=None, help="YAML config path (default: config/countries.yaml)")
    parser.add_argument("--sort", type=str, default=None, choices=FLAT_FIELDS, help="Sort rows by column")
    parser.add_argument("--desc", action="store_true", help="Sort descending")
    parser.add_argument("--limit", type=_non_negative_int, default=None, help="Only output the first N rows")
    parser.add_argument("--json", action="store_true", help="Print flat rows as JSON instead of a table")
    parser.add_argument("--stats", action="store_true", help="Print population/area statistics")
    return parser.parse_args(argv)


async def _load(args: argparse.Namespace) -> list:
    if args.input:
        return load_countries_file(args.input)
    cfg = load_source_config(args.config)
    return await load_countries(cfg, prefer_local=not args.remote)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    setup_logging()
    args = _parse_args(argv)

    try:
        countries = asyncio.run(_load(args))
    except (CountryLoaderError, ValueError, OSError, yaml.YAMLError) as e:
        logger.error("flatten_countries_failed", error=str(e))
        print(f"❌ Could not load countries: {e}", file=sys.stderr)
        return 1

    rows = flatten_countries(countries)
    logger.info("flatten_countries_complete", rows=len(rows))

    if args.sort:
        rows = sort_countries(rows, args.sort, descending=args.desc)
    shown = rows[: args.limit] if args.limit is not None else rows

    if args.json:
        print(json.dumps(shown, ensure_ascii=False, indent=2))
    else:
        print(render_table(shown))

    if args.stats:
        stats = summarize_countries(rows)
        print("\nSTATISTICS")
        print(f"  Total countries:                 {stats.total_countries}")
        print(f"  Countries with population data:  {stats.countries_with_population}")
        print(f"  Total population:                {format_number(stats.total_population)}")
        print(f"  Total area (km²):                {format_number(stats.total_area)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
