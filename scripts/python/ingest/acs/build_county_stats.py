#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Build counties_stats.json from ACS 5-year API responses saved on disk.

Expects one "<table>.json" response per entry of ACS_TABLES in --acs-dir
(e.g. pop_total.json, income_dist.json) and, optionally, a GEOID/ALAND land
area CSV. Missing responses are reported and skipped; their fields come out
as null in every county entry.
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from scripts.python.helpers.acs.config import ACS_DATA_ROOT, ACS_STATS_FILENAME, ACS_YEAR
from scripts.python.helpers.acs.constants import ACS_TABLES
from scripts.python.helpers.acs.ingest import (
    build_county_stats,
    load_acs_response,
    read_land_areas,
    write_county_stats,
)
from scripts.python.helpers.common.paths import require_input_files

LOG_TAG = "[build]"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build counties_stats.json from saved ACS responses.",
    )
    parser.add_argument(
        "--acs-dir",
        default=os.path.join(ACS_DATA_ROOT, "acs"),
        help="Directory containing <table>.json ACS responses (default: $ACS_DATA_ROOT/acs).",
    )
    parser.add_argument(
        "--land-area-csv",
        default=None,
        help="Optional CSV with GEOID and ALAND (square metres) columns.",
    )
    parser.add_argument(
        "--output",
        default=os.path.join(ACS_DATA_ROOT, ACS_STATS_FILENAME),
        help="Output path for counties_stats.json.",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=ACS_YEAR,
        help=f"ACS 5-year vintage recorded in each entry (default: {ACS_YEAR}).",
    )
    return parser


def run_build(
    acs_dir: Path | str,
    output: Path | str,
    land_area_csv: Path | str | None = None,
    year: int = ACS_YEAR,
) -> dict[str, object]:
    """Load saved responses, build the statistics document and write it."""
    responses = []
    missing_tables = []
    for table_name in ACS_TABLES:
        response_path = Path(acs_dir) / f"{table_name}.json"
        if not response_path.exists():
            missing_tables.append(table_name)
            print(f"{LOG_TAG} WARN: {table_name} response missing: {response_path}")
            continue
        responses.append(load_acs_response(response_path))
        print(f"{LOG_TAG} loaded {table_name}")

    land_areas = read_land_areas(land_area_csv) if land_area_csv is not None else None
    stats = build_county_stats(responses, land_areas, year)
    output_path = write_county_stats(stats, output)
    print(f"{LOG_TAG} wrote {len(stats)} counties to {output_path}")
    return {
        "output": output_path,
        "counties": len(stats),
        "missing_tables": missing_tables,
    }


def main() -> None:
    args = build_arg_parser().parse_args()
    require_input_files(args.acs_dir, args.land_area_csv)
    run_build(args.acs_dir, args.output, args.land_area_csv, args.year)


if __name__ == "__main__":
    main()
