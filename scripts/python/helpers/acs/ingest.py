"""
Build counties_stats.json entries from saved ACS API responses.

Each saved response is the API's JSON payload: a header row followed by one
row per county, with ``state`` and ``county`` FIPS columns. Responses are
merged per county and mapped onto the statistics document keys read by
``records.parse_county_record``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Sequence

import pandas as pd

from scripts.python.helpers.acs.config import ACS_YEAR
from scripts.python.helpers.acs.constants import (
    ACS_AGE_DETAIL_CODES,
    ACS_INCOME_BIN_CODES,
    ACS_VARIABLE_MAP,
    ACS_YEAR_BUILT_COMPONENTS,
    LAND_AREA_M2,
    M2_PER_KM2,
    PERCENT_DENOMINATORS,
    STATS_AGE_DETAIL_KEY,
    STATS_AREA_KM2_KEY,
    STATS_FIELD_MAP,
    STATS_INCOME_BINS_KEY,
    STATS_NAME_KEY,
    STATS_YEAR_KEY,
)
from scripts.python.helpers.acs.records import parse_numeric, parse_percent
from scripts.python.helpers.common.math_stats import sum_all_known

ACS_NAME_COLUMN = "NAME"
ACS_STATE_COLUMN = "state"
ACS_COUNTY_COLUMN = "county"

LAND_AREA_GEOID_COLUMN = "GEOID"
LAND_AREA_COLUMN = "ALAND"

AcsRow = dict[str, Any]


def parse_acs_response(rows: Sequence[Sequence[Any]]) -> dict[str, AcsRow]:
    """Key each data row of an ACS response by its 5-digit county geoid."""
    if not rows:
        raise ValueError("ACS response has no header row.")
    header = [str(column) for column in rows[0]]
    missing = [
        column for column in (ACS_STATE_COLUMN, ACS_COUNTY_COLUMN) if column not in header
    ]
    if missing:
        raise ValueError(f"ACS response is missing required column(s): {', '.join(missing)}")

    output: dict[str, AcsRow] = {}
    for row in rows[1:]:
        if len(row) != len(header):
            raise ValueError(
                f"ACS row has {len(row)} values for {len(header)} header columns."
            )
        values = dict(zip(header, row))
        geoid = f"{values[ACS_STATE_COLUMN]}{values[ACS_COUNTY_COLUMN]}"
        output[geoid] = values
    return output


def load_acs_response(path: Path | str) -> dict[str, AcsRow]:
    """Load one saved ACS response file."""
    response_path = Path(path)
    with response_path.open("r", encoding="utf-8") as handle:
        rows = json.load(handle)
    return parse_acs_response(rows)


def merge_acs_tables(*tables: Mapping[str, AcsRow]) -> dict[str, AcsRow]:
    """Merge per-county rows from several responses; later tables win on overlap."""
    merged: dict[str, AcsRow] = {}
    for table in tables:
        for geoid, values in table.items():
            merged.setdefault(geoid, {}).update(values)
    return merged


def read_land_areas(path: Path | str) -> dict[str, float | None]:
    """Read county land areas (square metres) from a GEOID/ALAND CSV."""
    frame = pd.read_csv(
        path,
        usecols=[LAND_AREA_GEOID_COLUMN, LAND_AREA_COLUMN],
        dtype={LAND_AREA_GEOID_COLUMN: str},
    )
    frame[LAND_AREA_GEOID_COLUMN] = frame[LAND_AREA_GEOID_COLUMN].str.strip().str.zfill(5)
    frame[LAND_AREA_COLUMN] = pd.to_numeric(frame[LAND_AREA_COLUMN], errors="coerce").astype(float)
    return {
        geoid: parse_numeric(None if pd.isna(aland) else float(aland))
        for geoid, aland in zip(frame[LAND_AREA_GEOID_COLUMN], frame[LAND_AREA_COLUMN])
    }


def build_stats_entry(
    geoid: str,
    values: Mapping[str, Any],
    land_area_m2: float | None = None,
    year: int = ACS_YEAR,
) -> dict[str, Any]:
    """Map one merged ACS row onto a counties_stats.json entry."""
    entry: dict[str, Any] = {
        "geoid": geoid,
        STATS_NAME_KEY: values.get(ACS_NAME_COLUMN),
        "statefp": geoid[:2],
        "countyfp": geoid[2:],
        STATS_YEAR_KEY: year,
    }
    for field_name, code in ACS_VARIABLE_MAP.items():
        parser = parse_percent if field_name in PERCENT_DENOMINATORS else parse_numeric
        entry[STATS_FIELD_MAP[field_name]] = parser(values.get(code))

    for field_name, codes in ACS_YEAR_BUILT_COMPONENTS.items():
        entry[STATS_FIELD_MAP[field_name]] = sum_all_known(
            parse_numeric(values.get(code)) for code in codes
        )

    entry[STATS_AGE_DETAIL_KEY] = {
        key: parse_numeric(values.get(code)) for key, code in ACS_AGE_DETAIL_CODES.items()
    }
    entry[STATS_INCOME_BINS_KEY] = [
        parse_numeric(values.get(code)) for code in ACS_INCOME_BIN_CODES
    ]

    entry[STATS_FIELD_MAP[LAND_AREA_M2]] = land_area_m2
    entry[STATS_AREA_KM2_KEY] = None if land_area_m2 is None else land_area_m2 / M2_PER_KM2
    return entry


def build_county_stats(
    tables: Sequence[Mapping[str, AcsRow]],
    land_areas: Mapping[str, float | None] | None = None,
    year: int = ACS_YEAR,
) -> dict[str, dict[str, Any]]:
    """Build the full statistics document from parsed ACS responses.

    When ``land_areas`` is given, counties without a land-area row are dropped.
    """
    merged = merge_acs_tables(*tables)
    stats: dict[str, dict[str, Any]] = {}
    for geoid in sorted(merged):
        if land_areas is not None and geoid not in land_areas:
            continue
        land_area = None if land_areas is None else land_areas[geoid]
        stats[geoid] = build_stats_entry(geoid, merged[geoid], land_area, year)
    return stats


def write_county_stats(stats: Mapping[str, Any], path: Path | str) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as handle:
        json.dump(stats, handle)
    return output_path


__all__ = [
    "build_county_stats",
    "build_stats_entry",
    "load_acs_response",
    "merge_acs_tables",
    "parse_acs_response",
    "read_land_areas",
    "write_county_stats",
]
