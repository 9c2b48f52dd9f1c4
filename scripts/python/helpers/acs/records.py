"""
County attribute records: parsing, validation and read-only access.

Every numeric field is either a known non-negative float or ``None``. Parsing
never substitutes zero for a missing value.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import pandas as pd

from scripts.python.helpers.acs.bins import known_bin_total
from scripts.python.helpers.acs.constants import (
    AGE_DETAIL_KEYS,
    COMPANION_WEIGHTS,
    COUNT_FIELDS,
    INCOME_BIN_COUNT,
    INCOME_HOUSEHOLDS,
    LAND_AREA_M2,
    M2_PER_KM2,
    PERCENT_DENOMINATORS,
    STATS_AGE_DETAIL_KEY,
    STATS_AREA_KM2_KEY,
    STATS_FIELD_MAP,
    STATS_INCOME_BINS_KEY,
    STATS_NAME_KEY,
)

GEOID_RE = re.compile(r"^\d{5}$")


def parse_numeric(raw: Any) -> float | None:
    """Return a finite, non-negative float or None.

    ACS marks suppressed or unavailable estimates with negative sentinels
    (e.g. -666666666), so negatives are treated as unknown.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    elif isinstance(raw, (int, float)):
        value = float(raw)
    else:
        return None
    if not math.isfinite(value) or value < 0.0:
        return None
    return value


def parse_percent(raw: Any) -> float | None:
    """Parse a percentage, treating values outside [0, 100] as unknown."""
    value = parse_numeric(raw)
    if value is None or value > 100.0:
        return None
    return value


@dataclass(frozen=True)
class IncomeDistribution:
    """Household counts per income bracket plus the reported total."""

    bins: tuple[float | None, ...]
    total: float | None

    @property
    def is_known(self) -> bool:
        return self.total is not None


UNKNOWN_INCOME = IncomeDistribution(bins=(None,) * INCOME_BIN_COUNT, total=None)


@dataclass(frozen=True)
class CountyRecord:
    """Read-only snapshot of one county's attributes."""

    geoid: str
    name: str | None = None
    counts: Mapping[str, float | None] = field(default_factory=dict)
    percents: Mapping[str, float | None] = field(default_factory=dict)
    companions: Mapping[str, float | None] = field(default_factory=dict)
    age_detail: Mapping[str, float | None] = field(default_factory=dict)
    income: IncomeDistribution = UNKNOWN_INCOME

    def __post_init__(self) -> None:
        if not GEOID_RE.match(self.geoid):
            raise ValueError(f"County geoid must be 5 digits; got {self.geoid!r}")
        if len(self.income.bins) != INCOME_BIN_COUNT:
            raise ValueError(
                f"County {self.geoid} has {len(self.income.bins)} income brackets; "
                f"expected {INCOME_BIN_COUNT}."
            )
        for name in ("counts", "companions", "age_detail"):
            for key, value in getattr(self, name).items():
                self._check_range(key, value)
        for key, value in self.percents.items():
            self._check_range(key, value, upper=100.0)
        for index, value in enumerate(self.income.bins):
            self._check_range(f"income bracket {index}", value)
        self._check_range("income total", self.income.total)
        if self.income.total is not None and known_bin_total(self.income.bins) > self.income.total:
            raise ValueError(
                f"County {self.geoid} income bracket counts exceed the reported total."
            )
        for name in ("counts", "percents", "companions", "age_detail"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def _check_range(self, label: str, value: float | None, upper: float | None = None) -> None:
        if value is None:
            return
        if not math.isfinite(value) or value < 0.0 or (upper is not None and value > upper):
            bound = ">= 0" if upper is None else f"within [0, {upper:g}]"
            raise ValueError(
                f"County {self.geoid} {label} must be finite and {bound} or unknown; got {value!r}"
            )

    @property
    def state_fips(self) -> str:
        return self.geoid[:2]

    def count(self, name: str) -> float | None:
        return self.counts.get(name)

    def percent(self, name: str) -> float | None:
        return self.percents.get(name)

    def companion(self, name: str) -> float | None:
        return self.companions.get(name)

    def age_count(self, key: str) -> float | None:
        return self.age_detail.get(key)


def _parse_income_bins(geoid: str, raw: Any) -> tuple[float | None, ...]:
    if raw is None:
        return UNKNOWN_INCOME.bins
    if not isinstance(raw, (list, tuple)) or len(raw) != INCOME_BIN_COUNT:
        raise ValueError(
            f"County {geoid} income bins must be a list of {INCOME_BIN_COUNT} counts."
        )
    return tuple(parse_numeric(value) for value in raw)


def _parse_land_area(entry: Mapping[str, Any]) -> float | None:
    aland = parse_numeric(entry.get(STATS_FIELD_MAP[LAND_AREA_M2]))
    if aland is not None:
        return aland
    area_km2 = parse_numeric(entry.get(STATS_AREA_KM2_KEY))
    if area_km2 is None:
        return None
    return area_km2 * M2_PER_KM2


def parse_county_record(geoid: str, entry: Mapping[str, Any]) -> CountyRecord:
    """Validate one counties_stats.json entry into a CountyRecord."""
    counts = {
        name: parse_numeric(entry.get(STATS_FIELD_MAP[name]))
        for name in COUNT_FIELDS
        if name != LAND_AREA_M2
    }
    counts[LAND_AREA_M2] = _parse_land_area(entry)

    age_raw = entry.get(STATS_AGE_DETAIL_KEY) or {}
    if not isinstance(age_raw, Mapping):
        raise ValueError(f"County {geoid} age detail must be an object.")

    name = entry.get(STATS_NAME_KEY)
    return CountyRecord(
        geoid=str(geoid),
        name=None if name is None else str(name),
        counts=counts,
        percents={
            key: parse_percent(entry.get(STATS_FIELD_MAP[key]))
            for key in PERCENT_DENOMINATORS
        },
        companions={
            key: parse_numeric(entry.get(STATS_FIELD_MAP[key]))
            for key in COMPANION_WEIGHTS
        },
        age_detail={key: parse_numeric(age_raw.get(key)) for key in AGE_DETAIL_KEYS},
        income=IncomeDistribution(
            bins=_parse_income_bins(geoid, entry.get(STATS_INCOME_BINS_KEY)),
            total=parse_numeric(entry.get(STATS_FIELD_MAP[INCOME_HOUSEHOLDS])),
        ),
    )


def parse_county_records(document: Mapping[str, Any]) -> dict[str, CountyRecord]:
    """Validate every entry of a counties_stats.json document."""
    if not isinstance(document, Mapping):
        raise ValueError("County statistics document must be a JSON object keyed by geoid.")
    records: dict[str, CountyRecord] = {}
    for geoid, entry in document.items():
        if not isinstance(entry, Mapping):
            raise ValueError(f"County {geoid} entry must be an object.")
        records[str(geoid)] = parse_county_record(str(geoid), entry)
    return records


def load_county_records(path: Path | str) -> dict[str, CountyRecord]:
    """Load and validate counties_stats.json."""
    stats_path = Path(path)
    if not stats_path.exists():
        raise ValueError(f"Missing county statistics file: {stats_path}")
    with stats_path.open("r", encoding="utf-8") as handle:
        document = json.load(handle)
    return parse_county_records(document)


def records_to_frame(records: Mapping[str, CountyRecord]) -> pd.DataFrame:
    """One row per county, NaN where a value is unknown."""
    rows = []
    for geoid in sorted(records):
        record = records[geoid]
        row: dict[str, object] = {"geoid": geoid, "name": record.name}
        row.update(record.counts)
        row.update(record.percents)
        row.update(record.companions)
        row.update(record.age_detail)
        row[INCOME_HOUSEHOLDS] = record.income.total
        rows.append(row)
    frame = pd.DataFrame(rows)
    if frame.empty:
        return frame
    frame = frame.set_index("geoid")
    value_columns = frame.columns.drop("name")
    frame[value_columns] = frame[value_columns].astype(float)
    return frame


__all__ = [
    "CountyRecord",
    "IncomeDistribution",
    "UNKNOWN_INCOME",
    "load_county_records",
    "parse_county_record",
    "parse_county_records",
    "parse_numeric",
    "parse_percent",
    "records_to_frame",
]
