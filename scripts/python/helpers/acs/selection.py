"""Helpers for turning caller selections into county records."""

from __future__ import annotations

from typing import Iterable, Mapping

from scripts.python.helpers.acs.constants import POPULATION, STATE_NAMES
from scripts.python.helpers.acs.records import CountyRecord


def resolve_selection(
    records: Mapping[str, CountyRecord],
    selection: Iterable[str],
) -> list[CountyRecord]:
    """Return the selected records in geoid order.

    Duplicate ids collapse and ids without a record are skipped; selections
    come from map interactions that can briefly reference counties the
    statistics file does not hold.
    """
    return [records[geoid] for geoid in sorted(set(selection)) if geoid in records]


def geoids_in_state(records: Mapping[str, CountyRecord], state_fips: str) -> set[str]:
    """All county ids whose state FIPS prefix matches ``state_fips``."""
    prefix = state_fips.zfill(2)
    return {geoid for geoid, record in records.items() if record.state_fips == prefix}


def states_with_population(records: Mapping[str, CountyRecord]) -> list[str]:
    """State FIPS codes with at least one county reporting a population."""
    return sorted(
        {
            record.state_fips
            for record in records.values()
            if record.count(POPULATION) is not None
        }
    )


def state_name(state_fips: str) -> str:
    return STATE_NAMES.get(state_fips, f"State {state_fips}")
