"""
Derived metrics for a county selection.

Turns combined selection totals into the flat summary consumed by report code:
raw totals, land area and density, recombined percentages, weighted companion
means, derived shares and income distribution estimates. Every value is a float
or None; every percentage is clamped to [0, 100].
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from scripts.python.helpers.acs.aggregation import (
    POPULATION_PER_M2,
    TOTAL_COUNT_KEYS,
    SelectionTotals,
    aggregate_selection,
)
from scripts.python.helpers.acs.bins import DEFAULT_INCOME_BRACKETS, BracketTable
from scripts.python.helpers.acs.config import ACS_DEFAULT_QUANTILES
from scripts.python.helpers.acs.constants import (
    AREA_KM2,
    AREA_MI2,
    COMPANION_WEIGHTS,
    DENSITY_KM2,
    DENSITY_MI2,
    INCOME_HOUSEHOLDS,
    INCOME_MEAN,
    LAND_AREA_M2,
    M2_PER_KM2,
    M2_PER_MI2,
    PERCENT_DENOMINATORS,
    SHARE_DEFINITIONS,
)
from scripts.python.helpers.acs.distribution import reconstruct_distribution
from scripts.python.helpers.acs.records import CountyRecord
from scripts.python.helpers.common.math_stats import clamp_percent, safe_ratio


def quantile_key(fraction: float) -> str:
    """Summary key for an income quantile, e.g. 0.2 -> ``income_p20``."""
    percent = fraction * 100.0
    if abs(percent - round(percent)) < 1e-9:
        return f"income_p{int(round(percent))}"
    return "income_p" + f"{percent:g}".replace(".", "_")


def quantile_label(fraction: float) -> str:
    """Display label for an income quantile, e.g. 0.2 -> ``P20``."""
    return "P" + quantile_key(fraction).removeprefix("income_p")


def summary_keys(quantiles: Sequence[float] = ACS_DEFAULT_QUANTILES) -> list[str]:
    """Every key of a selection summary, in report order."""
    return [
        *TOTAL_COUNT_KEYS,
        INCOME_HOUSEHOLDS,
        AREA_MI2,
        AREA_KM2,
        DENSITY_MI2,
        DENSITY_KM2,
        *PERCENT_DENOMINATORS,
        *COMPANION_WEIGHTS,
        *SHARE_DEFINITIONS,
        INCOME_MEAN,
        *(quantile_key(fraction) for fraction in quantiles),
    ]


def empty_summary(quantiles: Sequence[float] = ACS_DEFAULT_QUANTILES) -> dict[str, float | None]:
    """Summary for an empty selection; unknown everywhere, never zero."""
    return {key: None for key in summary_keys(quantiles)}


def _scaled(value: float | None, factor: float) -> float | None:
    return None if value is None else value * factor


def summarize_totals(
    totals: SelectionTotals,
    brackets: BracketTable = DEFAULT_INCOME_BRACKETS,
    quantiles: Sequence[float] = ACS_DEFAULT_QUANTILES,
) -> dict[str, float | None]:
    """Derive the flat summary from combined totals."""
    summary: dict[str, float | None] = {key: totals.count(key) for key in TOTAL_COUNT_KEYS}
    summary[INCOME_HOUSEHOLDS] = totals.income_total

    land_area = totals.count(LAND_AREA_M2)
    summary[AREA_MI2] = safe_ratio(land_area, M2_PER_MI2)
    summary[AREA_KM2] = safe_ratio(land_area, M2_PER_KM2)
    population_per_m2 = totals.pair_ratio(POPULATION_PER_M2)
    summary[DENSITY_MI2] = _scaled(population_per_m2, M2_PER_MI2)
    summary[DENSITY_KM2] = _scaled(population_per_m2, M2_PER_KM2)

    for key in PERCENT_DENOMINATORS:
        summary[key] = clamp_percent(totals.percent(key))
    for key in COMPANION_WEIGHTS:
        summary[key] = totals.companion(key)
    for key in SHARE_DEFINITIONS:
        summary[key] = clamp_percent(_scaled(totals.pair_ratio(key), 100.0))

    estimate = reconstruct_distribution(
        totals.income_bins,
        totals.income_total,
        brackets,
        quantiles,
    )
    summary[INCOME_MEAN] = estimate.mean
    for fraction in quantiles:
        summary[quantile_key(fraction)] = estimate.quantiles[fraction]
    return summary


def summarize_selection(
    records: Mapping[str, CountyRecord],
    selection: Iterable[str],
    *,
    brackets: BracketTable = DEFAULT_INCOME_BRACKETS,
    quantiles: Sequence[float] = ACS_DEFAULT_QUANTILES,
) -> dict[str, float | None]:
    """Combined statistics for the selected counties."""
    selected = set(selection)
    if not selected:
        return empty_summary(quantiles)
    totals = aggregate_selection(records, selected)
    return summarize_totals(totals, brackets, quantiles)


__all__ = [
    "empty_summary",
    "quantile_key",
    "quantile_label",
    "summarize_selection",
    "summarize_totals",
    "summary_keys",
]
