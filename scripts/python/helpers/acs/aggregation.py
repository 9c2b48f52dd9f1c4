"""
Fold county records into combined selection totals.

Each county contributes a ``SelectionTotals`` accumulator and accumulators are
combined with ``SelectionTotals.merge``. The merge is associative and
commutative and treats unknown as the identity, so contributions may be
reduced in any order or in independent partial batches.

Rates are never averaged across counties. A percentage P with denominator D is
recombined as sum(P_i / 100 * D_i) / sum(D_i) over the counties reporting both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, Mapping

from scripts.python.helpers.acs.bins import combine_bin_counts
from scripts.python.helpers.acs.constants import (
    AGE_COHORTS,
    COMPANION_WEIGHTS,
    COUNT_FIELDS,
    DENSITY_PAIR,
    ENGLISH_ONLY,
    INCOME_BIN_COUNT,
    LANGUAGE_BASE,
    LANGUAGE_OTHER,
    PERCENT_DENOMINATORS,
    SHARE_DEFINITIONS,
)
from scripts.python.helpers.acs.records import CountyRecord
from scripts.python.helpers.acs.selection import resolve_selection
from scripts.python.helpers.common.math_stats import add_known, safe_ratio, sum_all_known

# Internal pair key for population over land area (people per square metre).
POPULATION_PER_M2 = "population_per_m2"

TOTAL_COUNT_KEYS = COUNT_FIELDS + tuple(AGE_COHORTS) + (LANGUAGE_OTHER,)
PAIR_DEFINITIONS = {**SHARE_DEFINITIONS, POPULATION_PER_M2: DENSITY_PAIR}


@dataclass(frozen=True)
class RatioSum:
    """Numerator and denominator summed over the counties that report both."""

    numerator: float = 0.0
    denominator: float = 0.0

    def merge(self, other: RatioSum) -> RatioSum:
        return RatioSum(
            numerator=self.numerator + other.numerator,
            denominator=self.denominator + other.denominator,
        )

    def ratio(self) -> float | None:
        return safe_ratio(self.numerator, self.denominator)


EMPTY_RATIO = RatioSum()


def _merge_ratios(
    left: Mapping[str, RatioSum],
    right: Mapping[str, RatioSum],
) -> dict[str, RatioSum]:
    return {
        key: left.get(key, EMPTY_RATIO).merge(right.get(key, EMPTY_RATIO))
        for key in {**left, **right}
    }


@dataclass(frozen=True)
class SelectionTotals:
    """Combined totals for a set of counties, before any ratio is taken."""

    counts: Mapping[str, float | None] = field(default_factory=dict)
    percents: Mapping[str, RatioSum] = field(default_factory=dict)
    companions: Mapping[str, RatioSum] = field(default_factory=dict)
    pairs: Mapping[str, RatioSum] = field(default_factory=dict)
    income_bins: tuple[float | None, ...] = (None,) * INCOME_BIN_COUNT
    income_total: float | None = None
    unit_count: int = 0

    def merge(self, other: SelectionTotals) -> SelectionTotals:
        return SelectionTotals(
            counts={
                key: add_known(self.counts.get(key), other.counts.get(key))
                for key in {**self.counts, **other.counts}
            },
            percents=_merge_ratios(self.percents, other.percents),
            companions=_merge_ratios(self.companions, other.companions),
            pairs=_merge_ratios(self.pairs, other.pairs),
            income_bins=combine_bin_counts(self.income_bins, other.income_bins),
            income_total=add_known(self.income_total, other.income_total),
            unit_count=self.unit_count + other.unit_count,
        )

    def count(self, name: str) -> float | None:
        return self.counts.get(name)

    def percent(self, name: str) -> float | None:
        ratio = self.percents.get(name, EMPTY_RATIO).ratio()
        return None if ratio is None else ratio * 100.0

    def companion(self, name: str) -> float | None:
        return self.companions.get(name, EMPTY_RATIO).ratio()

    def pair_ratio(self, name: str) -> float | None:
        return self.pairs.get(name, EMPTY_RATIO).ratio()


def empty_totals() -> SelectionTotals:
    """Accumulator for a selection with no counties: every value unknown."""
    return SelectionTotals(
        counts={key: None for key in TOTAL_COUNT_KEYS},
        percents={key: EMPTY_RATIO for key in PERCENT_DENOMINATORS},
        companions={key: EMPTY_RATIO for key in COMPANION_WEIGHTS},
        pairs={key: EMPTY_RATIO for key in PAIR_DEFINITIONS},
    )


def _weighted_part(value: float | None, weight: float | None) -> RatioSum:
    if value is None or weight is None or weight <= 0.0:
        return EMPTY_RATIO
    return RatioSum(numerator=value * weight, denominator=weight)


def _language_other(record: CountyRecord) -> float | None:
    base = record.count(LANGUAGE_BASE)
    english_only = record.count(ENGLISH_ONLY)
    if base is None or english_only is None or english_only > base:
        return None
    return base - english_only


def derived_counts(record: CountyRecord) -> dict[str, float | None]:
    """Counts composed from several record fields; unknown if any part is unknown."""
    counts = {
        cohort: sum_all_known(record.age_count(key) for key in parts)
        for cohort, parts in AGE_COHORTS.items()
    }
    counts[LANGUAGE_OTHER] = _language_other(record)
    return counts


def unit_contribution(record: CountyRecord) -> SelectionTotals:
    """The accumulator for a single county."""
    counts = {key: record.count(key) for key in COUNT_FIELDS}
    counts.update(derived_counts(record))

    percents = {
        key: _weighted_part(
            None if record.percent(key) is None else record.percent(key) / 100.0,
            record.count(denominator),
        )
        for key, denominator in PERCENT_DENOMINATORS.items()
    }
    companions = {
        key: _weighted_part(record.companion(key), record.count(weight))
        for key, weight in COMPANION_WEIGHTS.items()
    }
    pairs = {}
    for key, (numerator_key, denominator_key) in PAIR_DEFINITIONS.items():
        numerator = counts[numerator_key]
        denominator = counts[denominator_key]
        if numerator is None or denominator is None or denominator <= 0.0:
            pairs[key] = EMPTY_RATIO
        else:
            pairs[key] = RatioSum(numerator=numerator, denominator=denominator)

    if record.income.is_known:
        income_bins = record.income.bins
        income_total = record.income.total
    else:
        income_bins = (None,) * INCOME_BIN_COUNT
        income_total = None

    return SelectionTotals(
        counts=counts,
        percents=percents,
        companions=companions,
        pairs=pairs,
        income_bins=income_bins,
        income_total=income_total,
        unit_count=1,
    )


def fold_records(records: Iterable[CountyRecord]) -> SelectionTotals:
    """Reduce county contributions into one accumulator."""
    return reduce(SelectionTotals.merge, map(unit_contribution, records), empty_totals())


def aggregate_selection(
    records: Mapping[str, CountyRecord],
    selection: Iterable[str],
) -> SelectionTotals:
    """Combined totals for the selected counties that have records."""
    return fold_records(resolve_selection(records, selection))


__all__ = [
    "EMPTY_RATIO",
    "PAIR_DEFINITIONS",
    "POPULATION_PER_M2",
    "RatioSum",
    "SelectionTotals",
    "TOTAL_COUNT_KEYS",
    "aggregate_selection",
    "derived_counts",
    "empty_totals",
    "fold_records",
    "unit_contribution",
]
