"""Mean and quantile estimates reconstructed from binned household income counts.

Counts are combined bracket totals (``None`` for a bracket with no known count)
and ``total`` is the independently reported distribution total. Known counts
may fall short of the total when some brackets are suppressed; estimates are
always normalised by the reported total.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from scripts.python.helpers.acs.bins import BracketTable
from scripts.python.helpers.acs.config import ACS_DEFAULT_QUANTILES


@dataclass(frozen=True)
class DistributionEstimate:
    """Mean plus one quantile estimate per requested fraction."""

    mean: float | None
    quantiles: dict[float, float | None] = field(default_factory=dict)


def _counts_array(counts: Sequence[float | None], table: BracketTable) -> np.ndarray:
    if len(counts) != len(table):
        raise ValueError(
            f"Got {len(counts)} bracket counts for a table of {len(table)} brackets."
        )
    values = np.asarray([0.0 if count is None else count for count in counts], dtype=float)
    if not np.all(np.isfinite(values)) or np.any(values < 0.0):
        raise ValueError(f"Bracket counts must be finite and non-negative; got {list(counts)}")
    return values


def _has_mass(counts: Sequence[float | None], total: float | None) -> bool:
    if total is None or total <= 0.0:
        return False
    return any(count is not None for count in counts)


def binned_mean(
    counts: Sequence[float | None],
    total: float | None,
    table: BracketTable,
) -> float | None:
    """Midpoint-weighted mean, sum(count_i * midpoint_i) / total.

    Unknown when the total is unknown or no bracket count is known.
    """
    values = _counts_array(counts, table)
    if not _has_mass(counts, total):
        return None
    return float(np.dot(values, table.midpoints()) / total)


def binned_quantile(
    counts: Sequence[float | None],
    total: float | None,
    table: BracketTable,
    fraction: float,
) -> float | None:
    """Estimate a quantile by linear interpolation inside the target bracket.

    The target bracket is the first whose cumulative count reaches
    ``fraction * total``. A target beyond the cumulative count of all brackets
    resolves to the capped upper bound of the final bracket. The estimate is
    unknown when the total is unknown or no bracket count is known.
    """
    if not 0.0 < fraction <= 1.0:
        raise ValueError(f"Quantile fraction must be in (0, 1]; got {fraction}")
    values = _counts_array(counts, table)
    if not _has_mass(counts, total):
        return None

    target = fraction * total
    cumulative = np.cumsum(values)
    index = int(np.searchsorted(cumulative, target, side="left"))
    if index >= len(values):
        return table.top_upper

    lower, upper = table.bounds()[index]
    bracket_count = values[index]
    if bracket_count == 0.0:
        return lower
    cumulative_before = cumulative[index - 1] if index > 0 else 0.0
    within = (target - cumulative_before) / bracket_count
    return float(lower + within * (upper - lower))


def reconstruct_distribution(
    counts: Sequence[float | None],
    total: float | None,
    table: BracketTable,
    fractions: Sequence[float] = ACS_DEFAULT_QUANTILES,
) -> DistributionEstimate:
    """Estimate the mean and each requested quantile from one set of bracket counts."""
    return DistributionEstimate(
        mean=binned_mean(counts, total, table),
        quantiles={
            fraction: binned_quantile(counts, total, table, fraction)
            for fraction in fractions
        },
    )


__all__ = [
    "DistributionEstimate",
    "binned_mean",
    "binned_quantile",
    "reconstruct_distribution",
]
