"""Common null-safe arithmetic helpers.

Unknown values are represented as ``None`` and are never coerced to zero.
"""

from __future__ import annotations

from typing import Iterable


def add_known(left: float | None, right: float | None) -> float | None:
    """Add two optional values, treating ``None`` as a non-contributing identity."""
    if left is None:
        return right
    if right is None:
        return left
    return left + right


def sum_all_known(values: Iterable[float | None]) -> float | None:
    """Sum values only when every one of them is known."""
    total = 0.0
    for value in values:
        if value is None:
            return None
        total += value
    return total


def safe_ratio(numerator: float | None, denominator: float | None) -> float | None:
    """Return numerator/denominator when both are known and denominator > 0."""
    if numerator is None or denominator is None:
        return None
    if denominator <= 0.0:
        return None
    return numerator / denominator


def clamp_percent(value: float | None) -> float | None:
    """Clamp a percentage to [0, 100], passing unknown through."""
    if value is None:
        return None
    return min(max(value, 0.0), 100.0)
