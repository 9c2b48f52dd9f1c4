"""Common CLI formatting helpers.

Unknown values render as ``--`` so the output never shows a stand-in zero.
"""

from __future__ import annotations

MISSING_TEXT = "--"


def format_optional(value: float | None, decimals: int = 1) -> str:
    if value is None:
        return MISSING_TEXT
    return f"{value:,.{decimals}f}"


def format_count(value: float | None) -> str:
    """Format a count with thousands separators."""
    if value is None:
        return MISSING_TEXT
    return f"{value:,.0f}"


def format_currency(value: float | None, symbol: str = "$") -> str:
    """Format a value as whole currency units with separators."""
    if value is None:
        return MISSING_TEXT
    return f"{symbol}{value:,.0f}"


def format_percent(value: float | None, decimals: int = 1) -> str:
    if value is None:
        return MISSING_TEXT
    return f"{value:.{decimals}f}%"
