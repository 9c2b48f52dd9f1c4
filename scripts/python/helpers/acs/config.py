"""
Runtime configuration for county statistics ingestion and selection summaries.
"""

from __future__ import annotations

import math
import os


def _parse_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(
        f"{name} must be one of 1/0, true/false, yes/no, on/off; got {value!r}"
    )


def _parse_float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number; got {value!r}") from exc
    if not math.isfinite(parsed) or parsed <= 0.0:
        raise ValueError(f"{name} must be a positive finite number; got {value!r}")
    return parsed


# ACS 5-year vintage the statistics file was built from. Bump when a new release drops.
ACS_YEAR = int(os.getenv("ACS_YEAR", "2023"))

# Directory holding counties_stats.json and the saved ACS responses.
ACS_DATA_ROOT = os.getenv("ACS_DATA_ROOT", "")
ACS_STATS_FILENAME = os.getenv("ACS_STATS_FILENAME", "counties_stats.json")

# Finite upper bound assigned to the open-ended top income bracket ($200k+).
# Mean income and the upper quantiles move directly with this value.
ACS_TOP_INCOME_UPPER = _parse_float_env("ACS_TOP_INCOME_UPPER", 250_000.0)

# Quantiles reported by selection summaries when none are requested.
ACS_DEFAULT_QUANTILES = (0.2, 0.8)

# Toggle the income histogram plot in the selection summary script.
ACS_SUMMARY_PLOTS = _parse_bool_env("ACS_SUMMARY_PLOTS", False)
