"""
Grouped, formatted views of a selection summary.

Formatting only: values are read from the summary mapping and never recomputed.
"""

from __future__ import annotations

from typing import Mapping, Sequence

import pandas as pd

from scripts.python.helpers.acs.config import ACS_DEFAULT_QUANTILES
from scripts.python.helpers.acs import constants
from scripts.python.helpers.acs.metrics import quantile_key, quantile_label
from scripts.python.helpers.common.cli import (
    MISSING_TEXT,
    format_count,
    format_currency,
    format_optional,
    format_percent,
)

Summary = Mapping[str, float | None]
ReportRow = tuple[str, str]

RACE_LABELS = {
    constants.RACE_WHITE: "White (alone)",
    constants.RACE_BLACK: "Black (alone)",
    constants.RACE_NATIVE: "American Indian/Alaska Native",
    constants.RACE_ASIAN: "Asian (alone)",
    constants.RACE_PACIFIC: "NH/Other Pacific Islander",
    constants.RACE_OTHER: "Some other race",
    constants.RACE_TWO_OR_MORE: "Two or more races",
}

AGE_LABELS = {
    constants.AGE_0_4: "0-4",
    constants.AGE_5_19: "5-19",
    constants.AGE_20_24: "20-24",
    constants.AGE_25_44: "25-44",
    constants.AGE_45_64: "45-64",
    constants.AGE_65_74: "65-74",
    constants.AGE_75_PLUS: "75+",
}

YEAR_BUILT_LABELS = {
    constants.YEAR_BUILT_PRE_1980: "Built before 1980",
    constants.YEAR_BUILT_1980_1999: "Built 1980-1999",
    constants.YEAR_BUILT_2000_2009: "Built 2000-2009",
    constants.YEAR_BUILT_2010_PLUS: "Built 2010 or later",
}


def _pct(summary: Summary, key: str) -> str:
    return format_percent(summary.get(key))


def _count_with_share(summary: Summary, count_key: str, share_key: str) -> str:
    count_text = format_count(summary.get(count_key))
    share = summary.get(share_key)
    if share is None:
        return count_text
    return f"{count_text} ({format_percent(share)})"


def _area_text(summary: Summary) -> str:
    if summary.get(constants.AREA_MI2) is None:
        return MISSING_TEXT
    return (
        f"{format_optional(summary.get(constants.AREA_MI2))} mi² "
        f"({format_optional(summary.get(constants.AREA_KM2))} km²)"
    )


def _density_text(summary: Summary) -> str:
    if summary.get(constants.DENSITY_MI2) is None:
        return MISSING_TEXT
    return (
        f"{format_optional(summary.get(constants.DENSITY_MI2))} /mi² "
        f"({format_optional(summary.get(constants.DENSITY_KM2))} /km²)"
    )


def build_report_sections(
    summary: Summary,
    quantiles: Sequence[float] = ACS_DEFAULT_QUANTILES,
) -> list[tuple[str, list[ReportRow]]]:
    """Group summary values into labelled report sections."""
    income_rows = [
        ("Mean household income", format_currency(summary.get(constants.INCOME_MEAN))),
        (
            "Median household income (household-weighted)",
            format_currency(summary.get(constants.MEDIAN_HOUSEHOLD_INCOME)),
        ),
    ]
    income_rows.extend(
        (quantile_label(fraction), format_currency(summary.get(quantile_key(fraction))))
        for fraction in quantiles
    )

    return [
        (
            "Core",
            [
                ("Total population", format_count(summary.get(constants.POPULATION))),
                ("Total area", _area_text(summary)),
                ("Density", _density_text(summary)),
                ("Households", format_count(summary.get(constants.HOUSEHOLDS))),
            ],
        ),
        (
            "Education & internet",
            [
                ("HS+ (25+)", _pct(summary, constants.EDU_HS_OR_HIGHER_PCT)),
                ("BA+ (25+)", _pct(summary, constants.EDU_BA_OR_HIGHER_PCT)),
                ("Broadband (HH)", _pct(summary, constants.BROADBAND_PCT)),
                ("Below poverty level", _pct(summary, constants.POVERTY_PCT)),
            ],
        ),
        (
            "Race & ethnicity",
            [("Hispanic or Latino (any race)", _pct(summary, constants.HISPANIC_PCT))]
            + [(label, _pct(summary, f"{key}_pct")) for key, label in RACE_LABELS.items()],
        ),
        (
            "Age",
            [(label, _pct(summary, f"{key}_pct")) for key, label in AGE_LABELS.items()],
        ),
        ("Income", income_rows),
        (
            "Economy",
            [
                (
                    "Labor force participation",
                    _pct(summary, constants.LABOR_FORCE_PARTICIPATION_PCT),
                ),
                ("Unemployment rate", _pct(summary, constants.UNEMPLOYMENT_RATE_PCT)),
                ("In labor force (16+)", format_count(summary.get(constants.IN_LABOR_FORCE))),
                ("Employed", format_count(summary.get(constants.EMPLOYED))),
                ("Unemployed", format_count(summary.get(constants.UNEMPLOYED))),
            ],
        ),
        (
            "Housing",
            [
                ("Occupied units", format_count(summary.get(constants.OCCUPIED_UNITS))),
                (
                    "Owner-occupied",
                    _count_with_share(
                        summary, constants.OWNER_OCCUPIED, constants.OWNER_OCCUPIED_PCT
                    ),
                ),
                (
                    "Renter-occupied",
                    _count_with_share(
                        summary, constants.RENTER_OCCUPIED, constants.RENTER_OCCUPIED_PCT
                    ),
                ),
                (
                    "Median gross rent (renter-weighted)",
                    format_currency(summary.get(constants.MEDIAN_GROSS_RENT)),
                ),
            ]
            + [
                (label, _pct(summary, f"{key}_pct"))
                for key, label in YEAR_BUILT_LABELS.items()
            ],
        ),
        (
            "Social",
            [
                ("Foreign-born", _pct(summary, constants.FOREIGN_BORN_PCT)),
                (
                    "Language other than English at home (5+)",
                    _pct(summary, constants.LANGUAGE_OTHER_PCT),
                ),
                ("Spanish spoken at home (5+)", _pct(summary, constants.SPANISH_AT_HOME_PCT)),
            ],
        ),
    ]


def render_report(sections: Sequence[tuple[str, Sequence[ReportRow]]]) -> str:
    """Render report sections as aligned plain text."""
    width = max(
        (len(label) for _, rows in sections for label, _ in rows),
        default=0,
    )
    lines: list[str] = []
    for title, rows in sections:
        lines.append(title)
        lines.extend(f"  {label.ljust(width)}  {value}" for label, value in rows)
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def summary_to_frame(summary: Summary) -> pd.DataFrame:
    """Two-column metric/value frame; unknown values become NaN."""
    return pd.DataFrame(
        {
            "metric": list(summary.keys()),
            "value": pd.Series(list(summary.values()), dtype=float),
        }
    )


__all__ = [
    "build_report_sections",
    "render_report",
    "summary_to_frame",
]
