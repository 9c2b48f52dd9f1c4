#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Summarise ACS county attributes for an arbitrary selection of counties.

Counties are selected by geoid (--geoid 55025) and/or by whole state
(--state 55). Prints the grouped summary and optionally writes
"SelectionSummary.csv" and "SelectionIncomeDistribution.png".

Income mean and upper quantiles depend on the cap used for the open $200k+
bracket (ACS_TOP_INCOME_UPPER, default 250000, or --brackets-config).
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Sequence

from scripts.python.helpers.acs.aggregation import aggregate_selection
from scripts.python.helpers.acs.bins import (
    DEFAULT_INCOME_BRACKETS,
    BracketTable,
    read_bracket_table,
)
from scripts.python.helpers.acs.config import (
    ACS_DATA_ROOT,
    ACS_DEFAULT_QUANTILES,
    ACS_STATS_FILENAME,
    ACS_SUMMARY_PLOTS,
)
from scripts.python.helpers.acs.metrics import empty_summary, summarize_totals
from scripts.python.helpers.acs.plotting import save_income_histogram
from scripts.python.helpers.acs.records import load_county_records
from scripts.python.helpers.acs.report import (
    build_report_sections,
    render_report,
    summary_to_frame,
)
from scripts.python.helpers.acs.selection import (
    geoids_in_state,
    resolve_selection,
    state_name,
    states_with_population,
)
from scripts.python.helpers.common.paths import require_input_files, resolve_output_path

SUMMARY_CSV_NAME = "SelectionSummary.csv"
INCOME_PLOT_NAME = "SelectionIncomeDistribution.png"
MAX_LISTED_NAMES = 12


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Summarise ACS attributes for a selection of counties.",
    )
    parser.add_argument(
        "--stats-json",
        default=os.path.join(ACS_DATA_ROOT, ACS_STATS_FILENAME),
        help="Path to counties_stats.json (default: $ACS_DATA_ROOT/counties_stats.json).",
    )
    parser.add_argument(
        "--geoid",
        action="append",
        default=[],
        help="County geoid (state+county FIPS) to select; repeatable.",
    )
    parser.add_argument(
        "--state",
        action="append",
        default=[],
        help="State FIPS whose counties are all selected; repeatable.",
    )
    parser.add_argument(
        "--quantile",
        action="append",
        type=float,
        default=None,
        help="Income quantile fraction in (0, 1]; repeatable (default: 0.2 and 0.8).",
    )
    parser.add_argument(
        "--brackets-config",
        default=None,
        help="Optional properties file with INCOME_BRACKET_EDGES and INCOME_TOP_BRACKET_UPPER.",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Optional output directory for the summary CSV and plot.",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        default=ACS_SUMMARY_PLOTS,
        help="Write the combined income histogram (requires --output-dir or uses cwd).",
    )
    return parser


def run_selection_summary(
    stats_json: Path | str,
    geoids: Sequence[str] = (),
    states: Sequence[str] = (),
    quantiles: Sequence[float] = ACS_DEFAULT_QUANTILES,
    brackets: BracketTable = DEFAULT_INCOME_BRACKETS,
    output_dir: str | None = None,
    plot: bool = False,
) -> dict[str, object]:
    """Load county records, summarise the selection and write optional outputs."""
    records = load_county_records(stats_json)
    selection = set(geoids)
    for state_fips in states:
        selection |= geoids_in_state(records, state_fips)

    populated_states = set(states_with_population(records))
    empty_states = [fips.zfill(2) for fips in states if fips.zfill(2) not in populated_states]

    matched = resolve_selection(records, selection)
    if selection:
        totals = aggregate_selection(records, selection)
        summary = summarize_totals(totals, brackets, quantiles)
        income_bins = totals.income_bins
    else:
        summary = empty_summary(quantiles)
        income_bins = (None,) * len(brackets)

    output_files: dict[str, Path] = {}
    if output_dir is not None:
        csv_path = resolve_output_path(SUMMARY_CSV_NAME, output_dir)
        summary_to_frame(summary).to_csv(csv_path, index=False)
        output_files["summary_csv"] = csv_path
    if plot and matched:
        output_files["income_plot"] = save_income_histogram(
            resolve_output_path(INCOME_PLOT_NAME, output_dir),
            brackets,
            income_bins,
            summary,
            quantiles,
            title=f"Household income distribution ({len(matched)} counties)",
        )

    return {
        "selected": sorted(selection),
        "matched": [record.geoid for record in matched],
        "names": [record.name or record.geoid for record in matched],
        "empty_states": empty_states,
        "summary": summary,
        "output_files": output_files,
    }


def main() -> None:
    args = build_arg_parser().parse_args()
    require_input_files(args.stats_json, args.brackets_config)

    brackets = (
        read_bracket_table(args.brackets_config)
        if args.brackets_config
        else DEFAULT_INCOME_BRACKETS
    )
    quantiles = tuple(args.quantile) if args.quantile else ACS_DEFAULT_QUANTILES

    result = run_selection_summary(
        args.stats_json,
        geoids=args.geoid,
        states=args.state,
        quantiles=quantiles,
        brackets=brackets,
        output_dir=args.output_dir,
        plot=args.plot,
    )

    print("County selection summary")
    print(f"Statistics file: {args.stats_json}")
    if args.state:
        print("States: " + ", ".join(state_name(fips.zfill(2)) for fips in args.state))
    for fips in result["empty_states"]:
        print(f"WARN: no county population data for {state_name(fips)}")
    print(f"Top income bracket capped at: ${brackets.open_upper:,.0f}")
    print(f"Selected counties: {len(result['selected'])} (with data: {len(result['matched'])})")
    names = result["names"]
    if names:
        listed = ", ".join(names[:MAX_LISTED_NAMES])
        print(listed + (" ..." if len(names) > MAX_LISTED_NAMES else ""))
    if not result["selected"]:
        print("No selection")
    print("")
    print(render_report(build_report_sections(result["summary"], quantiles)), end="")

    for label, path in result["output_files"].items():
        print(f"Wrote {label}: {path}")


if __name__ == "__main__":
    main()
