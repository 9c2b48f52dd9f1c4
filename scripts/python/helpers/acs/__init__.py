"""County ACS helper library for selection summaries."""

from scripts.python.helpers.acs.aggregation import (
    RatioSum,
    SelectionTotals,
    aggregate_selection,
    empty_totals,
    fold_records,
    unit_contribution,
)
from scripts.python.helpers.acs.bins import (
    DEFAULT_INCOME_BRACKETS,
    BracketTable,
    IncomeBracket,
    build_bracket_table,
    combine_bin_counts,
    read_bracket_table,
)
from scripts.python.helpers.acs.distribution import (
    DistributionEstimate,
    binned_mean,
    binned_quantile,
    reconstruct_distribution,
)
from scripts.python.helpers.acs.metrics import (
    empty_summary,
    quantile_key,
    summarize_selection,
    summarize_totals,
    summary_keys,
)
from scripts.python.helpers.acs.records import (
    CountyRecord,
    IncomeDistribution,
    load_county_records,
    parse_county_record,
    parse_county_records,
    records_to_frame,
)
from scripts.python.helpers.acs.selection import geoids_in_state, resolve_selection

__all__ = [
    "DEFAULT_INCOME_BRACKETS",
    "BracketTable",
    "CountyRecord",
    "DistributionEstimate",
    "IncomeBracket",
    "IncomeDistribution",
    "RatioSum",
    "SelectionTotals",
    "aggregate_selection",
    "binned_mean",
    "binned_quantile",
    "build_bracket_table",
    "combine_bin_counts",
    "empty_summary",
    "empty_totals",
    "fold_records",
    "geoids_in_state",
    "load_county_records",
    "parse_county_record",
    "parse_county_records",
    "quantile_key",
    "read_bracket_table",
    "reconstruct_distribution",
    "records_to_frame",
    "resolve_selection",
    "summarize_selection",
    "summarize_totals",
    "summary_keys",
    "unit_contribution",
]
