"""Income bracket tables and helpers for per-bracket household counts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import numpy as np

from scripts.python.helpers.acs.config import ACS_TOP_INCOME_UPPER
from scripts.python.helpers.acs.constants import INCOME_BRACKET_EDGES
from scripts.python.helpers.common.io_properties import (
    parse_float_list,
    read_properties,
    require_property,
)
from scripts.python.helpers.common.math_stats import add_known

BRACKET_EDGES_KEY = "INCOME_BRACKET_EDGES"
TOP_BRACKET_UPPER_KEY = "INCOME_TOP_BRACKET_UPPER"


@dataclass(frozen=True)
class IncomeBracket:
    """One income bracket; ``upper`` is None for the open-ended top bracket."""

    lower: float
    upper: float | None

    @property
    def label(self) -> str:
        if self.upper is None:
            return f"${self.lower:,.0f}+"
        return f"${self.lower:,.0f} - ${self.upper:,.0f}"


@dataclass(frozen=True)
class BracketTable:
    """Ordered, contiguous income brackets with a finite cap for the top one.

    Lower bounds are inclusive and upper bounds exclusive. ``open_upper`` stands
    in for the unobservable upper bound of the last bracket whenever the mean
    or a quantile needs arithmetic on it.
    """

    brackets: tuple[IncomeBracket, ...]
    open_upper: float

    def __post_init__(self) -> None:
        if not self.brackets:
            raise ValueError("Bracket table needs at least one bracket.")
        for item, following in zip(self.brackets[:-1], self.brackets[1:]):
            if item.upper is None:
                raise ValueError("Only the last bracket may be open-ended.")
            if item.upper <= item.lower:
                raise ValueError(f"Invalid bracket with upper<=lower: {item}")
            if item.upper != following.lower:
                raise ValueError(f"Brackets are not contiguous at {item.upper}.")
        top_upper = self.top_upper
        if top_upper <= self.brackets[-1].lower:
            raise ValueError(
                f"Top bracket upper bound {top_upper} must exceed its lower bound "
                f"{self.brackets[-1].lower}."
            )

    def __len__(self) -> int:
        return len(self.brackets)

    @property
    def top_upper(self) -> float:
        tail = self.brackets[-1]
        return self.open_upper if tail.upper is None else tail.upper

    def bounds(self) -> list[tuple[float, float]]:
        """Return (lower, upper) pairs with the open top bracket capped."""
        return [
            (item.lower, self.open_upper if item.upper is None else item.upper)
            for item in self.brackets
        ]

    def lower_edges(self) -> np.ndarray:
        return np.asarray([item.lower for item in self.brackets], dtype=float)

    def upper_edges(self) -> np.ndarray:
        return np.asarray([upper for _, upper in self.bounds()], dtype=float)

    def midpoints(self) -> np.ndarray:
        return (self.lower_edges() + self.upper_edges()) / 2.0


def build_bracket_table(edges: Sequence[float], open_upper: float) -> BracketTable:
    """Build a table from ascending lower edges; the last bracket is open-ended."""
    ordered = [float(edge) for edge in edges]
    if not ordered:
        raise ValueError("Bracket edges cannot be empty.")
    if any(right <= left for left, right in zip(ordered[:-1], ordered[1:])):
        raise ValueError(f"Bracket edges must be strictly ascending: {ordered}")
    brackets = [
        IncomeBracket(lower=lower, upper=upper)
        for lower, upper in zip(ordered[:-1], ordered[1:])
    ]
    brackets.append(IncomeBracket(lower=ordered[-1], upper=None))
    return BracketTable(brackets=tuple(brackets), open_upper=float(open_upper))


def read_bracket_table(path: Path | str) -> BracketTable:
    """Read a bracket table from a properties file.

    Expected keys:
      - INCOME_BRACKET_EDGES = 0,10000,15000,...,200000
      - INCOME_TOP_BRACKET_UPPER = 250000
    """
    props = read_properties(path)
    edges = parse_float_list(require_property(props, BRACKET_EDGES_KEY, path))
    raw_upper = require_property(props, TOP_BRACKET_UPPER_KEY, path)
    try:
        open_upper = float(raw_upper)
    except ValueError as exc:
        raise ValueError(f"Invalid {TOP_BRACKET_UPPER_KEY} in {path}: {raw_upper!r}") from exc
    return build_bracket_table(edges, open_upper)


def combine_bin_counts(
    *bin_sets: Sequence[float | None],
) -> tuple[float | None, ...]:
    """Add bracket counts position by position; a bracket unknown everywhere stays unknown."""
    if not bin_sets:
        return ()
    width = len(bin_sets[0])
    if any(len(bin_set) != width for bin_set in bin_sets):
        raise ValueError("Bin sets have different bracket counts.")
    combined: list[float | None] = [None] * width
    for bin_set in bin_sets:
        for index, count in enumerate(bin_set):
            combined[index] = add_known(combined[index], count)
    return tuple(combined)


def known_bin_total(counts: Sequence[float | None]) -> float:
    """Sum of the known bracket counts."""
    return float(sum(count for count in counts if count is not None))


DEFAULT_INCOME_BRACKETS = build_bracket_table(INCOME_BRACKET_EDGES, ACS_TOP_INCOME_UPPER)


__all__ = [
    "BracketTable",
    "DEFAULT_INCOME_BRACKETS",
    "IncomeBracket",
    "build_bracket_table",
    "combine_bin_counts",
    "known_bin_total",
    "read_bracket_table",
]
