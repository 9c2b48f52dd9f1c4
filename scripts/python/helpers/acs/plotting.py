"""
Plotting helpers for combined household income distributions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

import matplotlib.pyplot as plt
import numpy as np

from scripts.python.helpers.acs.bins import BracketTable
from scripts.python.helpers.acs.constants import INCOME_MEAN
from scripts.python.helpers.acs.metrics import quantile_key, quantile_label

MARKER_COLORS = ("r", "g", "m", "c", "y", "k")


def plot_income_histogram(
    brackets: BracketTable,
    counts: Sequence[float | None],
    summary: Mapping[str, float | None],
    quantiles: Sequence[float],
    title: str = "Household income distribution",
    bar_color: str = "b",
    alpha: float = 0.5,
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """Bar households per $1k of bracket width, marking the mean and quantiles.

    The open top bracket is drawn up to the table's capped upper bound. Ticks sit
    at bracket midpoints and carry the bracket labels.
    """
    axes = ax or plt.gca()
    lower = brackets.lower_edges()
    widths = brackets.upper_edges() - lower
    heights = np.asarray([0.0 if count is None else count for count in counts], dtype=float)
    axes.bar(
        lower,
        height=heights / (widths / 1_000.0),
        width=widths,
        align="edge",
        alpha=alpha,
        color=bar_color,
        label="Households",
    )

    markers = [("Mean", summary.get(INCOME_MEAN))]
    markers.extend(
        (quantile_label(fraction), summary.get(quantile_key(fraction)))
        for fraction in quantiles
    )
    for index, (label, value) in enumerate(markers):
        if value is None:
            continue
        axes.axvline(
            value,
            color=MARKER_COLORS[index % len(MARKER_COLORS)],
            linestyle="--",
            label=f"{label}: ${value:,.0f}",
        )

    axes.set_xticks(brackets.midpoints())
    axes.set_xticklabels(
        [bracket.label for bracket in brackets.brackets],
        rotation=90,
        fontsize=7,
    )
    axes.set_xlabel("Household income bracket")
    axes.set_ylabel("Households per $1k")
    axes.set_title(title)
    axes.legend()
    return axes


def save_income_histogram(
    output_path: Path | str,
    brackets: BracketTable,
    counts: Sequence[float | None],
    summary: Mapping[str, float | None],
    quantiles: Sequence[float],
    title: str = "Household income distribution",
) -> Path:
    """Render the income histogram to an image file and close the figure."""
    figure, axes = plt.subplots(figsize=(10, 5))
    try:
        plot_income_histogram(brackets, counts, summary, quantiles, title=title, ax=axes)
        figure.tight_layout()
        target = Path(output_path)
        figure.savefig(target)
    finally:
        plt.close(figure)
    return target
