from __future__ import annotations

import math
import unittest

from scripts.python.helpers.acs.constants import (
    AREA_KM2,
    AREA_MI2,
    INCOME_MEAN,
    OWNER_OCCUPIED,
    OWNER_OCCUPIED_PCT,
    POPULATION,
    POVERTY_PCT,
)
from scripts.python.helpers.acs.metrics import empty_summary
from scripts.python.helpers.acs.report import (
    build_report_sections,
    render_report,
    summary_to_frame,
)
from scripts.python.helpers.common.cli import (
    format_count,
    format_currency,
    format_optional,
    format_percent,
)


class TestAcsSelectionReport(unittest.TestCase):
    def test_formatters_render_unknown_as_dashes(self) -> None:
        self.assertEqual(format_count(None), "--")
        self.assertEqual(format_currency(None), "--")
        self.assertEqual(format_percent(None), "--")
        self.assertEqual(format_optional(None), "--")

    def test_formatters_render_zero_as_zero(self) -> None:
        self.assertEqual(format_count(0.0), "0")
        self.assertEqual(format_percent(0.0), "0.0%")
        self.assertEqual(format_currency(1_234_567.4), "$1,234,567")
        self.assertEqual(format_optional(1234.56), "1,234.6")

    def test_sections_cover_every_group(self) -> None:
        sections = build_report_sections(empty_summary())
        self.assertEqual(
            [title for title, _ in sections],
            [
                "Core",
                "Education & internet",
                "Race & ethnicity",
                "Age",
                "Income",
                "Economy",
                "Housing",
                "Social",
            ],
        )
        income_labels = [label for label, _ in dict(sections)["Income"]]
        self.assertIn("P20", income_labels)
        self.assertIn("P80", income_labels)

    def test_report_shows_values_and_unknowns(self) -> None:
        summary = empty_summary()
        summary.update(
            {
                POPULATION: 12_345.0,
                AREA_MI2: 10.0,
                AREA_KM2: 25.9,
                POVERTY_PCT: 0.0,
                OWNER_OCCUPIED: 3_000.0,
                OWNER_OCCUPIED_PCT: 62.5,
                INCOME_MEAN: 71_250.0,
            }
        )
        text = render_report(build_report_sections(summary))
        lines = text.splitlines()
        self.assertTrue(any("Total population" in line and "12,345" in line for line in lines))
        self.assertTrue(any("Total area" in line and "10.0 mi²" in line for line in lines))
        self.assertTrue(any("Below poverty level" in line and "0.0%" in line for line in lines))
        self.assertTrue(any("Owner-occupied" in line and "3,000 (62.5%)" in line for line in lines))
        self.assertTrue(any("Mean household income" in line and "$71,250" in line for line in lines))
        self.assertTrue(any(line.strip().startswith("Density") and "--" in line for line in lines))

    def test_summary_frame_uses_nan_for_unknown(self) -> None:
        summary = {POPULATION: 10.0, POVERTY_PCT: None}
        frame = summary_to_frame(summary)
        self.assertEqual(list(frame.columns), ["metric", "value"])
        self.assertEqual(frame["value"].iloc[0], 10.0)
        self.assertTrue(math.isnan(frame["value"].iloc[1]))


if __name__ == "__main__":
    unittest.main()
