from __future__ import annotations

import unittest

from scripts.python.helpers.acs.bins import build_bracket_table
from scripts.python.helpers.acs.constants import (
    AGE_0_4,
    AREA_KM2,
    AREA_MI2,
    BROADBAND_PCT,
    COMPANION_WEIGHTS,
    COUNT_FIELDS,
    DENSITY_KM2,
    DENSITY_MI2,
    EDU_BA_OR_HIGHER_PCT,
    EDU_HS_OR_HIGHER_PCT,
    HOUSEHOLDS,
    INCOME_BRACKET_EDGES,
    INCOME_HOUSEHOLDS,
    INCOME_MEAN,
    LAND_AREA_M2,
    MEDIAN_GROSS_RENT,
    MEDIAN_HOUSEHOLD_INCOME,
    OCCUPIED_UNITS,
    OWNER_OCCUPIED,
    OWNER_OCCUPIED_PCT,
    PERCENT_DENOMINATORS,
    POPULATION,
    POPULATION_25_PLUS,
    POVERTY_BASE,
    POVERTY_PCT,
    RACE_TOTAL,
    RACE_WHITE,
    RENTER_OCCUPIED,
    SHARE_DEFINITIONS,
)
from scripts.python.helpers.acs.metrics import (
    empty_summary,
    quantile_key,
    quantile_label,
    summarize_selection,
    summary_keys,
)
from scripts.python.helpers.acs.records import (
    CountyRecord,
    IncomeDistribution,
    parse_county_record,
)


class TestAcsSelectionMetrics(unittest.TestCase):
    def setUp(self) -> None:
        self.brackets = build_bracket_table(INCOME_BRACKET_EDGES, open_upper=250_000.0)
        income_bins = (10.0,) * 16
        self.records = {
            "55025": CountyRecord(
                geoid="55025",
                name="Dane County, Wisconsin",
                counts={
                    POPULATION: 1_000.0,
                    HOUSEHOLDS: 400.0,
                    POPULATION_25_PLUS: 600.0,
                    POVERTY_BASE: 950.0,
                    RACE_TOTAL: 1_000.0,
                    RACE_WHITE: 800.0,
                    OCCUPIED_UNITS: 400.0,
                    OWNER_OCCUPIED: 240.0,
                    RENTER_OCCUPIED: 160.0,
                    LAND_AREA_M2: 2_000_000.0,
                },
                percents={
                    EDU_HS_OR_HIGHER_PCT: 95.1,
                    EDU_BA_OR_HIGHER_PCT: 52.5,
                    BROADBAND_PCT: 88.4,
                    POVERTY_PCT: 11.2,
                },
                companions={MEDIAN_HOUSEHOLD_INCOME: 84_000.0, MEDIAN_GROSS_RENT: 1_350.0},
                age_detail={"a0_4": 60.0},
                income=IncomeDistribution(bins=income_bins, total=160.0),
            ),
            "55027": CountyRecord(
                geoid="55027",
                counts={POPULATION: 0.0, LAND_AREA_M2: 5_000_000.0},
            ),
        }

    def test_empty_selection_is_unknown_everywhere(self) -> None:
        summary = summarize_selection(self.records, [])
        self.assertEqual(summary, empty_summary())
        self.assertTrue(all(value is None for value in summary.values()))
        self.assertIn("income_p20", summary)
        self.assertIn("income_p80", summary)

    def test_selection_of_unknown_ids_is_unknown_everywhere(self) -> None:
        summary = summarize_selection(self.records, ["99999"], brackets=self.brackets)
        self.assertTrue(all(value is None for value in summary.values()))
        self.assertEqual(list(summary), summary_keys())

    def test_single_county_round_trip(self) -> None:
        record = self.records["55025"]
        summary = summarize_selection(self.records, ["55025"], brackets=self.brackets)
        for key in COUNT_FIELDS:
            self.assertEqual(summary[key], record.count(key), msg=key)
        for key in PERCENT_DENOMINATORS:
            self.assertAlmostEqual(summary[key], record.percent(key), places=9, msg=key)
        for key in COMPANION_WEIGHTS:
            self.assertAlmostEqual(summary[key], record.companion(key), places=9, msg=key)
        checked_shares = []
        for key, (numerator_key, denominator_key) in SHARE_DEFINITIONS.items():
            numerator = record.count(numerator_key)
            denominator = record.count(denominator_key)
            if numerator is None or denominator is None or denominator <= 0.0:
                continue
            checked_shares.append(key)
            self.assertAlmostEqual(summary[key], numerator / denominator * 100.0, places=9, msg=key)
        self.assertIn(OWNER_OCCUPIED_PCT, checked_shares)
        self.assertEqual(summary[INCOME_HOUSEHOLDS], 160.0)

    def test_area_and_density(self) -> None:
        summary = summarize_selection(self.records, ["55025"], brackets=self.brackets)
        self.assertAlmostEqual(summary[AREA_KM2], 2.0, places=9)
        self.assertAlmostEqual(summary[AREA_MI2], 2.0 / 2.589988110336, places=9)
        self.assertAlmostEqual(summary[DENSITY_KM2], 500.0, places=9)
        self.assertAlmostEqual(summary[DENSITY_MI2], 500.0 * 2.589988110336, places=6)

    def test_zero_population_is_zero_density_not_unknown(self) -> None:
        summary = summarize_selection(self.records, ["55027"], brackets=self.brackets)
        self.assertEqual(summary[POPULATION], 0.0)
        self.assertEqual(summary[DENSITY_KM2], 0.0)
        self.assertIsNone(summary[f"{AGE_0_4}_pct"])

    def test_shares_are_percentages(self) -> None:
        summary = summarize_selection(self.records, ["55025"], brackets=self.brackets)
        self.assertAlmostEqual(summary[OWNER_OCCUPIED_PCT], 60.0, places=9)
        self.assertAlmostEqual(summary[f"{RACE_WHITE}_pct"], 80.0, places=9)
        self.assertAlmostEqual(summary[f"{AGE_0_4}_pct"], 6.0, places=9)

    def test_shares_are_clamped(self) -> None:
        records = {
            "01001": CountyRecord(
                geoid="01001",
                counts={OWNER_OCCUPIED: 120.0, OCCUPIED_UNITS: 100.0},
            )
        }
        summary = summarize_selection(records, ["01001"], brackets=self.brackets)
        self.assertEqual(summary[OWNER_OCCUPIED_PCT], 100.0)

    def test_income_estimates_follow_requested_quantiles(self) -> None:
        summary = summarize_selection(
            self.records,
            ["55025", "55027"],
            brackets=self.brackets,
            quantiles=(0.5,),
        )
        self.assertIn("income_p50", summary)
        self.assertNotIn("income_p20", summary)
        # 160 households spread evenly; the 80th falls at the top of [40k, 45k).
        self.assertAlmostEqual(summary["income_p50"], 45_000.0, places=6)
        expected_mean = sum(
            10.0 * (lower + upper) / 2.0 for lower, upper in self.brackets.bounds()
        ) / 160.0
        self.assertAlmostEqual(summary[INCOME_MEAN], expected_mean, places=6)

    def test_suppressed_income_brackets_leave_estimates_unknown(self) -> None:
        record = parse_county_record(
            "01001",
            {"pop": 1_000, "inc_total": 400, "inc_bins": [-666_666_666] * 16},
        )
        summary = summarize_selection({"01001": record}, ["01001"], brackets=self.brackets)
        self.assertEqual(summary[INCOME_HOUSEHOLDS], 400.0)
        self.assertIsNone(summary[INCOME_MEAN])
        self.assertIsNone(summary["income_p20"])
        self.assertIsNone(summary["income_p80"])

    def test_quantile_keys_and_labels(self) -> None:
        self.assertEqual(quantile_key(0.2), "income_p20")
        self.assertEqual(quantile_key(0.9), "income_p90")
        self.assertEqual(quantile_key(0.025), "income_p2_5")
        self.assertEqual(quantile_label(0.8), "P80")


if __name__ == "__main__":
    unittest.main()
