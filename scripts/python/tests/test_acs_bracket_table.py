from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

import numpy as np

from scripts.python.helpers.acs.bins import (
    BracketTable,
    IncomeBracket,
    build_bracket_table,
    combine_bin_counts,
    read_bracket_table,
)


class TestAcsBracketTable(unittest.TestCase):
    def _write_properties(self, text: str) -> Path:
        handle = tempfile.NamedTemporaryFile(
            "w", suffix=".properties", delete=False, encoding="utf-8"
        )
        with handle:
            handle.write(text)
        return Path(handle.name)

    def test_open_top_bracket_is_capped_for_arithmetic(self) -> None:
        table = build_bracket_table([0, 10_000, 50_000], open_upper=80_000)
        self.assertEqual(
            table.bounds(),
            [(0.0, 10_000.0), (10_000.0, 50_000.0), (50_000.0, 80_000.0)],
        )
        self.assertIsNone(table.brackets[-1].upper)
        self.assertTrue(np.allclose(table.midpoints(), [5_000.0, 30_000.0, 65_000.0]))
        self.assertEqual(table.top_upper, 80_000.0)
        self.assertEqual(table.brackets[-1].label, "$50,000+")

    def test_edges_must_ascend(self) -> None:
        with self.assertRaises(ValueError):
            build_bracket_table([0, 20_000, 10_000], open_upper=50_000)

    def test_cap_must_exceed_top_lower_bound(self) -> None:
        with self.assertRaises(ValueError):
            build_bracket_table([0, 200_000], open_upper=200_000)

    def test_gaps_between_brackets_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            BracketTable(
                brackets=(IncomeBracket(0.0, 10.0), IncomeBracket(12.0, None)),
                open_upper=20.0,
            )

    def test_reads_table_from_properties_file(self) -> None:
        path = self._write_properties(
            "# income brackets\n"
            "INCOME_BRACKET_EDGES = 0, 25000, 75000\n"
            "INCOME_TOP_BRACKET_UPPER = 150000\n"
        )
        try:
            table = read_bracket_table(path)
        finally:
            path.unlink(missing_ok=True)
        self.assertEqual(len(table), 3)
        self.assertEqual(table.bounds()[-1], (75_000.0, 150_000.0))

    def test_missing_cap_property_fails_fast(self) -> None:
        path = self._write_properties("INCOME_BRACKET_EDGES = 0, 25000\n")
        try:
            with self.assertRaises(ValueError):
                read_bracket_table(path)
        finally:
            path.unlink(missing_ok=True)

    def test_combined_counts_keep_unknown_brackets_unknown(self) -> None:
        combined = combine_bin_counts((1.0, None, None), (2.0, 3.0, None))
        self.assertEqual(combined, (3.0, 3.0, None))

    def test_combined_counts_require_same_width(self) -> None:
        with self.assertRaises(ValueError):
            combine_bin_counts((1.0, 2.0), (1.0,))


if __name__ == "__main__":
    unittest.main()
