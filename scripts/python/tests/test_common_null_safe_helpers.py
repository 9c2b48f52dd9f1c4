from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from scripts.python.helpers.common.io_properties import (
    parse_float_list,
    read_properties,
    require_property,
)
from scripts.python.helpers.common.math_stats import (
    add_known,
    clamp_percent,
    safe_ratio,
    sum_all_known,
)
from scripts.python.helpers.common.paths import require_input_files, resolve_output_path


class TestCommonNullSafeHelpers(unittest.TestCase):
    def test_add_known_treats_unknown_as_identity(self) -> None:
        self.assertIsNone(add_known(None, None))
        self.assertEqual(add_known(None, 0.0), 0.0)
        self.assertEqual(add_known(2.0, None), 2.0)
        self.assertEqual(add_known(2.0, 3.0), 5.0)

    def test_sum_all_known_requires_every_value(self) -> None:
        self.assertEqual(sum_all_known([1.0, 2.0, 0.0]), 3.0)
        self.assertIsNone(sum_all_known([1.0, None]))
        self.assertEqual(sum_all_known([]), 0.0)

    def test_safe_ratio(self) -> None:
        self.assertEqual(safe_ratio(1.0, 4.0), 0.25)
        self.assertEqual(safe_ratio(0.0, 4.0), 0.0)
        self.assertIsNone(safe_ratio(1.0, 0.0))
        self.assertIsNone(safe_ratio(None, 4.0))
        self.assertIsNone(safe_ratio(1.0, None))

    def test_clamp_percent(self) -> None:
        self.assertEqual(clamp_percent(104.2), 100.0)
        self.assertEqual(clamp_percent(-0.5), 0.0)
        self.assertEqual(clamp_percent(42.0), 42.0)
        self.assertIsNone(clamp_percent(None))

    def test_properties_and_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            path = root / "brackets.properties"
            path.write_text("! comment\nA = 1, 2,3\nEMPTY =\nno separator\n", encoding="utf-8")
            props = read_properties(path)
            self.assertEqual(props, {"A": "1, 2,3", "EMPTY": ""})
            self.assertEqual(parse_float_list(props["A"]), [1.0, 2.0, 3.0])
            with self.assertRaises(ValueError):
                require_property(props, "EMPTY", path)
            with self.assertRaises(ValueError):
                parse_float_list("1,x")

            output = resolve_output_path("out.csv", str(root / "nested"))
            self.assertTrue(output.parent.is_dir())
            require_input_files(path, None)
            with self.assertRaises(SystemExit):
                require_input_files(root / "absent.txt")


if __name__ == "__main__":
    unittest.main()
