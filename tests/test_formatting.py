from __future__ import annotations

import importlib.util
import unittest

import numpy as np

from pylut.config import TableConfig
from pylut.diagnostics import diagnostics_from_table
from pylut.formatting import format_table, table_to_frame
from pylut.interpolation import InterpolationTable
from pylut.tables import load_ph_buffer_table


def _has_pandas() -> bool:
    return importlib.util.find_spec("pandas") is not None


class TestFormatTable(unittest.TestCase):
    def test_ph_table_dump(self) -> None:
        text = format_table(load_ph_buffer_table())
        lines = text.splitlines(keepends=True)
        self.assertEqual(len(lines), 12)
        self.assertEqual(lines[0], "0.00\t1.67\t4.01\t6.98\t7.12\t9.46\t10.32\t13.47\t\n")
        self.assertEqual(lines[-1], "55.00\t1.72\t4.08\t6.83\t6.97\t8.99\t9.81\t11.61\t\n")

    def test_overrides(self) -> None:
        table = InterpolationTable([[1.0, 2.5]], [1.0, 2.0], [25.0], 2, 1)
        self.assertEqual(format_table(table, precision=0, separator=","), "25,1,2,\n")
        self.assertEqual(format_table(table, precision=3), "25.000\t1.000\t2.500\t\n")

    def test_defaults_from_config(self) -> None:
        cfg = TableConfig(precision=1, separator=" | ")
        table = InterpolationTable([[1.0, 2.5]], [1.0, 2.0], [25.0], 2, 1, config=cfg)
        self.assertEqual(format_table(table), "25.0 | 1.0 | 2.5 | \n")

    def test_negative_precision(self) -> None:
        with self.assertRaises(ValueError):
            format_table(load_ph_buffer_table(), precision=-1)


@unittest.skipUnless(_has_pandas(), "pandas is not installed")
class TestTableToFrame(unittest.TestCase):
    def test_frame_layout(self) -> None:
        table = load_ph_buffer_table()
        frame = table_to_frame(table)
        self.assertEqual(frame.shape, (12, 7))
        np.testing.assert_array_equal(frame.index.to_numpy(), table.secondary_axis)
        np.testing.assert_array_equal(frame.columns.to_numpy(), table.primary_axis)
        self.assertEqual(float(frame.loc[35.0, 9.18]), 9.10)

    def test_frame_does_not_alias_table(self) -> None:
        table = load_ph_buffer_table()
        frame = table_to_frame(table)
        frame.iloc[0, 0] = -1.0
        self.assertEqual(float(table.grid[0, 0]), 1.67)


class TestDiagnostics(unittest.TestCase):
    def test_ph_table_passes(self) -> None:
        diag = diagnostics_from_table(load_ph_buffer_table())
        self.assertEqual(diag["rows"], 12)
        self.assertEqual(diag["cols"], 7)
        self.assertEqual(diag["secondary_min"], 0.0)
        self.assertEqual(diag["secondary_max"], 55.0)
        self.assertEqual(diag["primary_min"], 1.68)
        self.assertEqual(diag["grid_max"], 13.47)
        self.assertTrue(diag["all_checks_pass"])

    def test_flags_non_increasing_row(self) -> None:
        table = InterpolationTable([[1.0, 3.0, 2.0], [1.0, 2.0, 3.0]], [1.0, 2.0, 3.0], [0.0, 10.0], 3, 2)
        diag = diagnostics_from_table(table)
        self.assertFalse(diag["checks"]["rows_increasing"])
        self.assertTrue(diag["checks"]["primary_increasing"])
        self.assertFalse(diag["all_checks_pass"])

    def test_flags_lenient_table(self) -> None:
        cfg = TableConfig(validate_axes=False, validate_finite=False)
        table = InterpolationTable([[1.0, float("nan")], [1.0, 2.0]], [2.0, 1.0], [0.0, 10.0], 2, 2, config=cfg)
        checks = diagnostics_from_table(table)["checks"]
        self.assertFalse(checks["primary_increasing"])
        self.assertTrue(checks["secondary_increasing"])
        self.assertFalse(checks["all_finite"])


if __name__ == "__main__":
    unittest.main()
