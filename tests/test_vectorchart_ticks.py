from __future__ import annotations

import unittest

from vectorchart.fields import FieldAccessor
from vectorchart.scales import compute_scale
from vectorchart.ticks import build_x_axis_labels, build_y_axis_labels, build_y_axis_values


SALES = [
    {"date": "2024-01-01", "sales": "10"},
    {"date": "2024-01-02", "sales": "20"},
    {"date": "2024-01-03", "sales": "5"},
]
FIELDS = FieldAccessor.from_keys("date", "sales")


class YAxisLabelTests(unittest.TestCase):
    def test_sales_scenario_labels(self) -> None:
        scale = compute_scale(SALES, FIELDS, width=900, height=300, margin=50)
        self.assertEqual(build_y_axis_labels(SALES, scale), ["0", "10", "20"])

    def test_formatter_applies_to_each_label(self) -> None:
        scale = compute_scale(SALES, FIELDS, width=900, height=300, margin=50)
        labels = build_y_axis_labels(SALES, scale, lambda s: f"${s}")
        self.assertEqual(labels, ["$0", "$10", "$20"])

    def test_label_count_matches_dataset_and_values_ascend(self) -> None:
        data = [{"d": i, "v": v} for i, v in enumerate([3, 9, 1, 4, 7, 2, 8])]
        scale = compute_scale(data, ("d", "v"), width=600, height=400, margin=20)
        labels = build_y_axis_labels(data, scale)
        self.assertEqual(len(labels), len(data))
        parsed = [float(s) for s in labels]
        self.assertEqual(parsed, sorted(parsed))
        self.assertEqual(parsed[0], 0.0)
        self.assertAlmostEqual(parsed[-1], 9.0)

    def test_labels_round_trip_through_float(self) -> None:
        data = [{"d": i, "v": v} for i, v in enumerate([1, 20, 3, 4])]
        scale = compute_scale(data, ("d", "v"), width=600, height=400, margin=20)
        ticks = build_y_axis_values(len(data), scale.value_max)
        labels = build_y_axis_labels(data, scale)
        for tick, label in zip(ticks.tolist(), labels):
            self.assertAlmostEqual(float(label), tick, places=9)

    def test_degenerate_datasets(self) -> None:
        empty = compute_scale([], FIELDS, width=900, height=300, margin=50)
        self.assertEqual(build_y_axis_labels([], empty), [])
        single = compute_scale(SALES[:1], FIELDS, width=900, height=300, margin=50)
        self.assertEqual(build_y_axis_labels(SALES[:1], single), ["0"])


class XAxisLabelTests(unittest.TestCase):
    def test_labels_follow_dataset_order(self) -> None:
        data = [{"d": "c", "v": 1}, {"d": "a", "v": 2}, {"d": "b", "v": 3}]
        self.assertEqual(build_x_axis_labels(data, ("d", "v")), ["c", "a", "b"])

    def test_formatter_receives_raw_string(self) -> None:
        seen: list[str] = []

        def fmt(value: str) -> str:
            seen.append(value)
            return value[5:].replace("-", "/")

        self.assertEqual(build_x_axis_labels(SALES, FIELDS, fmt), ["01/01", "01/02", "01/03"])
        self.assertEqual(seen, ["2024-01-01", "2024-01-02", "2024-01-03"])

    def test_non_string_and_missing_values(self) -> None:
        data = [{"d": 7, "v": 1}, {"v": 2}]
        self.assertEqual(build_x_axis_labels(data, ("d", "v")), ["7", ""])

    def test_attribute_access(self) -> None:
        class Row:
            def __init__(self, day: str, total: float) -> None:
                self.day = day
                self.total = total

        rows = [Row("mon", 1.0), Row("tue", 2.0)]
        fields = FieldAccessor.from_keys("day", "total", attribute=True)
        self.assertEqual(build_x_axis_labels(rows, fields), ["mon", "tue"])


if __name__ == "__main__":
    unittest.main()
