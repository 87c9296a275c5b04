from __future__ import annotations

import dataclasses
import unittest

from vectorchart import BarChart, BarChartConfig, ChartDataError, bar_chart, layout_bar_chart
from vectorchart.fields import FieldAccessor
from vectorchart.primitives import Line, Rect


SALES = [
    {"date": "2024-01-01", "sales": "10"},
    {"date": "2024-01-02", "sales": "20"},
    {"date": "2024-01-03", "sales": "5"},
]
FIELDS = FieldAccessor.from_keys("date", "sales")
CONFIG = BarChartConfig(width=900, height=300)


class BarLayoutTests(unittest.TestCase):
    def test_default_margin_and_stage_order(self) -> None:
        self.assertEqual(CONFIG.margin, 50.0)
        model = layout_bar_chart(SALES, FIELDS, CONFIG)
        self.assertEqual(model.kind, "bar")
        self.assertEqual(
            model.layer_names(),
            (
                "background",
                "x_axis",
                "y_axis",
                "horizontal_lines",
                "vertical_lines",
                "x_ticks",
                "x_labels",
                "y_ticks",
                "y_labels",
                "bars",
            ),
        )

    def test_bars_with_three_d_edges(self) -> None:
        model = layout_bar_chart(SALES, FIELDS, CONFIG)
        bars = model.layer("bars")
        self.assertEqual(len(bars), 18)
        rects = [p for p in bars if isinstance(p, Rect)]
        edges = [p for p in bars if isinstance(p, Line)]
        self.assertEqual(len(rects), 3)
        self.assertEqual(len(edges), 15)
        self.assertEqual([r.height for r in rects], [100.0, 200.0, 50.0])
        self.assertEqual(rects[0].stroke, "#d69e9e")
        self.assertEqual(rects[0].opacity, 0.8)

    def test_out_of_range_value_does_not_escape(self) -> None:
        data = [{"date": "a", "sales": 10**400}, {"date": "b", "sales": "1e-320"}]
        with self.assertLogs("vectorchart.fields", level="WARNING"):
            model = layout_bar_chart(data, FIELDS, CONFIG)
        rects = [p for p in model.layer("bars") if isinstance(p, Rect)]
        self.assertEqual([r.height for r in rects], [0.0, 0.0])
        config = dataclasses.replace(CONFIG, strict_values=True)
        with self.assertRaises(ChartDataError):
            layout_bar_chart(data, FIELDS, config)

    def test_flat_bars(self) -> None:
        config = dataclasses.replace(CONFIG, bar=dataclasses.replace(CONFIG.bar, three_d=False))
        bars = layout_bar_chart(SALES, FIELDS, config).layer("bars")
        self.assertTrue(all(isinstance(p, Rect) for p in bars))
        self.assertEqual([p.index for p in bars], [0, 1, 2])

    def test_ticks_and_gridlines_sit_at_bucket_centers(self) -> None:
        model = layout_bar_chart(SALES, FIELDS, CONFIG)
        tick_x = [p.x1 for p in model.layer("x_ticks")]
        grid_x = [p.x1 for p in model.layer("vertical_lines")]
        label_x = [p.x for p in model.layer("x_labels")]
        rects = [p for p in model.layer("bars") if isinstance(p, Rect)]
        self.assertEqual(tick_x, grid_x)
        self.assertEqual(tick_x, label_x)
        for x, rect in zip(tick_x, rects):
            self.assertAlmostEqual(rect.x + rect.width / 2, x)
        self.assertTrue(all(50.0 < x < 850.0 for x in tick_x))

    def test_y_axis_matches_line_engine(self) -> None:
        model = layout_bar_chart(SALES, FIELDS, CONFIG)
        self.assertEqual([p.text for p in model.layer("y_labels")], ["0", "10", "20"])
        self.assertEqual([p.y1 for p in model.layer("horizontal_lines")], [250.0, 150.0, 50.0])

    def test_empty_dataset_has_only_frame(self) -> None:
        model = layout_bar_chart([], FIELDS, CONFIG)
        self.assertEqual(model.layer_names(), ("background", "x_axis", "y_axis"))

    def test_single_bar_is_centered(self) -> None:
        model = layout_bar_chart(SALES[1:2], FIELDS, CONFIG)
        (rect,) = [p for p in model.layer("bars") if isinstance(p, Rect)]
        self.assertEqual(rect.x + rect.width / 2, 450.0)
        self.assertEqual(rect.height, 0.0)

    def test_hidden_marks(self) -> None:
        config = dataclasses.replace(CONFIG, show_marks=False)
        self.assertNotIn("bars", layout_bar_chart(SALES, FIELDS, config).layer_names())


class BarChartEngineTests(unittest.TestCase):
    def test_engine_caches_labels(self) -> None:
        chart = BarChart(FIELDS, CONFIG)
        chart.layout(SALES)
        chart.layout(SALES)
        self.assertEqual(chart.label_cache.builds, 1)

    def test_bar_chart_factory_applies_formatters(self) -> None:
        chart = bar_chart(
            "date",
            "sales",
            width=900,
            height=300,
            x_formatter=lambda s: s[5:],
            y_formatter=lambda s: f"{s}k",
        )
        model = chart.layout(SALES)
        self.assertEqual([p.text for p in model.layer("x_labels")], ["01-01", "01-02", "01-03"])
        self.assertEqual([p.text for p in model.layer("y_labels")], ["0k", "10k", "20k"])


if __name__ == "__main__":
    unittest.main()
