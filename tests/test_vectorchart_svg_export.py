from __future__ import annotations

from collections import Counter
from pathlib import Path
import tempfile
import unittest
import xml.etree.ElementTree as ET

from vectorchart import BarChartConfig, LineChartConfig, layout_bar_chart, layout_line_chart, render_svg
from vectorchart.config import AxisLabelStyle
from vectorchart.export import write_svg


SALES = [
    {"date": "2024-01-01", "sales": "10"},
    {"date": "2024-01-02", "sales": "20"},
    {"date": "2024-01-03", "sales": "5"},
]


def _local(tag: str) -> str:
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


class SvgExportTests(unittest.TestCase):
    def test_line_chart_markup(self) -> None:
        model = layout_line_chart(SALES, ("date", "sales"), LineChartConfig(width=900, height=300, margin=50))
        root = ET.fromstring(render_svg(model))
        self.assertEqual(_local(root.tag), "svg")
        self.assertEqual(root.attrib["viewBox"], "0 0 900 300")
        counts = Counter(_local(el.tag) for el in root.iter())
        self.assertEqual(counts["linearGradient"], 2)
        self.assertEqual(counts["stop"], 4)
        self.assertEqual(counts["path"], 2)
        self.assertEqual(counts["circle"], 3 + 3)
        texts = [el.text for el in root.iter() if _local(el.tag) == "text"]
        self.assertIn("2024-01-02", texts)
        self.assertIn("20", texts)

    def test_element_order_follows_render_model(self) -> None:
        model = layout_line_chart(SALES, ("date", "sales"), LineChartConfig(width=900, height=300, margin=50))
        root = ET.fromstring(render_svg(model))
        drawn = [el for el in root if _local(el.tag) != "defs"]
        self.assertEqual(len(drawn), len(model))
        self.assertEqual(_local(drawn[0].tag), "rect")
        self.assertEqual(drawn[0].attrib["fill"], "url(#gradientback)")
        paths = [el for el in drawn if _local(el.tag) == "path"]
        self.assertEqual(paths[0].attrib["fill"], "url(#fillshadow)")
        self.assertTrue(paths[1].attrib["d"].startswith("M 50,150 Q"))

    def test_bar_chart_without_background_has_no_defs(self) -> None:
        config = BarChartConfig(width=900, height=300, show_background=False)
        root = ET.fromstring(render_svg(layout_bar_chart(SALES, ("date", "sales"), config)))
        self.assertEqual([el for el in root if _local(el.tag) == "defs"], [])
        rects = [el for el in root if _local(el.tag) == "rect"]
        self.assertEqual(len(rects), 3)
        self.assertEqual(rects[0].attrib["fill"], "transparent")
        self.assertEqual(rects[0].attrib["stroke-width"], "2")

    def test_rotated_labels_get_transform(self) -> None:
        config = LineChartConfig(width=400, height=200, y_labels=AxisLabelStyle(text_anchor="end", rotation=-45.0))
        root = ET.fromstring(render_svg(layout_line_chart(SALES, ("date", "sales"), config)))
        transforms = [el.attrib.get("transform") for el in root if _local(el.tag) == "text"]
        self.assertTrue(any(t and t.startswith("rotate(-45 ") for t in transforms))

    def test_write_svg(self) -> None:
        model = layout_line_chart([], ("date", "sales"), LineChartConfig(width=300, height=200))
        with tempfile.TemporaryDirectory() as tmp:
            out = write_svg(model, Path(tmp) / "chart.svg")
            self.assertTrue(out.read_text(encoding="utf-8").startswith("<svg"))


if __name__ == "__main__":
    unittest.main()
