from vectorchart.api import bar_chart, line_chart
from vectorchart.bar import BarChart, layout_bar_chart
from vectorchart.cache import YAxisLabelCache
from vectorchart.config import BarChartConfig, ChartConfig, LineChartConfig, resolve_chart_config
from vectorchart.errors import ChartDataError
from vectorchart.export import render_svg
from vectorchart.fields import FieldAccessor
from vectorchart.line import LineChart, layout_line_chart
from vectorchart.primitives import RenderModel
from vectorchart.scales import Scale, compute_scale

__all__ = [
    "BarChart",
    "BarChartConfig",
    "ChartConfig",
    "ChartDataError",
    "FieldAccessor",
    "LineChart",
    "LineChartConfig",
    "RenderModel",
    "Scale",
    "YAxisLabelCache",
    "bar_chart",
    "compute_scale",
    "layout_bar_chart",
    "layout_line_chart",
    "line_chart",
    "render_svg",
    "resolve_chart_config",
]
