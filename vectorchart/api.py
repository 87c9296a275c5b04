from __future__ import annotations

from typing import Any, Callable

from vectorchart.bar import BarChart
from vectorchart.config import BarChartConfig, LineChartConfig, resolve_chart_config
from vectorchart.fields import FieldAccessor
from vectorchart.line import LineChart


def line_chart(
    x_key: Any,
    y_key: Any,
    *,
    width: float,
    attribute: bool = False,
    on_press_item: Callable[[Any], None] | None = None,
    **overrides: Any,
) -> LineChart:
    config = resolve_chart_config("line", width, overrides)
    assert isinstance(config, LineChartConfig)
    fields = FieldAccessor.from_keys(x_key, y_key, attribute=attribute)
    return LineChart(fields, config, on_press_item=on_press_item)


def bar_chart(
    x_key: Any,
    y_key: Any,
    *,
    width: float,
    attribute: bool = False,
    **overrides: Any,
) -> BarChart:
    config = resolve_chart_config("bar", width, overrides)
    assert isinstance(config, BarChartConfig)
    fields = FieldAccessor.from_keys(x_key, y_key, attribute=attribute)
    return BarChart(fields, config)
