from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from vectorchart.axes import LAYER_BARS, frame_stages, ticks_and_labels
from vectorchart.cache import YAxisLabelCache
from vectorchart.config import BarChartConfig
from vectorchart.fields import FieldAccessor, as_field_accessor, parse_y_values
from vectorchart.marks import BarGeometry, bars_from_values
from vectorchart.primitives import Line, Primitive, Rect, RenderModel
from vectorchart.scales import scale_from_values
from vectorchart.ticks import build_x_axis_labels, build_y_axis_labels


LOGGER = logging.getLogger(__name__)


def layout_bar_chart(
    dataset: Sequence[Any],
    fields: FieldAccessor | tuple[Any, Any],
    config: BarChartConfig,
    *,
    label_cache: YAxisLabelCache | None = None,
) -> RenderModel:
    accessor = as_field_accessor(fields)
    values = parse_y_values(dataset, accessor, strict=config.strict_values)
    scale = scale_from_values(
        values,
        width=config.width,
        height=config.height,
        margin=config.margin,
        bucketed=True,
    )

    primitives: list[Primitive] = frame_stages(config, scale)

    x_text = build_x_axis_labels(dataset, accessor, config.x_formatter)
    if label_cache is None:
        y_text = build_y_axis_labels(dataset, scale, config.y_formatter)
    else:
        y_text = label_cache.get_or_build(
            dataset,
            (accessor, config.y_formatter),
            lambda: build_y_axis_labels(dataset, scale, config.y_formatter),
        )
    primitives.extend(ticks_and_labels(config, scale, x_text, y_text))

    if scale.count and config.show_marks:
        bs = config.bar
        bars = bars_from_values(
            values,
            scale,
            bar_width=bs.width,
            three_d=bs.three_d,
            depth=bs.three_d_depth,
        )
        for bar in bars:
            primitives.extend(_bar_primitives(bar, config))

    LOGGER.debug("bar chart layout: %d bars, %d primitives", scale.count, len(primitives))
    return RenderModel(kind="bar", width=config.width, height=config.height, primitives=tuple(primitives))


def _bar_primitives(bar: BarGeometry, config: BarChartConfig) -> list[Primitive]:
    bs = config.bar
    out: list[Primitive] = [
        Line.from_segment(
            LAYER_BARS,
            edge,
            stroke=bs.color,
            stroke_width=bs.three_d_line_thickness,
            index=bar.index,
        )
        for edge in bar.edges
    ]
    out.append(
        Rect(
            layer=LAYER_BARS,
            x=bar.x,
            y=bar.y,
            width=bar.width,
            height=bar.rect_height,
            fill=bs.fill,
            stroke=bs.color,
            stroke_width=bs.stroke_width,
            opacity=bs.opacity,
            index=bar.index,
        )
    )
    return out


class BarChart:
    """Bar chart engine bound to one field accessor and configuration."""

    def __init__(self, fields: FieldAccessor | tuple[Any, Any], config: BarChartConfig) -> None:
        self.fields = as_field_accessor(fields)
        self.config = config
        self.label_cache = YAxisLabelCache()

    def layout(self, dataset: Sequence[Any]) -> RenderModel:
        return layout_bar_chart(dataset, self.fields, self.config, label_cache=self.label_cache)
