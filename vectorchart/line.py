from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any, Callable

from vectorchart.axes import (
    LAYER_LINE,
    LAYER_POINTS,
    LAYER_SHADOW,
    LAYER_TOOLTIPS,
    frame_stages,
    gradient,
    ticks_and_labels,
)
from vectorchart.cache import YAxisLabelCache
from vectorchart.config import LineChartConfig
from vectorchart.fields import FieldAccessor, as_field_accessor, parse_y_values, y_label_source
from vectorchart.interaction import hit_test
from vectorchart.path import Point, close_to_baseline, path_from_points, point_positions
from vectorchart.primitives import Circle, Line, Path, Primitive, Rect, RenderModel, Text
from vectorchart.scales import Scale, scale_from_values
from vectorchart.ticks import build_x_axis_labels, build_y_axis_labels
from vectorchart.tooltip import build_tooltip


LOGGER = logging.getLogger(__name__)


def layout_line_chart(
    dataset: Sequence[Any],
    fields: FieldAccessor | tuple[Any, Any],
    config: LineChartConfig,
    *,
    label_cache: YAxisLabelCache | None = None,
) -> RenderModel:
    accessor = as_field_accessor(fields)
    values = parse_y_values(dataset, accessor, strict=config.strict_values)
    scale = scale_from_values(values, width=config.width, height=config.height, margin=config.margin)

    primitives: list[Primitive] = frame_stages(config, scale)
    points = point_positions(values, scale)
    line_path = path_from_points(points, config.line.use_curve)

    if points and config.show_shadow:
        primitives.append(
            Path(
                layer=LAYER_SHADOW,
                path=close_to_baseline(line_path, points, scale.baseline),
                fill=gradient("fillshadow", config.shadow_gradient, config.height),
                stroke_width=0.0,
            )
        )

    x_text = build_x_axis_labels(dataset, accessor, config.x_formatter)
    y_text = _y_axis_labels(dataset, accessor, scale, config, label_cache)
    primitives.extend(ticks_and_labels(config, scale, x_text, y_text))

    if points and config.show_marks:
        primitives.append(
            Path(
                layer=LAYER_LINE,
                path=line_path,
                fill="transparent",
                stroke=config.line.stroke,
                stroke_width=config.line.stroke_width,
            )
        )

    if points and (config.show_points or config.show_tooltips):
        primitives.extend(_point_overlays(dataset, accessor, points, config))

    LOGGER.debug("line chart layout: %d points, %d primitives", scale.count, len(primitives))
    return RenderModel(kind="line", width=config.width, height=config.height, primitives=tuple(primitives))


def _y_axis_labels(
    dataset: Sequence[Any],
    accessor: FieldAccessor,
    scale: Scale,
    config: LineChartConfig,
    label_cache: YAxisLabelCache | None,
) -> tuple[str, ...]:
    def build() -> list[str]:
        return build_y_axis_labels(dataset, scale, config.y_formatter)

    if label_cache is None:
        return tuple(build())
    return label_cache.get_or_build(dataset, (accessor, config.y_formatter), build)


def _point_overlays(
    dataset: Sequence[Any],
    accessor: FieldAccessor,
    points: Sequence[Point],
    config: LineChartConfig,
) -> list[Primitive]:
    ls = config.line
    tip = config.tooltip
    out: list[Primitive] = []
    for i, (item, (x, y)) in enumerate(zip(dataset, points)):
        if config.show_points:
            out.append(
                Circle(
                    layer=LAYER_POINTS,
                    cx=x,
                    cy=y,
                    r=ls.circle_radius,
                    fill=ls.circle_fill,
                    stroke=ls.circle_stroke,
                    stroke_width=ls.circle_stroke_width,
                    index=i,
                )
            )
        if not config.show_tooltips:
            continue
        raw = y_label_source(item, accessor)
        text = config.tooltip_formatter(raw) if config.tooltip_formatter is not None else raw
        geom = build_tooltip(x, y, text, marker_radius=ls.circle_radius, style=tip)
        out.append(
            Line.from_segment(
                LAYER_TOOLTIPS,
                geom.connector,
                stroke=ls.circle_stroke,
                stroke_width=ls.circle_stroke_width,
                opacity=tip.connector_opacity,
                index=i,
            )
        )
        out.append(
            Rect(
                layer=LAYER_TOOLTIPS,
                x=geom.box_x,
                y=geom.box_y,
                width=geom.box_width,
                height=geom.box_height,
                rx=geom.box_radius,
                fill=tip.fill,
                index=i,
            )
        )
        out.append(
            Text(
                layer=LAYER_TOOLTIPS,
                x=geom.text_x,
                y=geom.text_y,
                text=geom.text,
                font_size=tip.font_size,
                text_anchor=tip.text_anchor,
                font_weight=tip.font_weight,
                index=i,
            )
        )
    return out


class LineChart:
    """Line chart engine bound to one field accessor and configuration.

    `label_cache` memoizes the Y-axis labels per dataset identity; everything else is
    recomputed on each `layout` call.
    """

    def __init__(
        self,
        fields: FieldAccessor | tuple[Any, Any],
        config: LineChartConfig,
        *,
        on_press_item: Callable[[Any], None] | None = None,
    ) -> None:
        self.fields = as_field_accessor(fields)
        self.config = config
        self.on_press_item = on_press_item
        self.label_cache = YAxisLabelCache()

    def layout(self, dataset: Sequence[Any]) -> RenderModel:
        return layout_line_chart(dataset, self.fields, self.config, label_cache=self.label_cache)

    def press(self, dataset: Sequence[Any], index: int) -> Any:
        item = dataset[index]
        if self.on_press_item is not None:
            self.on_press_item(item)
        return item

    def press_at(self, dataset: Sequence[Any], model: RenderModel, x: float, y: float) -> Any | None:
        index = hit_test(model, x, y)
        if index is None:
            return None
        return self.press(dataset, index)
