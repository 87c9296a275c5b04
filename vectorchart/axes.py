from __future__ import annotations

from collections.abc import Sequence

from vectorchart.config import AxisLabelStyle, ChartConfig, GradientConfig
from vectorchart.primitives import Circle, GradientStopSpec, Line, LinearGradient, Primitive, Rect, Text
from vectorchart.scales import Scale


LAYER_BACKGROUND = "background"
LAYER_X_AXIS = "x_axis"
LAYER_Y_AXIS = "y_axis"
LAYER_HORIZONTAL_LINES = "horizontal_lines"
LAYER_VERTICAL_LINES = "vertical_lines"
LAYER_SHADOW = "shadow"
LAYER_X_TICKS = "x_ticks"
LAYER_X_LABELS = "x_labels"
LAYER_Y_TICKS = "y_ticks"
LAYER_Y_LABELS = "y_labels"
LAYER_LINE = "line"
LAYER_BARS = "bars"
LAYER_POINTS = "points"
LAYER_TOOLTIPS = "tooltips"

Y_LABEL_GAP = 13.0


def gradient(gradient_id: str, spec: GradientConfig, height: float) -> LinearGradient:
    stops = tuple(
        GradientStopSpec(offset=s.offset, color=s.stop_color, opacity=s.stop_opacity) for s in (spec.stop1, spec.stop2)
    )
    return LinearGradient(gradient_id=gradient_id, x1=0.0, y1=0.0, x2=0.0, y2=float(height), stops=stops)


def background(cfg: ChartConfig) -> list[Primitive]:
    return [
        Rect(
            layer=LAYER_BACKGROUND,
            x=0.0,
            y=0.0,
            width=float(cfg.width),
            height=float(cfg.height),
            rx=cfg.background_border_radius,
            fill=gradient("gradientback", cfg.background_gradient, cfg.height),
        )
    ]


def _axis_circle(cfg: ChartConfig, layer: str, cx: float, cy: float) -> Circle:
    ax = cfg.axis
    return Circle(
        layer=layer,
        cx=float(cx),
        cy=float(cy),
        r=ax.circle_radius,
        fill=ax.circle_fill,
        stroke=ax.stroke_color,
        stroke_width=ax.stroke_width,
        opacity=ax.stroke_opacity,
    )


def x_axis(cfg: ChartConfig) -> list[Primitive]:
    m = cfg.margin
    right = cfg.width - m
    return [
        _axis_circle(cfg, LAYER_X_AXIS, m, cfg.baseline),
        _axis_circle(cfg, LAYER_X_AXIS, right, cfg.baseline),
        Line(
            layer=LAYER_X_AXIS,
            x1=float(m),
            y1=float(cfg.baseline),
            x2=float(right),
            y2=float(cfg.baseline),
            stroke=cfg.axis.color,
            stroke_width=cfg.axis.stroke_width,
        ),
    ]


def y_axis(cfg: ChartConfig) -> list[Primitive]:
    m = cfg.margin
    return [
        _axis_circle(cfg, LAYER_Y_AXIS, m, m),
        Line(
            layer=LAYER_Y_AXIS,
            x1=float(m),
            y1=float(m),
            x2=float(m),
            y2=float(cfg.baseline),
            stroke=cfg.axis.color,
            stroke_width=cfg.axis.stroke_width,
        ),
    ]


def horizontal_lines(cfg: ChartConfig, scale: Scale) -> list[Primitive]:
    return [
        Line(
            layer=LAYER_HORIZONTAL_LINES,
            x1=float(cfg.margin),
            y1=y,
            x2=float(cfg.width - cfg.margin),
            y2=y,
            stroke=cfg.axis.color,
            stroke_width=cfg.axis.stroke_width,
            opacity=cfg.grid.horizontal_opacity,
        )
        for y in scale.y_tick_positions().tolist()
    ]


def vertical_lines(cfg: ChartConfig, scale: Scale) -> list[Primitive]:
    return [
        Line(
            layer=LAYER_VERTICAL_LINES,
            x1=x,
            y1=float(cfg.baseline),
            x2=x,
            y2=float(cfg.margin),
            stroke=cfg.axis.color,
            stroke_width=cfg.axis.stroke_width,
            opacity=cfg.grid.vertical_opacity,
        )
        for x in scale.x_positions().tolist()
    ]


def x_ticks(cfg: ChartConfig, scale: Scale) -> list[Primitive]:
    y = float(cfg.baseline)
    return [
        Line(
            layer=LAYER_X_TICKS,
            x1=x,
            y1=y,
            x2=x,
            y2=y + cfg.axis.tick_length,
            stroke=cfg.axis.color,
            stroke_width=cfg.axis.stroke_width,
        )
        for x in scale.x_positions().tolist()
    ]


def y_ticks(cfg: ChartConfig, scale: Scale) -> list[Primitive]:
    x = float(cfg.margin)
    return [
        Line(
            layer=LAYER_Y_TICKS,
            x1=x,
            y1=y,
            x2=x - cfg.axis.tick_length,
            y2=y,
            stroke=cfg.axis.color,
            stroke_width=cfg.axis.stroke_width,
        )
        for y in scale.y_tick_positions().tolist()
    ]


def _label(layer: str, st: AxisLabelStyle, x: float, y: float, text: str, index: int) -> Text:
    return Text(
        layer=layer,
        x=x,
        y=y,
        text=text,
        font_size=st.font_size,
        text_anchor=st.text_anchor,
        font_weight=st.font_weight,
        fill=st.fill,
        rotation=st.rotation,
        index=index,
    )


def x_labels(cfg: ChartConfig, scale: Scale, labels: Sequence[str]) -> list[Primitive]:
    st = cfg.x_labels
    y = cfg.baseline + cfg.axis.tick_length + st.font_size + st.y_offset
    return [
        _label(LAYER_X_LABELS, st, x - st.x_offset, float(y), text, i)
        for i, (x, text) in enumerate(zip(scale.x_positions().tolist(), labels))
    ]


def y_labels(cfg: ChartConfig, scale: Scale, labels: Sequence[str]) -> list[Primitive]:
    st = cfg.y_labels
    x = float(cfg.margin - Y_LABEL_GAP - st.x_offset)
    return [
        _label(LAYER_Y_LABELS, st, x, y + st.font_size / 3 + st.y_offset, text, i)
        for i, (y, text) in enumerate(zip(scale.y_tick_positions().tolist(), labels))
    ]


def frame_stages(cfg: ChartConfig, scale: Scale) -> list[Primitive]:
    """Background, axes and gridlines: everything drawn beneath the data."""

    has_data = scale.count > 0
    head: list[Primitive] = []
    if cfg.show_background:
        head.extend(background(cfg))
    if cfg.show_x_axis:
        head.extend(x_axis(cfg))
    if cfg.show_y_axis:
        head.extend(y_axis(cfg))
    if has_data and cfg.show_horizontal_lines:
        head.extend(horizontal_lines(cfg, scale))
    if has_data and cfg.show_vertical_lines:
        head.extend(vertical_lines(cfg, scale))
    return head


def ticks_and_labels(
    cfg: ChartConfig,
    scale: Scale,
    x_label_text: Sequence[str],
    y_label_text: Sequence[str],
) -> list[Primitive]:
    out: list[Primitive] = []
    if scale.count == 0:
        return out
    if cfg.show_x_ticks:
        out.extend(x_ticks(cfg, scale))
    if cfg.show_x_labels:
        out.extend(x_labels(cfg, scale, x_label_text))
    if cfg.show_y_ticks:
        out.extend(y_ticks(cfg, scale))
    if cfg.show_y_labels:
        out.extend(y_labels(cfg, scale, y_label_text))
    return out
