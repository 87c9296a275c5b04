from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
import re
from typing import Any, Callable, Literal, Mapping

Formatter = Callable[[str], str]
ChartKind = Literal["line", "bar"]

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_NAMED_PAINTS = frozenset({"transparent", "none"})


def validate_color(name: str, value: str) -> str:
    if not isinstance(value, str) or not (value in _NAMED_PAINTS or _HEX_COLOR.match(value)):
        raise ValueError(f"`{name}` must be a hex color (#RGB, #RRGGBB or #RRGGBBAA) or 'transparent'")
    return value


def _validate_opacity(name: str, value: float) -> None:
    if value < 0.0 or value > 1.0:
        raise ValueError(f"`{name}` must be in [0, 1]")


@dataclass(frozen=True)
class GradientStop:
    offset: float
    stop_color: str
    stop_opacity: float

    def __post_init__(self) -> None:
        validate_color("stop_color", self.stop_color)
        _validate_opacity("stop_opacity", self.stop_opacity)
        _validate_opacity("offset", self.offset)


@dataclass(frozen=True)
class GradientConfig:
    stop1: GradientStop
    stop2: GradientStop


def _background_gradient() -> GradientConfig:
    return GradientConfig(
        stop1=GradientStop(offset=0.0, stop_color="#6491d9", stop_opacity=0.3),
        stop2=GradientStop(offset=1.0, stop_color="#35578f", stop_opacity=0.8),
    )


def _shadow_gradient() -> GradientConfig:
    return GradientConfig(
        stop1=GradientStop(offset=0.0, stop_color="#6831ee", stop_opacity=0.8),
        stop2=GradientStop(offset=1.0, stop_color="#35578f", stop_opacity=0.2),
    )


@dataclass(frozen=True)
class AxisStyle:
    circle_radius: float = 5.0
    circle_fill: str = "#fff"
    stroke_color: str = "#fff"
    stroke_width: float = 2.0
    stroke_opacity: float = 0.8
    color: str = "#fff"
    tick_length: float = 10.0

    def __post_init__(self) -> None:
        validate_color("circle_fill", self.circle_fill)
        validate_color("stroke_color", self.stroke_color)
        validate_color("color", self.color)
        _validate_opacity("stroke_opacity", self.stroke_opacity)
        if self.circle_radius < 0 or self.stroke_width < 0 or self.tick_length < 0:
            raise ValueError("axis radius, stroke width and tick length must be >= 0")


@dataclass(frozen=True)
class GridStyle:
    horizontal_opacity: float = 0.3
    vertical_opacity: float = 0.3

    def __post_init__(self) -> None:
        _validate_opacity("horizontal_opacity", self.horizontal_opacity)
        _validate_opacity("vertical_opacity", self.vertical_opacity)


@dataclass(frozen=True)
class AxisLabelStyle:
    font_size: float = 12.0
    text_anchor: str = "middle"
    fill: str = "#fff"
    font_weight: str = "400"
    rotation: float = 0.0
    x_offset: float = 0.0
    y_offset: float = 0.0

    def __post_init__(self) -> None:
        validate_color("fill", self.fill)
        if self.font_size <= 0:
            raise ValueError("font_size must be > 0")
        if self.text_anchor not in {"start", "middle", "end"}:
            raise ValueError("text_anchor must be one of start/middle/end")


@dataclass(frozen=True)
class TooltipStyle:
    width: float = 60.0
    height: float = 20.0
    fill: str = "#fff"
    border_radius: float = 7.0
    font_size: float = 12.0
    font_weight: str = "bold"
    text_anchor: str = "middle"
    connector_length: float = 10.0
    connector_opacity: float = 0.6

    def __post_init__(self) -> None:
        validate_color("fill", self.fill)
        _validate_opacity("connector_opacity", self.connector_opacity)
        if self.width <= 0 or self.height <= 0:
            raise ValueError("tooltip width/height must be > 0")
        if self.connector_length < 0:
            raise ValueError("connector_length must be >= 0")


@dataclass(frozen=True)
class LineStyle:
    stroke: str = "#fff"
    stroke_width: float = 2.0
    use_curve: bool = True
    circle_radius: float = 5.0
    circle_stroke: str = "#fff"
    circle_stroke_width: float = 1.0
    circle_fill: str = "#0000ff"

    def __post_init__(self) -> None:
        validate_color("stroke", self.stroke)
        validate_color("circle_stroke", self.circle_stroke)
        validate_color("circle_fill", self.circle_fill)
        if self.circle_radius < 0:
            raise ValueError("circle_radius must be >= 0")


@dataclass(frozen=True)
class BarStyle:
    width: float = 20.0
    opacity: float = 0.8
    color: str = "#d69e9e"
    fill: str = "transparent"
    stroke_width: float = 2.0
    three_d: bool = True
    three_d_depth: float = 10.0
    three_d_line_thickness: float = 1.0

    def __post_init__(self) -> None:
        validate_color("color", self.color)
        validate_color("fill", self.fill)
        _validate_opacity("opacity", self.opacity)
        if self.width <= 0:
            raise ValueError("bar width must be > 0")
        if self.three_d_depth < 0:
            raise ValueError("three_d_depth must be >= 0")


@dataclass(frozen=True)
class ChartConfig:
    """Layout inputs shared by both chart engines.

    Styling fields are carried into the render model untouched; only `width`, `height`
    and `margin` take part in geometry. Formatters are applied at label time.
    """

    width: float
    height: float = 300.0
    margin: float = 20.0
    x_formatter: Formatter | None = None
    y_formatter: Formatter | None = None
    strict_values: bool = False
    background_color: str = "transparent"
    background_border_radius: float = 20.0
    background_gradient: GradientConfig = field(default_factory=_background_gradient)
    axis: AxisStyle = field(default_factory=AxisStyle)
    grid: GridStyle = field(default_factory=GridStyle)
    x_labels: AxisLabelStyle = field(default_factory=AxisLabelStyle)
    y_labels: AxisLabelStyle = field(default_factory=lambda: AxisLabelStyle(text_anchor="end"))
    # stage toggles
    show_background: bool = True
    show_x_axis: bool = True
    show_y_axis: bool = True
    show_horizontal_lines: bool = True
    show_vertical_lines: bool = True
    show_x_ticks: bool = True
    show_x_labels: bool = True
    show_y_ticks: bool = True
    show_y_labels: bool = True
    show_marks: bool = True

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        if self.margin < 0:
            raise ValueError("margin must be >= 0")
        if 2 * self.margin > self.width or 2 * self.margin > self.height:
            raise ValueError("margin must leave a non-negative plot area")
        validate_color("background_color", self.background_color)

    @property
    def baseline(self) -> float:
        return self.height - self.margin


@dataclass(frozen=True)
class LineChartConfig(ChartConfig):
    margin: float = 20.0
    line: LineStyle = field(default_factory=LineStyle)
    tooltip: TooltipStyle = field(default_factory=TooltipStyle)
    tooltip_formatter: Formatter | None = None
    shadow_gradient: GradientConfig = field(default_factory=_shadow_gradient)
    show_shadow: bool = True
    show_points: bool = True
    show_tooltips: bool = True


@dataclass(frozen=True)
class BarChartConfig(ChartConfig):
    margin: float = 50.0
    bar: BarStyle = field(default_factory=BarStyle)


_CONFIG_TYPES: dict[str, type[ChartConfig]] = {
    "line": LineChartConfig,
    "bar": BarChartConfig,
}


def resolve_chart_config(
    kind: ChartKind,
    width: float,
    overrides: Mapping[str, Any] | None = None,
) -> ChartConfig:
    """Merge user overrides onto the defaults for one chart kind.

    Nested style groups (`axis`, `tooltip`, `bar`, ...) accept either an instance of their
    dataclass or a mapping of field overrides. Unknown keys are rejected.
    """

    config_type = _CONFIG_TYPES.get(kind)
    if config_type is None:
        raise ValueError(f"unknown chart kind: {kind}")
    defaults = config_type(width=width)
    if not overrides:
        return defaults

    known = {f.name: f for f in dataclasses.fields(config_type)}
    resolved: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in known or key == "width":
            raise ValueError(f"Unknown chart option: {key}")
        current = getattr(defaults, key)
        if isinstance(value, Mapping) and dataclasses.is_dataclass(current):
            value = _merge_nested(key, current, value)
        resolved[key] = value
    return dataclasses.replace(defaults, **resolved)


def _merge_nested(group: str, current: Any, overrides: Mapping[str, Any]) -> Any:
    names = {f.name for f in dataclasses.fields(current)}
    merged: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in names:
            raise ValueError(f"Unknown option `{key}` in `{group}`")
        inner = getattr(current, key)
        if isinstance(value, Mapping) and dataclasses.is_dataclass(inner):
            value = _merge_nested(f"{group}.{key}", inner, value)
        merged[key] = value
    return dataclasses.replace(current, **merged)
