from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
import logging
import math
from typing import Any

import numpy as np

from vectorchart.fields import FieldAccessor, as_field_accessor, parse_y_values


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scale:
    """Axis ranges and gaps for one render.

    `pixel_gap_per_index` and `value_gap_per_index` describe the Y axis. The X gap uses
    `n - 1` slots for lines (points on slot boundaries) and `n` slots for bars (bars
    centered in their bucket).
    """

    value_max: float
    value_min: float
    pixel_gap_per_index: float
    value_gap_per_index: float
    x_gap_per_index: float
    count: int
    width: float
    height: float
    margin: float
    bucketed: bool = False

    @property
    def baseline(self) -> float:
        return self.height - self.margin

    def x_at(self, index: int) -> float:
        x = self.margin + self.x_gap_per_index * index
        if self.bucketed:
            x += self.x_gap_per_index / 2
        return float(x)

    def x_positions(self) -> np.ndarray:
        xs = self.margin + self.x_gap_per_index * np.arange(self.count, dtype=np.float64)
        if self.bucketed:
            xs = xs + self.x_gap_per_index / 2
        return xs

    def y_tick_at(self, index: int) -> float:
        return float(self.height - self.margin - self.pixel_gap_per_index * index)

    def y_tick_positions(self) -> np.ndarray:
        return self.height - self.margin - self.pixel_gap_per_index * np.arange(self.count, dtype=np.float64)

    def pixel_ratio(self) -> float | None:
        """Pixels per value unit, or None when the Y axis is flat or the ratio overflows."""
        if self.value_gap_per_index == 0 or self.pixel_gap_per_index == 0:
            return None
        ratio = self.pixel_gap_per_index / self.value_gap_per_index
        return ratio if math.isfinite(ratio) else None

    def value_to_pixel(self, value: float) -> float:
        ratio = self.pixel_ratio()
        if ratio is None:
            return float(self.baseline)
        y = (self.value_max - value) * ratio + self.margin
        return float(y) if math.isfinite(y) else float(self.baseline)

    def values_to_pixels(self, values: np.ndarray) -> np.ndarray:
        ratio = self.pixel_ratio()
        if ratio is None:
            return np.full(values.shape, self.baseline, dtype=np.float64)
        with np.errstate(over="ignore", invalid="ignore"):
            ys = (self.value_max - values) * ratio + self.margin
        return np.where(np.isfinite(ys), ys, self.baseline)


def compute_scale(
    dataset: Sequence[Any],
    fields: FieldAccessor | tuple[Any, Any],
    *,
    width: float,
    height: float,
    margin: float,
    bucketed: bool = False,
    strict: bool = False,
) -> Scale:
    values = parse_y_values(dataset, as_field_accessor(fields), strict=strict)
    return scale_from_values(values, width=width, height=height, margin=margin, bucketed=bucketed)


def scale_from_values(
    values: np.ndarray,
    *,
    width: float,
    height: float,
    margin: float,
    bucketed: bool = False,
) -> Scale:
    count = int(values.size)
    value_max = max(0.0, float(np.max(values))) if count else 0.0
    value_min = 0.0
    plot_w = width - margin * 2
    plot_h = height - margin * 2

    if count <= 1:
        LOGGER.debug("degenerate dataset (n=%d); using zero-gap scale", count)
        pixel_gap = 0.0
        value_gap = 0.0
        x_gap = plot_w / count if (bucketed and count == 1) else 0.0
    else:
        pixel_gap = plot_h / (count - 1)
        value_gap = (value_max - value_min) / (count - 1)
        x_gap = plot_w / count if bucketed else plot_w / (count - 1)

    return Scale(
        value_max=value_max,
        value_min=value_min,
        pixel_gap_per_index=pixel_gap,
        value_gap_per_index=value_gap,
        x_gap_per_index=x_gap,
        count=count,
        width=float(width),
        height=float(height),
        margin=float(margin),
        bucketed=bucketed,
    )


def format_tick(value: float, *, step: float | None = None) -> str:
    """Y-axis tick text with as many decimals as the tick step needs."""
    if not math.isfinite(value):
        return str(value)
    if step and math.isfinite(step) and abs(value) <= abs(step) * 1e-9:
        value = 0.0
    magnitude = abs(value)
    if magnitude and (magnitude >= 1e15 or magnitude < 1e-6):
        return repr(float(value))

    places = _step_places(step)
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_ticks_for_axis(ticks: np.ndarray) -> list[str]:
    if ticks.size < 2:
        return [format_tick(float(v)) for v in ticks]
    step = float(abs(ticks[1] - ticks[0]))
    return [format_tick(float(v), step=step) for v in ticks]


def _step_places(step: float | None) -> int:
    if not step or not math.isfinite(step) or step < 0:
        return 6
    exponent = Decimal(repr(step)).normalize().as_tuple().exponent
    return min(12, max(0, -int(exponent)))
