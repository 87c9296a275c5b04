from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from vectorchart.config import Formatter
from vectorchart.fields import FieldAccessor, as_field_accessor, x_label_source
from vectorchart.scales import Scale, format_ticks_for_axis


def build_y_axis_values(count: int, value_max: float) -> np.ndarray:
    """Synthetic Y ticks `0, gap, ..., value_max` with `gap = value_max / (count - 1)`.

    Ticks are spaced by count, not by data distribution. A single-point dataset gets the
    baseline tick only.
    """

    if count <= 0:
        return np.zeros(0, dtype=np.float64)
    if count == 1:
        return np.zeros(1, dtype=np.float64)
    gap = value_max / (count - 1)
    return np.sort(np.arange(count, dtype=np.float64) * gap)


def build_y_axis_labels(
    dataset: Sequence[Any],
    scale: Scale,
    y_formatter: Formatter | None = None,
) -> list[str]:
    labels = format_ticks_for_axis(build_y_axis_values(len(dataset), scale.value_max))
    if y_formatter is not None:
        labels = [y_formatter(label) for label in labels]
    return labels


def build_x_axis_labels(
    dataset: Sequence[Any],
    fields: FieldAccessor | tuple[Any, Any],
    x_formatter: Formatter | None = None,
) -> list[str]:
    accessor = as_field_accessor(fields)
    raw = [x_label_source(item, accessor) for item in dataset]
    if x_formatter is None:
        return raw
    return [x_formatter(value) for value in raw]


def x_tick_positions(scale: Scale) -> np.ndarray:
    return scale.x_positions()


def y_tick_positions(scale: Scale) -> np.ndarray:
    return scale.y_tick_positions()
