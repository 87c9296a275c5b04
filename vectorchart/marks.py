from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from vectorchart.fields import FieldAccessor, as_field_accessor, parse_y_values
from vectorchart.primitives import Segment
from vectorchart.scales import Scale


@dataclass(frozen=True)
class BarGeometry:
    index: int
    value: float
    center_x: float
    height: float
    x: float
    y: float
    width: float
    rect_height: float
    edges: tuple[Segment, ...] = ()


def bars_from_values(
    values: np.ndarray,
    scale: Scale,
    *,
    bar_width: float,
    three_d: bool = False,
    depth: float = 10.0,
) -> list[BarGeometry]:
    baseline = scale.baseline
    centers = scale.x_positions()
    tops = scale.values_to_pixels(values)
    bars: list[BarGeometry] = []
    for i, (value, cx, top) in enumerate(zip(values.tolist(), centers.tolist(), tops.tolist())):
        height = baseline - top
        # Values below zero hang under the baseline.
        rect_y = baseline - height if height >= 0 else baseline
        edges = three_d_edges(cx, baseline, height, bar_width=bar_width, depth=depth) if three_d else ()
        bars.append(
            BarGeometry(
                index=i,
                value=float(value),
                center_x=float(cx),
                height=float(height),
                x=float(cx - bar_width / 2),
                y=float(rect_y),
                width=float(bar_width),
                rect_height=float(abs(height)),
                edges=edges,
            )
        )
    return bars


def three_d_edges(center_x: float, baseline: float, height: float, *, bar_width: float, depth: float) -> tuple[Segment, ...]:
    """Wireframe edges that extrude the bar face towards the upper left by `depth`."""

    left = center_x - bar_width / 2
    right = center_x + bar_width / 2
    top = baseline - height
    return (
        Segment(left, baseline, left - depth, baseline - depth),
        Segment(left, top, left - depth, top - depth),
        Segment(left - depth, baseline - depth, left - depth, top - depth),
        Segment(left - depth, top - depth, right - depth, top - depth),
        Segment(right, top, right - depth, top - depth),
    )


def build_bars(
    dataset: Sequence[Any],
    fields: FieldAccessor | tuple[Any, Any],
    scale: Scale,
    *,
    bar_width: float = 20.0,
    three_d: bool = False,
    depth: float = 10.0,
    strict: bool = False,
) -> list[BarGeometry]:
    values = parse_y_values(dataset, as_field_accessor(fields), strict=strict)
    return bars_from_values(values, scale, bar_width=bar_width, three_d=three_d, depth=depth)
