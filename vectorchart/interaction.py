from __future__ import annotations

from collections.abc import Iterable

from vectorchart.axes import LAYER_POINTS, LAYER_TOOLTIPS
from vectorchart.primitives import Circle, Rect, RenderModel


def hit_test(
    model: RenderModel,
    x: float,
    y: float,
    *,
    layers: Iterable[str] = (LAYER_POINTS, LAYER_TOOLTIPS),
) -> int | None:
    """Return the data index of the topmost pressable primitive under `(x, y)`."""

    wanted = frozenset(layers)
    for primitive in reversed(model.primitives):
        if primitive.layer not in wanted:
            continue
        if not isinstance(primitive, (Circle, Rect)) or primitive.index is None:
            continue
        if primitive.contains(x, y):
            return primitive.index
    return None
