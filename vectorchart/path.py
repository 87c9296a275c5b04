from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal

import numpy as np

from vectorchart.fields import FieldAccessor, as_field_accessor, parse_y_values
from vectorchart.scales import Scale


PathOp = Literal["M", "L", "Q", "Z"]
Point = tuple[float, float]


@dataclass(frozen=True)
class PathCommand:
    op: PathOp
    points: tuple[Point, ...] = ()


@dataclass(frozen=True)
class PathDescriptor:
    commands: tuple[PathCommand, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.commands)

    def count(self, op: PathOp) -> int:
        return sum(1 for c in self.commands if c.op == op)

    def to_svg(self) -> str:
        parts: list[str] = []
        for command in self.commands:
            coords = " ".join(f"{format_coord(x)},{format_coord(y)}" for x, y in command.points)
            parts.append(f"{command.op} {coords}" if coords else command.op)
        return " ".join(parts)


def format_coord(value: float) -> str:
    out = f"{float(value):.4f}".rstrip("0").rstrip(".")
    return "0" if out in {"-0", ""} else out


def point_positions(values: np.ndarray, scale: Scale) -> list[Point]:
    xs = scale.x_positions()
    ys = scale.values_to_pixels(values)
    return [(float(x), float(y)) for x, y in zip(xs.tolist(), ys.tolist())]


def path_from_points(points: Sequence[Point], use_curve: bool) -> PathDescriptor:
    """Polyline, or the two-quadratic smoothing between each pair of points.

    Each curved span splits horizontally at 1/4, 2/4 and 3/4 of the distance with the
    joint at the vertical midpoint.
    """

    if not points:
        return PathDescriptor()
    commands: list[PathCommand] = [PathCommand("M", (points[0],))]
    prev_x, prev_y = points[0]
    for x, y in points[1:]:
        if use_curve:
            x_split = (x - prev_x) / 4
            y_split = (y - prev_y) / 2
            commands.append(
                PathCommand("Q", ((prev_x + x_split, prev_y), (prev_x + x_split * 2, prev_y + y_split)))
            )
            commands.append(PathCommand("Q", ((prev_x + x_split * 3, prev_y + y_split * 2), (x, y))))
        else:
            commands.append(PathCommand("L", ((x, y),)))
        prev_x, prev_y = x, y
    return PathDescriptor(tuple(commands))


def close_to_baseline(path: PathDescriptor, points: Sequence[Point], baseline: float) -> PathDescriptor:
    if not points:
        return PathDescriptor()
    first_x = points[0][0]
    last_x = points[-1][0]
    closing = (
        PathCommand("L", ((last_x, baseline),)),
        PathCommand("L", ((first_x, baseline),)),
        PathCommand("Z"),
    )
    return PathDescriptor(path.commands + closing)


def build_path(
    dataset: Sequence[Any],
    fields: FieldAccessor | tuple[Any, Any],
    scale: Scale,
    use_curve: bool = True,
    *,
    strict: bool = False,
) -> PathDescriptor:
    values = parse_y_values(dataset, as_field_accessor(fields), strict=strict)
    return path_from_points(point_positions(values, scale), use_curve)


def build_shadow_path(
    dataset: Sequence[Any],
    fields: FieldAccessor | tuple[Any, Any],
    scale: Scale,
    use_curve: bool = True,
    *,
    strict: bool = False,
) -> PathDescriptor:
    values = parse_y_values(dataset, as_field_accessor(fields), strict=strict)
    points = point_positions(values, scale)
    return close_to_baseline(path_from_points(points, use_curve), points, scale.baseline)
