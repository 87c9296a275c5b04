from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from vectorchart.path import PathDescriptor


@dataclass(frozen=True)
class GradientStopSpec:
    offset: float
    color: str
    opacity: float


@dataclass(frozen=True)
class LinearGradient:
    """Vertical user-space gradient referenced by id from fills."""

    gradient_id: str
    x1: float
    y1: float
    x2: float
    y2: float
    stops: tuple[GradientStopSpec, ...]


Paint = Union[str, LinearGradient, None]


@dataclass(frozen=True)
class Segment:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Rect:
    layer: str
    x: float
    y: float
    width: float
    height: float
    rx: float = 0.0
    fill: Paint = None
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0
    index: Optional[int] = None

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height


@dataclass(frozen=True)
class Circle:
    layer: str
    cx: float
    cy: float
    r: float
    fill: Paint = None
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0
    index: Optional[int] = None

    def contains(self, px: float, py: float) -> bool:
        return (px - self.cx) ** 2 + (py - self.cy) ** 2 <= self.r**2


@dataclass(frozen=True)
class Line:
    layer: str
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: Optional[str] = None
    stroke_width: float = 1.0
    opacity: float = 1.0
    index: Optional[int] = None

    @classmethod
    def from_segment(cls, layer: str, segment: Segment, **style) -> "Line":
        return cls(layer=layer, x1=segment.x1, y1=segment.y1, x2=segment.x2, y2=segment.y2, **style)


@dataclass(frozen=True)
class Path:
    layer: str
    path: PathDescriptor
    fill: Paint = None
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0


@dataclass(frozen=True)
class Text:
    layer: str
    x: float
    y: float
    text: str
    font_size: float = 12.0
    text_anchor: str = "middle"
    font_weight: str = "400"
    fill: Optional[str] = None
    rotation: float = 0.0
    index: Optional[int] = None


Primitive = Union[Rect, Circle, Line, Path, Text]


@dataclass(frozen=True)
class RenderModel:
    """Ordered draw list; later primitives paint over earlier ones."""

    kind: str
    width: float
    height: float
    primitives: tuple[Primitive, ...]

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.primitives)

    def __len__(self) -> int:
        return len(self.primitives)

    def layer(self, name: str) -> tuple[Primitive, ...]:
        return tuple(p for p in self.primitives if p.layer == name)

    def layer_names(self) -> tuple[str, ...]:
        seen: list[str] = []
        for primitive in self.primitives:
            if primitive.layer not in seen:
                seen.append(primitive.layer)
        return tuple(seen)

    def gradients(self) -> tuple[LinearGradient, ...]:
        found: dict[str, LinearGradient] = {}
        for primitive in self.primitives:
            fill = getattr(primitive, "fill", None)
            if isinstance(fill, LinearGradient) and fill.gradient_id not in found:
                found[fill.gradient_id] = fill
        return tuple(found.values())
