from __future__ import annotations

from pathlib import Path as FilePath
import xml.etree.ElementTree as ET

from vectorchart.path import format_coord
from vectorchart.primitives import Circle, Line, LinearGradient, Paint, Path, Primitive, Rect, RenderModel, Text


SVG_NS = "http://www.w3.org/2000/svg"


def render_svg(model: RenderModel) -> str:
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": format_coord(model.width),
            "height": format_coord(model.height),
            "viewBox": f"0 0 {format_coord(model.width)} {format_coord(model.height)}",
        },
    )
    gradients = model.gradients()
    if gradients:
        defs = ET.SubElement(root, "defs")
        for grad in gradients:
            _append_gradient(defs, grad)
    for primitive in model.primitives:
        _append_primitive(root, primitive)
    return ET.tostring(root, encoding="unicode")


def write_svg(model: RenderModel, path: FilePath | str) -> FilePath:
    out = FilePath(path)
    out.write_text(render_svg(model), encoding="utf-8")
    return out


def _append_gradient(parent: ET.Element, grad: LinearGradient) -> None:
    node = ET.SubElement(
        parent,
        "linearGradient",
        {
            "id": grad.gradient_id,
            "gradientUnits": "userSpaceOnUse",
            "x1": format_coord(grad.x1),
            "y1": format_coord(grad.y1),
            "x2": format_coord(grad.x2),
            "y2": format_coord(grad.y2),
        },
    )
    for stop in grad.stops:
        ET.SubElement(
            node,
            "stop",
            {
                "offset": format_coord(stop.offset),
                "stop-color": stop.color,
                "stop-opacity": format_coord(stop.opacity),
            },
        )


def _paint(value: Paint) -> str | None:
    if value is None:
        return None
    if isinstance(value, LinearGradient):
        return f"url(#{value.gradient_id})"
    return value


def _attrs(**values: object) -> dict[str, str]:
    out: dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        name = key.rstrip("_").replace("_", "-")
        out[name] = format_coord(value) if isinstance(value, (int, float)) else str(value)
    return out


def _append_primitive(root: ET.Element, primitive: Primitive) -> None:
    if isinstance(primitive, Rect):
        ET.SubElement(
            root,
            "rect",
            _attrs(
                x=primitive.x,
                y=primitive.y,
                width=primitive.width,
                height=primitive.height,
                rx=primitive.rx or None,
                fill=_paint(primitive.fill),
                stroke=primitive.stroke,
                stroke_width=primitive.stroke_width or None,
                opacity=primitive.opacity,
            ),
        )
    elif isinstance(primitive, Circle):
        ET.SubElement(
            root,
            "circle",
            _attrs(
                cx=primitive.cx,
                cy=primitive.cy,
                r=primitive.r,
                fill=_paint(primitive.fill),
                stroke=primitive.stroke,
                stroke_width=primitive.stroke_width or None,
                opacity=primitive.opacity,
            ),
        )
    elif isinstance(primitive, Line):
        ET.SubElement(
            root,
            "line",
            _attrs(
                x1=primitive.x1,
                y1=primitive.y1,
                x2=primitive.x2,
                y2=primitive.y2,
                stroke=primitive.stroke,
                stroke_width=primitive.stroke_width,
                opacity=primitive.opacity,
            ),
        )
    elif isinstance(primitive, Path):
        ET.SubElement(
            root,
            "path",
            _attrs(
                d=primitive.path.to_svg(),
                fill=_paint(primitive.fill),
                stroke=primitive.stroke,
                stroke_width=primitive.stroke_width,
                opacity=primitive.opacity,
            ),
        )
    elif isinstance(primitive, Text):
        transform = None
        if primitive.rotation:
            transform = (
                f"rotate({format_coord(primitive.rotation)} {format_coord(primitive.x)} {format_coord(primitive.y)})"
            )
        node = ET.SubElement(
            root,
            "text",
            _attrs(
                x=primitive.x,
                y=primitive.y,
                font_size=primitive.font_size,
                text_anchor=primitive.text_anchor,
                font_weight=primitive.font_weight,
                fill=primitive.fill,
                transform=transform,
            ),
        )
        node.text = primitive.text
    else:
        raise TypeError(f"unsupported primitive: {type(primitive)!r}")
