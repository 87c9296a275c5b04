from __future__ import annotations

from dataclasses import dataclass

from vectorchart.config import TooltipStyle
from vectorchart.primitives import Segment


@dataclass(frozen=True)
class TooltipGeometry:
    connector: Segment
    box_x: float
    box_y: float
    box_width: float
    box_height: float
    box_radius: float
    text_x: float
    text_y: float
    text: str


def build_tooltip(
    point_x: float,
    point_y: float,
    text: str,
    *,
    marker_radius: float,
    style: TooltipStyle | None = None,
) -> TooltipGeometry:
    """Anchor a tooltip above a point marker. Neighbouring tooltips may overlap."""

    st = style or TooltipStyle()
    anchor_y = point_y - marker_radius / 2
    top_of_connector = anchor_y - st.connector_length
    return TooltipGeometry(
        connector=Segment(point_x, anchor_y, point_x, top_of_connector),
        box_x=point_x - st.width / 2,
        box_y=anchor_y - st.height - st.connector_length,
        box_width=st.width,
        box_height=st.height,
        box_radius=st.border_radius,
        text_x=point_x,
        text_y=anchor_y - st.height / 2 - st.connector_length / 2,
        text=text,
    )
