"""SVG renderer for assembled graph scenes."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .utils import xml_escape
from ..config import RenderConfig, get_render_config
from ..geometry import EdgeSegment
from ..numbers import format_number
from ..scene import Circle, DrawPrimitive, FillKind, Label

logger = logging.getLogger(__name__)

ARROWHEAD_ID = "arrowhead"
EDGE_COLOR = "#2196F3"
EDGE_WIDTH = 2
NODE_STROKE = "#333"
NODE_STROKE_WIDTH = 1.5
LABEL_FONT_SIZE = "10px"

FILL_COLORS: Dict[FillKind, str] = {
    FillKind.VALUE: "#4CAF50",
    FillKind.RELATIONSHIP: "#2196F3",
}

ARROWHEAD_DEFS = f"""  <defs>
    <marker id="{ARROWHEAD_ID}" viewBox="0 0 10 10" refX="8" refY="5" markerWidth="6" markerHeight="6" orient="auto-start-reverse">
      <path d="M 0 0 L 10 5 L 0 10 z" fill="{EDGE_COLOR}"/>
    </marker>
  </defs>"""

document_tpl = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>%s</title>
</head>
<body>
<div style="width: %spx; height: %spx; border: 1px solid black; margin: auto;">
%s
</div>
</body>
</html>
"""


def _edge_markup(seg: EdgeSegment) -> str:
    attrs = [
        f'stroke="{EDGE_COLOR}"',
        f'stroke-width="{EDGE_WIDTH}"',
        f'd="{seg.path_data}"',
        f'transform="{seg.transform}"',
    ]
    marker = f"url(#{ARROWHEAD_ID})"
    if seg.start_arrow:
        attrs.append(f'marker-start="{marker}"')
    if seg.end_arrow:
        attrs.append(f'marker-end="{marker}"')
    return "  <path " + " ".join(attrs) + "/>"


def _circle_markup(circle: Circle) -> str:
    fill = FILL_COLORS[circle.fill_kind]
    return (
        f'  <circle cx="{format_number(circle.cx)}" cy="{format_number(circle.cy)}"'
        f' r="{format_number(circle.r)}" fill="{fill}" stroke="{NODE_STROKE}"'
        f' stroke-width="{NODE_STROKE_WIDTH}" class="{circle.fill_kind.value}"/>'
    )


def _label_markup(label: Label) -> str:
    return (
        f'  <text x="{format_number(label.x)}" y="{format_number(label.y)}" dy=".3em"'
        f' text-anchor="middle" fill="black" font-size="{LABEL_FONT_SIZE}">'
        f"{xml_escape(label.text)}</text>"
    )


def generate_svg(
    primitives: Iterable[DrawPrimitive],
    config: Optional[RenderConfig] = None,
) -> str:
    """Render *primitives* in order as a single ``<svg>`` element."""

    cfg = config or get_render_config()
    width = format_number(cfg.canvas_width)
    height = format_number(cfg.canvas_height)

    lines: List[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="100%" height="100%"'
        f' viewBox="0 0 {width} {height}">',
        ARROWHEAD_DEFS,
    ]
    count = 0
    for primitive in primitives:
        if isinstance(primitive, EdgeSegment):
            lines.append(_edge_markup(primitive))
        elif isinstance(primitive, Circle):
            lines.append(_circle_markup(primitive))
        elif isinstance(primitive, Label):
            lines.append(_label_markup(primitive))
        else:
            raise TypeError(f"unsupported draw primitive {primitive!r}")
        count += 1
    lines.append("</svg>")
    logger.debug("Generated SVG with %d primitive(s)", count)
    return "\n".join(lines)


def generate_svg_document(
    primitives: Iterable[DrawPrimitive],
    config: Optional[RenderConfig] = None,
    title: Optional[str] = None,
) -> str:
    """Wrap :func:`generate_svg` output in a standalone HTML page."""

    cfg = config or get_render_config()
    svg = generate_svg(primitives, cfg)
    return document_tpl % (
        xml_escape(title or "Graph"),
        format_number(cfg.canvas_width),
        format_number(cfg.canvas_height),
        svg,
    )
