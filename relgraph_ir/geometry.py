"""Edge geometry: trimmed segments, rotation and arrowhead flags.

An edge is described in local coordinates as the horizontal segment
``(0, 0) -> (length, 0)``, placed on the canvas by translating to an anchor
point near the source node and rotating by the edge angle. The segment is
shortened by ``node_radius + arrow_clearance`` so that it stops outside the
node circles, leaving room for the arrowhead marker.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

from .graph import EdgeDirection
from .logging_utils import apply_debug_logging
from .numbers import format_number

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

_ARROW_FLAGS = {
    EdgeDirection.VALUE_TO_REL: (False, True),
    EdgeDirection.REL_TO_VAL: (True, False),
    EdgeDirection.UNDIRECTED: (False, False),
    EdgeDirection.BIDIRECTIONAL: (True, True),
}


@dataclass(frozen=True)
class EdgeSegment:
    """Drawable edge; ``(x1, y1)`` is the anchor, ``(x2, y2)`` the far end."""

    kind: ClassVar[str] = "edge"

    x1: float
    y1: float
    x2: float
    y2: float
    rotation_deg: float
    length: float
    start_arrow: bool = False
    end_arrow: bool = False
    full_length: float = 0.0

    @property
    def anchor(self) -> Point:
        return (self.x1, self.y1)

    @property
    def end_point(self) -> Point:
        return (self.x2, self.y2)

    @property
    def angle_rad(self) -> float:
        return math.radians(self.rotation_deg)

    @property
    def transform(self) -> str:
        return (
            f"translate({format_number(self.x1)}, {format_number(self.y1)}) "
            f"rotate({format_number(self.rotation_deg)})"
        )

    @property
    def path_data(self) -> str:
        return f"M0,0 L{format_number(self.length)},0"


def _vec2(a: Point, b: Point) -> Point:
    return b[0] - a[0], b[1] - a[1]


def _norm2(v: Point) -> float:
    return math.hypot(v[0], v[1])


def arrow_flags(direction: EdgeDirection) -> Tuple[bool, bool]:
    """Return ``(start_arrow, end_arrow)`` for *direction*.

    ``REL_TO_VAL`` puts the arrow at the source end of the stored edge.
    """

    try:
        return _ARROW_FLAGS[direction]
    except KeyError:
        raise ValueError(f"unsupported edge direction {direction!r}") from None


def resolve_edge(
    pos_source: Point,
    pos_target: Point,
    direction: EdgeDirection,
    node_radius: float,
    arrow_clearance: float,
) -> EdgeSegment:
    diff = _vec2(pos_source, pos_target)
    full_length = _norm2(diff)
    if full_length == 0.0:
        # atan2(0, 0) is a convention, not a direction; fix it explicitly.
        angle = 0.0
    else:
        angle = math.atan2(diff[1], diff[0])

    trim = node_radius + arrow_clearance
    trimmed_length = full_length - trim

    ux, uy = math.cos(angle), math.sin(angle)
    anchor_x = pos_source[0] + ux * trim / 2.0
    anchor_y = pos_source[1] + uy * trim / 2.0

    start_arrow, end_arrow = arrow_flags(direction)
    return EdgeSegment(
        x1=anchor_x,
        y1=anchor_y,
        x2=anchor_x + ux * trimmed_length,
        y2=anchor_y + uy * trimmed_length,
        rotation_deg=math.degrees(angle),
        length=trimmed_length,
        start_arrow=start_arrow,
        end_arrow=end_arrow,
        full_length=full_length,
    )


__all__ = ["Point", "EdgeSegment", "arrow_flags", "resolve_edge"]

apply_debug_logging(globals(), logger=logger)
