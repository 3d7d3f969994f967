"""Scene assembly: graph + positions -> ordered draw primitives.

Edges come first so that renderers painting in list order draw them beneath
the nodes. Each node contributes a circle followed by its index label.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import ClassVar, List, Mapping, Optional, Union

from .config import RenderConfig, get_render_config
from .geometry import EdgeSegment, Point, resolve_edge
from .graph import Graph, NodeId, NodeKind
from .layout import circular_layout
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


class FillKind(enum.Enum):
    VALUE = "value"
    RELATIONSHIP = "relationship"

    @classmethod
    def for_node_kind(cls, kind: NodeKind) -> "FillKind":
        if kind is NodeKind.VALUE:
            return cls.VALUE
        if kind is NodeKind.RELATIONSHIP:
            return cls.RELATIONSHIP
        raise ValueError(f"unsupported node kind {kind!r}")


@dataclass(frozen=True)
class Circle:
    kind: ClassVar[str] = "circle"

    cx: float
    cy: float
    r: float
    fill_kind: FillKind


@dataclass(frozen=True)
class Label:
    kind: ClassVar[str] = "label"

    x: float
    y: float
    text: str


DrawPrimitive = Union[EdgeSegment, Circle, Label]


def assemble(
    graph: Graph,
    positions: Mapping[NodeId, Point],
    *,
    config: Optional[RenderConfig] = None,
) -> List[DrawPrimitive]:
    cfg = config or get_render_config()

    edges: List[DrawPrimitive] = []
    for edge in graph.edges():
        pos_source = positions.get(edge.source)
        pos_target = positions.get(edge.target)
        if pos_source is None or pos_target is None:
            logger.warning(
                "Skipping edge %d (%d->%d): endpoint position missing",
                edge.id,
                edge.source,
                edge.target,
            )
            continue
        edges.append(
            resolve_edge(
                pos_source,
                pos_target,
                edge.direction,
                cfg.node_radius,
                cfg.arrow_clearance,
            )
        )

    nodes: List[DrawPrimitive] = []
    for node in graph.nodes():
        pos = positions.get(node.id)
        if pos is None:
            logger.warning("Skipping node %d: position missing", node.id)
            continue
        x, y = pos
        nodes.append(Circle(x, y, cfg.node_radius, FillKind.for_node_kind(node.kind)))
        nodes.append(Label(x, y, str(node.id)))

    logger.debug("Assembled %d edge primitive(s), %d node primitive(s)", len(edges), len(nodes))
    return edges + nodes


def render_scene(graph: Graph, config: Optional[RenderConfig] = None) -> List[DrawPrimitive]:
    """Lay out *graph* on the configured circle and assemble its primitives."""

    cfg = config or get_render_config()
    positions = circular_layout(graph, cfg.center, cfg.layout_radius)
    return assemble(graph, positions, config=cfg)


__all__ = ["FillKind", "Circle", "Label", "DrawPrimitive", "assemble", "render_scene"]

apply_debug_logging(globals(), logger=logger)
