"""Closed-form circular placement of graph nodes.

Node ``i`` of ``N`` (in graph insertion order) is placed at angle
``2*pi*i/N`` on a circle around ``center``. The result is a plain mapping so
that any later refinement pass can take it as its starting point.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import numpy as np

from .config import RenderConfig, get_render_config
from .graph import Graph, NodeId

logger = logging.getLogger(__name__)

Position = Tuple[float, float]


def circular_layout(
    graph: Graph,
    center: Optional[Tuple[float, float]] = None,
    radius: Optional[float] = None,
    *,
    config: Optional[RenderConfig] = None,
) -> Dict[NodeId, Position]:
    """Return ``node_id -> (x, y)`` for every node of *graph*.

    ``center`` and ``radius`` default to the values of *config* (or the
    module-wide :func:`get_render_config`). An empty graph yields ``{}``.
    """

    if center is None or radius is None:
        cfg = config or get_render_config()
        if center is None:
            center = cfg.center
        if radius is None:
            radius = cfg.layout_radius

    node_ids = graph.node_ids()
    n = len(node_ids)
    if n == 0:
        logger.debug("No nodes to layout")
        return {}

    cx, cy = float(center[0]), float(center[1])
    r = float(radius)
    angles = np.arange(n, dtype=float) / n * 2.0 * np.pi
    xs = cx + r * np.cos(angles)
    ys = cy + r * np.sin(angles)

    positions: Dict[NodeId, Position] = {
        node_id: (float(x), float(y)) for node_id, x, y in zip(node_ids, xs, ys)
    }
    logger.debug(
        "Circular layout: %d node(s), center=(%.1f, %.1f), radius=%.1f", n, cx, cy, r
    )
    return positions


__all__ = ["Position", "circular_layout"]
