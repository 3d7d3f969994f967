import math
from typing import Mapping

from .geometry import Point
from .graph import Graph, NodeId


class LayoutValidationError(ValueError):
    pass


def validate_positions(graph: Graph, positions: Mapping[NodeId, Point]) -> None:
    """Check that *positions* holds exactly one finite point per node of *graph*."""

    for node_id in graph.node_ids():
        if node_id not in positions:
            raise LayoutValidationError(f'node {node_id} has no position')
        pos = positions[node_id]
        if len(pos) != 2:
            raise LayoutValidationError(f'node {node_id} position must be (x, y), got {pos!r}')
        if not all(math.isfinite(float(c)) for c in pos):
            raise LayoutValidationError(f'node {node_id} has non-finite position {pos!r}')
    for node_id in positions:
        if not graph.has_node(node_id):
            raise LayoutValidationError(f'position given for unknown node {node_id!r}')
