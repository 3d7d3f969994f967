"""Typed value/relationship graph used as input to layout and scene assembly."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Union


class GraphError(Exception):
    """Base class for graph construction and lookup errors."""


class NotFoundError(GraphError, KeyError):
    """Raised when a node id is referenced but absent from the graph."""

    def __init__(self, node_id: object) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"node {self.node_id!r} not found"


class InvalidEndpointError(GraphError, ValueError):
    """Raised when an edge is added with an absent source or target."""

    def __init__(self, source: object, target: object, missing: List[object]) -> None:
        self.source = source
        self.target = target
        self.missing = list(missing)
        ids = ", ".join(repr(m) for m in self.missing)
        super().__init__(f"edge {source!r}->{target!r} references unknown node(s): {ids}")


class NodeKind(enum.Enum):
    VALUE = "value"
    RELATIONSHIP = "relationship"

    @classmethod
    def parse(cls, text: Union[str, "NodeKind"]) -> "NodeKind":
        if isinstance(text, cls):
            return text
        key = str(text).strip().lower()
        for kind in cls:
            if kind.value == key or kind.name.lower() == key:
                return kind
        raise ValueError(f"unknown node kind {text!r}")


class EdgeDirection(enum.Enum):
    """Arrow style of an edge, independent of its stored source/target order."""

    VALUE_TO_REL = "vtr"
    REL_TO_VAL = "rtv"
    UNDIRECTED = "und"
    BIDIRECTIONAL = "bi"

    @classmethod
    def parse(cls, text: Union[str, "EdgeDirection"]) -> "EdgeDirection":
        if isinstance(text, cls):
            return text
        key = str(text).strip().lower()
        for direction in cls:
            if direction.value == key or direction.name.lower() == key:
                return direction
        raise ValueError(f"unknown edge direction {text!r}")


NodeId = int
EdgeId = int


@dataclass(frozen=True)
class Node:
    id: NodeId
    kind: NodeKind


@dataclass(frozen=True)
class Edge:
    id: EdgeId
    source: NodeId
    target: NodeId
    direction: EdgeDirection


@dataclass
class Graph:
    """Directed multigraph of value and relationship nodes.

    Node ids are dense integers handed out in insertion order; edges keep
    insertion order too. There is no removal API: a graph is built once and
    read by the layout and scene passes.
    """

    _nodes: Dict[NodeId, Node] = field(default_factory=dict)
    _edges: List[Edge] = field(default_factory=list)

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def node_ids(self) -> List[NodeId]:
        return list(self._nodes.keys())

    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def node(self, node_id: NodeId) -> Node:
        try:
            return self._nodes[node_id]
        except (KeyError, TypeError):
            raise NotFoundError(node_id) from None

    def node_kind(self, node_id: NodeId) -> NodeKind:
        return self.node(node_id).kind

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def add_node(self, kind: Union[NodeKind, str]) -> NodeId:
        node_id = len(self._nodes)
        self._nodes[node_id] = Node(node_id, NodeKind.parse(kind))
        return node_id

    def add_edge(
        self,
        source: NodeId,
        target: NodeId,
        direction: Union[EdgeDirection, str] = EdgeDirection.UNDIRECTED,
    ) -> EdgeId:
        missing = [n for n in (source, target) if not self._is_known(n)]
        if missing:
            raise InvalidEndpointError(source, target, missing)
        edge_id = len(self._edges)
        self._edges.append(Edge(edge_id, source, target, EdgeDirection.parse(direction)))
        return edge_id

    def _is_known(self, node_id: object) -> bool:
        try:
            return node_id in self._nodes
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"


__all__ = [
    "GraphError",
    "NotFoundError",
    "InvalidEndpointError",
    "NodeKind",
    "EdgeDirection",
    "NodeId",
    "EdgeId",
    "Node",
    "Edge",
    "Graph",
]
