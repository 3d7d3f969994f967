from typing import Iterable, Tuple

from .geometry import EdgeSegment
from .graph import Graph
from .scene import Circle, DrawPrimitive, Label


def point_str(x: float, y: float) -> str:
    return f"({x:.6f}, {y:.6f})"


def _arrows_str(start: bool, end: bool) -> str:
    return ("<" if start else "-") + (">" if end else "-")


def _escape_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def format_primitive(primitive: DrawPrimitive) -> str:
    if isinstance(primitive, EdgeSegment):
        return (
            f"edge {point_str(primitive.x1, primitive.y1)} -> {point_str(primitive.x2, primitive.y2)}"
            f" rot={primitive.rotation_deg:.6f} len={primitive.length:.6f}"
            f" arrows={_arrows_str(primitive.start_arrow, primitive.end_arrow)}"
        )
    if isinstance(primitive, Circle):
        return (
            f"circle {point_str(primitive.cx, primitive.cy)} r={primitive.r:.6f}"
            f" fill={primitive.fill_kind.value}"
        )
    if isinstance(primitive, Label):
        return f'label {point_str(primitive.x, primitive.y)} "{_escape_text(primitive.text)}"'
    raise ValueError(f"unsupported primitive {primitive!r}")


def print_scene(primitives: Iterable[DrawPrimitive]) -> str:
    return "\n".join(format_primitive(p) for p in primitives)


def edge_str(ends: Tuple[int, int]) -> str:
    return f"{ends[0]}-{ends[1]}"


def format_graph(graph: Graph) -> str:
    lines = [f"nodes ({graph.node_count()}):"]
    for node in graph.nodes():
        lines.append(f"  {node.id}: {node.kind.value}")
    lines.append(f"edges ({graph.edge_count()}):")
    for edge in graph.edges():
        lines.append(f"  [{edge.id}] {edge_str((edge.source, edge.target))} {edge.direction.value}")
    return "\n".join(lines)
