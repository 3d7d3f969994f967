from .graph import EdgeDirection, Graph, NodeKind
from .layout import circular_layout
from .printer import format_graph, print_scene
from .scene import render_scene
from .validate import validate_positions


def create_demo_graph() -> Graph:
    """Three value and three relationship nodes, one edge per arrow style."""
    graph = Graph()
    v1 = graph.add_node(NodeKind.VALUE)
    r1 = graph.add_node(NodeKind.RELATIONSHIP)
    v2 = graph.add_node(NodeKind.VALUE)
    r2 = graph.add_node(NodeKind.RELATIONSHIP)
    v3 = graph.add_node(NodeKind.VALUE)
    r3 = graph.add_node(NodeKind.RELATIONSHIP)

    graph.add_edge(v1, r1, EdgeDirection.VALUE_TO_REL)  # arrow at r1
    graph.add_edge(v2, r2, EdgeDirection.REL_TO_VAL)  # arrow at v2
    graph.add_edge(v3, r3, EdgeDirection.UNDIRECTED)
    graph.add_edge(r1, v2, EdgeDirection.BIDIRECTIONAL)
    graph.add_edge(r2, v3, EdgeDirection.VALUE_TO_REL)
    return graph


def run():
    graph = create_demo_graph()
    print(f"Graph:\n{format_graph(graph)}\n")
    validate_positions(graph, circular_layout(graph))
    scene = render_scene(graph)
    print(f"Scene:\n{print_scene(scene)}")


if __name__ == "__main__":
    run()
