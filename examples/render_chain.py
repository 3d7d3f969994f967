"""Example pipeline: build a value/relationship chain, lay it out and write SVG."""

from pathlib import Path

from relgraph_ir import (
    EdgeDirection,
    Graph,
    NodeKind,
    RenderConfig,
    generate_svg_document,
    print_scene,
    render_scene,
)


def build_chain(length: int) -> Graph:
    graph = Graph()
    previous = graph.add_node(NodeKind.VALUE)
    for _ in range(length):
        rel = graph.add_node(NodeKind.RELATIONSHIP)
        value = graph.add_node(NodeKind.VALUE)
        graph.add_edge(previous, rel, EdgeDirection.VALUE_TO_REL)
        graph.add_edge(rel, value, EdgeDirection.REL_TO_VAL)
        previous = value
    return graph


def main() -> None:
    graph = build_chain(4)
    config = RenderConfig(canvas_width=600, canvas_height=600, center=(300.0, 300.0), layout_radius=250.0)
    scene = render_scene(graph, config)
    print(print_scene(scene))

    out = Path("chain.html")
    out.write_text(generate_svg_document(scene, config, title="Chain"), encoding="utf-8")
    print(f"Written {out}")


if __name__ == "__main__":
    main()
