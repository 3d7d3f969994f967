import logging

import pytest

from relgraph_ir import (
    Circle,
    EdgeDirection,
    EdgeSegment,
    FillKind,
    Graph,
    Label,
    NodeKind,
    RenderConfig,
    assemble,
    circular_layout,
    create_demo_graph,
    render_scene,
)


def _two_node_graph(direction=EdgeDirection.VALUE_TO_REL):
    graph = Graph()
    v1 = graph.add_node(NodeKind.VALUE)
    r1 = graph.add_node(NodeKind.RELATIONSHIP)
    graph.add_edge(v1, r1, direction)
    return graph


def test_empty_graph_assembles_to_empty_scene():
    graph = Graph()

    assert assemble(graph, circular_layout(graph, (250.0, 250.0), 200.0)) == []
    assert render_scene(graph) == []


def test_edges_precede_nodes_and_labels():
    graph = create_demo_graph()
    scene = render_scene(graph)

    kinds = [p.kind for p in scene]
    n_edges = kinds.count("edge")
    assert n_edges == len(graph.edges())
    assert kinds[:n_edges] == ["edge"] * n_edges
    assert kinds[n_edges:] == ["circle", "label"] * graph.node_count()


def test_primitive_order_follows_insertion_order():
    graph = create_demo_graph()
    positions = circular_layout(graph, (250.0, 250.0), 200.0)
    scene = assemble(graph, positions, config=RenderConfig())

    edges = [p for p in scene if isinstance(p, EdgeSegment)]
    expected = [
        (e.direction is EdgeDirection.REL_TO_VAL or e.direction is EdgeDirection.BIDIRECTIONAL,
         e.direction is EdgeDirection.VALUE_TO_REL or e.direction is EdgeDirection.BIDIRECTIONAL)
        for e in graph.edges()
    ]
    assert [(s.start_arrow, s.end_arrow) for s in edges] == expected

    labels = [p for p in scene if isinstance(p, Label)]
    assert [label.text for label in labels] == [str(i) for i in graph.node_ids()]
    circles = [p for p in scene if isinstance(p, Circle)]
    assert [(c.cx, c.cy) for c in circles] == [positions[i] for i in graph.node_ids()]


def test_fill_kind_follows_node_kind():
    scene = render_scene(_two_node_graph())

    circles = [p for p in scene if isinstance(p, Circle)]
    assert [c.fill_kind for c in circles] == [FillKind.VALUE, FillKind.RELATIONSHIP]
    assert all(c.r == 10.0 for c in circles)


def test_label_is_anchored_at_node_position():
    graph = _two_node_graph()
    positions = {0: (0.0, 0.0), 1: (100.0, 0.0)}

    scene = assemble(graph, positions)

    assert scene[0] == EdgeSegment(12.5, 0.0, 87.5, 0.0, 0.0, 75.0, False, True, 100.0)
    assert Label(100.0, 0.0, "1") in scene


def test_config_sizes_are_applied():
    graph = _two_node_graph()
    config = RenderConfig(node_radius=4.0, arrow_clearance=6.0)

    scene = assemble(graph, {0: (0.0, 0.0), 1: (50.0, 0.0)}, config=config)

    assert scene[0].length == pytest.approx(40.0)
    assert scene[1].r == 4.0


def test_missing_position_skips_edge_and_node(caplog):
    graph = _two_node_graph()

    with caplog.at_level(logging.WARNING, logger="relgraph_ir.scene"):
        scene = assemble(graph, {0: (0.0, 0.0)})

    assert [p.kind for p in scene] == ["circle", "label"]
    assert "Skipping edge 0" in caplog.text
    assert "Skipping node 1" in caplog.text


def test_fill_kind_for_node_kind():
    assert FillKind.for_node_kind(NodeKind.VALUE) is FillKind.VALUE
    assert FillKind.for_node_kind(NodeKind.RELATIONSHIP) is FillKind.RELATIONSHIP
    with pytest.raises(ValueError):
        FillKind.for_node_kind("value")
