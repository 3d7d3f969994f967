from relgraph_ir import (
    Circle,
    EdgeDirection,
    EdgeSegment,
    FillKind,
    Graph,
    Label,
    NodeKind,
    format_graph,
    format_primitive,
    print_scene,
)


def test_format_edge_line():
    seg = EdgeSegment(12.5, 0.0, 87.5, 0.0, 0.0, 75.0, False, True, 100.0)

    assert format_primitive(seg) == (
        'edge (12.500000, 0.000000) -> (87.500000, 0.000000) rot=0.000000 len=75.000000 arrows=->'
    )


def test_arrow_markers_in_text():
    both = EdgeSegment(0.0, 0.0, 1.0, 0.0, 0.0, 1.0, True, True)
    start = EdgeSegment(0.0, 0.0, 1.0, 0.0, 0.0, 1.0, True, False)
    none = EdgeSegment(0.0, 0.0, 1.0, 0.0, 0.0, 1.0)

    assert format_primitive(both).endswith('arrows=<>')
    assert format_primitive(start).endswith('arrows=<-')
    assert format_primitive(none).endswith('arrows=--')


def test_print_scene_joins_lines():
    scene = [
        Circle(450.0, 250.0, 10.0, FillKind.RELATIONSHIP),
        Label(450.0, 250.0, '0'),
    ]

    out = print_scene(scene)

    assert out.splitlines() == [
        'circle (450.000000, 250.000000) r=10.000000 fill=relationship',
        'label (450.000000, 250.000000) "0"',
    ]


def test_print_empty_scene():
    assert print_scene([]) == ''


def test_format_graph_lists_nodes_and_edges():
    graph = Graph()
    v = graph.add_node(NodeKind.VALUE)
    r = graph.add_node(NodeKind.RELATIONSHIP)
    graph.add_edge(r, v, EdgeDirection.REL_TO_VAL)

    out = format_graph(graph)

    assert '  0: value' in out
    assert '  1: relationship' in out
    assert '  [0] 1-0 rtv' in out
