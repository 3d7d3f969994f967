from relgraph_ir import circular_layout, create_demo_graph, generate_svg, print_scene, render_scene, validate_positions
from relgraph_ir.demo import run


def test_demo_pipeline_smoke():
    graph = create_demo_graph()
    validate_positions(graph, circular_layout(graph))
    scene = render_scene(graph)
    out = print_scene(scene)
    svg = generate_svg(scene)

    assert graph.node_count() == 6
    assert len(graph.edges()) == 5
    assert len(scene) == 5 + 2 * 6
    assert 'fill=value' in out and 'fill=relationship' in out
    assert svg.count('<circle') == 6


def test_demo_run_prints(capsys):
    run()

    out = capsys.readouterr().out
    assert 'Graph:' in out
    assert 'Scene:' in out
