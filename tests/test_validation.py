import math

import pytest

from relgraph_ir import Graph, LayoutValidationError, NodeKind, circular_layout, validate_positions


def _graph(n=2):
    graph = Graph()
    for _ in range(n):
        graph.add_node(NodeKind.VALUE)
    return graph


def test_validate_accepts_circular_layout():
    graph = _graph(5)

    validate_positions(graph, circular_layout(graph, (0.0, 0.0), 1.0))


def test_validate_accepts_empty_graph():
    validate_positions(Graph(), {})


@pytest.mark.parametrize(
    'positions, message_part',
    [
        ({0: (0.0, 0.0)}, 'node 1 has no position'),
        ({0: (0.0, 0.0), 1: (math.nan, 0.0)}, 'non-finite'),
        ({0: (0.0, 0.0), 1: (0.0, math.inf)}, 'non-finite'),
        ({0: (0.0, 0.0), 1: (1.0, 1.0), 2: (2.0, 2.0)}, 'unknown node 2'),
        ({0: (0.0, 0.0), 1: (1.0, 1.0, 1.0)}, 'must be (x, y)'),
    ],
)
def test_validate_rejects_bad_positions(positions, message_part):
    with pytest.raises(LayoutValidationError) as exc:
        validate_positions(_graph(), positions)

    assert message_part in str(exc.value)
    assert isinstance(exc.value, ValueError)
