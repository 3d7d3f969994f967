import logging

import numpy as np
import pytest

from relgraph_ir import EdgeDirection, resolve_edge
from relgraph_ir.logging_utils import debug_log_call, summarize


def test_summarize_bounds_large_collections():
    text = summarize({i: (float(i), 0.5) for i in range(10)})

    assert text.startswith('{0: (0, 0.5)')
    assert '... (10 total)' in text
    assert summarize(list(range(3))) == '[0, 1, 2]'
    assert summarize(np.zeros((2, 3))) == 'ndarray(shape=(2, 3), dtype=float64)'


def test_debug_log_call_traces_entry_and_exit(caplog):
    logger = logging.getLogger('relgraph_ir.tests.trace')

    @debug_log_call(logger)
    def add(a, b=1):
        return a + b

    with caplog.at_level(logging.DEBUG, logger='relgraph_ir.tests.trace'):
        assert add(2, b=3) == 5

    assert 'Entering' in caplog.text and 'add' in caplog.text
    assert 'Exiting' in caplog.text and '-> 5' in caplog.text


def test_debug_log_call_reraises(caplog):
    logger = logging.getLogger('relgraph_ir.tests.trace')

    @debug_log_call(logger)
    def boom():
        raise RuntimeError('bad')

    with caplog.at_level(logging.DEBUG, logger='relgraph_ir.tests.trace'):
        with pytest.raises(RuntimeError):
            boom()

    assert 'Exception in' in caplog.text


def test_geometry_functions_are_traced(caplog):
    with caplog.at_level(logging.DEBUG, logger='relgraph_ir.geometry'):
        resolve_edge((0.0, 0.0), (1.0, 0.0), EdgeDirection.UNDIRECTED, 0.1, 0.1)

    assert 'Entering resolve_edge' in caplog.text
