"""
Unit tests for trace() over converged and hand-built tables.
"""

import numpy as np
import pytest

from adjacency_list_graph import build_graph
from distance_vector_engine import SimpleDistanceVectorEngine
from errors import NodeRangeError
from path_tracer import trace
from routing import RoutingTables, TraceStatus


def _tables(dist, next_hop, infinity=100):
    """Wrap 1-based rows in matrices with an unused row/column 0."""
    n = len(dist)
    d = np.full((n + 1, n + 1), infinity, dtype=np.int64)
    h = np.full((n + 1, n + 1), -1, dtype=np.int64)
    d[1:, 1:] = dist
    h[1:, 1:] = next_hop
    return RoutingTables(dist=d, next_hop=h, infinity=infinity, max_nodes=n)


def test_trace_lists_forwarding_hops_without_destination():
    tables = SimpleDistanceVectorEngine().recompute(build_graph([(1, 2, 3), (2, 3, 4), (3, 4, 1)]))

    result = trace(1, 4, tables)

    assert result.status is TraceStatus.DELIVERED
    assert result.cost == 8
    assert result.hops == (1, 2, 3)
    assert result.path == (1, 2, 3, 4)


def test_trace_to_self_is_empty_route():
    tables = SimpleDistanceVectorEngine().recompute(build_graph([(1, 2, 3)]))

    result = trace(2, 2, tables)

    assert result.delivered
    assert result.cost == 0
    assert result.hops == ()
    assert result.path == (2,)


def test_trace_reports_unreachable():
    tables = SimpleDistanceVectorEngine().recompute(build_graph([(1, 2, 3), (3, 3, 1)]))

    result = trace(1, 3, tables)

    assert result.status is TraceStatus.UNREACHABLE
    assert result.cost is None
    assert result.path == ()


def test_dead_end_next_hop_is_broken_not_unreachable():
    # 1 believes it can reach 3 via 2, but 2 has no next hop for 3
    tables = _tables(
        dist=[[0, 1, 2], [1, 0, 1], [2, 1, 0]],
        next_hop=[[1, 2, 2], [1, 2, -1], [2, 2, 3]],
    )

    result = trace(1, 3, tables)

    assert result.status is TraceStatus.BROKEN
    assert result.hops == (1, 2)
    assert result.cost == 2


def test_forwarding_loop_terminates_as_broken():
    tables = _tables(
        dist=[[0, 1, 2], [1, 0, 1], [2, 1, 0]],
        next_hop=[[1, 2, 2], [1, 2, 1], [2, 2, 3]],
    )

    result = trace(1, 3, tables)

    assert result.status is TraceStatus.BROKEN
    assert len(result.hops) == 3


def test_out_of_range_nodes_raise():
    tables = SimpleDistanceVectorEngine().recompute(build_graph([(1, 2, 3)]))

    with pytest.raises(NodeRangeError):
        trace(1, 5, tables)
    with pytest.raises(NodeRangeError):
        trace(0, 1, tables)
