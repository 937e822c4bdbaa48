import pytest

from adjacency_list_graph import build_graph
from errors import NodeRangeError
from graph import INFINITE_COST, Edge
from topology_changes import apply_change


def test_change_updates_existing_link_in_both_directions():
    g = build_graph([(1, 2, 4), (2, 3, 1)])

    apply_change(g, 2, 1, 9)

    assert list(g.edges(1)) == [Edge(2, 9)]
    assert list(g.edges(2)) == [Edge(1, 9), Edge(3, 1)]


def test_change_inserts_missing_link_symmetrically():
    g = build_graph([(1, 2, 4), (2, 3, 1)])

    apply_change(g, 1, 3, 2)

    assert list(g.edges(1)) == [Edge(2, 4), Edge(3, 2)]
    assert list(g.edges(3)) == [Edge(2, 1), Edge(1, 2)]


def test_removal_keeps_entry_with_infinite_cost():
    g = build_graph([(1, 2, 4), (2, 3, 1)])

    apply_change(g, 1, 2, -999)

    assert list(g.edges(1)) == [Edge(2, INFINITE_COST)]
    assert g.find_edge(2, 1).cost == INFINITE_COST
    assert not g.find_edge(1, 2).is_up
    assert g.neighbors(2) == [3]


def test_removed_link_is_reenabled_in_place():
    g = build_graph([(1, 2, 4)])

    apply_change(g, 1, 2, -999)
    apply_change(g, 1, 2, 6)

    assert list(g.edges(1)) == [Edge(2, 6)]
    assert list(g.edges(2)) == [Edge(1, 6)]


def test_removing_nonexistent_link_is_noop():
    g = build_graph([(1, 2, 4), (2, 3, 1)])
    before = {n: list(g.edges(n)) for n in g.nodes()}

    apply_change(g, 1, 3, -999)

    assert {n: list(g.edges(n)) for n in g.nodes()} == before


def test_custom_removal_sentinel():
    g = build_graph([(1, 2, 4)])

    apply_change(g, 1, 2, -1, removal_sentinel=-1)

    assert g.find_edge(1, 2).cost == INFINITE_COST


def test_out_of_range_change_leaves_graph_untouched():
    g = build_graph([(1, 2, 4)])

    with pytest.raises(NodeRangeError):
        apply_change(g, 1, 7, 3)

    assert list(g.edges(1)) == [Edge(2, 4)]


def test_negative_non_sentinel_cost_is_rejected():
    g = build_graph([(1, 2, 4)])

    with pytest.raises(ValueError):
        apply_change(g, 1, 2, -5)
