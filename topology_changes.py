"""
Topology change events and the in-place change applicator.
"""

from dataclasses import dataclass
import logging

from adjacency_list_graph import AdjacencyListGraph
from config import REMOVAL_SENTINEL
from graph import INFINITE_COST, NodeId


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopologyChange:
    """
    One edit to an undirected link. cost == removal sentinel removes it.
    """
    node1: NodeId
    node2: NodeId
    cost: int


def apply_change(
    graph: AdjacencyListGraph,
    u: NodeId,
    v: NodeId,
    new_cost: int,
    removal_sentinel: int = REMOVAL_SENTINEL,
) -> None:
    """
    Update, insert or remove the link u <-> v in place.

    A removed link keeps its adjacency entries with infinite cost. Removing
    a link that does not exist changes nothing. The caller is responsible
    for re-running convergence afterwards.
    """
    graph.check_node(u)
    graph.check_node(v)
    cost: float = INFINITE_COST if new_cost == removal_sentinel else new_cost
    if cost < 0:
        raise ValueError(f"link cost must be non-negative, got {new_cost}")

    _apply_half(graph, u, v, cost)
    _apply_half(graph, v, u, cost)


def _apply_half(graph: AdjacencyListGraph, src: NodeId, dst: NodeId, cost: float) -> None:
    edge = graph.find_edge(src, dst)
    if edge is not None:
        if cost == INFINITE_COST:
            logger.debug("link %d -> %d removed (was %s)", src, dst, edge.cost)
        else:
            logger.debug("link %d -> %d cost %s -> %s", src, dst, edge.cost, cost)
        edge.cost = cost
        return

    if cost != INFINITE_COST:
        logger.debug("link %d -> %d inserted with cost %s", src, dst, cost)
        graph.append_half_edge(src, dst, cost)
