"""
Concrete undirected, weighted graph implementation for distvec.

Implements the Graph interface with one ordered edge list per node ID,
sized once from the largest node ID in the topology.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from errors import NodeRangeError
from graph import INFINITE_COST, Edge, Graph, NodeId


class AdjacencyListGraph(Graph):
    """
    Undirected graph backed by a list of edge lists indexed by node ID.

    Index 0 is reserved and never populated.
    """

    def __init__(self, max_nodes: int) -> None:
        if max_nodes < 0:
            raise ValueError(f"max_nodes must be non-negative, got {max_nodes}")
        self._max_nodes = max_nodes
        self._adj: List[List[Edge]] = [[] for _ in range(max_nodes + 1)]

    # --- Mutation API ---------------------------------------------------------

    def add_edge(self, a: NodeId, b: NodeId, cost: float) -> None:
        """
        Append the undirected edge a <-> b to both adjacency lists.
        Parallel edges are kept as separate entries.
        """
        self.check_node(a)
        self.check_node(b)
        _check_cost(cost)
        self._adj[a].append(Edge(b, cost))
        self._adj[b].append(Edge(a, cost))

    def append_half_edge(self, src: NodeId, dst: NodeId, cost: float) -> None:
        """
        Append src -> dst only. Callers must add the mirror entry themselves.
        """
        self.check_node(src)
        self.check_node(dst)
        _check_cost(cost)
        self._adj[src].append(Edge(dst, cost))

    # --- Graph interface ------------------------------------------------------

    @property
    def max_nodes(self) -> int:
        return self._max_nodes

    def nodes(self) -> Iterable[NodeId]:
        return range(1, self._max_nodes + 1)

    def edges(self, node: NodeId) -> Sequence[Edge]:
        self.check_node(node)
        return self._adj[node]

    # --- Queries --------------------------------------------------------------

    def check_node(self, node: NodeId) -> None:
        if not 1 <= node <= self._max_nodes:
            raise NodeRangeError(node, self._max_nodes)

    def find_edge(self, a: NodeId, b: NodeId) -> Optional[Edge]:
        """First entry in a's list pointing to b, removed links included."""
        for edge in self.edges(a):
            if edge.neighbor == b:
                return edge
        return None

    def edge_triples(self) -> List[Tuple[NodeId, NodeId, float]]:
        """
        Every live undirected edge once, as (low, high, cost), in list order.
        """
        triples: List[Tuple[NodeId, NodeId, float]] = []
        for node in self.nodes():
            for edge in self._adj[node]:
                if edge.is_up and node <= edge.neighbor:
                    triples.append((node, edge.neighbor, edge.cost))
        return triples


def build_graph(edges: Iterable[Tuple[NodeId, NodeId, float]]) -> AdjacencyListGraph:
    """
    Build a graph from (node1, node2, cost) triples.

    max_nodes is the largest ID seen; it cannot grow afterwards.
    """
    triples = list(edges)
    for a, b, _ in triples:
        if a < 1 or b < 1:
            raise NodeRangeError(min(a, b), max(a, b))
    max_nodes = max((max(a, b) for a, b, _ in triples), default=0)

    graph = AdjacencyListGraph(max_nodes)
    for a, b, cost in triples:
        graph.add_edge(a, b, cost)
    return graph


def _check_cost(cost: float) -> None:
    if cost < 0 or cost == INFINITE_COST:
        raise ValueError(f"link cost must be a finite non-negative number, got {cost}")
