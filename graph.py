"""
Undirected, weighted graph abstraction for distvec.

Nodes are integer IDs in [1, max_nodes].
Every edge is stored once per endpoint, in insertion order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Sequence
import math


NodeId = int

# Cost carried by a logically removed link. The entry stays in the adjacency
# list so later changes can re-enable it in place.
INFINITE_COST = math.inf


@dataclass
class Edge:
    """
    One adjacency-list entry: the neighbour and the current link cost.
    """
    neighbor: NodeId
    cost: float

    @property
    def is_up(self) -> bool:
        return self.cost != INFINITE_COST


class Graph(ABC):
    """Undirected, weighted graph over a fixed range of node IDs."""

    @property
    @abstractmethod
    def max_nodes(self) -> int:
        """Largest valid node ID; fixed once the graph is built."""
        raise NotImplementedError

    @abstractmethod
    def nodes(self) -> Iterable[NodeId]:
        """Return all node IDs in ascending order."""
        raise NotImplementedError

    @abstractmethod
    def edges(self, node: NodeId) -> Sequence[Edge]:
        """
        Ordered adjacency list for a given node, removed links included.
        """
        raise NotImplementedError

    def neighbors(self, node: NodeId) -> List[NodeId]:
        """Neighbours over links that are currently up, in list order."""
        return [e.neighbor for e in self.edges(node) if e.is_up]

    def max_finite_cost(self) -> float:
        """Largest cost over links that are up, 0 for a linkless graph."""
        return max((e.cost for n in self.nodes() for e in self.edges(n) if e.is_up), default=0)
