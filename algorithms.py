"""
Algorithm interfaces for routing.

Keeps the convergence algorithm separate from input parsing and the
simulation loop.
"""

from abc import ABC, abstractmethod

from graph import Graph
from routing import RoutingTables


class DistanceVectorEngine(ABC):
    """
    Interface for all-pairs distance-vector convergence.
    """

    @abstractmethod
    def recompute(self, graph: Graph) -> RoutingTables:
        """
        Rebuild distance and next-hop tables for graph from scratch.

        Tables are reset to the direct-neighbour state and then relaxed
        until a full pass changes nothing.

        Returns:
            Converged RoutingTables for every node in graph.
        """
        raise NotImplementedError
