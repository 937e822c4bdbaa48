"""
Neighbour-restricted Bellman–Ford distance-vector engine.

Computes dense all-pairs distance and next-hop matrices over an undirected
graph and re-converges from scratch on every call.
"""

from typing import Optional
import logging

import numpy as np

from algorithms import DistanceVectorEngine
from config import EngineConfig
from errors import ConvergenceError, CostOverflowError
from graph import Graph
from routing import NO_NEXT_HOP, RoutingTables


logger = logging.getLogger(__name__)

# Two saturated values must still sum inside int64.
MAX_INFINITY = 2 ** 62


def derive_infinity(max_nodes: int, max_cost: float) -> int:
    """
    Sentinel strictly larger than twice any simple-path cost in the graph.
    """
    return 2 * max(max_nodes, 1) * max(int(max_cost), 1) + 1


class SimpleDistanceVectorEngine(DistanceVectorEngine):
    """
    Fixed-point relaxation where each node only learns through its direct
    neighbours, as in a distributed distance-vector protocol.

    On equal cost the smaller next-hop ID wins.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self._config = config or EngineConfig()

    @property
    def config(self) -> EngineConfig:
        return self._config

    def recompute(self, graph: Graph) -> RoutingTables:
        """
        Reset every row to its direct-neighbour state, then relax.

        Each pass visits every (node, neighbour) pair over links that are
        up and sweeps all destinations at once. The sweep for a pair matches
        the scalar loop: the only column it could change that it also reads
        is the neighbour's own, and that column is never improved by it.
        """
        n = graph.max_nodes
        inf = self._infinity(graph)
        dist, next_hop = self._reset(graph, inf)

        max_passes = self._config.max_passes or 2 * (n + 1) ** 2
        passes = 0
        changed = True
        while changed:
            if passes >= max_passes:
                raise ConvergenceError(f"no fixed point after {passes} passes over {n} nodes")
            passes += 1
            changed = False
            updates = 0

            for i in graph.nodes():
                row_dist = dist[i]
                row_hop = next_hop[i]
                for nb in graph.neighbors(i):
                    if nb == i:
                        continue
                    link = row_dist[nb]
                    if link >= inf:
                        continue

                    candidate = np.minimum(link + dist[nb], inf)
                    hop = row_hop[nb]
                    better = (candidate < inf) & (
                        (row_dist > candidate) | ((row_dist == candidate) & (row_hop > hop))
                    )
                    better[i] = False
                    if better.any():
                        row_dist[better] = candidate[better]
                        row_hop[better] = hop
                        updates += int(better.sum())
                        changed = True

            if self._config.verbose:
                logger.debug("pass %d: %d entries updated", passes, updates)

        if self._config.verbose:
            logger.debug("converged after %d passes (infinity=%d)\ndist=\n%s\nnext_hop=\n%s",
                         passes, inf, dist[1:, 1:], next_hop[1:, 1:])

        return RoutingTables(dist=dist, next_hop=next_hop, infinity=inf, max_nodes=n, passes=passes)

    # --- Internal helpers ---------------------------------------------------

    def _infinity(self, graph: Graph) -> int:
        max_cost = graph.max_finite_cost()
        if self._config.infinity is not None:
            inf = self._config.infinity
            # A simple path has at most max_nodes - 1 links.
            longest = max(graph.max_nodes - 1, 1) * int(max_cost)
            if inf <= longest:
                raise CostOverflowError(
                    f"infinity {inf} does not exceed longest possible path cost {longest}"
                )
        else:
            inf = derive_infinity(graph.max_nodes, max_cost)
        if inf > MAX_INFINITY:
            raise CostOverflowError(f"infinity {inf} exceeds int64-safe bound {MAX_INFINITY}")
        return inf

    def _reset(self, graph: Graph, inf: int) -> tuple[np.ndarray, np.ndarray]:
        size = graph.max_nodes + 1
        dist = np.full((size, size), inf, dtype=np.int64)
        for i in graph.nodes():
            dist[i, i] = 0
            for edge in graph.edges(i):
                if edge.neighbor == i:
                    continue
                # Parallel links: last entry wins.
                dist[i, edge.neighbor] = int(edge.cost) if edge.is_up else inf

        next_hop = np.full((size, size), NO_NEXT_HOP, dtype=np.int64)
        columns = np.broadcast_to(np.arange(size, dtype=np.int64), (size, size))
        direct = dist < inf
        next_hop[direct] = columns[direct]
        return dist, next_hop
