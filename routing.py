"""
Routing data structures for distvec.

Converged distance / next-hop matrices, forwarding entries, message queries
and trace results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from graph import NodeId


NO_NEXT_HOP = -1


@dataclass(frozen=True)
class RouteEntry:
    """
    Single forwarding entry in a node's routing table.
    """
    dest: NodeId
    next_hop: NodeId
    cost: int


@dataclass(frozen=True, eq=False)
class RoutingTables:
    """
    Dense (max_nodes + 1) x (max_nodes + 1) matrices; row/column 0 unused.

    dist[i, j] == infinity and next_hop[i, j] == NO_NEXT_HOP mark an
    unreachable pair.
    """
    dist: np.ndarray
    next_hop: np.ndarray
    infinity: int
    max_nodes: int
    passes: int = 0

    def cost(self, src: NodeId, dest: NodeId) -> Optional[int]:
        """Path cost, or None when dest is unreachable from src."""
        d = int(self.dist[src, dest])
        return None if d >= self.infinity else d

    def is_reachable(self, src: NodeId, dest: NodeId) -> bool:
        return int(self.dist[src, dest]) < self.infinity

    def forwarding_table(self, node: NodeId) -> List[RouteEntry]:
        """
        Reachable destinations of node in ascending order, self entry included.
        """
        entries: List[RouteEntry] = []
        for dest in range(1, self.max_nodes + 1):
            if self.is_reachable(node, dest):
                entries.append(RouteEntry(dest, int(self.next_hop[node, dest]), int(self.dist[node, dest])))
        return entries

    def same_routes(self, other: "RoutingTables") -> bool:
        """Equal node range and identical matrices (infinity may differ)."""
        if self.max_nodes != other.max_nodes:
            return False
        if not np.array_equal(self.next_hop, other.next_hop):
            return False
        mine = np.where(self.dist >= self.infinity, -1, self.dist)
        theirs = np.where(other.dist >= other.infinity, -1, other.dist)
        return bool(np.array_equal(mine, theirs))


@dataclass(frozen=True)
class MessageQuery:
    """A message to forward from source to dest."""
    source: NodeId
    dest: NodeId
    text: str


class TraceStatus(Enum):
    """
    DELIVERED: a full hop sequence from source to dest was found.
    UNREACHABLE: dest has infinite cost from source.
    BROKEN: the next-hop chain dead-ends or loops before reaching dest.
    """

    DELIVERED = "delivered"
    UNREACHABLE = "unreachable"
    BROKEN = "broken"


@dataclass(frozen=True)
class TraceResult:
    """
    Outcome of tracing one source -> dest forwarding path.

    hops lists every node that forwards the message, source first, dest
    excluded. For BROKEN traces it holds the hops walked before the failure.
    """
    source: NodeId
    dest: NodeId
    status: TraceStatus
    cost: Optional[int] = None
    hops: Tuple[NodeId, ...] = ()

    @property
    def delivered(self) -> bool:
        return self.status is TraceStatus.DELIVERED

    @property
    def path(self) -> Tuple[NodeId, ...]:
        """Full node sequence including dest; empty unless delivered."""
        if not self.delivered:
            return ()
        return self.hops + (self.dest,)
