"""
Forwarding path reconstruction over converged routing tables.
"""

from typing import List

from errors import NodeRangeError
from graph import NodeId
from routing import NO_NEXT_HOP, RoutingTables, TraceResult, TraceStatus


def trace(source: NodeId, dest: NodeId, tables: RoutingTables) -> TraceResult:
    """
    Follow next hops from source until dest is reached.

    A -1 next hop or a walk longer than max_nodes hops means the tables are
    inconsistent; that is reported as BROKEN rather than looping.
    """
    for node in (source, dest):
        if not 1 <= node <= tables.max_nodes:
            raise NodeRangeError(node, tables.max_nodes)

    cost = tables.cost(source, dest)
    if cost is None:
        return TraceResult(source, dest, TraceStatus.UNREACHABLE)

    hops: List[NodeId] = []
    current = source
    while current != dest:
        if len(hops) >= tables.max_nodes:
            return TraceResult(source, dest, TraceStatus.BROKEN, cost, tuple(hops))
        hops.append(current)
        current = int(tables.next_hop[current, dest])
        if current == NO_NEXT_HOP:
            return TraceResult(source, dest, TraceStatus.BROKEN, cost, tuple(hops))

    return TraceResult(source, dest, TraceStatus.DELIVERED, cost, tuple(hops))
