"""
Simulation driver: initial convergence, then one epoch per topology change.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from adjacency_list_graph import AdjacencyListGraph, build_graph
from algorithms import DistanceVectorEngine
from config import EngineConfig
from distance_vector_engine import SimpleDistanceVectorEngine
from errors import NodeRangeError
from graph import NodeId
from path_tracer import trace
from routing import MessageQuery, RoutingTables, TraceResult, TraceStatus
from topology_changes import TopologyChange, apply_change


logger = logging.getLogger(__name__)


@dataclass
class Epoch:
    """
    Tables and answered messages for one convergence.

    change is None for the initial convergence.
    """
    index: int
    change: Optional[TopologyChange]
    tables: RoutingTables
    traces: List[Tuple[MessageQuery, TraceResult]]


@dataclass(frozen=True)
class RejectedChange:
    position: int
    change: TopologyChange
    reason: str


@dataclass
class SimulationResult:
    epochs: List[Epoch] = field(default_factory=list)
    rejected_changes: List[RejectedChange] = field(default_factory=list)


def answer_messages(messages: Iterable[MessageQuery], tables: RoutingTables) -> List[Tuple[MessageQuery, TraceResult]]:
    """
    Trace every message against the current tables.

    Messages naming a node outside the topology are reported unreachable.
    """
    answered: List[Tuple[MessageQuery, TraceResult]] = []
    for msg in messages:
        try:
            result = trace(msg.source, msg.dest, tables)
        except NodeRangeError as exc:
            logger.warning("message %d -> %d: %s", msg.source, msg.dest, exc)
            result = TraceResult(msg.source, msg.dest, TraceStatus.UNREACHABLE)
        if result.status is TraceStatus.BROKEN:
            logger.warning("message %d -> %d: next-hop chain broken after %s", msg.source, msg.dest, list(result.hops))
        answered.append((msg, result))
    return answered


def run_simulation(
    edges: Iterable[Tuple[NodeId, NodeId, int]],
    messages: Sequence[MessageQuery],
    changes: Iterable[TopologyChange],
    config: Optional[EngineConfig] = None,
    engine: Optional[DistanceVectorEngine] = None,
) -> SimulationResult:
    """
    Build the graph, converge, then replay changes strictly in order.

    Each accepted change is applied in place and followed by a full
    recompute and a fresh answer for every message. Changes that name an
    unknown node or carry an invalid cost are logged and skipped.
    """
    cfg = config or EngineConfig()
    dv_engine = engine or SimpleDistanceVectorEngine(cfg)

    graph = build_graph(edges)
    logger.info("topology: %d nodes, %d links", graph.max_nodes, len(graph.edge_triples()))

    result = SimulationResult()
    result.epochs.append(_converge(graph, dv_engine, messages, 0, None))

    for position, change in enumerate(changes, start=1):
        try:
            apply_change(graph, change.node1, change.node2, change.cost, cfg.removal_sentinel)
        except ValueError as exc:
            # NodeRangeError is a ValueError too.
            logger.warning("change %d (%d, %d, %d) rejected: %s",
                           position, change.node1, change.node2, change.cost, exc)
            result.rejected_changes.append(RejectedChange(position, change, str(exc)))
            continue
        result.epochs.append(_converge(graph, dv_engine, messages, len(result.epochs), change))

    return result


def _converge(
    graph: AdjacencyListGraph,
    engine: DistanceVectorEngine,
    messages: Sequence[MessageQuery],
    index: int,
    change: Optional[TopologyChange],
) -> Epoch:
    tables = engine.recompute(graph)
    logger.info("epoch %d converged in %d passes", index, tables.passes)
    return Epoch(index, change, tables, answer_messages(messages, tables))
