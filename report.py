"""
Text rendering of forwarding tables and message traces.
"""

from pathlib import Path
from typing import Iterable, List, TextIO

from routing import MessageQuery, RoutingTables, TraceResult, TraceStatus
from simulation import Epoch


def format_forwarding_tables(tables: RoutingTables) -> List[str]:
    """
    One 'dest next_hop cost' line per reachable destination, node by node.
    """
    lines: List[str] = []
    for node in range(1, tables.max_nodes + 1):
        for entry in tables.forwarding_table(node):
            lines.append(f"{entry.dest} {entry.next_hop} {entry.cost}")
    return lines


def format_trace(msg: MessageQuery, result: TraceResult) -> str:
    prefix = f"from {msg.source} to {msg.dest}"
    if result.status is TraceStatus.UNREACHABLE:
        return f"{prefix} cost infinite hops unreachable message {msg.text}"
    if result.status is TraceStatus.BROKEN:
        return f"{prefix} cost {result.cost} hops broken message {msg.text}"
    if not result.hops:
        # source == dest: nothing forwards the message
        return f"{prefix} cost {result.cost} hops message {msg.text}"
    hops = " ".join(str(h) for h in result.hops)
    return f"{prefix} cost {result.cost} hops {hops} message {msg.text}"


def format_epoch(epoch: Epoch) -> List[str]:
    lines = format_forwarding_tables(epoch.tables)
    lines.extend(format_trace(msg, res) for msg, res in epoch.traces)
    return lines


def write_report(epochs: Iterable[Epoch], out: TextIO) -> None:
    """Write every epoch in order, separated by a blank line."""
    for i, epoch in enumerate(epochs):
        if i:
            out.write("\n")
        for line in format_epoch(epoch):
            out.write(line + "\n")


def write_report_file(epochs: Iterable[Epoch], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        write_report(epochs, f)
