"""
Readers for the topology, message and change files.

All three formats are whitespace separated, one record per line. Blank
lines and lines starting with '#' are skipped. Any malformed record is
fatal and raises InputFormatError with the offending line number.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from config import REMOVAL_SENTINEL
from errors import InputFormatError
from routing import MessageQuery
from topology_changes import TopologyChange


EdgeTriple = Tuple[int, int, int]


def parse_topology(lines: Iterable[str], source: Optional[str] = None) -> List[EdgeTriple]:
    edges: List[EdgeTriple] = []
    for line_no, fields in _records(lines):
        a, b, cost = _int_triple(fields, source, line_no)
        if cost < 0:
            raise InputFormatError(f"negative link cost {cost}", source, line_no)
        edges.append((a, b, cost))
    return edges


def parse_messages(lines: Iterable[str], source: Optional[str] = None) -> List[MessageQuery]:
    """
    Each line is 'source dest text'; the text keeps its interior spacing.
    """
    messages: List[MessageQuery] = []
    for line_no, raw in _stripped(lines):
        parts = raw.split(None, 2)
        if len(parts) < 2:
            raise InputFormatError("expected 'source dest message'", source, line_no)
        src, dest = (_node_id(p, source, line_no) for p in parts[:2])
        text = parts[2] if len(parts) == 3 else ""
        messages.append(MessageQuery(src, dest, text))
    return messages


def parse_changes(
    lines: Iterable[str],
    source: Optional[str] = None,
    removal_sentinel: int = REMOVAL_SENTINEL,
) -> List[TopologyChange]:
    changes: List[TopologyChange] = []
    for line_no, fields in _records(lines):
        a, b, cost = _int_triple(fields, source, line_no)
        if cost < 0 and cost != removal_sentinel:
            raise InputFormatError(f"negative link cost {cost}", source, line_no)
        changes.append(TopologyChange(a, b, cost))
    return changes


def read_topology(path: Path) -> List[EdgeTriple]:
    return parse_topology(_read_lines(path), str(path))


def read_messages(path: Path) -> List[MessageQuery]:
    return parse_messages(_read_lines(path), str(path))


def read_changes(path: Path, removal_sentinel: int = REMOVAL_SENTINEL) -> List[TopologyChange]:
    return parse_changes(_read_lines(path), str(path), removal_sentinel)


# --- Internal helpers ---------------------------------------------------------

def _read_lines(path: Path) -> List[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise InputFormatError(f"cannot open: {exc.strerror or exc}", str(path)) from exc
    except UnicodeDecodeError as exc:
        raise InputFormatError(f"not valid UTF-8 text at byte {exc.start}", str(path)) from exc


def _stripped(lines: Iterable[str]) -> Iterable[Tuple[int, str]]:
    for line_no, line in enumerate(lines, start=1):
        raw = line.strip()
        if not raw or raw.startswith("#"):
            continue
        yield line_no, raw


def _records(lines: Iterable[str]) -> Iterable[Tuple[int, List[str]]]:
    for line_no, raw in _stripped(lines):
        yield line_no, raw.split()


def _int_triple(fields: List[str], source: Optional[str], line_no: int) -> EdgeTriple:
    if len(fields) != 3:
        raise InputFormatError(f"expected 3 fields, got {len(fields)}", source, line_no)
    a = _node_id(fields[0], source, line_no)
    b = _node_id(fields[1], source, line_no)
    try:
        cost = int(fields[2])
    except ValueError:
        raise InputFormatError(f"cost {fields[2]!r} is not an integer", source, line_no) from None
    return a, b, cost


def _node_id(field: str, source: Optional[str], line_no: int) -> int:
    try:
        node = int(field)
    except ValueError:
        raise InputFormatError(f"node ID {field!r} is not an integer", source, line_no) from None
    if node < 1:
        raise InputFormatError(f"node ID {node} must be >= 1", source, line_no)
    return node
