"""
Exception hierarchy for distvec.

Construction-time errors (inputs, config, topology) are fatal for a run.
Per-query outcomes such as unreachable destinations are not exceptions.
"""

from typing import Optional


class DistvecError(Exception):
    """Base class for all distvec errors."""


class InputFormatError(DistvecError):
    """
    Input file could not be opened or a record could not be parsed.
    """

    def __init__(self, message: str, path: Optional[str] = None, line_no: Optional[int] = None) -> None:
        self.path = path
        self.line_no = line_no
        location = ""
        if path is not None:
            location = f"{path}:{line_no}: " if line_no is not None else f"{path}: "
        super().__init__(f"{location}{message}")


class NodeRangeError(DistvecError, ValueError):
    """Node ID outside [1, max_nodes]."""

    def __init__(self, node: int, max_nodes: int) -> None:
        self.node = node
        self.max_nodes = max_nodes
        super().__init__(f"node {node} outside valid range [1, {max_nodes}]")


class CostOverflowError(DistvecError):
    """The infinity sentinel cannot be represented without overflow."""


class ConvergenceError(DistvecError):
    """Relaxation did not reach a fixed point within the pass budget."""


class ConfigError(DistvecError):
    """Invalid engine configuration."""
