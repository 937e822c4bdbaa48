"""
CLI to run a distance-vector routing simulation.

Reads a topology, a message list and an ordered change list, converges the
tables after the initial topology and after every change, and writes the
forwarding tables plus message traces to an output file.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence
import argparse
import logging
import sys

from config import EngineConfig, load_config
from errors import DistvecError
from inputs import read_changes, read_messages, read_topology
from report import write_report_file
from simulation import run_simulation


logger = logging.getLogger("distvec")


def make_logger(level: str = "INFO") -> logging.Logger:
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s", "%H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="distvec", description="Distance-vector routing simulator")
    ap.add_argument("topofile", type=Path, help="Topology file: 'node1 node2 cost' per line")
    ap.add_argument("messagefile", type=Path, help="Message file: 'source dest text' per line")
    ap.add_argument("changesfile", type=Path, help="Change file: 'node1 node2 cost' per line")
    ap.add_argument("-o", "--output", type=Path, default=Path("output.txt"), help="Report path (default: output.txt)")
    ap.add_argument("-c", "--config", type=Path, default=None, help="YAML engine configuration")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log convergence passes at DEBUG level")
    return ap


def run(
    topofile: Path,
    messagefile: Path,
    changesfile: Path,
    output: Path,
    config: Optional[EngineConfig] = None,
) -> int:
    cfg = config or EngineConfig()
    edges = read_topology(topofile)
    messages = read_messages(messagefile)
    changes = read_changes(changesfile, cfg.removal_sentinel)
    logger.info("loaded %d links, %d messages, %d changes", len(edges), len(messages), len(changes))

    result = run_simulation(edges, messages, changes, cfg)
    write_report_file(result.epochs, output)
    logger.info("wrote %d epochs to %s (%d changes rejected)",
                len(result.epochs), output, len(result.rejected_changes))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config) if args.config else EngineConfig()
        if args.verbose:
            cfg = replace(cfg, verbose=True)
        make_logger("DEBUG" if cfg.verbose else "INFO")
        return run(args.topofile, args.messagefile, args.changesfile, args.output, cfg)
    except DistvecError as exc:
        logger.error("%s", exc)
        return 1
    except ValueError as exc:
        # Bad topology contents such as an out-of-range or negative value.
        logger.error("invalid topology: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
