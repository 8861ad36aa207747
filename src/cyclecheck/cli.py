"""Command-line front end.

Runs one or both detectors over the demo graph, optionally in a custom
node order and with extra edges, and prints the outcome.

Exit Codes:
    0: Every selected detector found the graph acyclic
    1: A cycle was found
    2: Invalid arguments or graph input

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from cyclecheck.analysis import detect_cycle
from cyclecheck.config import RunConfig
from cyclecheck.constants import DEFAULT_EDGES, DEFAULT_NODE_LABELS
from cyclecheck.diagnostics import GraphError
from cyclecheck.enums import Algorithm
from cyclecheck.graph import default_graph, parse_labels
from cyclecheck.rendering import format_adjacency_matrix, format_result

__all__ = ["build_parser", "main", "parse_config", "run"]

logger = logging.getLogger(__name__)

_TITLES = {
    Algorithm.DFS: "Graph Cycle Detection using DFS (Lexicographical Depth Rule)",
    Algorithm.BFS: "Graph Cycle Detection using BFS (Kahn's Algorithm)",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    default_edges = ", ".join(f"{s}->{t}" for s, t in DEFAULT_EDGES)
    parser = argparse.ArgumentParser(
        prog="cyclecheck",
        description="Detect a cycle in the demo directed graph using DFS and/or BFS.",
        epilog=(
            f"Default node order: {' '.join(DEFAULT_NODE_LABELS)}. "
            f"Demo edges: {default_edges}."
        ),
    )
    parser.add_argument(
        "--algorithm",
        choices=["dfs", "bfs", "both"],
        default="both",
        help="Detector to run (default: both)",
    )
    parser.add_argument(
        "--labels",
        metavar="LABELS",
        help='Custom node order, whitespace separated (e.g. "A B C D E F G")',
    )
    parser.add_argument(
        "--edge",
        nargs=2,
        action="append",
        metavar=("SRC", "DST"),
        default=[],
        help="Add an edge SRC -> DST on top of the demo edges (repeatable)",
    )
    parser.add_argument(
        "--show-matrix",
        action="store_true",
        help="Print the adjacency matrix before detection",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def parse_config(argv: Sequence[str] | None = None) -> RunConfig:
    """Parse command-line arguments into a RunConfig.

    Raises:
        SystemExit: On invalid arguments (argparse convention, status 2)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.algorithm == "both":
        algorithms: tuple[Algorithm, ...] = (Algorithm.DFS, Algorithm.BFS)
    else:
        algorithms = (Algorithm(args.algorithm),)

    try:
        return RunConfig(
            algorithms=algorithms,
            labels=parse_labels(args.labels) if args.labels is not None else None,
            extra_edges=tuple((src, dst) for src, dst in args.edge),
            show_matrix=args.show_matrix,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))


def run(config: RunConfig) -> int:
    """Execute a configured run, printing to stdout.

    Returns:
        Process exit status
    """
    try:
        graph = default_graph(config.labels, config.extra_edges)
    except GraphError as e:
        logger.error("Invalid graph input: %s", e)
        print(e, file=sys.stderr)
        return 2

    print(f"Node order: {', '.join(graph.labels)}")
    if config.show_matrix:
        print("Adjacency Matrix:")
        print(format_adjacency_matrix(graph))
    print()

    cycle_found = False
    for algorithm in config.algorithms:
        result = detect_cycle(graph, algorithm)
        cycle_found = cycle_found or result.has_cycle
        print(_TITLES[algorithm])
        print(format_result(result))
        print()

    return 1 if cycle_found else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Console script entry point."""
    config = parse_config(argv)
    logging.basicConfig(
        level=config.numeric_log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(config)
