"""Algorithm dispatch for cycle detection.

Python 3.13+.
"""

import logging

from cyclecheck.enums import Algorithm
from cyclecheck.graph import Graph

from .bfs import detect_cycle_bfs
from .dfs import detect_cycle_dfs
from .results import DetectionResult

__all__ = ["detect_cycle"]

logger = logging.getLogger(__name__)


def detect_cycle(graph: Graph, algorithm: Algorithm | str = Algorithm.DFS) -> DetectionResult:
    """Run the requested detector on ``graph``.

    Args:
        graph: Graph to inspect
        algorithm: Algorithm member or its string value ("dfs", "bfs")

    Returns:
        The detector's result

    Raises:
        ValueError: If ``algorithm`` names no known algorithm
    """
    selected = Algorithm(algorithm)
    match selected:
        case Algorithm.DFS:
            result = detect_cycle_dfs(graph)
        case Algorithm.BFS:
            result = detect_cycle_bfs(graph)

    logger.debug(
        "%s on %d nodes / %d edges: %s",
        selected,
        graph.node_count,
        graph.edge_count,
        type(result).__name__,
    )
    return result
