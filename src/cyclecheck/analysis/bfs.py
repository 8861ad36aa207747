"""Breadth-first cycle detection via Kahn's topological sort.

Python 3.13+.
"""

import logging
from collections import deque

from cyclecheck.graph import Graph

from .results import CycleFound, DetectionResult, NoCycle

__all__ = ["detect_cycle_bfs"]

logger = logging.getLogger(__name__)


def detect_cycle_bfs(graph: Graph) -> DetectionResult:
    """Find a cycle, or a topological order, using Kahn's algorithm.

    The queue is seeded with every zero in-degree node in declaration
    order. Each dequeued node decrements its out-neighbors in ascending
    lexicographic label order, enqueueing those that reach zero.

    When every node is consumed the graph is acyclic and the consumption
    order is returned as the topological order. Otherwise the unconsumed
    nodes (the residual set) contain a cycle, which is rebuilt by
    ``_trace_residual_cycle``.

    Args:
        graph: Graph to inspect

    Returns:
        NoCycle carrying the topological order, or CycleFound

    Example:
        >>> from cyclecheck.graph import build_graph
        >>> detect_cycle_bfs(build_graph("BA", [("B", "A")]))
        NoCycle(topological_order=('B', 'A'))
    """
    node_count = graph.node_count
    in_degree = [0] * node_count
    for targets in graph.adjacency:
        for target in targets:
            in_degree[target] += 1

    queue = deque(i for i in range(node_count) if in_degree[i] == 0)
    order: list[int] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph.successors(node):
            in_degree[neighbor] -= 1
            if in_degree[neighbor] == 0:
                queue.append(neighbor)

    if len(order) == node_count:
        logger.debug("BFS consumed all %d nodes; graph is acyclic", node_count)
        return NoCycle(tuple(graph.label_of(i) for i in order))

    residual = [i for i in range(node_count) if in_degree[i] > 0]
    logger.debug(
        "BFS consumed %d of %d nodes; %d residual",
        len(order),
        node_count,
        len(residual),
    )
    return _trace_residual_cycle(graph, residual)


def _trace_residual_cycle(graph: Graph, residual: list[int]) -> CycleFound:
    """Rebuild a cycle from the residual set by single-predecessor tracing.

    Each residual node ``v`` is linked to the first residual ``u`` (in
    index order) with an edge ``u -> v``. Starting at the first residual
    node, predecessor links are followed until a node repeats; that node
    starts the cycle. Walking predecessors from it and reversing yields
    the cycle in forward edge order.

    Every residual node keeps at least one incoming edge from another
    residual node (consumed nodes have already been subtracted from its
    in-degree), so the walk always closes. Should a node nonetheless lack
    a predecessor, the trace stops there and the partial path is returned
    with ``closed=False``; the graph is still reported cyclic since Kahn's
    algorithm failed to consume it.
    """
    predecessor: dict[int, int] = {}
    for v in residual:
        for u in residual:
            if graph.has_edge(u, v):
                predecessor[v] = u
                break

    seen = [False] * graph.node_count
    current = residual[0]
    while current in predecessor and not seen[current]:
        seen[current] = True
        current = predecessor[current]
    start = current

    backward = [start]
    tracer = predecessor.get(start)
    while tracer is not None and tracer != start:
        backward.append(tracer)
        tracer = predecessor.get(tracer)
    closed = tracer == start

    backward.reverse()
    labels = tuple(graph.label_of(i) for i in backward)
    if not closed:
        logger.warning(
            "Residual predecessor trace from '%s' did not close", graph.label_of(start)
        )
        return CycleFound(labels, closed=False)
    return CycleFound((*labels, labels[0]))
