"""Depth-first cycle detection with recursion-stack tracking.

Python 3.13+.
"""

import logging

from cyclecheck.graph import Graph

from .results import CycleFound, DetectionResult, NoCycle

__all__ = ["detect_cycle_dfs"]

logger = logging.getLogger(__name__)


def detect_cycle_dfs(graph: Graph) -> DetectionResult:
    """Find one cycle using depth-first search.

    Roots are seeded in node declaration order. Within one expansion,
    neighbors are visited in ascending lexicographic label order, so the
    reported cycle depends only on labels and edges, never on how the
    adjacency is stored.

    Implements DFS iteratively with an explicit stack of frames
    ``[node, position]`` where ``position`` indexes the node's sorted
    successor tuple. This visits nodes in exactly the order of the
    recursive formulation while avoiding RecursionError on long chains.

    A node is gray (on the recursion stack) from its first visit until
    every successor has been explored. An edge to a gray node is a
    back-edge; the cycle is the current path from that node onward, with
    its label repeated to show closure.

    Args:
        graph: Graph to inspect

    Returns:
        CycleFound for the first back-edge met, otherwise NoCycle
        (with ``topological_order`` None)

    Example:
        >>> from cyclecheck.graph import build_graph
        >>> g = build_graph("ABC", [("A", "B"), ("B", "C"), ("C", "A")])
        >>> detect_cycle_dfs(g)
        CycleFound(path=('A', 'B', 'C', 'A'), closed=True)

    Complexity:
        Time: O(V + E) plus O(E log E) for the sorted successor tables
        Space: O(V) for visited/recursion tracking
    """
    node_count = graph.node_count
    visited = [False] * node_count
    on_stack = [False] * node_count
    path: list[int] = []

    for root in range(node_count):
        if visited[root]:
            continue

        visited[root] = True
        on_stack[root] = True
        path.append(root)
        stack: list[list[int]] = [[root, 0]]

        while stack:
            frame = stack[-1]
            node, position = frame
            successors = graph.successors(node)

            if position == len(successors):
                # Expansion complete with no cycle below this node
                stack.pop()
                path.pop()
                on_stack[node] = False
                continue

            frame[1] = position + 1
            neighbor = successors[position]

            if not visited[neighbor]:
                visited[neighbor] = True
                on_stack[neighbor] = True
                path.append(neighbor)
                stack.append([neighbor, 0])
            elif on_stack[neighbor]:
                start = path.index(neighbor)
                cycle = tuple(graph.label_of(i) for i in path[start:])
                result = CycleFound((*cycle, graph.label_of(neighbor)))
                logger.debug("DFS back-edge %s -> %s", graph.label_of(node), cycle[0])
                return result

    logger.debug("DFS found no cycle in %d nodes", node_count)
    return NoCycle()
