"""Checks that a detection result is consistent with its graph.

Used by callers that want to trust a reported cycle or topological
order without re-deriving it.

Python 3.13+.
"""

from collections.abc import Sequence

from cyclecheck.graph import Graph

__all__ = [
    "is_topological_order",
    "is_valid_cycle",
]


def is_valid_cycle(graph: Graph, path: Sequence[str]) -> bool:
    """Return True when ``path`` is a closed walk along edges of ``graph``.

    A valid cycle has at least two labels, begins and ends with the same
    label, names only known nodes, and every consecutive pair is an edge.

    Example:
        >>> from cyclecheck.graph import build_graph
        >>> g = build_graph("AB", [("A", "B"), ("B", "A")])
        >>> is_valid_cycle(g, ["A", "B", "A"])
        True
        >>> is_valid_cycle(g, ["A", "B"])
        False
    """
    if len(path) < 2 or path[0] != path[-1]:
        return False

    indices = [graph.index_of(label) for label in path]
    if any(i is None for i in indices):
        return False

    return all(
        graph.has_edge(u, v)  # type: ignore[arg-type]
        for u, v in zip(indices, indices[1:], strict=False)
    )


def is_topological_order(graph: Graph, order: Sequence[str]) -> bool:
    """Return True when ``order`` lists every node once, sources before targets."""
    if len(order) != graph.node_count:
        return False

    position: dict[str, int] = {}
    for i, label in enumerate(order):
        if label in position or graph.index_of(label) is None:
            return False
        position[label] = i

    return all(position[source] < position[target] for source, target in graph.edges())
