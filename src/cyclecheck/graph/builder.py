"""Graph construction from labelled edges or adjacency matrices.

These builders resolve labels to indices before a Graph is created, so
the detectors only ever see already-resolved indices. Edges naming an
unknown label are dropped rather than rejected; this is what lets the
demo edge structure be reused over a custom node order.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from cyclecheck.constants import DEFAULT_EDGES, DEFAULT_NODE_LABELS
from cyclecheck.diagnostics import ErrorTemplate, GraphConstructionError

from .model import Graph

__all__ = [
    "build_graph",
    "default_graph",
    "graph_from_matrix",
    "parse_labels",
]

logger = logging.getLogger(__name__)


def parse_labels(text: str) -> tuple[str, ...]:
    """Split whitespace-separated node labels, preserving order.

    Example:
        >>> parse_labels("A B  C")
        ('A', 'B', 'C')
    """
    return tuple(text.split())


def build_graph(
    labels: Iterable[str],
    edges: Iterable[tuple[str, str]],
) -> Graph:
    """Build a Graph from node labels and (source, target) label pairs.

    Pairs that reference a label outside ``labels`` are dropped. Repeated
    pairs collapse into one edge.

    Args:
        labels: Node labels in declaration order
        edges: Directed edges as (source_label, target_label)

    Returns:
        Immutable Graph

    Raises:
        GraphConstructionError: If a label is empty or repeated
    """
    label_tuple = tuple(labels)
    index: dict[str, int] = {}
    for position, label in enumerate(label_tuple):
        # Must precede edge resolution against this map
        if isinstance(label, str) and label in index:
            raise GraphConstructionError(ErrorTemplate.duplicate_label(label, position))
        index[label] = position

    successors: list[set[int]] = [set() for _ in label_tuple]
    for source, target in edges:
        u = index.get(source)
        v = index.get(target)
        if u is None or v is None:
            logger.debug("Dropped edge %s -> %s: unknown label", source, target)
            continue
        successors[u].add(v)

    return Graph.from_successors(label_tuple, successors)


def graph_from_matrix(
    labels: Sequence[str],
    matrix: Sequence[Sequence[int | bool]],
) -> Graph:
    """Build a Graph from an N x N adjacency matrix.

    ``matrix[u][v]`` truthy means the edge ``u -> v`` exists.

    Raises:
        GraphConstructionError: If the matrix is not N x N
    """
    node_count = len(labels)
    if len(matrix) != node_count:
        raise GraphConstructionError(
            ErrorTemplate.matrix_not_square(None, len(matrix), node_count)
        )
    for row_index, row in enumerate(matrix):
        if len(row) != node_count:
            raise GraphConstructionError(
                ErrorTemplate.matrix_not_square(row_index, len(row), node_count)
            )

    return Graph.from_successors(
        labels,
        ({v for v, cell in enumerate(row) if cell} for row in matrix),
    )


def default_graph(
    labels: Iterable[str] | None = None,
    extra_edges: Iterable[tuple[str, str]] = (),
) -> Graph:
    """Build the demo graph.

    Uses the fixed edge structure D->A, E->A, A->C, C->F, F->B, C->B,
    C->G, C->E. With ``labels`` omitted the nodes are declared in the
    order D E A C F B G; otherwise ``labels`` gives a custom declaration
    order (and may omit or add nodes).

    Args:
        labels: Custom node order, or None for the default order
        extra_edges: Additional edges appended to the demo structure

    Returns:
        Immutable Graph
    """
    node_labels = DEFAULT_NODE_LABELS if labels is None else tuple(labels)
    return build_graph(node_labels, (*DEFAULT_EDGES, *extra_edges))
