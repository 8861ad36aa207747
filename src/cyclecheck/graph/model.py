"""Immutable directed graph value.

Holds the ordered node labels and the adjacency relation over node
indices. Both detectors consume a Graph; nothing mutates it after
construction.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from cyclecheck.diagnostics import ErrorTemplate, GraphConstructionError

__all__ = ["Graph"]


@dataclass(frozen=True, slots=True)
class Graph:
    """Directed graph over uniquely labelled nodes.

    Node indices are assigned by position in ``labels``. That declaration
    order is significant: it seeds DFS roots and the initial BFS queue.
    Out-neighbors are always handed to traversals in ascending
    lexicographic label order via ``successors``.

    Attributes:
        labels: Node labels in declaration order
        adjacency: Successor index set for every node index

    Example:
        >>> g = Graph(("A", "B"), (frozenset({1}), frozenset()))
        >>> g.index_of("B")
        1
        >>> g.has_edge(0, 1)
        True
        >>> g.index_of("Z") is None
        True
    """

    labels: tuple[str, ...]
    adjacency: tuple[frozenset[int], ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)
    _sorted_successors: tuple[tuple[int, ...], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate labels and adjacency, then build lookup tables.

        Raises:
            GraphConstructionError: If a label is empty or repeated, the
                adjacency length differs from the label count, or a
                successor index lies outside [0, N).
        """
        node_count = len(self.labels)
        index: dict[str, int] = {}
        for position, label in enumerate(self.labels):
            if not isinstance(label, str) or not label:
                raise GraphConstructionError(ErrorTemplate.empty_label(position))
            if label in index:
                raise GraphConstructionError(
                    ErrorTemplate.duplicate_label(label, position)
                )
            index[label] = position

        if len(self.adjacency) != node_count:
            raise GraphConstructionError(
                ErrorTemplate.matrix_not_square(None, len(self.adjacency), node_count)
            )

        for source, targets in enumerate(self.adjacency):
            for target in targets:
                if not 0 <= target < node_count:
                    raise GraphConstructionError(
                        ErrorTemplate.index_out_of_range(source, target, node_count)
                    )

        # Frozen dataclass: bypass __setattr__ for derived caches
        object.__setattr__(self, "_index", index)
        object.__setattr__(
            self,
            "_sorted_successors",
            tuple(
                tuple(sorted(targets, key=self.labels.__getitem__))
                for targets in self.adjacency
            ),
        )

    @classmethod
    def from_successors(
        cls, labels: Sequence[str], successors: Iterable[Iterable[int]]
    ) -> Graph:
        """Build a Graph from per-node successor index iterables."""
        return cls(tuple(labels), tuple(frozenset(targets) for targets in successors))

    @property
    def node_count(self) -> int:
        """Number of nodes (N)."""
        return len(self.labels)

    @property
    def edge_count(self) -> int:
        """Number of directed edges."""
        return sum(len(targets) for targets in self.adjacency)

    def index_of(self, label: str) -> int | None:
        """Return the index of ``label``, or None when it is not a node."""
        return self._index.get(label)

    def label_of(self, index: int) -> str:
        """Return the label of the node at ``index``."""
        return self.labels[index]

    def has_edge(self, source: int, target: int) -> bool:
        """Return True when the edge ``source -> target`` exists."""
        return target in self.adjacency[source]

    def successors(self, index: int) -> tuple[int, ...]:
        """Out-neighbors of ``index`` in ascending lexicographic label order."""
        return self._sorted_successors[index]

    def edges(self) -> Iterator[tuple[str, str]]:
        """Yield edges as label pairs, row-major in index order."""
        for source, targets in enumerate(self.adjacency):
            for target in sorted(targets):
                yield self.labels[source], self.labels[target]

    def to_matrix(self) -> tuple[tuple[int, ...], ...]:
        """Return the N x N adjacency matrix of 0/1 ints."""
        n = self.node_count
        return tuple(
            tuple(1 if target in targets else 0 for target in range(n))
            for targets in self.adjacency
        )
