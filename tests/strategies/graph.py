"""Hypothesis strategies for directed graph generation.

Provides reusable strategies for generating ``cyclecheck.Graph`` values.
Node declaration order is drawn independently of edge direction so the
detectors' seeding order and lexicographic tie-break are both exercised.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - graphs: Emits ``strategy=graph_{topology}``

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from cyclecheck import Graph, build_graph

__all__ = [
    "graphs",
    "node_labels",
]

# Constrained alphabet keeps shrinking fast while allowing multi-character
# labels whose lexicographic order differs from declaration order.
node_labels: st.SearchStrategy[str] = st.text(
    alphabet=st.sampled_from("ABCDEFGH"),
    min_size=1,
    max_size=2,
)


@composite
def graphs(
    draw: st.DrawFn,
    *,
    min_nodes: int = 0,
    max_nodes: int = 8,
    allow_cycles: bool | None = None,
) -> Graph:
    """Generate labelled directed graphs.

    Edges run from earlier to later positions of a hidden ranking, which
    keeps the graph acyclic; a cycle is injected afterwards when requested.

    Args:
        draw: Hypothesis draw function.
        min_nodes: Minimum number of nodes.
        max_nodes: Maximum number of nodes.
        allow_cycles: ``True`` forces at least one cycle, ``False``
            guarantees acyclic, ``None`` draws randomly.

    Events emitted:
        - ``strategy=graph_{topology}``: Graph topology category.
    """
    force_cycle = draw(st.booleans()) if allow_cycles is None else allow_cycles
    lower = max(min_nodes, 1) if force_cycle else min_nodes
    labels = draw(
        st.lists(node_labels, min_size=lower, max_size=max_nodes, unique=True)
    )
    ranking = draw(st.permutations(labels))
    n = len(ranking)

    topology = draw(st.sampled_from(["empty", "linear", "star", "dag"]))
    edges: set[tuple[str, str]] = set()

    match topology:
        case "empty":
            event("strategy=graph_empty")

        case "linear":
            event("strategy=graph_linear")
            for i in range(n - 1):
                edges.add((ranking[i], ranking[i + 1]))

        case "star":
            event("strategy=graph_star")
            for spoke in ranking[1:]:
                edges.add((ranking[0], spoke))

        case "dag":
            event("strategy=graph_dag")
            if n >= 2:
                edge_count = draw(st.integers(min_value=0, max_value=n * 2))
                for _ in range(edge_count):
                    src = draw(st.integers(min_value=0, max_value=n - 2))
                    dst = draw(st.integers(min_value=src + 1, max_value=n - 1))
                    edges.add((ranking[src], ranking[dst]))

    if force_cycle:
        i = draw(st.integers(min_value=0, max_value=n - 1))
        j = draw(st.integers(min_value=i, max_value=n - 1))
        if i == j:
            event("strategy=graph_self_loop")
        else:
            event("strategy=graph_back_edge")
        for k in range(i, j):
            edges.add((ranking[k], ranking[k + 1]))
        edges.add((ranking[j], ranking[i]))

    return build_graph(labels, sorted(edges))
