"""Plain-text rendering of graphs and detection results.

Python 3.13+.
"""

from cyclecheck.analysis import CycleFound, DetectionResult, NoCycle
from cyclecheck.constants import CYCLE_SEPARATOR, TOPOLOGICAL_SEPARATOR
from cyclecheck.graph import Graph

__all__ = [
    "format_adjacency_matrix",
    "format_result",
]


def format_adjacency_matrix(graph: Graph) -> str:
    """Render the adjacency matrix with labelled rows and columns.

    Example:
        >>> from cyclecheck.graph import build_graph
        >>> print(format_adjacency_matrix(build_graph("AB", [("A", "B")])))
            A B
            ----
        A | 0 1
        B | 0 0
    """
    width = max((len(label) for label in graph.labels), default=1)
    margin = " " * (width + 3)

    lines = [
        margin + " ".join(label.ljust(width) for label in graph.labels).rstrip(),
        margin + "-" * ((width + 1) * graph.node_count),
    ]
    for label, row in zip(graph.labels, graph.to_matrix(), strict=True):
        cells = " ".join(str(cell).ljust(width) for cell in row).rstrip()
        lines.append(f"{label.ljust(width)} | {cells}".rstrip())
    return "\n".join(lines)


def format_result(result: DetectionResult) -> str:
    """Render a detection result as a one-line report.

    Example:
        >>> format_result(CycleFound(("A", "B", "A")))
        'Cycle detected: A B A'
        >>> format_result(NoCycle(("B", "A")))
        'No cycle found in the graph. Valid topological sort: B -> A'
    """
    match result:
        case CycleFound(path=path, closed=True):
            return f"Cycle detected: {CYCLE_SEPARATOR.join(path)}"
        case CycleFound(path=path):
            return f"Cycle detected (trace did not close): {CYCLE_SEPARATOR.join(path)}"
        case NoCycle(topological_order=None):
            return "No cycle found in the graph."
        case NoCycle(topological_order=order):
            return (
                "No cycle found in the graph. Valid topological sort: "
                f"{TOPOLOGICAL_SEPARATOR.join(order)}"
            )
    msg = f"Unsupported result type: {type(result).__name__}"
    raise TypeError(msg)
