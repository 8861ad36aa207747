"""cyclecheck - cycle detection in directed graphs.

Detects whether a directed graph contains a cycle with two independent
algorithms: depth-first search with recursion-stack tracking, and
breadth-first search via Kahn's topological sort. Both visit
out-neighbors in ascending lexicographic label order, so results are
reproducible regardless of how edges were supplied.

Public API:
    Graph - Immutable labelled directed graph
    build_graph / graph_from_matrix / default_graph - Graph builders
    detect_cycle - Run a detector selected by Algorithm
    detect_cycle_dfs / detect_cycle_bfs - The two detectors
    NoCycle / CycleFound - Tagged detection results
    is_valid_cycle / is_topological_order - Result checks
    format_result / format_adjacency_matrix - Text rendering

Exceptions:
    GraphError - Base exception class
    GraphConstructionError - Structurally invalid graph input

Submodules:
    cyclecheck.diagnostics - Diagnostic codes, templates and formatter
    cyclecheck.cli - Command-line front end (python -m cyclecheck)
"""

from .analysis import (
    CycleFound,
    DetectionResult,
    NoCycle,
    detect_cycle,
    detect_cycle_bfs,
    detect_cycle_dfs,
    is_topological_order,
    is_valid_cycle,
)
from .diagnostics import GraphConstructionError, GraphError
from .enums import Algorithm
from .graph import Graph, build_graph, default_graph, graph_from_matrix, parse_labels
from .rendering import format_adjacency_matrix, format_result

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cyclecheck")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Algorithm",
    "CycleFound",
    "DetectionResult",
    "Graph",
    "GraphConstructionError",
    "GraphError",
    "NoCycle",
    "__version__",
    "build_graph",
    "default_graph",
    "detect_cycle",
    "detect_cycle_bfs",
    "detect_cycle_dfs",
    "format_adjacency_matrix",
    "format_result",
    "graph_from_matrix",
    "is_topological_order",
    "is_valid_cycle",
    "parse_labels",
]
