"""Graph data model and builders.

Python 3.13+.
"""

from .builder import build_graph, default_graph, graph_from_matrix, parse_labels
from .model import Graph

__all__ = [
    "Graph",
    "build_graph",
    "default_graph",
    "graph_from_matrix",
    "parse_labels",
]
