"""Hypothesis strategies for cyclecheck property-based testing.

Usage:
    from tests.strategies import graphs
    from tests.strategies.graph import node_labels

Event-Emitting Strategies (HypoFuzz-Optimized):
    - graphs: Emits ``strategy=graph_{topology}``
"""

from .graph import graphs, node_labels

__all__ = [
    "graphs",
    "node_labels",
]
