"""Cycle detection over directed graphs.

Provides two independent detectors (depth-first with recursion-stack
tracking, and Kahn's breadth-first topological sort), their tagged
results, and helpers for checking a result against its graph.

Python 3.13+.
"""

from .bfs import detect_cycle_bfs
from .detect import detect_cycle
from .dfs import detect_cycle_dfs
from .results import CycleFound, DetectionResult, NoCycle, is_cycle_found
from .verify import is_topological_order, is_valid_cycle

__all__ = [
    "CycleFound",
    "DetectionResult",
    "NoCycle",
    "detect_cycle",
    "detect_cycle_bfs",
    "detect_cycle_dfs",
    "is_cycle_found",
    "is_topological_order",
    "is_valid_cycle",
]
