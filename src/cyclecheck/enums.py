"""Enumerations for cyclecheck type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Algorithm(StrEnum):
    """Cycle detection algorithm.

    StrEnum provides automatic string conversion: str(Algorithm.DFS) == "dfs"
    """

    DFS = "dfs"
    """Depth-first search with recursion-stack tracking"""

    BFS = "bfs"
    """Breadth-first search via Kahn's topological sort"""


__all__ = [
    "Algorithm",
]
