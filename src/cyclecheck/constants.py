"""Shared constants for cyclecheck.

Centralizes the demo graph used by the command-line front end and the
examples, along with rendering defaults. Placing these here keeps the
graph builders and the renderer free of hardcoded data.

Constants are grouped by domain:
- Demo graph: default node order and edge structure
- Rendering: separators used in textual output

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Demo graph
    "DEFAULT_NODE_LABELS",
    "DEFAULT_EDGES",
    # Rendering
    "CYCLE_SEPARATOR",
    "TOPOLOGICAL_SEPARATOR",
]

# ============================================================================
# DEMO GRAPH
# ============================================================================

# Declaration order matters: it is the DFS root-seeding order and the
# BFS initial queue order. It is deliberately not alphabetical.
DEFAULT_NODE_LABELS: tuple[str, ...] = ("D", "E", "A", "C", "F", "B", "G")

# D->A, E->A, A->C, C->F, F->B, C->B, C->G, C->E (acyclic)
DEFAULT_EDGES: tuple[tuple[str, str], ...] = (
    ("D", "A"),
    ("E", "A"),
    ("A", "C"),
    ("C", "F"),
    ("F", "B"),
    ("C", "B"),
    ("C", "G"),
    ("C", "E"),
)

# ============================================================================
# RENDERING
# ============================================================================

CYCLE_SEPARATOR: str = " "
TOPOLOGICAL_SEPARATOR: str = " -> "
