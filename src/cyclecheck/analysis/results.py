"""Tagged detection results.

Every detector returns exactly one of ``NoCycle`` or ``CycleFound``.
Both are frozen values; match on the class or test ``has_cycle``.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeIs

__all__ = [
    "CycleFound",
    "DetectionResult",
    "NoCycle",
    "is_cycle_found",
]


@dataclass(frozen=True, slots=True)
class NoCycle:
    """The graph is acyclic.

    Attributes:
        topological_order: Labels in a valid topological order (BFS only);
            None when the detector does not compute one (DFS)
    """

    topological_order: tuple[str, ...] | None = None

    @property
    def has_cycle(self) -> bool:
        """Always False."""
        return False


@dataclass(frozen=True, slots=True)
class CycleFound:
    """The graph contains a cycle.

    Attributes:
        path: Cycle labels in traversal order with the first label
            repeated at the end, e.g. ("A", "B", "C", "A")
        closed: False only when BFS predecessor tracing ended at a node
            without a residual predecessor; ``path`` is then the partial
            trace and does not close
    """

    path: tuple[str, ...]
    closed: bool = True

    @property
    def has_cycle(self) -> bool:
        """Always True."""
        return True


type DetectionResult = NoCycle | CycleFound


def is_cycle_found(result: DetectionResult) -> TypeIs[CycleFound]:
    """Narrow a detection result to CycleFound."""
    return isinstance(result, CycleFound)
