"""Run configuration for the command-line front end.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cyclecheck.enums import Algorithm

__all__ = ["RunConfig"]

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable settings for one ``cyclecheck`` invocation.

    Constructing ``RunConfig()`` with no arguments runs both detectors on
    the demo graph in its default node order.

    Attributes:
        algorithms: Detectors to run, in order (default: DFS then BFS)
        labels: Custom node order for the demo edge structure, or None
        extra_edges: Edges added on top of the demo structure
        show_matrix: Print the adjacency matrix before detection
        log_level: Root logging level name (default: WARNING)

    Example:
        >>> config = RunConfig(algorithms=(Algorithm.BFS,), labels=("A", "C", "D"))
        >>> config.numeric_log_level == logging.WARNING
        True
    """

    algorithms: tuple[Algorithm, ...] = (Algorithm.DFS, Algorithm.BFS)
    labels: tuple[str, ...] | None = None
    extra_edges: tuple[tuple[str, str], ...] = ()
    show_matrix: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If no algorithm is selected, an algorithm is
                unknown, or log_level is not a standard level name.
        """
        if not self.algorithms:
            msg = "RunConfig.algorithms must name at least one algorithm"
            raise ValueError(msg)
        object.__setattr__(
            self, "algorithms", tuple(Algorithm(a) for a in self.algorithms)
        )
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            msg = f"RunConfig.log_level must be one of {_LOG_LEVELS}, got {self.log_level!r}"
            raise ValueError(msg)
        object.__setattr__(self, "log_level", level)

    @property
    def numeric_log_level(self) -> int:
        """Logging level as the integer ``logging`` expects."""
        return logging.getLevelNamesMapping()[self.log_level]
