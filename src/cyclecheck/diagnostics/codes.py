"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for graph construction.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Label errors (node declarations)
        2000-2999: Adjacency errors (edge and matrix structure)
    """

    # Label errors (1000-1999)
    EMPTY_LABEL = 1001
    DUPLICATE_LABEL = 1002

    # Adjacency errors (2000-2999)
    INDEX_OUT_OF_RANGE = 2001
    MATRIX_NOT_SQUARE = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        label: Node label involved in the error (if any)
        index: Node index involved in the error (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    label: str | None = None
    index: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DUPLICATE_LABEL]: Node label 'A' is declared more than once
              = label: A
              = index: 3
              = help: Give every node a unique label

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
