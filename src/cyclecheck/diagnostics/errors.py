"""Graph exception hierarchy with structured diagnostics.

All exceptions may carry Diagnostic objects for rich error information.
Detection itself never raises; only graph construction does.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class GraphError(Exception):
    """Base exception for all cyclecheck errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GraphError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GraphConstructionError(GraphError):
    """Structurally invalid graph input.

    Raised for empty or duplicate labels, successor indices outside
    [0, N), and non-square adjacency matrices. Edges that merely name an
    unknown label are not errors; builders drop them.
    """
