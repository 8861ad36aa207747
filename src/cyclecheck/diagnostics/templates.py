"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All construction error messages are created here so exception
    constructors never build f-strings inline.
    """

    @staticmethod
    def empty_label(index: int) -> Diagnostic:
        """Node label is empty or not a string.

        Args:
            index: Position of the offending label in the node list

        Returns:
            Diagnostic for EMPTY_LABEL
        """
        msg = f"Node label at index {index} must be a non-empty string"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_LABEL,
            message=msg,
            hint="Use a printable name such as 'A' for every node",
            index=index,
        )

    @staticmethod
    def duplicate_label(label: str, index: int) -> Diagnostic:
        """Node label declared twice.

        Args:
            label: The repeated label
            index: Position of the second declaration

        Returns:
            Diagnostic for DUPLICATE_LABEL
        """
        msg = f"Node label '{label}' is declared more than once"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_LABEL,
            message=msg,
            hint="Give every node a unique label",
            label=label,
            index=index,
        )

    @staticmethod
    def index_out_of_range(source: int, target: int, node_count: int) -> Diagnostic:
        """Successor index outside [0, N).

        Args:
            source: Index of the node owning the edge
            target: Offending successor index
            node_count: Number of nodes in the graph

        Returns:
            Diagnostic for INDEX_OUT_OF_RANGE
        """
        msg = (
            f"Edge {source} -> {target} references a node outside "
            f"[0, {node_count})"
        )
        return Diagnostic(
            code=DiagnosticCode.INDEX_OUT_OF_RANGE,
            message=msg,
            hint="Resolve edge endpoints with Graph.index_of before construction",
            index=target,
        )

    @staticmethod
    def matrix_not_square(row: int | None, width: int, node_count: int) -> Diagnostic:
        """Adjacency matrix shape does not match the node list.

        Args:
            row: First offending row, or None when the row count is wrong
            width: Length of the offending row, or the number of rows
            node_count: Number of node labels

        Returns:
            Diagnostic for MATRIX_NOT_SQUARE
        """
        if row is None:
            detail = f"got {width} rows"
        else:
            detail = f"row {row} has {width} entries"
        msg = f"Adjacency matrix must be {node_count}x{node_count}; {detail}"
        return Diagnostic(
            code=DiagnosticCode.MATRIX_NOT_SQUARE,
            message=msg,
            hint="Provide one row per node and one column per node",
            index=row,
        )
