"""Diagnostic system for graph construction errors.

Provides structured error diagnostics with codes, hints and formatting.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import GraphConstructionError, GraphError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GraphConstructionError",
    "GraphError",
    "OutputFormat",
]
