"""Diagnostics."""

from booleanquery.diagnostics.codes import (
    QUERY_UNBALANCED_QUOTES,
    QUERY_UNCLOSED_BRACKET,
    QUERY_UNEXPECTED_CLOSING_BRACKET,
    DiagnosticSpec,
)
from booleanquery.diagnostics.diagnostic import Diagnostic, Severity
from booleanquery.diagnostics.report import diagnostic_from_spec, has_errors, render_diagnostic

__all__ = [
    "QUERY_UNBALANCED_QUOTES",
    "QUERY_UNCLOSED_BRACKET",
    "QUERY_UNEXPECTED_CLOSING_BRACKET",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "diagnostic_from_spec",
    "has_errors",
    "render_diagnostic",
]
