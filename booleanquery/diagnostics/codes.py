"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


QUERY_UNBALANCED_QUOTES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_UNBALANCED_QUOTES",
    message="Unbalanced double quotes.",
    hint='Close the phrase with a matching `"` or remove the stray quote.',
    severity="error",
    category="quotes",
)

QUERY_UNEXPECTED_CLOSING_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_UNEXPECTED_CLOSING_BRACKET",
    message="Closing bracket without a matching opening bracket.",
    hint="Remove the extra `)` or add the missing `(` before it.",
    severity="error",
    category="brackets",
)

QUERY_UNCLOSED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_UNCLOSED_BRACKET",
    message="Opening bracket is never closed.",
    hint="Add the missing `)` to close the group.",
    severity="error",
    category="brackets",
)
