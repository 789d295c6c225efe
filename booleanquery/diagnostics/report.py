"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from booleanquery.diagnostics.codes import DiagnosticSpec
from booleanquery.diagnostics.diagnostic import Diagnostic
from booleanquery.text import TextRange

_FLATTEN_WHITESPACE = str.maketrans("\r\n\t", "   ")


def diagnostic_from_spec(spec: DiagnosticSpec, range: TextRange) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=spec.message,
        range=range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def render_diagnostic(diagnostic: Diagnostic, source: str) -> str:
    """Render a diagnostic with the offending span underlined in `source`.

    `source` must be the text the diagnostic range points into (the cleaned
    query for pipeline diagnostics).
    """
    start, end = diagnostic.range.as_tuple()
    underline = " " * start + "^" * max(diagnostic.range.len().value, 1)
    lines = [
        f"{diagnostic.severity}[{diagnostic.code}] at {start}..{end}: {diagnostic.message}",
        f"  {source.translate(_FLATTEN_WHITESPACE)}",
        f"  {underline}",
    ]
    if diagnostic.hint is not None:
        lines.append(f"  hint: {diagnostic.hint}")
    return "\n".join(lines)
