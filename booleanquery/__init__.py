"""Convert human-typed boolean search expressions into boolean full-text queries."""

from __future__ import annotations

from booleanquery.diagnostics import Diagnostic
from booleanquery.lexer import DELIMITERS, BooleanOperator, Lexer, Token, TokenKind, token_kind
from booleanquery.pipeline import (
    ParserOptions,
    Pipeline,
    QueryParseResult,
    Stage,
    StageSnapshot,
    UnparsableQueryError,
    dump_stages,
)

_DEFAULT_PIPELINE = Pipeline()


def _resolve_pipeline(options: ParserOptions | None) -> Pipeline:
    if options is None:
        return _DEFAULT_PIPELINE
    return Pipeline(options)


def parse(query: str, options: ParserOptions | None = None) -> str | None:
    """Convert `query` to boolean full-text syntax, or None if it is unparsable."""
    return _resolve_pipeline(options).parse(query)


def parse_result(
    query: str,
    options: ParserOptions | None = None,
    *,
    trace: bool = False,
) -> QueryParseResult:
    return _resolve_pipeline(options).parse_result(query, trace=trace)


__all__ = [
    "DELIMITERS",
    "BooleanOperator",
    "Diagnostic",
    "Lexer",
    "ParserOptions",
    "Pipeline",
    "QueryParseResult",
    "Stage",
    "StageSnapshot",
    "Token",
    "TokenKind",
    "UnparsableQueryError",
    "dump_stages",
    "parse",
    "parse_result",
    "token_kind",
]
