"""Balance checks that decide whether a query can be converted at all."""

from __future__ import annotations

from collections.abc import Sequence

from booleanquery.diagnostics import (
    QUERY_UNBALANCED_QUOTES,
    QUERY_UNCLOSED_BRACKET,
    QUERY_UNEXPECTED_CLOSING_BRACKET,
    Diagnostic,
    diagnostic_from_spec,
)
from booleanquery.lexer import QUOTE, TokenKind, token_kind
from booleanquery.text import TextRange, TextSize


def check_quote_balance(text: str) -> Diagnostic | None:
    """Phrases pair quotes simply, so an odd count leaves the last one open."""
    if text.count(QUOTE) % 2 == 0:
        return None
    unpaired = text.rfind(QUOTE)
    return diagnostic_from_spec(
        QUERY_UNBALANCED_QUOTES,
        TextRange.at(TextSize.from_int(unpaired), TextSize.of(QUOTE)),
    )


def check_bracket_balance(tokens: Sequence[str]) -> Diagnostic | None:
    """Check bracket order over a phrase-merged stream.

    Token texts concatenate back to the cleaned query, so ranges are
    accumulated from token lengths.
    """
    open_offsets: list[int] = []
    offset = 0
    for token in tokens:
        kind = token_kind(token)
        if kind == TokenKind.LPAREN:
            open_offsets.append(offset)
        elif kind == TokenKind.RPAREN:
            if not open_offsets:
                return diagnostic_from_spec(QUERY_UNEXPECTED_CLOSING_BRACKET, _bracket_range(offset))
            open_offsets.pop()
        offset += len(token)

    if open_offsets:
        return diagnostic_from_spec(QUERY_UNCLOSED_BRACKET, _bracket_range(open_offsets[0]))
    return None


def _bracket_range(offset: int) -> TextRange:
    return TextRange.at(TextSize.from_int(offset), TextSize.from_int(1))
