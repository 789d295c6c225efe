"""Lexer."""

from booleanquery.lexer.lexer import Lexer, dump_tokens
from booleanquery.lexer.tokens import (
    DELIMITERS,
    HYPHEN,
    LEFT_BRACKET,
    OR_SENTINEL,
    QUOTE,
    RIGHT_BRACKET,
    WILDCARD,
    BooleanOperator,
    Token,
    TokenKind,
    token_kind,
)

__all__ = [
    "DELIMITERS",
    "HYPHEN",
    "LEFT_BRACKET",
    "OR_SENTINEL",
    "QUOTE",
    "RIGHT_BRACKET",
    "WILDCARD",
    "BooleanOperator",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "token_kind",
]
