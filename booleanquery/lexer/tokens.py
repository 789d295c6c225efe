"""Lexer tokens and the token-kind classifier."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Final

from booleanquery.text import TextRange

# OR has no operator in the boolean full-text grammar, so it travels through the
# rewrite passes as a character that the whitelist can never let through.
OR_SENTINEL: Final[str] = "§"

LEFT_BRACKET: Final[str] = "("
RIGHT_BRACKET: Final[str] = ")"
QUOTE: Final[str] = '"'
WILDCARD: Final[str] = "*"
HYPHEN: Final[str] = "-"

DELIMITERS: Final[tuple[str, ...]] = (
    "\r\n",
    "!=",
    ">=",
    "<=",
    "<>",
    ":=",
    "\\",
    "&&",
    ">",
    "<",
    "|",
    "=",
    "^",
    "(",
    ")",
    "\t",
    "\n",
    "'",
    '"',
    "`",
    ",",
    "@",
    " ",
    "+",
    "-",
    "*",
    "/",
    ";",
)


class BooleanOperator(StrEnum):
    """Boolean connectives, valued by their keyword spelling."""

    AND = "and"
    OR = "or"
    NOT = "not"

    @property
    def character(self) -> str:
        """Canonical operator character emitted in place of the keyword."""
        match self:
            case BooleanOperator.AND:
                return "+"
            case BooleanOperator.OR:
                return OR_SENTINEL
            case BooleanOperator.NOT:
                return HYPHEN


class TokenKind(IntEnum):
    # -------------------------
    # Trivia
    # -------------------------
    WHITESPACE = 10  # blank, including the empty string

    # -------------------------
    # Operands
    # -------------------------
    OPERAND = 20
    PHRASE = 21  # starts with a double quote
    DELIMITER = 22  # non-structural delimiter, e.g. `,` or `>=`

    # -------------------------
    # Operators
    # -------------------------
    AND_KEYWORD = 30
    OR_KEYWORD = 31
    NOT_KEYWORD = 32
    AND_OPERATOR = 33  # +
    OR_OPERATOR = 34  # sentinel
    NOT_OPERATOR = 35  # -

    # -------------------------
    # Structure
    # -------------------------
    LPAREN = 40
    RPAREN = 41
    QUOTE = 42  # lone quote, only seen before phrases are merged

    @property
    def is_blank(self) -> bool:
        return self is TokenKind.WHITESPACE

    @property
    def is_bracket(self) -> bool:
        return self in (TokenKind.LPAREN, TokenKind.RPAREN)

    @property
    def is_operator(self) -> bool:
        return self.operator is not None

    @property
    def is_connective(self) -> bool:
        """AND/OR in keyword or character form; these need operands on both sides."""
        return self.operator in (BooleanOperator.AND, BooleanOperator.OR)

    @property
    def is_negation(self) -> bool:
        return self.operator is BooleanOperator.NOT

    @property
    def operator(self) -> BooleanOperator | None:
        return _OPERATOR_BY_KIND.get(self)


_OPERATOR_BY_KIND: Final[dict[TokenKind, BooleanOperator]] = {
    TokenKind.AND_KEYWORD: BooleanOperator.AND,
    TokenKind.AND_OPERATOR: BooleanOperator.AND,
    TokenKind.OR_KEYWORD: BooleanOperator.OR,
    TokenKind.OR_OPERATOR: BooleanOperator.OR,
    TokenKind.NOT_KEYWORD: BooleanOperator.NOT,
    TokenKind.NOT_OPERATOR: BooleanOperator.NOT,
}

_FIXED_KINDS: Final[dict[str, TokenKind]] = {
    BooleanOperator.AND.value: TokenKind.AND_KEYWORD,
    BooleanOperator.OR.value: TokenKind.OR_KEYWORD,
    BooleanOperator.NOT.value: TokenKind.NOT_KEYWORD,
    BooleanOperator.AND.character: TokenKind.AND_OPERATOR,
    BooleanOperator.OR.character: TokenKind.OR_OPERATOR,
    BooleanOperator.NOT.character: TokenKind.NOT_OPERATOR,
    LEFT_BRACKET: TokenKind.LPAREN,
    RIGHT_BRACKET: TokenKind.RPAREN,
    QUOTE: TokenKind.QUOTE,
}

_DELIMITER_SET: Final[frozenset[str]] = frozenset(DELIMITERS)


def token_kind(token: str) -> TokenKind:
    """Classify a token string.

    Kind is derived from the text alone, so the passes can keep working on
    plain strings while dispatching on a closed set of kinds.
    """
    kind = _FIXED_KINDS.get(token)
    if kind is not None:
        return kind
    if not token.strip():
        return TokenKind.WHITESPACE
    if token.startswith(QUOTE):
        return TokenKind.PHRASE
    if token in _DELIMITER_SET:
        return TokenKind.DELIMITER
    return TokenKind.OPERAND


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token with its range in the lexed text."""

    text: str
    range: TextRange

    @property
    def kind(self) -> TokenKind:
        return token_kind(self.text)
