"""Lexer."""

from collections.abc import Iterable

from booleanquery.lexer.tokens import DELIMITERS, Token
from booleanquery.text import TextRange, TextSize


class Lexer:
    """Longest-match splitter over a fixed delimiter alphabet.

    Every delimiter becomes its own token; runs of anything else become word
    tokens. Concatenating the token texts gives back the input unchanged.
    """

    def __init__(self, delimiters: Iterable[str] = DELIMITERS) -> None:
        alphabet = tuple(delimiters)
        if not alphabet:
            raise ValueError("Delimiter alphabet cannot be empty")
        if any(delimiter == "" for delimiter in alphabet):
            raise ValueError("Delimiters cannot be empty strings")
        self._delimiters = frozenset(alphabet)
        self._max_length = max(len(delimiter) for delimiter in alphabet)

    @property
    def delimiters(self) -> frozenset[str]:
        return self._delimiters

    def max_delimiter_length(self) -> int:
        """Length of the longest delimiter in the alphabet."""
        return self._max_length

    def is_delimiter(self, candidate: str) -> bool:
        return candidate in self._delimiters

    def lex(self, text: str) -> list[Token]:
        tokens: list[Token] = []
        word_start: int | None = None
        position = 0

        while position < len(text):
            delimiter = self._match_delimiter(text, position)
            if delimiter is None:
                if word_start is None:
                    word_start = position
                position += 1
                continue

            if word_start is not None:
                tokens.append(_token(text, word_start, position))
                word_start = None

            tokens.append(_token(text, position, position + len(delimiter)))
            position += len(delimiter)

        if word_start is not None:
            tokens.append(_token(text, word_start, position))

        return tokens

    def tokenize(self, text: str) -> list[str]:
        """Split text into plain token strings."""
        return [token.text for token in self.lex(text)]

    def _match_delimiter(self, text: str, position: int) -> str | None:
        # Longest first, so `>=` wins over `>`.
        longest = min(self._max_length, len(text) - position)
        for length in range(longest, 0, -1):
            candidate = text[position : position + length]
            if self.is_delimiter(candidate):
                return candidate
        return None


def _token(text: str, start: int, end: int) -> Token:
    return Token(text[start:end], TextRange.new(TextSize.from_int(start), TextSize.from_int(end)))


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, range, and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<14} range={tok.range.as_tuple()} text={tok.text!r}")
