"""String-level cleanup applied before tokenizing and after joining."""

from __future__ import annotations

from collections.abc import Iterable
import re
from typing import Final

from booleanquery.lexer import OR_SENTINEL, BooleanOperator

_BRACKETS_AND_QUOTES: Final = str.maketrans(
    {
        "{": "(",
        "[": "(",
        "}": ")",
        "]": ")",
        "“": '"',
        "”": '"',
    }
)

_SPACE_RUNS = re.compile(r" +")
_LEADING_LINE_SPACE = re.compile(r"^\s+", re.MULTILINE)
_TRAILING_LINE_SPACE = re.compile(r"\s+$", re.MULTILINE)
_NEWLINE_RUNS = re.compile(r"\n+")
_LEADING_SPACES = re.compile(r"^ +")
_NBSP_LINE = re.compile(r"^&nbsp;$", re.IGNORECASE | re.MULTILINE)
_STRAY_HYPHEN = re.compile(r"(\b-\s)|(\s-\s)")
_WHITESPACE_RUNS = re.compile(r"\s\s+")

_ALLOWED_CHARACTERS: Final[frozenset[str]] = frozenset('0123456789 @()-+*".')

# Operators left dangling by the join are moved onto the token to their right.
_REATTACH_ORDER: Final[tuple[str, ...]] = (
    BooleanOperator.NOT.character,
    BooleanOperator.AND.character,
    BooleanOperator.OR.character,
)


def preclean(text: str, *, field_markers: Iterable[str] = ("title:",)) -> str:
    """Normalize raw user input and lowercase it."""
    output = text
    for marker in field_markers:
        output = re.sub(re.escape(marker), " ", output, flags=re.IGNORECASE)
    output = output.translate(_BRACKETS_AND_QUOTES)
    output = _SPACE_RUNS.sub(" ", output)
    output = _LEADING_LINE_SPACE.sub("", output)
    output = _TRAILING_LINE_SPACE.sub("", output)
    output = _NEWLINE_RUNS.sub("\n", output)
    output = _LEADING_SPACES.sub("", output)
    output = _NBSP_LINE.sub("", output)
    output = _STRAY_HYPHEN.sub(" ", output)
    output = _WHITESPACE_RUNS.sub(" ", output)
    return output.strip().lower()


def strip_disallowed(token: str) -> str:
    """Keep letters, ASCII digits, space and `@ ( ) - + * . "`."""
    return "".join(ch for ch in token if ch.isalpha() or ch in _ALLOWED_CHARACTERS)


def postclean(text: str) -> str:
    output = text
    for character in _REATTACH_ORDER:
        output = output.replace(f"{character} ", f" {character}")
    output = _WHITESPACE_RUNS.sub(" ", output)
    output = output.replace(" )", ")").replace("( ", "(")
    return output.replace(OR_SENTINEL, "")
