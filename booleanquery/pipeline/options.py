"""Pipeline configuration options."""

from dataclasses import dataclass

from booleanquery.lexer import DELIMITERS


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Immutable knobs for the conversion pipeline.

    `field_markers` are matched case-insensitively and replaced with a space
    before anything else runs. `delimiters` is the lexer alphabet.
    """

    field_markers: tuple[str, ...] = ("title:",)
    delimiters: tuple[str, ...] = DELIMITERS
