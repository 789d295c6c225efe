"""Pipeline orchestration: clean, validate, tokenize, rewrite, emit."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import partial
from typing import Final

from booleanquery.diagnostics import Diagnostic
from booleanquery.lexer import BooleanOperator, Lexer
from booleanquery.pipeline.clean import postclean, preclean
from booleanquery.pipeline.options import ParserOptions
from booleanquery.pipeline.passes import (
    collapse_stacked_operators,
    drop_blank_tokens,
    insert_missing_and,
    merge_hyphenated_words,
    merge_quoted_phrases,
    merge_wildcards,
    rewrite_connective,
    rewrite_negations,
    strip_dangling_operators,
    strip_disallowed_characters,
)
from booleanquery.pipeline.result import QueryParseResult, Stage, StageSnapshot
from booleanquery.pipeline.validate import check_bracket_balance, check_quote_balance

TokenPass = Callable[[Sequence[str]], list[str]]

# Hyphen merging must see the token neighbourhood before `-` is read as NOT.
REWRITE_PASSES: Final[tuple[tuple[Stage, TokenPass], ...]] = (
    (Stage.STRIP_CHARACTERS, strip_disallowed_characters),
    (Stage.MERGE_HYPHENATED, merge_hyphenated_words),
    (Stage.MERGE_WILDCARDS, merge_wildcards),
    (Stage.DROP_BLANK, drop_blank_tokens),
    (Stage.STRIP_DANGLING, strip_dangling_operators),
    (Stage.REWRITE_OR, partial(rewrite_connective, operator=BooleanOperator.OR)),
    (Stage.REWRITE_AND, partial(rewrite_connective, operator=BooleanOperator.AND)),
    (Stage.REWRITE_NOT, rewrite_negations),
    (Stage.COLLAPSE_STACKED, collapse_stacked_operators),
    (Stage.INSERT_AND, insert_missing_and),
)


class Pipeline:
    """Converts boolean search expressions into boolean full-text queries.

    Holds only immutable configuration, so one instance can serve concurrent
    callers.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options if options is not None else ParserOptions()
        self._lexer = Lexer(self._options.delimiters)

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    def parse(self, text: str) -> str | None:
        """Convert `text`, returning None when it cannot be converted."""
        return self.parse_result(text).query

    def parse_result(self, text: str, *, trace: bool = False) -> QueryParseResult:
        stages: list[StageSnapshot] = []

        def record(stage: Stage, output: str | Sequence[str]) -> None:
            if not trace:
                return
            if isinstance(output, str):
                stages.append(StageSnapshot(stage, text=output))
            else:
                stages.append(StageSnapshot(stage, tokens=tuple(output)))

        cleaned = preclean(text, field_markers=self._options.field_markers)
        record(Stage.PRECLEAN, cleaned)

        quote_error = check_quote_balance(cleaned)
        if quote_error is not None:
            return _unparsable(text, cleaned, quote_error, stages)

        tokens = self._lexer.tokenize(cleaned)
        record(Stage.TOKENIZE, tokens)

        tokens = merge_quoted_phrases(tokens)
        record(Stage.MERGE_QUOTED, tokens)

        bracket_error = check_bracket_balance(tokens)
        if bracket_error is not None:
            return _unparsable(text, cleaned, bracket_error, stages)

        for stage, rewrite in REWRITE_PASSES:
            tokens = rewrite(tokens)
            record(stage, tokens)

        query = postclean(" ".join(tokens)).strip()
        record(Stage.POSTCLEAN, query)

        return QueryParseResult(
            source_text=text,
            cleaned_text=cleaned,
            query=query,
            diagnostics=[],
            stages=tuple(stages),
        )


def _unparsable(
    text: str,
    cleaned: str,
    diagnostic: Diagnostic,
    stages: list[StageSnapshot],
) -> QueryParseResult:
    return QueryParseResult(
        source_text=text,
        cleaned_text=cleaned,
        query=None,
        diagnostics=[diagnostic],
        stages=tuple(stages),
    )
