"""Result carriers for a pipeline run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from booleanquery.diagnostics import Diagnostic, has_errors


class Stage(StrEnum):
    """Pipeline stages in execution order."""

    PRECLEAN = "preclean"
    TOKENIZE = "tokenize"
    MERGE_QUOTED = "merge_quoted"
    STRIP_CHARACTERS = "strip_characters"
    MERGE_HYPHENATED = "merge_hyphenated"
    MERGE_WILDCARDS = "merge_wildcards"
    DROP_BLANK = "drop_blank"
    STRIP_DANGLING = "strip_dangling"
    REWRITE_OR = "rewrite_or"
    REWRITE_AND = "rewrite_and"
    REWRITE_NOT = "rewrite_not"
    COLLAPSE_STACKED = "collapse_stacked"
    INSERT_AND = "insert_and"
    POSTCLEAN = "postclean"


@dataclass(frozen=True, slots=True)
class StageSnapshot:
    """Output of one stage: `text` for string stages, `tokens` for stream stages."""

    stage: Stage
    text: str | None = None
    tokens: tuple[str, ...] | None = None


class UnparsableQueryError(ValueError):
    """Raised by `QueryParseResult.unwrap` when the query could not be converted."""

    def __init__(self, source_text: str, diagnostics: list[Diagnostic]) -> None:
        summary = "; ".join(diagnostic.message for diagnostic in diagnostics) or "unparsable query"
        super().__init__(f"Cannot convert {source_text!r}: {summary}")
        self.source_text = source_text
        self.diagnostics = diagnostics


@dataclass(frozen=True, slots=True)
class QueryParseResult:
    """Outcome of converting one query.

    `query` is None exactly when the input was unparsable; `diagnostics` then
    says why, with ranges pointing into `cleaned_text`.
    """

    source_text: str
    cleaned_text: str
    query: str | None
    diagnostics: list[Diagnostic]
    stages: tuple[StageSnapshot, ...] = ()

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def is_parsable(self) -> bool:
        return self.query is not None

    def unwrap(self) -> str:
        if self.query is None:
            raise UnparsableQueryError(self.source_text, self.diagnostics)
        return self.query


def dump_stages(result: QueryParseResult) -> None:
    """Print every recorded stage snapshot for debugging."""
    print(f"source={result.source_text!r}")
    for snapshot in result.stages:
        if snapshot.tokens is not None:
            print(f"{snapshot.stage.value:<18} tokens={list(snapshot.tokens)!r}")
        else:
            print(f"{snapshot.stage.value:<18} text={snapshot.text!r}")
    for diagnostic in result.diagnostics:
        print(f"- {diagnostic.severity.upper()} {diagnostic.code} range={diagnostic.range.as_tuple()} message={diagnostic.message}")
