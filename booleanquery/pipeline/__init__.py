"""Conversion pipeline: options, clean helpers, passes, orchestration and results."""

from booleanquery.pipeline.clean import postclean, preclean, strip_disallowed
from booleanquery.pipeline.options import ParserOptions
from booleanquery.pipeline.pipeline import REWRITE_PASSES, Pipeline
from booleanquery.pipeline.result import (
    QueryParseResult,
    Stage,
    StageSnapshot,
    UnparsableQueryError,
    dump_stages,
)
from booleanquery.pipeline.validate import check_bracket_balance, check_quote_balance

__all__ = [
    "REWRITE_PASSES",
    "ParserOptions",
    "Pipeline",
    "QueryParseResult",
    "Stage",
    "StageSnapshot",
    "UnparsableQueryError",
    "check_bracket_balance",
    "check_quote_balance",
    "dump_stages",
    "postclean",
    "preclean",
    "strip_disallowed",
]
