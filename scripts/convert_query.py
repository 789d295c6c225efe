#!/usr/bin/env python3
"""Convert boolean search expressions into boolean full-text queries."""

from __future__ import annotations

import argparse
import sys

from booleanquery import ParserOptions, Pipeline, dump_stages
from booleanquery.diagnostics import render_diagnostic


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert boolean search expressions to full-text query syntax.")
    parser.add_argument(
        "queries",
        nargs="*",
        help="Queries to convert (reads one query per line from stdin when omitted).",
    )
    parser.add_argument("--trace", action="store_true", help="Print the output of every pipeline stage.")
    parser.add_argument(
        "--field-marker",
        action="append",
        dest="field_markers",
        default=None,
        help="Field marker to strip, e.g. 'title:' (repeatable; replaces the default).",
    )
    args = parser.parse_args(argv)

    options = ParserOptions() if args.field_markers is None else ParserOptions(field_markers=tuple(args.field_markers))
    pipeline = Pipeline(options)

    queries = args.queries or [line.rstrip("\n") for line in sys.stdin]

    failures = 0
    for query in queries:
        result = pipeline.parse_result(query, trace=args.trace)
        if args.trace:
            dump_stages(result)
        if result.query is None:
            failures += 1
            for diagnostic in result.diagnostics:
                print(render_diagnostic(diagnostic, result.cleaned_text), file=sys.stderr)
            continue
        print(result.query)

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
