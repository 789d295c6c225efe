#!/usr/bin/env python3
from __future__ import annotations

import argparse

from booleanquery import Lexer
from booleanquery.lexer import dump_tokens
from booleanquery.pipeline import preclean


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump lexer tokens for a query.")
    parser.add_argument("query", help="Query text to lex.")
    parser.add_argument("--raw", action="store_true", help="Lex the query as given, without precleaning.")
    args = parser.parse_args(argv)

    text = args.query if args.raw else preclean(args.query)
    tokens = Lexer().lex(text)
    print(f"text={text!r}")
    dump_tokens(tokens)
    print(f"\n{len(tokens)} tokens")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
