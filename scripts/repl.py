#!/usr/bin/env python3
"""Read one line at a time and print its parse tree or diagnostic."""

from __future__ import annotations

import argparse
import logging

from bracketmark import ParserOptions, dump_tree, parse_result
from bracketmark.diagnostics import render_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Interactive bracket notation parser")
    parser.add_argument("--max-depth", type=int, default=None, help="Override the bracket nesting limit")
    parser.add_argument("--verbose", action="store_true", help="Log parser debug records")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s %(message)s")

    try:
        options = ParserOptions() if args.max_depth is None else ParserOptions(max_nesting_depth=args.max_depth)
    except ValueError as exc:
        parser.error(str(exc))

    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            return 0
        result = parse_result(line, options)
        if result.sequence is not None:
            print(dump_tree(result.sequence))
        else:
            print(render_diagnostics(result.diagnostics))


if __name__ == "__main__":
    raise SystemExit(main())
