# apps/cli/suggest.py
"""
CLI entry point: suggest words for Russian Wordle.

This script:
  1) Validates every pattern (exits 1 naming the bad ones).
  2) Resolves the corpus (--db, else the configured location).
  3) Filters, intersects and ranks, then prints a table or writes CSV/JSON.

Examples:
    python -m apps.cli.suggest -p "**_н**" -r "о,с,и"
    python -m apps.cli.suggest -p "Т*_ок*" -p "*о***" -l 10
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ruwordle.config import resolve_database
from ruwordle.corpus import get_corpus_suffixes, open_corpus
from ruwordle.errors import PatternValidationError, RuWordleError
from ruwordle.pipeline import (
    format_table, result_to_dict, suggest, validate_patterns, write_csv, write_manifest,
)
from ruwordle.pipeline.io import timestamp_id


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ruwordle",
        description="Suggest words for the Russian version of Wordle.",
    )
    ap.add_argument("-p", "--pattern", dest="patterns", action="extend", nargs="+",
                    required=True, metavar="PATTERN",
                    help="letter pattern: '*' unknown, UPPER confirmed, lower misplaced, "
                         "'_x' rejected letter (repeatable)")
    ap.add_argument("-r", "--rejects", default="",
                    help="comma-delimited rejected letters, e.g. 'о,с,и'")
    ap.add_argument("-l", "--limit", type=int, default=0,
                    help="limit the number of suggestions (0 = all)")
    ap.add_argument("--db", help=f"corpus location ({', '.join(get_corpus_suffixes())} "
                                 f"or SQLite); overrides the configured one")
    ap.add_argument("--format", choices=["table", "csv", "json"], default="table",
                    help="output format")
    ap.add_argument("--out", help="output file for csv/json (default: reports/suggest_<ts>.*)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="[%(levelname)s] %(message)s")

    print(f"Pattern = {' '.join(args.patterns)}")

    invalid = validate_patterns(args.patterns)
    if invalid:
        print(f"Error: {PatternValidationError(invalid)}", file=sys.stderr)
        return 1

    try:
        location = resolve_database(args.db)
        with open_corpus(location) as corpus:
            result = suggest(args.patterns, corpus, rejects=args.rejects, limit=args.limit)
    except RuWordleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    if args.format == "table":
        print(format_table(result.candidates))
    else:
        out = args.out or str(Path("reports") / f"suggest_{timestamp_id()}.{args.format}")
        if args.format == "csv":
            write_csv(result.candidates, out)
        else:
            write_manifest(result_to_dict(result, args.patterns), out)
        print(f"Wrote: {out}")

    print(f"Found {len(result.candidates)} candidate(s)")
    print(f"Elapsed time: {result.elapsed_ms / 1000.0:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
