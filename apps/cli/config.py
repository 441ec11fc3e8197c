# apps/cli/config.py
"""
Manage the persisted corpus location.

Usage:
    python -m apps.cli.config set-db ~/data/words.db
    python -m apps.cli.config show
"""

from __future__ import annotations

import argparse
import logging
import sys

from ruwordle.config import DATABASE_KEY, config_path, load_config, set_database
from ruwordle.errors import RuWordleError


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="ruwordle-config",
                                 description="ruwordle configuration")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="command", required=True)
    p_set = sub.add_parser("set-db", help="store the corpus location")
    p_set.add_argument("path", help="SQLite database or word-list file")
    sub.add_parser("show", help="print the config file path and stored values")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="[%(levelname)s] %(message)s")

    try:
        if args.command == "set-db":
            written = set_database(args.path)
            print(f"{DATABASE_KEY} = {load_config()[DATABASE_KEY]}")
            print(f"Wrote: {written}")
        else:
            print(f"config: {config_path()}")
            cfg = load_config()
            if not cfg:
                print("(empty)")
            for k, v in sorted(cfg.items()):
                print(f"{k} = {v}")
    except RuWordleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
