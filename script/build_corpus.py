"""
Build the SQLite word corpus from a raw Russian word list.

What it does:
- Reads a word list from a local file (--in) or downloads one (--url).
- NFC-normalizes, lowercases, folds 'ё' to 'е'.
- Keeps only 5-letter words made of Russian letters; de-duplicates while
  preserving input order.
- Writes the `words(word TEXT NOT NULL)` table (replacing its contents).
- Optionally exports the cleaned list as text (--export).

Usage:
    python -m script.build_corpus --in data/russian_nouns.txt --db data/words.db
    python -m script.build_corpus --url https://example.org/nouns.txt --db data/words.db
"""

from __future__ import annotations

import argparse
import sqlite3
import unicodedata
from pathlib import Path
from typing import Iterable, List

import requests
from tqdm import tqdm

from ruwordle.corpus import is_corpus_word, pretty_summary, validate_wordlist
from ruwordle.engine.alphabet import fold_yo

SCHEMA = "CREATE TABLE IF NOT EXISTS {table} (word TEXT NOT NULL)"


def fetch_lines(url: str) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    r.encoding = r.encoding or "utf-8"
    return r.text.splitlines()


def clean_words(lines: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for raw in lines:
        w = fold_yo(unicodedata.normalize("NFC", raw.strip()).lower())
        if is_corpus_word(w) and w not in seen:
            seen.add(w)
            out.append(w)
    return out


def write_corpus(words: List[str], db_path: str, table: str = "words", progress: bool = True) -> int:
    """Replace the table's contents with `words`; returns the row count written."""
    p = Path(db_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(p))
    try:
        with conn:
            conn.execute(SCHEMA.format(table=table))
            conn.execute(f"DELETE FROM {table}")
            rows = tqdm(words, desc="Writing", unit="word", ncols=80, disable=not progress)
            conn.executemany(f"INSERT INTO {table} (word) VALUES (?)", ((w,) for w in rows))
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    finally:
        conn.close()


def main():
    ap = argparse.ArgumentParser(description="Build the ruwordle SQLite corpus")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="inp", help="input word list (one word per line)")
    src.add_argument("--url", help="download the word list from this URL")
    ap.add_argument("--db", required=True, help="output SQLite database")
    ap.add_argument("--table", default="words")
    ap.add_argument("--export", help="also write the cleaned list to this text file")
    ap.add_argument("--no-progress", action="store_true")
    args = ap.parse_args()

    if args.inp:
        print(pretty_summary(validate_wordlist(args.inp)))
        lines = Path(args.inp).read_text(encoding="utf-8-sig").splitlines()
    else:
        lines = fetch_lines(args.url)

    words = clean_words(lines)
    n = write_corpus(words, args.db, table=args.table, progress=not args.no_progress)
    if args.export:
        out = Path(args.export)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text("\n".join(words) + "\n", encoding="utf-8")
        print(f"Wrote: {args.export}")
    print(f"Input: {len(lines)} lines -> {args.db}:{args.table} ({n} words)")


if __name__ == "__main__":
    main()
