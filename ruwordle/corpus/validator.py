"""
Word-list validator for ruwordle corpora.

What this module does:
- Check a raw word list before it is loaded into the SQLite corpus.
- Enforce formatting rules (lowercase Russian letters only, exact length N,
  one word per line); 'ё' is accepted and counted separately since the
  build step folds it.
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from ruwordle.corpus import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/russian_nouns.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple

from ..engine.alphabet import RUSSIAN_ALPHABET
from ..engine.patterns import WORD_LENGTH


@dataclass
class WordListReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    N: int               # required word length
    count: int           # number of VALID words
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # lines that are not N lowercase Russian letters
    yo_words: int        # valid words containing 'ё'
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def is_corpus_word(word: str, N: int = WORD_LENGTH) -> bool:
    return len(word) == N and all(ch in RUSSIAN_ALPHABET for ch in word)


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines are invalid.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8-sig") as f:
        for raw in f:
            w = raw.strip()
            if w and is_corpus_word(w, N):
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def validate_wordlist(path: str, N: int = WORD_LENGTH) -> Dict:
    """
    Validate a word list for length N.

    Returns a JSON-serializable dict (WordListReport schema). `passed` is
    strict: the file must exist, hold at least one valid word, and have no
    invalid lines. Duplicates are reported but do not fail the check.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(str(path), False, N, 0, 0, 0, 0, "",
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    rep = WordListReport(
        path=str(p),
        exists=True,
        N=N,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        yo_words=sum(1 for w in words if "ё" in w),
        sha256=_sha256_file(p),
    )

    if rep.count == 0:
        rep.issues.append("word list contains 0 valid words")
    if invalid:
        rep.issues.append(f"word list has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("word list contains duplicate lines")

    rep.passed = rep.count > 0 and invalid == 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        N=5 | words=4530 (uniq=4530, yo=112, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"yo={report['yo_words']}, invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
