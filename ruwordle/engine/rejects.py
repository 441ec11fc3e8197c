"""
Reject set: letters known to be absent from the target word.

Sources, unioned into one set per invocation:
  - the free-form reject argument, e.g. "ё,E,д,Я,O"
  - letters pulled out of patterns by the '_<letter>' marker
"""

from __future__ import annotations

from typing import Iterable, List, Set

from .alphabet import fold_letter

SEPARATOR = ","


def fold_rejects(letters: Iterable[str]) -> List[str]:
    """
    Fold each input character into zero or more canonical letters.

    Commas and whitespace are separators, not letters. One character can
    lowercase to several; all of them are kept.
    """
    out: List[str] = []
    for ch in letters:
        if ch == SEPARATOR or ch.isspace():
            continue
        out.extend(fold_letter(ch))
    return out


def process_rejects(raw: str) -> Set[str]:
    """
    Examples:
      process_rejects("ё,E,д,Я,O") -> {"е", "д", "я", "о"}
      process_rejects("") -> set()
    """
    return set(fold_rejects(raw or ""))


def merge_rejects(raw: str, extracted: Iterable[str]) -> Set[str]:
    """Union of the reject argument and marker-extracted letters, both folded."""
    return process_rejects(raw) | set(fold_rejects(extracted))
