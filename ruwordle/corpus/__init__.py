from __future__ import annotations
from pathlib import Path
from typing import List

from .base import BaseCorpus, REGISTRY
from .sqlite import SqliteCorpus
from .wordlist import WordListCorpus
from .validator import validate_wordlist, pretty_summary, is_corpus_word


def open_corpus(location: str) -> BaseCorpus:
    """
    Factory: open a corpus by location, choosing the kind from the file
    suffix. Unknown suffixes are treated as SQLite databases.
    """
    cls = REGISTRY.get(Path(location).suffix.lower(), SqliteCorpus)
    return cls.open(location)


def get_corpus_suffixes() -> List[str]:
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseCorpus", "SqliteCorpus", "WordListCorpus", "open_corpus", "get_corpus_suffixes",
    "validate_wordlist", "pretty_summary", "is_corpus_word",
]
