from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Set

from .base import BaseCorpus, register
from ..engine.query import WordFilter
from ..errors import CorpusAccessError

log = logging.getLogger(__name__)


@register(".txt", ".lst")
class WordListCorpus(BaseCorpus):
    """
    In-memory corpus over a plain word list (one word per line).

    Words are kept exactly as given (only surrounding whitespace is stripped,
    blank lines dropped); the filter itself rejects anything that is not
    lowercase Russian.
    """
    kind = "wordlist"

    def __init__(self, words: Iterable[str], location: str = "<memory>"):
        super().__init__(location)
        self.words: Set[str] = {w.strip() for w in words if w.strip()}

    @classmethod
    def open(cls, location: str) -> "WordListCorpus":
        # utf-8-sig drops a leading BOM left by Windows editors
        try:
            text = Path(location).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusAccessError(str(location), str(e)) from e
        corpus = cls(text.splitlines(), str(location))
        log.debug("loaded %d words from %s", len(corpus.words), location)
        return corpus

    def query(self, word_filter: WordFilter) -> Set[str]:
        return {w for w in self.words if word_filter.matches(w)}
