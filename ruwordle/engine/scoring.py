"""
Candidate ranking by Russian letter frequency.

score_word():
  - start at 1.0
  - walk the word left to right, multiplying by each letter's weight
  - stop at the FIRST letter missing from the table (later letters are
    ignored, not penalized)

rank_candidates():
  - score every word (after the 'ё' fold), sort by score descending
  - equal scores are ordered alphabetically so output is reproducible
  - limit <= 0 keeps everything
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping

from .alphabet import fold_yo

# Relative frequency (%) of letters in Russian text; 'ё' is folded into 'е'.
LETTER_FREQUENCIES: Mapping[str, float] = MappingProxyType({
    "о": 10.97, "е": 8.45, "а": 8.01, "и": 7.35, "н": 6.70, "т": 6.26,
    "с": 5.47, "л": 4.97, "в": 4.53, "р": 4.40, "к": 3.49, "м": 3.21,
    "д": 2.98, "п": 2.81, "ы": 2.10, "у": 2.08, "б": 1.92, "я": 1.79,
    "ь": 1.74, "г": 1.70, "з": 1.65, "ч": 1.44, "й": 1.21, "ж": 1.01,
    "х": 0.95, "ш": 0.72, "ю": 0.49, "ц": 0.48, "э": 0.32, "щ": 0.31,
    "ф": 0.26, "ъ": 0.04,
})


@dataclass(frozen=True)
class Candidate:
    word: str
    score: float


def score_word(word: str, freqs: Mapping[str, float] = LETTER_FREQUENCIES) -> float:
    score = 1.0
    for ch in word:
        weight = freqs.get(ch)
        if weight is None:
            break
        score *= weight
    return score


def rank_candidates(words: Iterable[str], limit: int = 0,
                    freqs: Mapping[str, float] = LETTER_FREQUENCIES) -> List[Candidate]:
    # 'ёж..' and 'еж..' collapse to one lemma
    lemmas = {fold_yo(w) for w in words}
    scored = [Candidate(w, score_word(w, freqs)) for w in lemmas]

    scored.sort(key=lambda c: (-c.score, c.word))

    if limit > 0:
        del scored[limit:]
    return scored
