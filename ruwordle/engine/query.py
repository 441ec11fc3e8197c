"""
Query constructor: typed constraint + reject set -> word filter.

A word passes iff ALL of the following hold:
  1) it has exactly 5 letters
  2) it is made of lowercase Russian letters only
  3) it contains no '-' or '.'
  4) every confirmed slot holds its letter at that position
  5) every present slot's letter occurs in the word, but not at that position
  6) no rejected letter occurs anywhere

WordFilter carries two equivalent realizations of these conjuncts:
  - to_sql()  : parameterized SQLite SELECT for the on-disk corpus
  - matches() : in-memory check for word lists (and for tests)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Tuple

from .alphabet import RUSSIAN_ALPHABET
from .patterns import WORD_LENGTH, PatternConstraint

# SQLite GLOB classes compare code points; а..я is contiguous, ё is not.
_NON_ALPHABET_GLOB = "*[^а-яё]*"
_EXCLUDED_PUNCT = ("-", ".")


@dataclass(frozen=True)
class WordFilter:
    constraint: PatternConstraint
    rejects: FrozenSet[str]

    def to_sql(self, table: str = "words", column: str = "word") -> Tuple[str, List[str]]:
        """
        Build the SELECT and its positional parameters.

        `table` and `column` are identifiers chosen by the caller's schema,
        never user input; letters always travel as parameters.
        """
        col = f"w.{column}"
        clauses = [
            f"LENGTH({col}) = {WORD_LENGTH}",
            f"{col} NOT GLOB ?",
        ]
        params: List[str] = [_NON_ALPHABET_GLOB]

        for ch in _EXCLUDED_PUNCT:
            clauses.append(f"instr({col}, ?) = 0")
            params.append(ch)

        for pos, slot in enumerate(self.constraint, start=1):
            if slot.kind == "confirmed":
                clauses.append(f"substr({col}, {pos}, 1) = ?")
                params.append(slot.letter)
            elif slot.kind == "present":
                clauses.append(f"instr({col}, ?) > 0 AND substr({col}, {pos}, 1) != ?")
                params.extend([slot.letter, slot.letter])

        for letter in sorted(self.rejects):
            clauses.append(f"instr({col}, ?) = 0")
            params.append(letter)

        sql = f"SELECT DISTINCT {col} FROM {table} w WHERE " + " AND ".join(clauses)
        return sql, params

    def matches(self, word: str) -> bool:
        if len(word) != WORD_LENGTH:
            return False
        if any(ch not in RUSSIAN_ALPHABET for ch in word):
            return False
        if any(p in word for p in _EXCLUDED_PUNCT):
            return False

        for i, slot in enumerate(self.constraint):
            if slot.kind == "confirmed" and word[i] != slot.letter:
                return False
            if slot.kind == "present" and (slot.letter not in word or word[i] == slot.letter):
                return False

        return not any(r in word for r in self.rejects)


def build_filter(constraint: PatternConstraint, rejects: Iterable[str]) -> WordFilter:
    return WordFilter(constraint, frozenset(rejects))
