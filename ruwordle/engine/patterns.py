"""
Pattern language: raw user text -> canonical string -> typed constraint.

Raw notation (one pattern per submission):
  - '*'      : unknown slot (wildcard)
  - 'А'      : uppercase letter, confirmed at this position ("green")
  - 'а'      : lowercase letter, present in the word but not here ("yellow")
  - '_а'     : rejected-letter marker; the two characters collapse into a
               single '*' slot and the letter joins the reject set

Examples:
  normalize_pattern("**_н**") -> ("*****", ["н"])
  normalize_pattern("_о*_т*А") -> ("****А", ["о", "т"])

The canonical string keeps the case convention; parse_constraint() turns it
into explicit Slot values so nothing downstream has to look at letter case.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from typing import Iterator, List, Literal, Optional, Tuple

import regex

from .alphabet import fold_letter, graphemes
from ..errors import PatternValidationError

log = logging.getLogger(__name__)

WORD_LENGTH = 5
WILDCARD = "*"
REJECT_MARKER = "_"

# "_" then one grapheme cluster that starts with a Cyrillic letter
_MARKER_RE = regex.compile(REJECT_MARKER + r"(?=\p{Cyrillic})(?=\p{L})(\X)")

SlotKind = Literal["unknown", "confirmed", "present"]


@dataclass(frozen=True)
class Slot:
    kind: SlotKind
    letter: Optional[str] = None

    def to_canonical(self) -> str:
        if self.kind == "confirmed":
            return self.letter.upper()
        if self.kind == "present":
            return self.letter
        return WILDCARD


UNKNOWN = Slot("unknown")


@dataclass(frozen=True)
class PatternConstraint:
    """Exactly WORD_LENGTH slots; built once and only read afterwards."""
    slots: Tuple[Slot, ...]

    def __iter__(self) -> Iterator[Slot]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def to_canonical(self) -> str:
        return "".join(s.to_canonical() for s in self.slots)


def normalize_pattern(raw: str) -> Tuple[str, List[str]]:
    """
    Replace every '_<letter>' marker with a wildcard in one forward scan.

    Returns:
      (canonical, extracted_rejects) where extracted_rejects holds the
      marker letters (NFC-composed) in order of appearance. Everything
      that is not a marker is copied through unchanged.

    A marker not followed by a Cyrillic letter is left untouched; the extra
    character then makes the pattern fail length validation.
    """
    extracted: List[str] = []

    def _collapse(m) -> str:
        extracted.append(unicodedata.normalize("NFC", m.group(1)))
        return WILDCARD

    return _MARKER_RE.sub(_collapse, raw), extracted


def slot_count(pattern: str) -> int:
    return len(graphemes(pattern))


def is_valid_pattern(pattern: str) -> bool:
    """True iff the pattern has exactly 5 slots once markers are collapsed."""
    canonical, _ = normalize_pattern(pattern)
    return slot_count(canonical) == WORD_LENGTH


def parse_constraint(canonical: str) -> PatternConstraint:
    """
    Turn a canonical (marker-free) pattern into typed slots.

    Letters are folded (lowercase, 'ё'->'е', Latin lookalikes->Cyrillic);
    combining marks on a letter (stress accents) are dropped. Anything that
    is neither '*' nor a cased letter imposes no constraint.
    """
    clusters = graphemes(canonical)
    if len(clusters) != WORD_LENGTH:
        raise PatternValidationError([canonical])

    slots: List[Slot] = []
    for pos, cluster in enumerate(clusters, start=1):
        base = unicodedata.normalize("NFC", cluster)[0]
        if base == WILDCARD:
            slots.append(UNKNOWN)
        elif base.isupper():
            slots.append(Slot("confirmed", fold_letter(base)))
        elif base.islower():
            slots.append(Slot("present", fold_letter(base)))
        else:
            log.warning("pattern %r: character %r at position %d treated as wildcard",
                        canonical, cluster, pos)
            slots.append(UNKNOWN)
    return PatternConstraint(tuple(slots))
