"""
Alphabet helpers shared by every stage of the engine.

Folds (applied to ALL letter comparisons):
  - 'ё' -> 'е'   the corpus is stored without the diaeresis
  - Latin 'e'/'o' -> Cyrillic 'е'/'о'   a wrong keyboard layout produces
    lookalikes that would otherwise never match anything

Slots are counted in extended grapheme clusters (regex `\\X`), so a
decomposed 'й' or a letter carrying a stress mark is still one slot.
"""

from __future__ import annotations

from typing import List

import regex

RUSSIAN_ALPHABET = "абвгдежзийклмнопрстуфхцчшщъыьэюяё"

_LATIN_LOOKALIKES = {"e": "е", "o": "о"}
_GRAPHEME = regex.compile(r"\X")


def fold_yo(text: str) -> str:
    return text.replace("ё", "е")


def latin_to_cyrillic(ch: str) -> str:
    return _LATIN_LOOKALIKES.get(ch, ch)


def fold_letter(ch: str) -> str:
    """
    Lowercase a single input character and apply both folds.

    Lowercasing may expand one character into several (e.g. 'İ'); every
    produced character is folded and the result is returned joined.
    """
    return "".join(latin_to_cyrillic(c) for c in fold_yo(ch.lower()))


def graphemes(text: str) -> List[str]:
    """Split `text` into extended grapheme clusters; the text is not rewritten."""
    return _GRAPHEME.findall(text)
