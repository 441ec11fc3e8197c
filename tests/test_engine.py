import pytest
from ruwordle.engine import (
    normalize_pattern, is_valid_pattern, parse_constraint, Slot,
    process_rejects, merge_rejects, score_word, rank_candidates,
)
from ruwordle.engine.alphabet import fold_yo, latin_to_cyrillic, graphemes
from ruwordle.errors import PatternValidationError

# Cyrillic 'е'/'о' vs their Latin lookalikes, spelled out to avoid confusion
CYR_E, CYR_O = "\u0435", "\u043e"
LAT_E, LAT_O = "e", "o"


# --- pattern normalization ---
@pytest.mark.parametrize("raw,canonical,rejects", [
    ("**_н**", "*****", ["н"]),
    ("_о*_т*А", "****А", ["о", "т"]),
    ("_о*_т**А", "*****А", ["о", "т"]),
    ("****_т", "*****", ["т"]),
    ("*****", "*****", []),
    ("АБВГД", "АБВГД", []),
    ("А*Б*В", "А*Б*В", []),
    ("**_Н**", "*****", ["Н"]),
])
def test_normalize_pattern(raw, canonical, rejects):
    assert normalize_pattern(raw) == (canonical, rejects)


def test_normalize_leaves_dangling_marker():
    # '_' not followed by a Russian letter is not a marker
    assert normalize_pattern("***_1*") == ("***_1*", [])
    assert normalize_pattern("****_") == ("****_", [])


def test_normalize_decomposed_letter_is_one_slot():
    canonical, rejects = normalize_pattern("_\u0438\u0306****")  # и + combining breve
    assert canonical == "*****"
    assert rejects == ["\u0439"]


# --- validation ---
@pytest.mark.parametrize("pattern,ok", [
    ("_о_т***", True),
    ("*****", True),
    ("**И*а", True),
    ("\u0438\u0306****", True),
    ("_а_б_ф_рдт", False),
    ("****", False),
    ("******", False),
    ("***_a*", False),
    ("", False),
])
def test_is_valid_pattern(pattern, ok):
    assert is_valid_pattern(pattern) is ok


# --- typed constraint ---
def test_parse_constraint_slots():
    c = parse_constraint("Т*ок*")
    assert c.slots == (
        Slot("confirmed", "т"), Slot("unknown"), Slot("present", "о"),
        Slot("present", "к"), Slot("unknown"),
    )
    assert c.to_canonical() == "Т*ок*"


def test_parse_constraint_folds_letters():
    c = parse_constraint("Ё" + LAT_E.upper() + LAT_O + "**")
    assert c.slots[0] == Slot("confirmed", CYR_E)
    assert c.slots[1] == Slot("confirmed", CYR_E)
    assert c.slots[2] == Slot("present", CYR_O)


def test_parse_constraint_rejects_wrong_length():
    with pytest.raises(PatternValidationError):
        parse_constraint("****")


# --- rejects ---
def test_process_rejects_folds_everything():
    raw = "ё," + LAT_E.upper() + ",д,Я," + LAT_O.upper()
    assert process_rejects(raw) == {CYR_E, "д", "я", CYR_O}


def test_process_rejects_separators():
    assert process_rejects("") == set()
    assert process_rejects("а, б,,в") == {"а", "б", "в"}


def test_merge_rejects():
    assert merge_rejects("о", ["Т", "ё"]) == {"о", "т", "е"}


def test_alphabet_folds():
    assert fold_yo("ёлка") == "елка"
    assert latin_to_cyrillic(LAT_E) == CYR_E
    assert latin_to_cyrillic(LAT_O) == CYR_O
    assert latin_to_cyrillic("a") == "a"
    assert latin_to_cyrillic("я") == "я"
    assert graphemes("ёж") == ["ё", "ж"]


# --- scoring / ranking ---
def test_score_word_all_ones():
    freqs = {ch: 1.0 for ch in "привет"}
    assert score_word("привет", freqs) == 1.0


def test_score_word_stops_at_unknown_letter():
    freqs = {"а": 2.0, "б": 3.0}
    assert score_word("аб", freqs) == 6.0
    assert score_word("аxб", freqs) == 2.0
    assert score_word("xаб", freqs) == 1.0


def test_rank_candidates_order_and_ties():
    freqs = {"а": 2.0, "б": 3.0, "в": 3.0}
    ranked = rank_candidates(["аа", "бб", "ба", "вб", "бв"], freqs=freqs)
    assert [c.word for c in ranked] == ["бб", "бв", "вб", "ба", "аа"]
    assert ranked[0].score == 9.0


@pytest.mark.parametrize("limit,expected", [(0, 3), (-1, 3), (2, 2), (10, 3)])
def test_rank_candidates_limit(limit, expected):
    assert len(rank_candidates(["носок", "сокол", "кубик"], limit=limit)) == expected


def test_rank_candidates_folds_yo():
    ranked = rank_candidates(["ёжики", "ежики"])
    assert [c.word for c in ranked] == ["ежики"]


# --- grapheme clusters ---
@pytest.mark.parametrize("pattern", [
    "*\u0430\u20dd***",  # enclosing circle (Me)
    "*\u0915\u093f***",  # Devanagari ki, spacing vowel sign (Mc)
    "*\u0430\u0301***",  # stress accent (Mn)
])
def test_marks_do_not_add_slots(pattern):
    assert is_valid_pattern(pattern) is True


def test_normalize_marker_free_pattern_is_unchanged():
    raw = "\u0438\u0306****"  # decomposed й stays decomposed
    assert normalize_pattern(raw) == (raw, [])


def test_normalize_accepts_any_cyrillic_letter():
    # Ukrainian і and є
    assert normalize_pattern("_\u0456**_\u0454**") == ("******", ["\u0456", "\u0454"])
    assert is_valid_pattern("_\u0456****") is True


def test_parse_constraint_decomposed_letter():
    c = parse_constraint("\u0418\u0306****")  # И + combining breve
    assert c.slots[0] == Slot("confirmed", "\u0439")


def test_parse_constraint_uncased_letters_are_wildcards():
    c = parse_constraint("\u4e2d\u05d0***")  # CJK and Hebrew letters have no case
    assert c.slots[0] == Slot("unknown") and c.slots[1] == Slot("unknown")
