import sqlite3

import pytest
from ruwordle.corpus import SqliteCorpus, WordListCorpus
from ruwordle.engine import build_filter, parse_constraint, process_rejects


def _sqlite(words):
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE words (word TEXT NOT NULL)")
    conn.executemany("INSERT INTO words (word) VALUES (?)", [(w,) for w in words])
    return SqliteCorpus(conn)


def _memory(words):
    return WordListCorpus(words)


# Every case runs against both realizations of the filter.
@pytest.fixture(params=[_sqlite, _memory], ids=["sqlite", "memory"])
def make_corpus(request):
    return request.param


def _query(corpus, pattern, rejects=""):
    return corpus.query(build_filter(parse_constraint(pattern), process_rejects(rejects)))


def test_excludes_uppercase_words(make_corpus):
    corpus = make_corpus(["мирно", "Мирно", "слово", "Слово"])
    assert _query(corpus, "*****") == {"мирно", "слово"}


def test_returns_only_5_letter_words(make_corpus):
    corpus = make_corpus(["мирно", "Привет", "слово", "Слово", "тест", "тестирование"])
    assert _query(corpus, "*****") == {"мирно", "слово"}


def test_excludes_hyphen_period_and_latin(make_corpus):
    corpus = make_corpus(["ай-ай", "т.е.д", "мирно", "hello", "мирнo"])  # last one ends in Latin 'o'
    assert _query(corpus, "*****") == {"мирно"}


def test_present_letter_not_at_position(make_corpus):
    corpus = make_corpus(["мирно", "минор", "слово", "морни", "ранки"])
    assert _query(corpus, "**н**") == {"мирно", "морни"}


def test_confirmed_letter(make_corpus):
    corpus = make_corpus(["мирно", "минор", "слово", "морни"])
    assert _query(corpus, "М*Н**") == {"минор"}


def test_rejects_exclude_words(make_corpus):
    corpus = make_corpus(["мирно", "слово", "тесто", "гром", "кубик"])
    assert _query(corpus, "*****", "о,е") == {"кубик"}


def test_mixed_constraints(make_corpus):
    corpus = make_corpus(["носок", "сокол", "кусок", "сопки", "посох"])
    # 'с' confirmed first, 'о' present but not 2nd, no 'л'
    assert _query(corpus, "Со***", "л") == set()
    # 'о' confirmed 2nd, 'к' present but not 5th
    assert _query(corpus, "*О**к") == {"сокол", "сопки"}


def test_sql_uses_parameters_for_letters():
    f = build_filter(parse_constraint("Т*о**"), {"ъ"})
    sql, params = f.to_sql()
    assert "т" not in sql and "о" not in sql and "ъ" not in sql
    assert "т" in params and "о" in params and "ъ" in params
    assert sql.startswith("SELECT DISTINCT w.word FROM words w WHERE")
