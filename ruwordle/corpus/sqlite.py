"""
SQLite-backed corpus.

Expected schema (see script/build_corpus.py):
    CREATE TABLE words (word TEXT NOT NULL)

The database is opened read-only through a `mode=ro` URI, so a wrong path
fails loudly instead of silently creating an empty database.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Set

from .base import BaseCorpus, register
from ..engine.query import WordFilter
from ..errors import CorpusAccessError

log = logging.getLogger(__name__)


@register(".db", ".sqlite", ".sqlite3")
class SqliteCorpus(BaseCorpus):
    kind = "sqlite"

    def __init__(self, conn: sqlite3.Connection, location: str = ":memory:",
                 table: str = "words", column: str = "word"):
        super().__init__(location)
        self.conn = conn
        self.table = table
        self.column = column

    @classmethod
    def open(cls, location: str, table: str = "words", column: str = "word") -> "SqliteCorpus":
        p = Path(location).expanduser()
        if not p.is_file():
            raise CorpusAccessError(str(location), "database file not found")
        uri = p.resolve().as_uri() + "?mode=ro"
        try:
            conn = sqlite3.connect(uri, uri=True)
        except sqlite3.Error as e:
            raise CorpusAccessError(str(location), str(e)) from e
        log.debug("opened sqlite corpus %s", uri)
        return cls(conn, str(location), table=table, column=column)

    def query(self, word_filter: WordFilter) -> Set[str]:
        sql, params = word_filter.to_sql(self.table, self.column)
        log.debug("SQL: %s | params=%s", sql, params)
        try:
            rows = self.conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise CorpusAccessError(self.location, str(e)) from e
        return {row[0] for row in rows}

    def close(self) -> None:
        self.conn.close()
