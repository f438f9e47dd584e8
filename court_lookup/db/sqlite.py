"""
SQLite backend for the query log.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from court_lookup.db.store import QueryStore, StoreError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS queries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    case_type TEXT NOT NULL,
    case_number TEXT NOT NULL,
    year INTEGER NOT NULL,
    query_timestamp TEXT NOT NULL,
    status TEXT NOT NULL,
    raw_response TEXT,
    parties TEXT,
    filing_date TEXT,
    next_hearing TEXT,
    case_status TEXT,
    judgment_url TEXT,
    error_message TEXT
)
"""


class SqliteQueryStore(QueryStore):
    """Single shared connection; driver calls are serialized with a lock."""

    paramstyle = "qmark"

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    def open(self) -> None:
        if self._conn is not None:
            return
        if self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        try:
            self._conn = sqlite3.connect(self.path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StoreError(f"Unable to open {self.path}: {exc}") from exc
        with self._connection() as conn:
            conn.execute(SCHEMA)
        logger.info("Connected to SQLite database at %s", self.path)

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        with self._lock:
            if self._conn is None:
                raise StoreError("Query store is not open")
            try:
                yield self._conn
                self._conn.commit()
            except sqlite3.Error as exc:
                self._conn.rollback()
                raise StoreError(str(exc)) from exc
