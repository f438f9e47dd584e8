"""
PostgreSQL backend for the query log.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import psycopg
from psycopg import Connection
from psycopg_pool import ConnectionPool

from court_lookup.db.store import QueryStore, StoreError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS queries (
    id BIGSERIAL PRIMARY KEY,
    case_type TEXT NOT NULL,
    case_number TEXT NOT NULL,
    year INTEGER NOT NULL,
    query_timestamp TIMESTAMPTZ NOT NULL DEFAULT now(),
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


class PostgresQueryStore(QueryStore):
    paramstyle = "format"

    def __init__(self, conninfo: str, *, min_size: int = 1, max_size: int = 10) -> None:
        self.pool = ConnectionPool(conninfo=conninfo, min_size=min_size, max_size=max_size, open=False)

    def open(self) -> None:
        self.pool.open(wait=True)
        with self._connection() as conn:
            conn.execute(SCHEMA)
        logger.info("Connected to PostgreSQL query store")

    def close(self) -> None:
        self.pool.close()

    @contextmanager
    def _connection(self) -> Iterator[Connection]:
        try:
            with self.pool.connection() as conn:
                yield conn
        except psycopg.Error as exc:
            raise StoreError(str(exc)) from exc
