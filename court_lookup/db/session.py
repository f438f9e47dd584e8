"""
Query store construction from a database URL.
"""

from __future__ import annotations

from court_lookup.db.postgres import PostgresQueryStore
from court_lookup.db.sqlite import SqliteQueryStore
from court_lookup.db.store import QueryStore

SQLITE_PREFIX = "sqlite:///"
POSTGRES_SCHEMES = ("postgres://", "postgresql://")


def create_store(database_url: str) -> QueryStore:
    """Return an unopened store for ``database_url``. Callers own open/close."""
    if database_url.startswith(SQLITE_PREFIX):
        return SqliteQueryStore(database_url[len(SQLITE_PREFIX):] or ":memory:")
    if database_url.startswith(POSTGRES_SCHEMES):
        return PostgresQueryStore(database_url)
    raise ValueError(f"Unsupported DATABASE_URL: {database_url}")
