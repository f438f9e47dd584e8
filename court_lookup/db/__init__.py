"""
Query log persistence.
"""

from court_lookup.db.models import STATUS_ERROR, STATUS_SUCCESS, QueryLogEntry
from court_lookup.db.postgres import PostgresQueryStore
from court_lookup.db.session import create_store
from court_lookup.db.sqlite import SqliteQueryStore
from court_lookup.db.store import QueryStore, StoreError

__all__ = [
    "PostgresQueryStore",
    "QueryLogEntry",
    "QueryStore",
    "STATUS_ERROR",
    "STATUS_SUCCESS",
    "SqliteQueryStore",
    "StoreError",
    "create_store",
]
