"""
Append-only query log store.
"""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from datetime import datetime, timezone
from typing import Any, Optional

from court_lookup.db import queries
from court_lookup.db.models import QueryLogEntry
from court_lookup.providers.base import CaseQuery, CaseRecord

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when the underlying database driver fails."""


class QueryStore:
    """Base class for query log backends. Rows can be added and read, never changed."""

    paramstyle = "format"

    def open(self) -> None:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

    def _connection(self) -> AbstractContextManager[Any]:
        raise NotImplementedError

    def __enter__(self) -> "QueryStore":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def append(
        self,
        query: CaseQuery,
        record: Optional[CaseRecord],
        outcome: str,
        error: Optional[str] = None,
    ) -> int:
        """Insert one log row for a lookup attempt and return its ID."""
        with self._connection() as conn:
            entry_id = queries.insert_query(
                conn,
                paramstyle=self.paramstyle,
                query=query,
                record=record,
                outcome=outcome,
                error=error,
                timestamp=datetime.now(timezone.utc),
            )
        logger.info("Query saved with ID: %s", entry_id)
        return entry_id

    def list_recent(self, limit: int) -> list[QueryLogEntry]:
        """Return at most ``limit`` entries, newest first. Non-positive limits yield nothing."""
        limit = max(int(limit), 0)
        with self._connection() as conn:
            return queries.fetch_recent_queries(conn, limit, paramstyle=self.paramstyle)

    def get_by_id(self, entry_id: int) -> Optional[QueryLogEntry]:
        with self._connection() as conn:
            return queries.fetch_query(conn, entry_id, paramstyle=self.paramstyle)
