"""
Database query helpers for the query log.

Helpers accept any DB-API connection that exposes ``execute`` (sqlite3 and
psycopg both do); ``paramstyle`` selects the placeholder syntax.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from court_lookup.db.models import QueryLogEntry
from court_lookup.providers.base import CaseQuery, CaseRecord

COLUMNS = (
    "id",
    "case_type",
    "case_number",
    "year",
    "query_timestamp",
    "status",
    "raw_response",
    "parties",
    "filing_date",
    "next_hearing",
    "case_status",
    "judgment_url",
    "error_message",
)

_SELECT = f"SELECT {', '.join(COLUMNS)} FROM queries"


def _marker(paramstyle: str) -> str:
    return "?" if paramstyle == "qmark" else "%s"


def insert_query(
    conn: Any,
    *,
    paramstyle: str,
    query: CaseQuery,
    record: Optional[CaseRecord],
    outcome: str,
    error: Optional[str],
    timestamp: datetime,
) -> int:
    """Insert a single query log row and return its ID."""
    mark = _marker(paramstyle)
    values = (
        query.case_type,
        query.case_number,
        query.year,
        timestamp.isoformat() if paramstyle == "qmark" else timestamp,
        outcome,
        record.to_json() if record else None,
        record.parties if record else None,
        record.filing_date if record else None,
        record.next_hearing if record else None,
        record.status if record else None,
        record.judgment_url if record else None,
        error,
    )
    sql = (
        "INSERT INTO queries (case_type, case_number, year, query_timestamp, status, raw_response, "
        "parties, filing_date, next_hearing, case_status, judgment_url, error_message) "
        f"VALUES ({', '.join([mark] * len(values))})"
    )
    if paramstyle == "qmark":
        cur = conn.execute(sql, values)
        return int(cur.lastrowid)
    row = conn.execute(sql + " RETURNING id", values).fetchone()
    return int(row[0])


def fetch_recent_queries(conn: Any, limit: int, *, paramstyle: str) -> list[QueryLogEntry]:
    """Return up to ``limit`` rows, newest first."""
    rows = conn.execute(
        f"{_SELECT} ORDER BY query_timestamp DESC, id DESC LIMIT {_marker(paramstyle)}",
        (limit,),
    ).fetchall()
    return [row_to_entry(row) for row in rows]


def fetch_query(conn: Any, entry_id: int, *, paramstyle: str) -> Optional[QueryLogEntry]:
    """Fetch a single query log row."""
    row = conn.execute(f"{_SELECT} WHERE id = {_marker(paramstyle)}", (entry_id,)).fetchone()
    if row is None:
        return None
    return row_to_entry(row)


def row_to_entry(row) -> QueryLogEntry:
    timestamp = row[4]
    if isinstance(timestamp, str):
        timestamp = datetime.fromisoformat(timestamp)
    return QueryLogEntry(
        id=int(row[0]),
        case_type=row[1],
        case_number=row[2],
        year=int(row[3]),
        query_timestamp=timestamp,
        status=row[5],
        raw_response=row[6],
        parties=row[7],
        filing_date=row[8],
        next_hearing=row[9],
        case_status=row[10],
        judgment_url=row[11],
        error_message=row[12],
    )
