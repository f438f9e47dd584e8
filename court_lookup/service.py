"""
Case lookup orchestration: validate, fetch, then log the attempt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from court_lookup.config import Settings
from court_lookup.db import STATUS_ERROR, STATUS_SUCCESS, QueryLogEntry, QueryStore, StoreError
from court_lookup.errors import CaseNotFoundError, CaseValidationError, LookupFailedError
from court_lookup.providers import CaseDataProvider, CaseQuery, CaseRecord
from court_lookup.validation import parse_year, validate_case_input

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SaveResult:
    """Outcome of persisting a lookup. Callers may inspect or ignore it."""

    entry_id: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.entry_id is not None


@dataclass(slots=True, frozen=True)
class LookupResult:
    record: CaseRecord
    saved: SaveResult


class CaseLookupService:
    def __init__(self, provider: CaseDataProvider, store: QueryStore, settings: Settings) -> None:
        self.provider = provider
        self.store = store
        self.settings = settings

    def lookup(self, case_type: Any, case_number: Any, year: Any) -> LookupResult:
        validation = validate_case_input(
            case_type,
            case_number,
            year,
            min_year=self.settings.min_year,
            max_year=self.settings.max_year,
        )
        if not validation.is_valid:
            raise CaseValidationError("; ".join(validation.errors), validation.errors)

        query = CaseQuery(
            case_type=str(case_type).strip(),
            case_number=str(case_number).strip(),
            year=parse_year(year),
        )
        logger.info("Fetching case: %s", query.label())

        try:
            record = self.provider.fetch(query.case_type, query.case_number, query.year)
        except Exception as exc:
            logger.exception("Provider failed for %s", query.label())
            self._save(query, None, STATUS_ERROR, error=str(exc) or exc.__class__.__name__)
            raise LookupFailedError("Failed to fetch case data") from exc

        saved = self._save(query, record, STATUS_SUCCESS)
        return LookupResult(record=record, saved=saved)

    def history(self, limit: int) -> list[QueryLogEntry]:
        try:
            return self.store.list_recent(limit)
        except StoreError as exc:
            logger.error("Error fetching queries: %s", exc)
            raise LookupFailedError("Failed to fetch query history") from exc

    def get_entry(self, entry_id: int) -> QueryLogEntry:
        try:
            entry = self.store.get_by_id(entry_id)
        except StoreError as exc:
            logger.error("Error fetching case %s: %s", entry_id, exc)
            raise LookupFailedError("Failed to fetch case") from exc
        if entry is None:
            raise CaseNotFoundError("Case not found")
        return entry

    def _save(
        self,
        query: CaseQuery,
        record: Optional[CaseRecord],
        outcome: str,
        error: Optional[str] = None,
    ) -> SaveResult:
        try:
            entry_id = self.store.append(query, record, outcome, error)
        except StoreError as exc:
            logger.error("Error saving query for %s: %s", query.label(), exc)
            return SaveResult(error=str(exc))
        return SaveResult(entry_id=entry_id)
