"""
Sequential batch lookups with a fixed pause between requests.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable

from court_lookup.providers.base import CaseDataProvider, CaseQuery, CaseRecord
from court_lookup.validation import MAX_YEAR, MIN_YEAR, parse_year, validate_case_input

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BatchResult:
    query: CaseQuery
    success: bool
    record: CaseRecord | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        if self.success and self.record is not None:
            return {"success": True, "data": self.record.to_dict()}
        return {"success": False, "error": self.error, "caseNumber": self.query.case_number}


def fetch_batch(
    provider: CaseDataProvider,
    cases: Iterable[CaseQuery],
    *,
    delay: float = 2.0,
    min_year: int = MIN_YEAR,
    max_year: int = MAX_YEAR,
) -> list[BatchResult]:
    """Look up each case in order. A failed item is recorded and the batch carries on."""
    queue = list(cases)
    results: list[BatchResult] = []

    for index, query in enumerate(queue, start=1):
        logger.info("Fetching case %d/%d: %s", index, len(queue), query.label())
        validation = validate_case_input(
            query.case_type,
            query.case_number,
            query.year,
            min_year=min_year,
            max_year=max_year,
        )
        if not validation.is_valid:
            error = f"Invalid input: {', '.join(validation.errors)}"
            logger.error("Skipping case %s: %s", query.case_number, error)
            results.append(BatchResult(query=query, success=False, error=error))
        else:
            try:
                record = provider.fetch(query.case_type, query.case_number, parse_year(query.year))
                results.append(BatchResult(query=query, success=True, record=record))
            except Exception as exc:
                logger.error("Failed to fetch case %s: %s", query.case_number, exc)
                results.append(BatchResult(query=query, success=False, error=str(exc)))

        if delay > 0 and index < len(queue):
            time.sleep(delay)

    return results
