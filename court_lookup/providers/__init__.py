"""
Case data providers: simulated placeholder data and live portal lookups.
"""

from __future__ import annotations

from typing import Iterable

from court_lookup.config import Settings
from court_lookup.providers.base import CaseDataProvider, CaseQuery, CaseRecord, format_case_number
from court_lookup.providers.batch import BatchResult, fetch_batch
from court_lookup.providers.live import LiveCaseProvider, parse_case_details
from court_lookup.providers.simulated import SimulatedCaseProvider


def build_provider(settings: Settings) -> CaseDataProvider:
    """Return the provider selected by CASE_PROVIDER."""
    if settings.case_provider == "live":
        return LiveCaseProvider(
            state=settings.court_state,
            timeout=settings.request_timeout,
            delay=settings.request_delay,
        )
    return SimulatedCaseProvider()


def run_batch(
    settings: Settings,
    cases: Iterable[CaseQuery],
    provider: CaseDataProvider | None = None,
) -> list[BatchResult]:
    """Batch lookup using BATCH_DELAY and the configured year bounds."""
    return fetch_batch(
        provider or build_provider(settings),
        cases,
        delay=settings.batch_delay,
        min_year=settings.min_year,
        max_year=settings.max_year,
    )


__all__ = [
    "BatchResult",
    "CaseDataProvider",
    "CaseQuery",
    "CaseRecord",
    "LiveCaseProvider",
    "SimulatedCaseProvider",
    "build_provider",
    "fetch_batch",
    "format_case_number",
    "parse_case_details",
    "run_batch",
]
