"""
Placeholder case data drawn at random from fixed pools.
"""

from __future__ import annotations

import random
from datetime import date

from court_lookup.providers.base import CaseRecord, format_case_number

PARTIES = (
    "Ramesh Kumar vs State of Delhi",
    "ABC Corporation vs XYZ Ltd",
    "John Doe vs Union of India",
    "Priya Sharma vs Municipal Corporation",
    "Tech Solutions Pvt Ltd vs State Bank",
)

STATUSES = (
    "Pending",
    "Disposed",
    "Adjourned",
    "Under Review",
    "Final Order Passed",
)

NEXT_HEARING_YEAR = 2025
NEXT_HEARING_MONTH = 10
SAMPLE_JUDGMENT_URL = "https://example.com/judgments/sample.pdf"
DISPLAY_DATE_FORMAT = "%d %b %Y"


def format_display_date(value: date) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


class SimulatedCaseProvider:
    """Returns random, non-authoritative case details without any external lookup."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def fetch(self, case_type: str, case_number: str, year: int) -> CaseRecord:
        filing_date = date(year, self.rng.randint(1, 12), self.rng.randint(1, 28))
        next_hearing = date(NEXT_HEARING_YEAR, NEXT_HEARING_MONTH, self.rng.randint(1, 30))
        return CaseRecord(
            case_number=format_case_number(case_type, case_number, year),
            parties=self.rng.choice(PARTIES),
            filing_date=format_display_date(filing_date),
            next_hearing=format_display_date(next_hearing),
            status=self.rng.choice(STATUSES),
            judgment_url=SAMPLE_JUDGMENT_URL,
        )
