"""
Case record type and the provider capability shared by every data source.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Protocol


def format_case_number(case_type: str, case_number: str, year: int) -> str:
    return f"{str(case_type).strip()}/{str(case_number).strip()}/{year}"


@dataclass(slots=True, frozen=True)
class CaseQuery:
    case_type: str
    case_number: str
    year: int

    def label(self) -> str:
        return format_case_number(self.case_type, self.case_number, self.year)


@dataclass(slots=True, frozen=True)
class CaseRecord:
    case_number: str
    parties: str
    filing_date: str
    next_hearing: str
    status: str
    judgment_url: str | None = None

    def to_dict(self) -> dict:
        return {
            "caseNumber": self.case_number,
            "parties": self.parties,
            "filingDate": self.filing_date,
            "nextHearing": self.next_hearing,
            "status": self.status,
            "judgmentUrl": self.judgment_url,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


class CaseDataProvider(Protocol):
    """Anything that can turn validated case inputs into a CaseRecord."""

    def fetch(self, case_type: str, case_number: str, year: int) -> CaseRecord:
        ...
