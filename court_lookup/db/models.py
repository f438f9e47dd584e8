"""
Dataclasses mirroring database tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


@dataclass(slots=True, frozen=True)
class QueryLogEntry:
    id: int
    case_type: str
    case_number: str
    year: int
    query_timestamp: datetime
    status: str
    raw_response: Optional[str]
    parties: Optional[str]
    filing_date: Optional[str]
    next_hearing: Optional[str]
    case_status: Optional[str]
    judgment_url: Optional[str]
    error_message: Optional[str]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "case_type": self.case_type,
            "case_number": self.case_number,
            "year": self.year,
            "query_timestamp": self.query_timestamp.isoformat(),
            "status": self.status,
            "raw_response": self.raw_response,
            "parties": self.parties,
            "filing_date": self.filing_date,
            "next_hearing": self.next_hearing,
            "case_status": self.case_status,
            "judgment_url": self.judgment_url,
            "error_message": self.error_message,
        }
