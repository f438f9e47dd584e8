"""
Input validation for case lookups.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

MIN_YEAR = 1950
MAX_YEAR = 2025
YEAR_PATTERN = re.compile(r"^[+-]?[0-9]+$")


@dataclass(slots=True)
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def parse_year(value: Any) -> int | None:
    """Coerce a year given as int or numeric string. Returns None when not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if YEAR_PATTERN.match(text):
            return int(text)
    return None


def validate_case_input(
    case_type: Any,
    case_number: Any,
    year: Any,
    *,
    min_year: int = MIN_YEAR,
    max_year: int = MAX_YEAR,
) -> ValidationResult:
    """Check every field and collect all violations instead of stopping at the first."""
    errors: list[str] = []

    for value, label in ((case_type, "Case type"), (case_number, "Case number")):
        if _is_blank(value):
            errors.append(f"{label} is required")
        elif isinstance(value, bool) or not isinstance(value, (str, int)):
            errors.append(f"{label} must be text or a number")

    if _is_blank(year):
        errors.append("Year is required")
    else:
        year_num = parse_year(year)
        if year_num is None or not (min_year <= year_num <= max_year):
            errors.append(f"Year must be between {min_year} and {max_year}")

    return ValidationResult(is_valid=not errors, errors=errors)
