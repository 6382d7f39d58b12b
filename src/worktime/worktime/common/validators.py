from __future__ import annotations

from datetime import date

from ..core.constants import MAX_REPORT_YEAR, MIN_REPORT_YEAR
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_int(value, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} must be an integer") from exc


def require_year(year: int) -> int:
    year = require_int(year, "year")
    if not MIN_REPORT_YEAR <= year <= MAX_REPORT_YEAR:
        raise ValidationError(f"year must be between {MIN_REPORT_YEAR} and {MAX_REPORT_YEAR}")
    return year


def require_month(month: int) -> int:
    month = require_int(month, "month")
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    return month


def require_date_range(start: date, end: date) -> tuple[date, date]:
    if start > end:
        raise ValidationError(f"start date {start} is after end date {end}")
    return start, end
