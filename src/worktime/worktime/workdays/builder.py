from __future__ import annotations

from datetime import date
from typing import Iterable

from ..events.model import AttendanceEvent


def work_days(events: Iterable[AttendanceEvent]) -> set[date]:
    """Dates with at least one check-in, whatever their computed duration.

    Attendance based, for headcount statistics. Not the same thing as
    PeriodAggregate.work_day_count, which counts days with minutes > 0.
    """
    return {e.work_date for e in events if e.check_in is not None}


def count_work_days(events: Iterable[AttendanceEvent], start: date, end: date) -> int:
    return sum(1 for d in work_days(events) if start <= d <= end)
