from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..daily.model import DailyAggregate


@dataclass(frozen=True)
class PeriodAggregate:
    """Summary over a contiguous range of days (a day, week, month or year)."""

    start_date: Optional[date]
    end_date: Optional[date]
    total_minutes: int
    work_day_count: int
    average_minutes: int
    longest_day_minutes: int
    earliest_check_in: Optional[datetime]
    latest_check_out: Optional[datetime]
    daily_data: tuple[DailyAggregate, ...]
