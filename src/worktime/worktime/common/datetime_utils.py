from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, tzinfo
from typing import Iterator, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current wall-clock time in the given zone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def each_day(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date in [start, end]."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def week_range(day: date, *, week_start: int = 0) -> tuple[date, date]:
    """Seven-day window containing ``day``; ``week_start`` follows date.weekday()."""
    offset = (day.weekday() - week_start) % 7
    start = day - timedelta(days=offset)
    return start, start + timedelta(days=6)


def month_range(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def year_range(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)
