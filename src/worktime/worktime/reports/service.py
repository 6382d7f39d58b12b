from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from ..common.datetime_utils import month_range, now_local, week_range, year_range
from ..common.validators import require_date_range, require_month, require_non_empty, require_year
from ..core.constants import DEFAULT_WEEK_START
from ..core.enums import ReferencePolicy
from ..engine import WorkTimeEngine
from ..events.factory import AttendanceEventFactory
from ..events.model import EventBatch
from ..events.repository import AttendanceEventRepository
from ..periods.model import PeriodAggregate
from ..timestamps.normalizer import TimestampNormalizer
from ..workdays.builder import count_work_days

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkDayStats:
    """Attendance-based day counts (any check-in), for headcount figures."""

    monthly: int
    yearly: int


class WorkTimeReportService:
    def __init__(
        self,
        events: AttendanceEventRepository,
        normalizer: TimestampNormalizer,
        *,
        engine: Optional[WorkTimeEngine] = None,
        clock: Optional[Callable[[], datetime]] = None,
        week_start: int = DEFAULT_WEEK_START,
    ):
        self._events = events
        self._normalizer = normalizer
        self._factory = AttendanceEventFactory(normalizer)
        self._engine = engine or WorkTimeEngine()
        self._clock = clock or (lambda: now_local(normalizer.timezone))
        self._week_start = int(week_start)

    def daily_report(self, user_id: str, day: date, *, live: bool = False) -> PeriodAggregate:
        return self._build(user_id, day, day, live=live)

    def weekly_report(self, user_id: str, any_day: date) -> PeriodAggregate:
        start, end = week_range(any_day, week_start=self._week_start)
        return self._build(user_id, start, end)

    def monthly_report(self, user_id: str, year: int, month: int) -> PeriodAggregate:
        start, end = month_range(require_year(year), require_month(month))
        return self._build(user_id, start, end)

    def yearly_report(self, user_id: str, year: int) -> PeriodAggregate:
        start, end = year_range(require_year(year))
        return self._build(user_id, start, end)

    def range_report(self, user_id: str, start: date, end: date) -> PeriodAggregate:
        require_date_range(start, end)
        return self._build(user_id, start, end)

    def today_work_minutes(self, user_id: str) -> int:
        user_id = require_non_empty(user_id, "user_id")
        now = self._clock()
        today = now.date()
        batch = self._load(user_id, today, today)
        return self._engine.live_total_minutes(batch.events, today, now)

    def work_day_stats(self, user_id: str, today: Optional[date] = None) -> WorkDayStats:
        user_id = require_non_empty(user_id, "user_id")
        today = today or self._clock().date()
        month_start, month_end = month_range(today.year, today.month)
        year_start, _ = year_range(today.year)

        batch = self._load(user_id, year_start, max(today, month_end))
        return WorkDayStats(
            monthly=count_work_days(batch.events, month_start, month_end),
            yearly=count_work_days(batch.events, year_start, today),
        )

    def _build(self, user_id: str, start: date, end: date, *, live: bool = False) -> PeriodAggregate:
        user_id = require_non_empty(user_id, "user_id")
        batch = self._load(user_id, start, end)

        if live:
            policy, now = ReferencePolicy.LIVE, self._clock()
        else:
            policy, now = ReferencePolicy.HISTORICAL, None

        report = self._engine.period(
            batch.events,
            start,
            end,
            policy=policy,
            now=now,
            issues=batch.issues_by_date(),
        )
        logger.info(
            "Report %s %s..%s: %d minutes over %d work days",
            user_id,
            start,
            end,
            report.total_minutes,
            report.work_day_count,
        )
        return report

    def _load(self, user_id: str, start: date, end: date) -> EventBatch:
        rows = self._events.fetch_rows(user_id, start, end)
        batch = self._factory.from_rows(rows)
        if batch.issues:
            logger.warning("%d malformed attendance rows for %s in %s..%s", len(batch.issues), user_id, start, end)
        return batch
