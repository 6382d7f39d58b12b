from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Mapping, Optional, Sequence

from .common.datetime_utils import each_day
from .core.enums import ReferencePolicy
from .daily.aggregator import DailyAggregator
from .daily.model import DailyAggregate
from .durations.base import DurationCalculator
from .durations.ceiling_calculator import CeilingMinuteCalculator
from .events.model import AttendanceEvent
from .periods.aggregator import PeriodAggregator
from .periods.model import PeriodAggregate
from .sessions.reconciler import SessionReconciler


class WorkTimeEngine:
    """Pure pipeline: events -> sessions per date -> daily rows -> period summary.

    Every call recomputes from the events it is given; there is no state
    between calls, so the same snapshot always yields the same figures.
    """

    def __init__(
        self,
        *,
        reconciler: Optional[SessionReconciler] = None,
        calculator: Optional[DurationCalculator] = None,
        period_aggregator: Optional[PeriodAggregator] = None,
    ):
        self._reconciler = reconciler or SessionReconciler()
        self._calculator = calculator or CeilingMinuteCalculator()
        self._periods = period_aggregator or PeriodAggregator()

    @staticmethod
    def group_by_date(events: Iterable[AttendanceEvent]) -> dict[date, list[AttendanceEvent]]:
        grouped: dict[date, list[AttendanceEvent]] = {}
        for event in events:
            grouped.setdefault(event.work_date, []).append(event)
        return grouped

    def daily(
        self,
        events: Iterable[AttendanceEvent],
        start: date,
        end: date,
        *,
        policy: ReferencePolicy = ReferencePolicy.HISTORICAL,
        now: Optional[datetime] = None,
        issues: Optional[Mapping[date, Sequence[str]]] = None,
    ) -> list[DailyAggregate]:
        grouped = self.group_by_date(events)
        issues = issues or {}
        aggregator = DailyAggregator(self._calculator, policy=policy, now=now)

        return [
            aggregator.aggregate(day, self._reconciler.reconcile(grouped.get(day, ())), issues.get(day, ()))
            for day in each_day(start, end)
        ]

    def period(
        self,
        events: Iterable[AttendanceEvent],
        start: date,
        end: date,
        *,
        policy: ReferencePolicy = ReferencePolicy.HISTORICAL,
        now: Optional[datetime] = None,
        issues: Optional[Mapping[date, Sequence[str]]] = None,
    ) -> PeriodAggregate:
        days = self.daily(events, start, end, policy=policy, now=now, issues=issues)
        return self._periods.aggregate(days, start_date=start, end_date=end)

    def live_total_minutes(self, events: Iterable[AttendanceEvent], work_date: date, now: datetime) -> int:
        """Running total for a day, counting an open session up to ``now``."""
        day = self.daily(events, work_date, work_date, policy=ReferencePolicy.LIVE, now=now)[0]
        return day.total_minutes
