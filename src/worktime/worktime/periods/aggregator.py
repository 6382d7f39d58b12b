from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..daily.model import DailyAggregate
from .model import PeriodAggregate


def _rounded_average(total: int, count: int) -> int:
    # Half-up integer division; totals are never negative.
    if count <= 0:
        return 0
    return (2 * total + count) // (2 * count)


class PeriodAggregator:
    """Folds daily aggregates; granularity is only the length of the range."""

    def aggregate(
        self,
        daily_aggregates: Sequence[DailyAggregate],
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> PeriodAggregate:
        days = tuple(daily_aggregates)
        total = sum(d.total_minutes for d in days)
        # Duration based; the attendance-based count lives in workdays.builder.
        work_day_count = sum(1 for d in days if d.total_minutes > 0)

        check_ins = [s.check_in for d in days for s in d.sessions]
        check_outs = [s.check_out for d in days for s in d.sessions if s.check_out is not None]

        return PeriodAggregate(
            start_date=start_date or (days[0].work_date if days else None),
            end_date=end_date or (days[-1].work_date if days else None),
            total_minutes=total,
            work_day_count=work_day_count,
            average_minutes=_rounded_average(total, work_day_count),
            longest_day_minutes=max((d.total_minutes for d in days), default=0),
            earliest_check_in=min(check_ins, default=None),
            latest_check_out=max(check_outs, default=None),
            daily_data=days,
        )
