from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..core.enums import ReferencePolicy
from ..durations.base import DurationCalculator, reference_for
from ..durations.ceiling_calculator import CeilingMinuteCalculator
from ..sessions.model import Session
from .model import DailyAggregate

logger = logging.getLogger(__name__)


class DailyAggregator:
    def __init__(
        self,
        calculator: Optional[DurationCalculator] = None,
        *,
        policy: ReferencePolicy = ReferencePolicy.HISTORICAL,
        now: Optional[datetime] = None,
    ):
        self._calculator = calculator or CeilingMinuteCalculator()
        self._policy = policy
        self._now = now

    def aggregate(self, work_date: date, sessions: Sequence[Session], issues: Iterable[str] = ()) -> DailyAggregate:
        computed = tuple(
            replace(s, minutes=self._calculator.minutes(s, reference_for(s, self._policy, self._now)))
            for s in sessions
        )
        total = sum(s.minutes for s in computed)
        closed_outs = [s.check_out for s in computed if s.check_out is not None]

        aggregate = DailyAggregate(
            work_date=work_date,
            sessions=computed,
            total_minutes=total,
            is_complete=bool(computed) and not any(s.is_open for s in computed),
            first_check_in=min((s.check_in for s in computed), default=None),
            last_check_out=max(closed_outs, default=None),
            issues=tuple(issues),
        )
        logger.debug("Daily total for %s: %d minutes over %d sessions", work_date, total, len(computed))
        return aggregate
