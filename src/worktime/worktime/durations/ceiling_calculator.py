from __future__ import annotations

import logging
from datetime import datetime, timezone

from ..core.constants import DEFAULT_LONG_SESSION_LOG_MINUTES, MIN_SESSION_MINUTES, SECONDS_PER_MINUTE
from ..sessions.model import Session
from .base import DurationCalculator

logger = logging.getLogger(__name__)


class CeilingMinuteCalculator(DurationCalculator):
    """Standard rule: whole seconds, rounded up to minutes, never below 1."""

    def __init__(self, *, long_session_log_minutes: int = DEFAULT_LONG_SESSION_LOG_MINUTES):
        self._long_session_log_minutes = int(long_session_log_minutes)

    def minutes(self, session: Session, reference_instant: datetime) -> int:
        end = session.check_out if session.check_out is not None else reference_instant
        # Same-zone aware subtraction is wall-clock; go through UTC for elapsed time.
        elapsed = end.astimezone(timezone.utc) - session.check_in.astimezone(timezone.utc)
        seconds = max(0, int(elapsed.total_seconds()))
        minutes = max(MIN_SESSION_MINUTES, -(-seconds // SECONDS_PER_MINUTE))

        if minutes > self._long_session_log_minutes:
            logger.debug(
                "Long session: check_in=%s end=%s open=%s seconds=%d minutes=%d",
                session.check_in.isoformat(),
                end.isoformat(),
                session.is_open,
                seconds,
                minutes,
            )
        return minutes
