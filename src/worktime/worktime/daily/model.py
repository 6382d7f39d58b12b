from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..sessions.model import Session


@dataclass(frozen=True)
class DailyAggregate:
    """Per-day detail row: the day's sessions and their summed minutes."""

    work_date: date
    sessions: tuple[Session, ...]
    total_minutes: int
    is_complete: bool
    first_check_in: Optional[datetime] = None
    last_check_out: Optional[datetime] = None
    issues: tuple[str, ...] = ()

    @property
    def has_open_session(self) -> bool:
        return any(s.is_open for s in self.sessions)
