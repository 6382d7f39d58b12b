from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceEvent:
    """One append-only row of the event store (read-only to the engine).

    ``work_date`` is the business day assigned by the writer, never derived
    from the instants. ``recorded_at`` is when the row was written.
    """

    user_id: str
    work_date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    recorded_at: datetime

    def __post_init__(self):
        if self.check_in is None and self.check_out is None:
            raise ValidationError("An attendance event needs a check-in or a check-out")


@dataclass(frozen=True)
class RowIssue:
    """A raw row that could not become an event."""

    work_date: Optional[date]
    raw: object
    reason: str

    def describe(self) -> str:
        return f"{self.reason}: {self.raw!r}"


@dataclass(frozen=True)
class EventBatch:
    events: tuple[AttendanceEvent, ...] = ()
    issues: tuple[RowIssue, ...] = ()

    def issues_by_date(self) -> dict[date, tuple[str, ...]]:
        out: dict[date, list[str]] = {}
        for issue in self.issues:
            if issue.work_date is not None:
                out.setdefault(issue.work_date, []).append(issue.describe())
        return {d: tuple(msgs) for d, msgs in out.items()}
