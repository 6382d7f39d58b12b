from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import MalformedTimestamp, ValidationError
from ..timestamps.normalizer import TimestampNormalizer
from .model import AttendanceEvent, EventBatch, RowIssue

logger = logging.getLogger(__name__)


class AttendanceEventFactory:
    """Turns raw store rows into normalized AttendanceEvent values."""

    def __init__(self, normalizer: TimestampNormalizer):
        self._normalizer = normalizer

    def from_row(self, row: Mapping[str, Any]) -> AttendanceEvent:
        work_date = self._work_date(row.get("date"))
        created_at = row.get("created_at")
        if created_at is None:
            raise ValidationError("Attendance row has no created_at")

        return AttendanceEvent(
            user_id=str(row.get("user_id") or ""),
            work_date=work_date,
            check_in=self._instant(row.get("check_in_time"), work_date),
            check_out=self._instant(row.get("check_out_time"), work_date),
            recorded_at=self._normalizer.coerce(created_at, on_date=work_date),
        )

    def from_rows(self, rows: Iterable[Mapping[str, Any]]) -> EventBatch:
        """Convert a batch; bad rows become issues on their day instead of failing the batch."""
        events: list[AttendanceEvent] = []
        issues: list[RowIssue] = []

        for row in rows:
            try:
                events.append(self.from_row(row))
            except MalformedTimestamp as exc:
                logger.warning("Dropping attendance row for %s: %s", row.get("date"), exc)
                issues.append(RowIssue(work_date=self._safe_date(row.get("date")), raw=exc.raw, reason=exc.reason))
            except ValidationError as exc:
                logger.warning("Skipping attendance row for %s: %s", row.get("date"), exc)

        return EventBatch(events=tuple(events), issues=tuple(issues))

    def _instant(self, value: Any, work_date: date) -> Optional[datetime]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return self._normalizer.coerce(value, on_date=work_date)

    @staticmethod
    def _work_date(value: Any) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return parse_iso_date(value.strip())
            except ValueError as exc:
                raise MalformedTimestamp(value, "invalid work date") from exc
        raise MalformedTimestamp(value, "missing work date")

    @classmethod
    def _safe_date(cls, value: Any) -> Optional[date]:
        try:
            return cls._work_date(value)
        except MalformedTimestamp:
            return None
