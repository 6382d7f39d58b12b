from __future__ import annotations

import re
from datetime import date, datetime, time, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import DEFAULT_CIVIL_TIMEZONE
from ..core.exceptions import MalformedTimestamp, ValidationError

_BARE_TIME = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2})(?:\.(\d{1,6}))?)?$")
_SHORT_OFFSET = re.compile(r"(:\d{2}(?:\.\d+)?)([+-]\d{2})$")


class TimestampNormalizer:
    """Single interpretation rule for every timestamp entering the engine.

    The result is always an aware datetime in the civil timezone:

    - ``2025-01-01T00:00:00Z`` / ``...+00:00``: an instant, converted to civil time.
    - ``2025-01-01T09:00:00`` / ``2025-01-01 09:00``: civil wall-clock time as is.
    - ``09:00`` / ``09:00:30``: civil wall-clock time on ``on_date``.
    - ``2025-01-01``: civil midnight.

    A local time is never read as UTC and a UTC time is never read as local,
    which is what produced the 9-hour offsets in older reports.
    """

    def __init__(self, timezone: Union[str, tzinfo] = DEFAULT_CIVIL_TIMEZONE):
        if isinstance(timezone, str):
            try:
                timezone = ZoneInfo(timezone)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValidationError(f"Unknown timezone {timezone!r}") from exc
        self._tz = timezone

    @property
    def timezone(self) -> tzinfo:
        return self._tz

    def normalize(self, raw: str, *, on_date: Optional[date] = None) -> datetime:
        if not isinstance(raw, str):
            raise MalformedTimestamp(raw, "expected a string")
        value = raw.strip()
        if not value:
            raise MalformedTimestamp(raw, "empty value")

        m = _BARE_TIME.match(value)
        if m:
            return self._from_bare_time(raw, m, on_date)

        if value[-1] in "Zz":
            value = value[:-1] + "+00:00"
        else:
            value = _SHORT_OFFSET.sub(r"\1\2:00", value)

        try:
            parsed = datetime.fromisoformat(value)
        except ValueError as exc:
            raise MalformedTimestamp(raw, str(exc)) from exc
        return self.to_civil(parsed)

    def coerce(self, value: Union[str, datetime], *, on_date: Optional[date] = None) -> datetime:
        """Accept driver-native datetimes as well as strings."""
        if isinstance(value, datetime):
            return self.to_civil(value)
        return self.normalize(value, on_date=on_date)

    def to_civil(self, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=self._tz)
        return value.astimezone(self._tz)

    def _from_bare_time(self, raw: str, m: re.Match, on_date: Optional[date]) -> datetime:
        if on_date is None:
            raise MalformedTimestamp(raw, "bare time needs a calendar date")
        hours, minutes, seconds, fraction = m.groups()
        try:
            wall = time(
                hour=int(hours),
                minute=int(minutes),
                second=int(seconds or 0),
                microsecond=int((fraction or "0").ljust(6, "0")),
            )
        except ValueError as exc:
            raise MalformedTimestamp(raw, str(exc)) from exc
        return datetime.combine(on_date, wall, tzinfo=self._tz)
