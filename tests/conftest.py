from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from src.worktime.worktime.events.model import AttendanceEvent
from src.worktime.worktime.timestamps.normalizer import TimestampNormalizer

TOKYO = ZoneInfo("Asia/Tokyo")


@pytest.fixture
def tz():
    return TOKYO


@pytest.fixture
def normalizer():
    return TimestampNormalizer("Asia/Tokyo")


@pytest.fixture
def fixed_now():
    return datetime(2025, 1, 15, 18, 30, tzinfo=TOKYO)


@pytest.fixture
def at():
    """at("09:00") -> civil instant on 2025-01-15; at("09:00", day) for other dates."""

    def build(hhmm: str, day: date = date(2025, 1, 15)) -> datetime:
        parts = [int(p) for p in hhmm.split(":")]
        while len(parts) < 3:
            parts.append(0)
        return datetime(day.year, day.month, day.day, parts[0], parts[1], parts[2], tzinfo=TOKYO)

    return build


@pytest.fixture
def event(at):
    """event("09:00", "17:00", recorded="17:00") with HH:MM shorthands."""

    def build(check_in, check_out=None, *, recorded=None, day: date = date(2025, 1, 15), user_id: str = "u1"):
        recorded = recorded or check_out or check_in
        return AttendanceEvent(
            user_id=user_id,
            work_date=day,
            check_in=at(check_in, day) if check_in else None,
            check_out=at(check_out, day) if check_out else None,
            recorded_at=at(recorded, day),
        )

    return build
