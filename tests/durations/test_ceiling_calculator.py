from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from src.worktime.worktime.core.enums import ReferencePolicy, SessionFlag
from src.worktime.worktime.core.exceptions import ValidationError
from src.worktime.worktime.durations.base import reference_for
from src.worktime.worktime.durations.ceiling_calculator import CeilingMinuteCalculator
from src.worktime.worktime.sessions.model import Session


def test_closed_session_minutes(at):
    session = Session(check_in=at("09:00"), check_out=at("17:00"), recorded_at=at("17:00"))

    assert CeilingMinuteCalculator().minutes(session, at("23:00")) == 480


def test_partial_minute_rounds_up(at):
    session = Session(check_in=at("09:00:00"), check_out=at("09:10:01"), recorded_at=at("09:10:01"))

    assert CeilingMinuteCalculator().minutes(session, at("23:00")) == 11


def test_same_second_session_counts_one_minute(at):
    session = Session(check_in=at("09:00"), check_out=at("09:00"), recorded_at=at("09:00"))

    assert CeilingMinuteCalculator().minutes(session, at("09:00")) == 1


def test_sub_second_remainder_is_truncated(at):
    start = at("09:00")
    session = Session(check_in=start, check_out=start + timedelta(seconds=60, milliseconds=500), recorded_at=start)

    assert CeilingMinuteCalculator().minutes(session, start) == 1


def test_open_session_uses_reference(at):
    session = Session(check_in=at("09:00"), check_out=None, recorded_at=at("09:05"))

    assert CeilingMinuteCalculator().minutes(session, at("09:05")) == 5


def test_reference_before_check_in_floors_at_one(at):
    session = Session(check_in=at("09:00"), check_out=None, recorded_at=at("08:00"))

    assert CeilingMinuteCalculator().minutes(session, at("08:00")) == 1


def test_reference_policy(at, fixed_now):
    session = Session(check_in=at("09:00"), check_out=None, recorded_at=at("09:05"))

    assert reference_for(session, ReferencePolicy.HISTORICAL) == at("09:05")
    assert reference_for(session, ReferencePolicy.LIVE, fixed_now) == fixed_now


def test_live_policy_requires_now(at):
    session = Session(check_in=at("09:00"), check_out=None, recorded_at=at("09:05"))

    with pytest.raises(ValidationError):
        reference_for(session, ReferencePolicy.LIVE)


def test_flagged_open_sessions_stop_at_their_own_write_time(at, fixed_now):
    abandoned = Session(check_in=at("09:00"), check_out=None, recorded_at=at("09:00"), flags=(SessionFlag.ABANDONED_OPEN,))
    inverted = Session(check_in=at("13:00"), check_out=None, recorded_at=at("13:10"), flags=(SessionFlag.INVERTED_CHECKOUT,))

    assert reference_for(abandoned, ReferencePolicy.LIVE, fixed_now) == at("09:00")
    assert reference_for(inverted, ReferencePolicy.LIVE, fixed_now) == at("13:10")


def test_elapsed_time_across_dst_change():
    berlin = ZoneInfo("Europe/Berlin")
    # clocks jump from 02:00 to 03:00 on 2025-03-30
    session = Session(
        check_in=datetime(2025, 3, 30, 1, 30, tzinfo=berlin),
        check_out=datetime(2025, 3, 30, 3, 30, tzinfo=berlin),
        recorded_at=datetime(2025, 3, 30, 3, 30, tzinfo=berlin),
    )

    assert CeilingMinuteCalculator().minutes(session, session.recorded_at) == 60


def test_elapsed_time_when_clocks_fall_back():
    berlin = ZoneInfo("Europe/Berlin")
    # 03:00 becomes 02:00 again on 2025-10-26
    session = Session(
        check_in=datetime(2025, 10, 26, 1, 30, tzinfo=berlin),
        check_out=datetime(2025, 10, 26, 3, 30, tzinfo=berlin),
        recorded_at=datetime(2025, 10, 26, 3, 30, tzinfo=berlin),
    )

    assert CeilingMinuteCalculator().minutes(session, session.recorded_at) == 180
