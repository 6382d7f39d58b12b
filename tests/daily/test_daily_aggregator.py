from datetime import date

from src.worktime.worktime.core.enums import ReferencePolicy
from src.worktime.worktime.daily.aggregator import DailyAggregator
from src.worktime.worktime.sessions.model import Session

DAY = date(2025, 1, 15)


def test_two_closed_sessions_sum(at):
    sessions = [
        Session(check_in=at("09:00"), check_out=at("12:00"), recorded_at=at("12:00")),
        Session(check_in=at("13:00"), check_out=at("18:00"), recorded_at=at("18:00")),
    ]

    day = DailyAggregator().aggregate(DAY, sessions)

    assert day.total_minutes == 480
    assert [s.minutes for s in day.sessions] == [180, 300]
    assert day.is_complete
    assert day.first_check_in == at("09:00")
    assert day.last_check_out == at("18:00")


def test_open_session_uses_historical_reference_by_default(at):
    sessions = [Session(check_in=at("09:00"), check_out=None, recorded_at=at("09:05"))]

    day = DailyAggregator().aggregate(DAY, sessions)

    assert day.total_minutes == 5
    assert not day.is_complete
    assert day.has_open_session
    assert day.last_check_out is None


def test_open_session_with_live_reference(at, fixed_now):
    sessions = [Session(check_in=at("09:00"), check_out=None, recorded_at=at("09:05"))]

    day = DailyAggregator(policy=ReferencePolicy.LIVE, now=fixed_now).aggregate(DAY, sessions)

    assert day.total_minutes == 570


def test_empty_day_is_zero_and_incomplete():
    day = DailyAggregator().aggregate(DAY, [], issues=["bad timestamp"])

    assert day.total_minutes == 0
    assert not day.is_complete
    assert day.sessions == ()
    assert day.first_check_in is None
    assert day.issues == ("bad timestamp",)
