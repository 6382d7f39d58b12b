from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_CIVIL_TIMEZONE, DEFAULT_LONG_SESSION_LOG_MINUTES, DEFAULT_WEEK_START
from .database.connection import DBConfig, DatabaseConnection
from .durations.ceiling_calculator import CeilingMinuteCalculator
from .engine import WorkTimeEngine
from .events.mysql_event_repository import MySQLAttendanceEventRepository
from .reports.service import WorkTimeReportService
from .timestamps.normalizer import TimestampNormalizer


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    events_repo: MySQLAttendanceEventRepository
    normalizer: TimestampNormalizer
    engine: WorkTimeEngine

    report_service: WorkTimeReportService


def build_container(
    *,
    db_config: dict,
    civil_timezone: str = DEFAULT_CIVIL_TIMEZONE,
    long_session_log_minutes: int = DEFAULT_LONG_SESSION_LOG_MINUTES,
    week_start: int = DEFAULT_WEEK_START,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    events_repo = MySQLAttendanceEventRepository(conn)
    normalizer = TimestampNormalizer(civil_timezone)
    engine = WorkTimeEngine(calculator=CeilingMinuteCalculator(long_session_log_minutes=long_session_log_minutes))

    report_service = WorkTimeReportService(
        events_repo,
        normalizer,
        engine=engine,
        week_start=week_start,
    )

    return Container(
        conn=conn,
        events_repo=events_repo,
        normalizer=normalizer,
        engine=engine,
        report_service=report_service,
    )
