from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import AttendanceEventRepository


class MySQLAttendanceEventRepository(AttendanceEventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_rows(self, user_id: str, start_date: date, end_date: date) -> Sequence[Mapping[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, date, check_in_time, check_out_time, created_at
                FROM attendance_records
                WHERE user_id=%s AND date BETWEEN %s AND %s
                ORDER BY created_at ASC
                """,
                (user_id, start_date, end_date),
            )
            return fetchall(cur)
