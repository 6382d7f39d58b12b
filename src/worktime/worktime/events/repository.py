from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Protocol, Sequence


class AttendanceEventRepository(Protocol):
    """Read side of the external event store.

    Rows are mappings with ``user_id``, ``date``, ``check_in_time``,
    ``check_out_time`` and ``created_at``; timestamp values may be strings
    or datetimes depending on the driver.
    """

    def fetch_rows(self, user_id: str, start_date: date, end_date: date) -> Sequence[Mapping[str, Any]]:
        raise NotImplementedError
