from __future__ import annotations

from typing import Any, Optional

from ..backend.connection import BackendConnection
from .repository import AttendanceRepository


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: BackendConnection):
        self._conn = conn

    def fetch_and_save(self, *, from_date: str, to_date: str) -> Any:
        return self._conn.get_json("/inout/list/", {"from_date": from_date, "to_date": to_date})

    def search(self, *, from_date: str, to_date: str, empcode: Optional[str] = None) -> Any:
        return self._conn.get_json(
            "/inout/search/",
            {"from_date": from_date, "to_date": to_date, "empcode": empcode},
        )

    def filter_by_employee(self, *, empcode: str, from_date: str, to_date: str) -> Any:
        return self._conn.get_json(
            "/inout/filter/",
            {"empcode": empcode, "from_date": from_date, "to_date": to_date},
        )
