from __future__ import annotations

from typing import Any, Optional

from ..backend.connection import BackendConnection
from .repository import McidRepository


class HttpMcidRepository(McidRepository):
    def __init__(self, conn: BackendConnection):
        self._conn = conn

    def fetch(self, *, from_date: str, to_date: str) -> Any:
        return self._conn.get_json("/mcid-data/fetch/", {"from_date": from_date, "to_date": to_date})

    def process(self, *, from_date: str, to_date: str, empcode: Optional[str] = None) -> Any:
        return self._conn.get_json(
            "/mcid-data/process/",
            {"from_date": from_date, "to_date": to_date, "empcode": empcode},
        )
