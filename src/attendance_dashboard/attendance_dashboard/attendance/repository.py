from __future__ import annotations

from typing import Any, Optional, Protocol


class AttendanceRepository(Protocol):
    """Remote attendance endpoints. Dates are DD/MM/YYYY strings."""

    def fetch_and_save(self, *, from_date: str, to_date: str) -> Any:
        raise NotImplementedError

    def search(self, *, from_date: str, to_date: str, empcode: Optional[str] = None) -> Any:
        raise NotImplementedError

    def filter_by_employee(self, *, empcode: str, from_date: str, to_date: str) -> Any:
        raise NotImplementedError
