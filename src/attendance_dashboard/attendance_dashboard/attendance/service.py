from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..backend.connection import extract_items
from ..common.validators import optional_text, require_date_range
from ..explorer.model import ColumnDescriptor, ExplorerConfig, ExportField
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

ATTENDANCE_COLUMNS = (
    ColumnDescriptor("empcode", "Employee Code"),
    ColumnDescriptor("name", "Name"),
    ColumnDescriptor("date_string", "Date"),
    ColumnDescriptor("in_time", "In Time"),
    ColumnDescriptor("out_time", "Out Time"),
    ColumnDescriptor("work_time", "Work Time"),
    ColumnDescriptor("break_time", "Break Time"),
    ColumnDescriptor("over_time", "Over Time"),
    ColumnDescriptor("status", "Status"),
    ColumnDescriptor("remark", "Remark", sortable=False),
)

ATTENDANCE_EXPLORER = ExplorerConfig(
    columns=ATTENDANCE_COLUMNS,
    search_keys=("empcode", "name", "date_string"),
)

ATTENDANCE_EXPORT_FIELDS = (
    ExportField("Empcode", "empcode"),
    ExportField("Name", "name"),
    ExportField("Date", "date_string"),
    ExportField("In Time", "in_time"),
    ExportField("Out Time", "out_time"),
    ExportField("Work Time", "work_time"),
    ExportField("Break Time", "break_time"),
    ExportField("Over Time", "over_time"),
    ExportField("Status", "status"),
    ExportField("Remark", "remark"),
)


@dataclass(frozen=True)
class AttendanceResult:
    from_date: str
    to_date: str
    empcode: Optional[str]
    records: list[AttendanceRecord]

    @property
    def rows(self) -> list[dict]:
        return [r.as_row() for r in self.records]

    @property
    def export_basename(self) -> str:
        return f"attendance_{self.from_date}_{self.to_date}".replace("/", "-")


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def search(self, *, from_date: str, to_date: str, empcode: Optional[str] = None) -> AttendanceResult:
        """Search a date range; a non-blank employee code narrows it to one employee."""
        from_date, to_date = require_date_range(from_date, to_date)
        empcode = optional_text(empcode)

        if empcode:
            payload = self._attendance.filter_by_employee(empcode=empcode, from_date=from_date, to_date=to_date)
        else:
            payload = self._attendance.search(from_date=from_date, to_date=to_date)

        records = [AttendanceRecord.from_api(item) for item in extract_items(payload, "data")]
        logger.info("Attendance %s-%s empcode=%s: %d records", from_date, to_date, empcode or "*", len(records))
        return AttendanceResult(from_date=from_date, to_date=to_date, empcode=empcode, records=records)

    def sync(self, *, from_date: str, to_date: str) -> int:
        """Ask the backend to pull the range from the punch source and store it."""
        from_date, to_date = require_date_range(from_date, to_date)
        payload = self._attendance.fetch_and_save(from_date=from_date, to_date=to_date)
        if isinstance(payload, dict) and isinstance(payload.get("saved_count"), int):
            return payload["saved_count"]
        return len(extract_items(payload, "data"))
