from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from ..backend.connection import first_present


@dataclass(frozen=True)
class AttendanceRecord:
    """One in/out record per employee and day, as served by the backend."""

    empcode: str
    name: str
    date_string: str
    in_time: str
    out_time: str
    work_time: str
    break_time: str
    over_time: str
    status: str
    remark: str
    erl_out: str
    late_in: str

    @classmethod
    def from_api(cls, item: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            empcode=first_present(item, "Empcode", "empcode"),
            name=first_present(item, "Name", "name"),
            date_string=first_present(item, "DateString", "date_string", "Date"),
            in_time=first_present(item, "INTime", "in_time", "InTime"),
            out_time=first_present(item, "OUTTime", "out_time", "OutTime"),
            work_time=first_present(item, "WorkTime", "work_time"),
            break_time=first_present(item, "BreakTime", "break_time"),
            over_time=first_present(item, "OverTime", "over_time"),
            status=first_present(item, "Status", "status"),
            remark=first_present(item, "Remark", "remark"),
            erl_out=first_present(item, "ErlOut", "erl_out"),
            late_in=first_present(item, "Late_In", "late_in"),
        )

    def as_row(self) -> dict:
        return asdict(self)
