from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from ..backend.connection import first_present


@dataclass(frozen=True)
class McidPunch:
    """A single machine punch tagged with the machine (MCID) that recorded it."""

    empcode: str
    name: str
    punch_date: str
    punch_time: str
    mcid: str
    m_flag: str = ""

    @classmethod
    def from_api(cls, item: Mapping[str, Any]) -> "McidPunch":
        return cls(
            empcode=first_present(item, "Empcode", "empcode"),
            name=first_present(item, "Name", "name"),
            punch_date=first_present(item, "PunchDate", "punch_date"),
            punch_time=first_present(item, "PunchTime", "punch_time"),
            mcid=first_present(item, "mcid", "MCID", "Mcid"),
            m_flag=first_present(item, "M_Flag", "m_flag"),
        )

    def as_row(self) -> dict:
        return asdict(self)


def _count(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return None


@dataclass(frozen=True)
class OperationalSummary:
    """Per-employee, per-day totals derived by the backend from MCID punches."""

    empcode: str
    name: str
    date: str
    in_time: str
    out_time: str
    total_time: str
    break_time: str
    work_time: str
    total_punches_count: Any
    invalid_punches_count: Any

    @classmethod
    def from_api(cls, item: Mapping[str, Any]) -> "OperationalSummary":
        return cls(
            empcode=first_present(item, "empcode", "Empcode"),
            name=first_present(item, "name", "Name"),
            date=first_present(item, "date", "Date"),
            in_time=first_present(item, "in_time", "InTime"),
            out_time=first_present(item, "out_time", "OutTime"),
            total_time=first_present(item, "total_time", "TotalTime"),
            break_time=first_present(item, "break_time", "BreakTime"),
            work_time=first_present(item, "work_time", "WorkTime"),
            total_punches_count=_count(item.get("total_punches_count")),
            invalid_punches_count=_count(item.get("invalid_punches_count")),
        )

    def as_row(self) -> dict:
        return asdict(self)
