from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Sequence

import pandas as pd

from ..attendance.service import AttendanceService
from ..common.datetime_utils import (
    default_range,
    format_dmy,
    format_hours_minutes,
    parse_hours_minutes,
    today_local,
)
from ..core.constants import (
    ANALYTICS_DAYS,
    DASHBOARD_DAYS,
    DATE_FORMAT,
    EMPLOYEE_TOP_N,
    STATUS_TOP_N,
    WORK_TIME_BUCKET_HOURS,
)


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int = 0
    total_records: int = 0
    today_attendance: int = 0
    average_work_time: str = "0:00"


@dataclass(frozen=True)
class AnalyticsReport:
    from_date: str
    to_date: str
    stats: DashboardStats
    attendance_by_date: list[dict] = field(default_factory=list)
    status_distribution: list[dict] = field(default_factory=list)
    employee_attendance: list[dict] = field(default_factory=list)
    work_time_distribution: list[dict] = field(default_factory=list)


def _frame(rows: Sequence[dict]) -> pd.DataFrame:
    df = pd.DataFrame(list(rows))
    for col in ("empcode", "date_string", "work_time", "status"):
        if col not in df.columns:
            df[col] = ""
    return df.fillna("")


def compute_stats(rows: Sequence[dict], *, today: date) -> DashboardStats:
    if not rows:
        return DashboardStats()
    df = _frame(rows)

    employees = df.loc[df["empcode"] != "", "empcode"].nunique()
    today_text = format_dmy(today)
    today_count = int(df["date_string"].astype(str).str.contains(today_text, regex=False).sum())

    hours = pd.to_numeric(df["work_time"].map(parse_hours_minutes), errors="coerce").dropna()
    hours = hours[hours > 0]
    average = format_hours_minutes(float(hours.mean())) if not hours.empty else "0:00"

    return DashboardStats(
        total_employees=int(employees),
        total_records=len(df),
        today_attendance=today_count,
        average_work_time=average,
    )


def _parse_day(value: str) -> Optional[date]:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def attendance_by_date(rows: Sequence[dict]) -> list[dict]:
    if not rows:
        return []
    df = _frame(rows)
    days = df["date_string"].astype(str).str.split(" ").str[0].map(_parse_day).dropna()
    counts = days.value_counts().sort_index()
    return [{"date": d.strftime("%b %d"), "attendance": int(n)} for d, n in counts.items()]


def status_distribution(rows: Sequence[dict], *, top: int = STATUS_TOP_N) -> list[dict]:
    if not rows:
        return []
    statuses = _frame(rows)["status"].replace("", "Unknown")
    counts = statuses.value_counts(sort=False).sort_values(ascending=False, kind="stable").head(top)
    return [{"name": name, "value": int(n)} for name, n in counts.items()]


def employee_attendance(rows: Sequence[dict], *, top: int = EMPLOYEE_TOP_N) -> list[dict]:
    if not rows:
        return []
    codes = _frame(rows)["empcode"].replace("", "Unknown")
    counts = codes.value_counts(sort=False).sort_values(ascending=False, kind="stable").head(top)
    return [{"empcode": code, "count": int(n)} for code, n in counts.items()]


def work_time_distribution(rows: Sequence[dict], *, bucket: int = WORK_TIME_BUCKET_HOURS) -> list[dict]:
    if not rows:
        return []
    work = _frame(rows)["work_time"].replace("", "0:00")
    hours = pd.to_numeric(work.map(parse_hours_minutes), errors="coerce").dropna()
    lower = (hours // bucket * bucket).astype(int)
    counts = lower.value_counts().sort_index()
    return [{"range": f"{low}-{low + bucket}h", "count": int(n)} for low, n in counts.items()]


class AnalyticsService:
    """Dashboard numbers and chart series computed from attendance search results."""

    def __init__(self, attendance: AttendanceService):
        self._attendance = attendance

    def report(self, *, from_date: str, to_date: str, today: Optional[date] = None) -> AnalyticsReport:
        result = self._attendance.search(from_date=from_date, to_date=to_date)
        rows = result.rows
        return AnalyticsReport(
            from_date=result.from_date,
            to_date=result.to_date,
            stats=compute_stats(rows, today=today or today_local()),
            attendance_by_date=attendance_by_date(rows),
            status_distribution=status_distribution(rows),
            employee_attendance=employee_attendance(rows),
            work_time_distribution=work_time_distribution(rows),
        )

    def dashboard(self, *, today: Optional[date] = None) -> AnalyticsReport:
        today = today or today_local()
        from_date, to_date = default_range(DASHBOARD_DAYS, today=today)
        return self.report(from_date=from_date, to_date=to_date, today=today)

    def default_analytics_range(self, *, today: Optional[date] = None) -> tuple[str, str]:
        return default_range(ANALYTICS_DAYS, today=today)
