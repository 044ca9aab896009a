from datetime import date

from src.attendance_dashboard.attendance_dashboard.analytics.service import (
    AnalyticsService,
    DashboardStats,
    attendance_by_date,
    compute_stats,
    employee_attendance,
    status_distribution,
    work_time_distribution,
)
from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord
from src.attendance_dashboard.attendance_dashboard.attendance.service import AttendanceService

from tests.fakes import RAW_ATTENDANCE, FakeAttendanceRepo

ROWS = [AttendanceRecord.from_api(item).as_row() for item in RAW_ATTENDANCE]


def test_compute_stats(fixed_today):
    stats = compute_stats(ROWS, today=fixed_today)

    assert stats == DashboardStats(
        total_employees=3,
        total_records=3,
        today_attendance=1,
        average_work_time="5:55",
    )


def test_compute_stats_without_rows(fixed_today):
    assert compute_stats([], today=fixed_today) == DashboardStats()


def test_attendance_by_date_is_chronological():
    rows = ROWS + [{"date_string": "30/12/2024 00:00"}, {"date_string": "bad"}]

    assert attendance_by_date(rows) == [
        {"date": "Dec 30", "attendance": 1},
        {"date": "Jan 02", "attendance": 2},
        {"date": "Jan 03", "attendance": 1},
    ]


def test_status_and_employee_series():
    rows = ROWS + [{"empcode": "E1", "status": ""}]

    assert status_distribution(rows) == [
        {"name": "P", "value": 2},
        {"name": "HD", "value": 1},
        {"name": "Unknown", "value": 1},
    ]
    assert employee_attendance(rows)[0] == {"empcode": "E1", "count": 2}
    assert status_distribution(rows, top=1) == [{"name": "P", "value": 2}]


def test_work_time_buckets_sorted_numerically():
    rows = ROWS + [{"work_time": "10:05"}]

    assert work_time_distribution(rows) == [
        {"range": "2-4h", "count": 1},
        {"range": "6-8h", "count": 1},
        {"range": "8-10h", "count": 1},
        {"range": "10-12h", "count": 1},
    ]


def test_dashboard_searches_the_last_week(fixed_today):
    repo = FakeAttendanceRepo(RAW_ATTENDANCE)

    report = AnalyticsService(AttendanceService(repo)).dashboard(today=fixed_today)

    assert repo.calls == [("search", "27/12/2024", "03/01/2025", None)]
    assert report.stats.today_attendance == 1
    assert len(report.attendance_by_date) == 2


def test_default_analytics_range_covers_thirty_days():
    service = AnalyticsService(AttendanceService(FakeAttendanceRepo([])))

    assert service.default_analytics_range(today=date(2025, 1, 31)) == ("01/01/2025", "31/01/2025")
