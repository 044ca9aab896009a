import csv
import io

import pytest

from src.attendance_dashboard.attendance_dashboard.core.exceptions import BackendError
from src.attendance_dashboard.attendance_dashboard.main import create_app

from tests.fakes import RAW_ATTENDANCE, RAW_FILES, FakeAttendanceRepo, FakeFileRepo, build_fake_container

RANGE = {"from_date": "01/01/2025", "to_date": "31/01/2025"}


@pytest.fixture
def make_client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    def _make(**repos):
        return create_app(build_fake_container(**repos)).test_client()

    return _make


def test_attendance_page_before_search(client):
    resp = client.get("/attendance")

    assert resp.status_code == 200
    assert "Enter dates and click Search" in resp.get_data(as_text=True)


def test_attendance_page_renders_sorted_table(client):
    resp = client.get("/attendance", query_string={**RANGE, "sort": "name", "dir": "desc"})
    html = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert "3 records found" in html
    assert html.index("carl") < html.index("Bob") < html.index("Amy")
    assert "sort-indicator" in html
    assert "<th>Remark</th>" in html


def test_attendance_page_shows_validation_message(client):
    resp = client.get("/attendance", query_string={"from_date": "31/01/2025", "to_date": "01/01/2025"})

    assert "From date must not be after to date" in resp.get_data(as_text=True)


def test_api_attendance_applies_explorer_state(client):
    resp = client.get("/api/attendance", query_string={**RANGE, "q": "bob"})
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["total_count"] == 1
    assert body["rows"][0]["empcode"] == "E1"
    assert body["page_size"] == 20
    assert body["sort"] == {"key": None, "direction": "asc"}


def test_api_attendance_errors(client, make_client):
    assert client.get("/api/attendance", query_string={"from_date": "bad", "to_date": "01/01/2025"}).status_code == 400

    failing = make_client(attendance_repo=FakeAttendanceRepo(RAW_ATTENDANCE, error=BackendError("Backend down")))
    resp = failing.get("/api/attendance", query_string=RANGE)
    assert resp.status_code == 502
    assert resp.get_json() == {"error": "Backend down"}


def test_attendance_export_csv(client):
    resp = client.get("/attendance/export", query_string={**RANGE, "sort": "name"})

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment; filename=attendance_01-01-2025_31-01-2025.csv" == resp.headers["Content-Disposition"]
    parsed = list(csv.reader(io.StringIO(resp.data.decode("utf-8-sig"))))
    assert parsed[0][:3] == ["Empcode", "Name", "Date"]
    assert [r[1] for r in parsed[1:]] == ["Amy", "Bob", "carl"]


def test_attendance_export_xlsx(client):
    resp = client.get("/attendance/export", query_string={**RANGE, "format": "xlsx"})

    assert resp.status_code == 200
    assert resp.headers["Content-Disposition"].endswith(".xlsx")
    assert resp.data[:2] == b"PK"


def test_empty_export_redirects_with_message(client):
    resp = client.get("/attendance/export", query_string={**RANGE, "q": "nobody"})

    assert resp.status_code == 302
    assert "/attendance" in resp.headers["Location"]

    followed = client.get("/attendance/export", query_string={**RANGE, "q": "nobody"}, follow_redirects=True)
    html = followed.get_data(as_text=True)
    assert "No data to export" in html
    assert "No data available" in html


def test_attendance_sync_flashes_saved_count(client, container):
    resp = client.post("/attendance/sync", data=RANGE, follow_redirects=True)

    assert "Fetched and saved 3 records" in resp.get_data(as_text=True)
    assert container.attendance_repo.calls[0] == ("fetch_and_save", "01/01/2025", "31/01/2025")


def test_mcid_page_and_api(client):
    page = client.get("/mcid", query_string={**RANGE, "mode": "fetch"})
    assert page.status_code == 200
    assert "M1" in page.get_data(as_text=True)

    resp = client.get("/api/mcid", query_string={**RANGE, "mode": "process", "sort": "total_punches_count"})
    body = resp.get_json()
    assert body["mode"] == "process"
    assert body["stats"] == {"total_employees": 2, "total_punches": 19}
    assert [r["name"] for r in body["rows"]] == ["Amy", "Bob"]

    assert client.get("/api/mcid", query_string={**RANGE, "mode": "other"}).status_code == 400


def test_mcid_export(client):
    resp = client.get("/mcid/export", query_string={**RANGE, "mode": "fetch"})

    assert resp.status_code == 200
    assert "mcid_data_01-01-2025_31-01-2025.csv" in resp.headers["Content-Disposition"]


def test_files_page_and_api(client):
    html = client.get("/files").get_data(as_text=True)
    assert "punch_jan.csv" in html
    assert "1,234" in html

    body = client.get("/api/files", query_string={"sort": "filename", "dir": "desc"}).get_json()
    assert [r["filename"] for r in body["rows"]] == ["punch_jan.csv", "punch_feb.csv"]

    assert client.get("/api/files/1").get_json()["filename"] == "punch_jan.csv"
    assert client.get("/api/files/42").status_code == 404


def test_process_file_flashes_result(client, make_client):
    resp = client.post("/files/1/process", follow_redirects=True)
    assert "File 1 processed" in resp.get_data(as_text=True)

    failing = make_client(files_repo=FakeFileRepo(RAW_FILES, fail_process=True))
    resp = failing.post("/files/1/process", follow_redirects=True)
    assert "Error: File not found: id=1" in resp.get_data(as_text=True)


def test_dashboard_and_analytics(client):
    assert "Total Employees" in client.get("/").get_data(as_text=True)
    assert client.get("/analytics", query_string=RANGE).status_code == 200

    body = client.get("/api/analytics", query_string=RANGE).get_json()
    assert body["stats"]["total_records"] == 3
    assert body["status_distribution"][0] == {"name": "P", "value": 2}
