from src.attendance_dashboard.attendance_dashboard.core.enums import SortDirection
from src.attendance_dashboard.attendance_dashboard.explorer.table import DataExplorer
from src.attendance_dashboard.attendance_dashboard.mcid.model import OperationalSummary
from src.attendance_dashboard.attendance_dashboard.mcid.service import (
    MCID_COLUMNS,
    PROCESS_COLUMNS,
    McidMode,
    McidService,
    explorer_config_for,
)

from tests.fakes import RAW_OPERATIONAL, RAW_PUNCHES, FakeMcidRepo


def _service():
    repo = FakeMcidRepo(RAW_PUNCHES, RAW_OPERATIONAL)
    return McidService(repo), repo


def test_fetch_normalizes_punches_and_stats():
    service, repo = _service()

    result = service.run(McidMode.FETCH, from_date="02/01/2025", to_date="02/01/2025", empcode="E1")

    assert repo.calls == [("fetch", "02/01/2025", "02/01/2025")]
    assert result.mode is McidMode.FETCH
    assert [r["mcid"] for r in result.rows] == ["M1", "M2"]
    assert result.rows[0]["m_flag"] == "I"
    assert result.stats["already_similar_count"] == 1
    assert result.total_records == 2
    assert result.employees == 2
    assert result.explorer_config.columns == MCID_COLUMNS
    assert result.export_basename == "mcid_data_02-01-2025_02-01-2025"


def test_process_returns_operational_summaries():
    service, repo = _service()

    result = service.run(McidMode.PROCESS, from_date="01/01/2025", to_date="02/01/2025", empcode=" E1 ")

    assert repo.calls == [("process", "01/01/2025", "02/01/2025", "E1")]
    assert result.explorer_config.columns == PROCESS_COLUMNS
    assert result.total_records == 19
    assert [r["work_time"] for r in result.rows] == ["8:00", "7:00"]


def test_punch_counts_sort_numerically():
    service, _ = _service()
    result = service.process(from_date="01/01/2025", to_date="02/01/2025")
    explorer = DataExplorer(result.rows, result.explorer_config)

    explorer.toggle_sort("total_punches_count")

    assert [r["total_punches_count"] for r in explorer.view().page] == [9, 10]
    assert explorer.state.sort_direction is SortDirection.ASC


def test_summary_counts_tolerate_strings_and_blanks():
    summary = OperationalSummary.from_api({"empcode": "E9", "total_punches_count": "12", "invalid_punches_count": ""})

    assert summary.total_punches_count == 12
    assert summary.invalid_punches_count is None


def test_config_for_empty_rows_uses_punch_columns():
    config = explorer_config_for([])

    assert config.columns == MCID_COLUMNS
    assert config.search_keys == ("empcode", "name")
