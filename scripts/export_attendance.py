"""Export attendance for a date range to a CSV or Excel file.

Note: Same pipeline as the web export (search → sort → full export), with a
file on disk as the sink instead of an HTTP attachment.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.attendance.service import (
    ATTENDANCE_EXPLORER,
    ATTENDANCE_EXPORT_FIELDS,
)
from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.core.enums import ExportFormat, SortDirection
from src.attendance_dashboard.attendance_dashboard.core.exceptions import DomainError
from src.attendance_dashboard.attendance_dashboard.explorer.export import export_explorer
from src.attendance_dashboard.attendance_dashboard.explorer.model import ExplorerState
from src.attendance_dashboard.attendance_dashboard.explorer.table import DataExplorer


def main() -> None:
    parser = argparse.ArgumentParser(description="Export attendance records for a date range")
    parser.add_argument("from_date", help="DD/MM/YYYY")
    parser.add_argument("to_date", help="DD/MM/YYYY")
    parser.add_argument("--empcode", help="Only this employee")
    parser.add_argument("--search", default="", help="Free-text filter on empcode, name and date")
    parser.add_argument("--sort", help="Column key to sort by")
    parser.add_argument("--desc", action="store_true", help="Sort descending")
    parser.add_argument("--xlsx", action="store_true", help="Write Excel instead of CSV")
    parser.add_argument("-o", "--out-dir", default=str(REPO_ROOT / "exports"))
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(backend_config=settings.BACKEND_CONFIG)

    try:
        result = container.attendance_service.search(from_date=args.from_date, to_date=args.to_date, empcode=args.empcode)
        state = ExplorerState(
            search_term=args.search,
            sort_key=args.sort,
            sort_direction=SortDirection.DESC if args.desc else SortDirection.ASC,
        )
        explorer = DataExplorer(result.rows, ATTENDANCE_EXPLORER, state=state)
        doc = export_explorer(
            explorer,
            basename=result.export_basename,
            fmt=ExportFormat.XLSX if args.xlsx else ExportFormat.CSV,
            fields=ATTENDANCE_EXPORT_FIELDS,
        )
    except DomainError as e:
        raise SystemExit(f"Export failed: {e}")

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / doc.filename
    out_file.write_bytes(doc.content)
    print(f"OK: {explorer.view().total_count} records -> {out_file}")


if __name__ == "__main__":
    main()
