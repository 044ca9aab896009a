"""Example: use the service layer and the explorer without Flask.

Controllers stay thin; the same explorer that backs the web tables can be
driven directly from Python.
"""

import importlib

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.attendance.service import ATTENDANCE_EXPLORER
from src.attendance_dashboard.attendance_dashboard.common.datetime_utils import default_range
from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.explorer.table import DataExplorer


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(backend_config=settings.BACKEND_CONFIG)

    from_date, to_date = default_range(7)
    result = container.attendance_service.search(from_date=from_date, to_date=to_date)

    explorer = DataExplorer(result.rows, ATTENDANCE_EXPLORER)
    explorer.toggle_sort("name")
    table = explorer.render()

    print(" | ".join(h.header for h in table.headers))
    for row in table.body:
        print(" | ".join(str(v) for v in row))
    if table.pagination:
        print(table.pagination.label)


if __name__ == "__main__":
    main()
