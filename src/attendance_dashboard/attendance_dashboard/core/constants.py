"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 20
MISSING_PLACEHOLDER = "-"
NO_DATA_TEXT = "No data available"
NO_EXPORT_DATA_TEXT = "No data to export"

DATE_FORMAT = "%d/%m/%Y"
DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_BACKEND_TIMEOUT = 30

DASHBOARD_DAYS = 7
ANALYTICS_DAYS = 30
STATUS_TOP_N = 6
EMPLOYEE_TOP_N = 10
WORK_TIME_BUCKET_HOURS = 2
