from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.constants import DATE_FORMAT


def parse_dmy_date(value: str) -> date:
    """Parse DD/MM/YYYY string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_dmy(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def default_range(days: int, *, today: date | None = None) -> tuple[str, str]:
    """(from, to) as DD/MM/YYYY strings covering the last ``days`` days."""
    today = today or today_local()
    return format_dmy(today - timedelta(days=days)), format_dmy(today)


def parse_hours_minutes(value: object) -> float | None:
    """Turn an ``H:MM`` duration into fractional hours, None when unparseable."""
    if not isinstance(value, str) or ":" not in value:
        return None
    hours, _, minutes = value.partition(":")
    try:
        return int(hours) + int(minutes[:2]) / 60
    except ValueError:
        return None


def format_hours_minutes(hours: float) -> str:
    whole = int(hours)
    minutes = round((hours - whole) * 60)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    return f"{whole}:{minutes:02d}"
