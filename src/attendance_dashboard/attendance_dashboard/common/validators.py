from __future__ import annotations

from datetime import date

from ..core.exceptions import ValidationError
from .datetime_utils import parse_dmy_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_dmy_date(value: str, field_name: str) -> date:
    value = require_non_empty(value, field_name)
    try:
        return parse_dmy_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be DD/MM/YYYY") from None


def require_date_range(from_date: str, to_date: str) -> tuple[str, str]:
    """Validate a DD/MM/YYYY range and return the stripped strings."""
    if not (from_date or "").strip() or not (to_date or "").strip():
        raise ValidationError("Please select both from and to dates")

    start = require_dmy_date(from_date, "From date")
    end = require_dmy_date(to_date, "To date")
    if start > end:
        raise ValidationError("From date must not be after to date")
    return from_date.strip(), to_date.strip()


def optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
