from __future__ import annotations

from enum import Enum


class SortDirection(str, Enum):
    """Sort order of the active explorer column."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC

    @property
    def indicator(self) -> str:
        return "↑" if self is SortDirection.ASC else "↓"


class ValueKind(str, Enum):
    """Discriminator for cell values inside a row."""

    MISSING = "MISSING"
    TEXT = "TEXT"
    NUMBER = "NUMBER"
    OTHER = "OTHER"


class ExportFormat(str, Enum):
    CSV = "csv"
    XLSX = "xlsx"
