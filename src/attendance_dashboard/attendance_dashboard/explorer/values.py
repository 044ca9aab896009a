"""Cell values of explorer rows.

Rows are open mappings whose values are text, numbers or absent. Every stage
of the explorer (search, sort, render, export) looks values up through
``resolve_path`` and classifies them with ``kind_of``, so a missing field is
handled the same way everywhere.
"""

from __future__ import annotations

import math
import unicodedata
from typing import Any, Mapping, Sequence

from ..core.constants import MISSING_PLACEHOLDER
from ..core.enums import ValueKind


class _Missing:
    """Marker for a field that is absent from a row."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

Row = Mapping[str, Any]


def resolve_path(row: Row, path: str) -> Any:
    """Look up ``path`` in ``row``; dotted paths walk nested mappings.

    Any missing or non-traversable intermediate yields ``MISSING``.
    """
    if "." not in path:
        if isinstance(row, Mapping):
            return row.get(path, MISSING)
        return MISSING

    current: Any = row
    for segment in path.split("."):
        if isinstance(current, Mapping):
            current = current.get(segment, MISSING)
        elif isinstance(current, Sequence) and not isinstance(current, str) and segment.isdigit():
            index = int(segment)
            current = current[index] if index < len(current) else MISSING
        else:
            return MISSING
        if current is MISSING or current is None:
            return current
    return current


def kind_of(value: Any) -> ValueKind:
    if value is None or value is MISSING:
        return ValueKind.MISSING
    if isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.OTHER


def text_form(value: Any) -> str:
    """String form used by search and mixed-type ordering."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def display_text(value: Any, placeholder: str = MISSING_PLACEHOLDER) -> str:
    if kind_of(value) is ValueKind.MISSING:
        return placeholder
    return text_form(value)


def collation_key(text: str) -> tuple:
    """Locale-style sort key: letters first, then accents, lowercase before uppercase."""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (
        base.casefold(),
        decomposed.casefold(),
        tuple(ch.isupper() for ch in base),
    )


def collate(left: str, right: str) -> int:
    a, b = collation_key(left), collation_key(right)
    if a == b:
        return 0
    return -1 if a < b else 1


def compare_numbers(left: float, right: float) -> int:
    diff = left - right
    if diff != diff:  # NaN
        return 0
    if diff < 0:
        return -1
    return 1 if diff > 0 else 0
