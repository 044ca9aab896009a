"""Filter → sort → page derivation.

Every function here is pure: it reads the caller's rows and returns new
sequences (or the input itself when nothing changes) without mutating them.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Optional, Sequence

from ..core.enums import SortDirection, ValueKind
from .model import ExplorerConfig, ExplorerState, ExplorerView
from .values import Row, collate, compare_numbers, kind_of, resolve_path, text_form


def _matches(value: Any, needle: str) -> bool:
    if kind_of(value) is ValueKind.MISSING:
        return False
    return needle in text_form(value).lower()


def filter_rows(
    rows: Sequence[Row],
    search_term: str,
    *,
    searchable: bool = True,
    search_keys: Optional[Sequence[str]] = None,
) -> Sequence[Row]:
    """Keep rows where any considered field contains ``search_term`` (case-insensitive)."""
    if not searchable or not search_term:
        return rows

    needle = search_term.lower()
    if search_keys is not None:
        return [row for row in rows if any(_matches(resolve_path(row, key), needle) for key in search_keys)]
    return [row for row in rows if any(_matches(value, needle) for value in row.values())]


def compare_values(left: Any, right: Any, direction: SortDirection = SortDirection.ASC) -> int:
    """Three-way comparison used for sorting.

    Missing values go last whatever the direction; DESC only inverts the
    comparison between present values.
    """
    left_kind, right_kind = kind_of(left), kind_of(right)
    if left_kind is ValueKind.MISSING and right_kind is ValueKind.MISSING:
        return 0
    if left_kind is ValueKind.MISSING:
        return 1
    if right_kind is ValueKind.MISSING:
        return -1

    if left_kind is ValueKind.TEXT and right_kind is ValueKind.TEXT:
        result = collate(left, right)
    elif left_kind is ValueKind.NUMBER and right_kind is ValueKind.NUMBER:
        result = compare_numbers(left, right)
    else:
        result = collate(text_form(left), text_form(right))

    return -result if direction is SortDirection.DESC else result


def sort_rows(
    rows: Sequence[Row],
    sort_key: Optional[str],
    direction: SortDirection = SortDirection.ASC,
) -> Sequence[Row]:
    """Stable sort of ``rows`` by the value at ``sort_key``."""
    if not sort_key:
        return rows

    decorated = [(resolve_path(row, sort_key), row) for row in rows]
    decorated.sort(key=cmp_to_key(lambda a, b: compare_values(a[0], b[0], direction)))
    return [row for _, row in decorated]


def count_pages(total_count: int, page_size: int) -> int:
    return -(-int(total_count) // int(page_size))


def clamp_page(page: int, total_pages: int) -> int:
    if total_pages <= 0:
        return 1
    return max(1, min(int(page), total_pages))


def paginate(rows: Sequence[Row], page: int, page_size: int) -> list[Row]:
    start = (int(page) - 1) * int(page_size)
    if start < 0:
        return []
    return list(rows[start : start + page_size])


def derive(rows: Sequence[Row], config: ExplorerConfig, state: ExplorerState) -> ExplorerView:
    """Run the full pipeline for ``state`` over the raw ``rows``."""
    filtered = filter_rows(
        rows,
        state.search_term,
        searchable=config.searchable,
        search_keys=config.search_keys,
    )
    ordered = sort_rows(filtered, state.sort_key, state.sort_direction)
    page = paginate(ordered, state.current_page, config.page_size)

    return ExplorerView(
        filtered=filtered,
        sorted=ordered,
        page=page,
        total_count=len(ordered),
        total_pages=count_pages(len(ordered), config.page_size),
        current_page=state.current_page,
        state=state,
    )
