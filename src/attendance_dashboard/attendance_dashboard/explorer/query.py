"""Carry explorer state in query strings.

A web request holds no explorer between calls, so the state is read from the
query string, the explorer is rebuilt over freshly fetched rows, and every
link on the page carries the state its click would produce.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Sequence

from ..core.enums import SortDirection
from .model import ExplorerConfig, ExplorerState
from .table import DataExplorer, PaginationInfo
from .values import Row

SEARCH_PARAM = "q"
SORT_PARAM = "sort"
DIRECTION_PARAM = "dir"
PAGE_PARAM = "page"
STATE_PARAMS = (SEARCH_PARAM, SORT_PARAM, DIRECTION_PARAM, PAGE_PARAM)

UrlBuilder = Callable[[dict], str]


def _parse_page(value: Optional[str]) -> int:
    try:
        return int(value) if value is not None else 1
    except (TypeError, ValueError):
        return 1


def _parse_direction(value: Optional[str]) -> SortDirection:
    try:
        return SortDirection((value or "").lower())
    except ValueError:
        return SortDirection.ASC


def state_from_args(args: Mapping[str, str], config: ExplorerConfig) -> ExplorerState:
    sort_key = args.get(SORT_PARAM) or None
    column = config.column(sort_key) if sort_key else None
    if column is None or not column.sortable:
        sort_key = None

    return ExplorerState(
        search_term=(args.get(SEARCH_PARAM) or "") if config.searchable else "",
        sort_key=sort_key,
        sort_direction=_parse_direction(args.get(DIRECTION_PARAM)),
        current_page=_parse_page(args.get(PAGE_PARAM)),
    )


def state_to_args(state: ExplorerState) -> dict:
    args: dict = {}
    if state.search_term:
        args[SEARCH_PARAM] = state.search_term
    if state.sort_key:
        args[SORT_PARAM] = state.sort_key
        args[DIRECTION_PARAM] = state.sort_direction.value
    if state.current_page > 1:
        args[PAGE_PARAM] = state.current_page
    return args


def explorer_from_args(rows: Sequence[Row], config: ExplorerConfig, args: Mapping[str, str]) -> DataExplorer:
    """Build an explorer whose page is already clamped to the data."""
    state = state_from_args(args, config)
    explorer = DataExplorer(rows, config, state=state)
    explorer.set_page(state.current_page)
    return explorer


def carry_args(args: Mapping[str, str]) -> dict:
    """Non-explorer query parameters (date range, empcode, ...)."""
    return {k: v for k, v in args.items() if k not in STATE_PARAMS and v not in (None, "")}


@dataclass(frozen=True)
class TableLinks:
    sort: dict[str, str] = field(default_factory=dict)
    previous: Optional[str] = None
    next: Optional[str] = None
    export: Optional[str] = None


def build_links(
    explorer: DataExplorer,
    *,
    base_args: Mapping[str, str],
    make_url: UrlBuilder,
    make_export_url: Optional[UrlBuilder] = None,
) -> TableLinks:
    base = dict(base_args)

    sort_links = {}
    for col in explorer.config.columns:
        if not col.sortable:
            continue
        probe = DataExplorer(explorer.rows, explorer.config, state=explorer.state)
        probe.toggle_sort(col.key)
        sort_links[col.key] = make_url({**base, **state_to_args(probe.state)})

    previous_url = next_url = None
    view = explorer.view()
    if view.total_pages > 1:
        info = PaginationInfo(view.current_page, view.total_pages, view.total_count)
        if info.has_previous:
            previous_url = make_url({**base, **state_to_args(explorer.state.evolve(current_page=info.previous_page))})
        if info.has_next:
            next_url = make_url({**base, **state_to_args(explorer.state.evolve(current_page=info.next_page))})

    export_url = None
    if make_export_url is not None:
        export_url = make_export_url({**base, **state_to_args(explorer.state.evolve(current_page=1))})

    return TableLinks(sort=sort_links, previous=previous_url, next=next_url, export=export_url)
