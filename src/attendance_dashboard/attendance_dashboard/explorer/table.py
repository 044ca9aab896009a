from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..core.constants import NO_DATA_TEXT
from ..core.enums import SortDirection
from .model import ColumnDescriptor, ExplorerConfig, ExplorerState, ExplorerView, ExportField
from .pipeline import clamp_page, derive
from .values import MISSING, Row, display_text, resolve_path


@dataclass(frozen=True)
class HeaderCell:
    key: str
    header: str
    sortable: bool
    indicator: str = ""

    @property
    def is_active(self) -> bool:
        return bool(self.indicator)


@dataclass(frozen=True)
class PaginationInfo:
    current_page: int
    total_pages: int
    total_count: int

    @property
    def previous_page(self) -> int:
        return max(1, self.current_page - 1)

    @property
    def next_page(self) -> int:
        return min(self.total_pages, self.current_page + 1)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def label(self) -> str:
        return f"Page {self.current_page} of {self.total_pages} ({self.total_count} total)"


@dataclass(frozen=True)
class TableRender:
    """Everything a template needs to draw the current page."""

    headers: list[HeaderCell]
    body: list[list[Any]]
    colspan: int
    pagination: Optional[PaginationInfo]
    no_data_text: str = NO_DATA_TEXT

    @property
    def is_empty(self) -> bool:
        return not self.body


def render_cell(column: ColumnDescriptor, row: Row) -> Any:
    value = resolve_path(row, column.key)
    if column.render is not None:
        return column.render(None if value is MISSING else value, row)
    return display_text(value)


class DataExplorer:
    """Searchable, sortable, paginated view over caller-owned rows.

    State only changes through ``set_search_term``, ``toggle_sort`` and
    ``set_page`` (plus ``set_rows`` when the caller re-fetches); ``view``
    re-derives everything from the raw rows each time it is called.
    """

    def __init__(self, rows: Sequence[Row], config: ExplorerConfig, *, state: ExplorerState | None = None):
        self._rows = rows
        self._config = config
        self._state = state or ExplorerState()

    @property
    def rows(self) -> Sequence[Row]:
        return self._rows

    @property
    def config(self) -> ExplorerConfig:
        return self._config

    @property
    def state(self) -> ExplorerState:
        return self._state

    def set_rows(self, rows: Sequence[Row]) -> None:
        self._rows = rows

    def set_search_term(self, term: str) -> None:
        self._state = self._state.evolve(search_term=term or "", current_page=1)

    def toggle_sort(self, column_key: str) -> None:
        column = self._config.column(column_key)
        if column is None or not column.sortable:
            return

        if self._state.sort_key == column_key:
            self._state = self._state.evolve(sort_direction=self._state.sort_direction.flipped())
        else:
            self._state = self._state.evolve(sort_key=column_key, sort_direction=SortDirection.ASC)

    def set_page(self, page: int) -> None:
        total_pages = self.view().total_pages
        self._state = self._state.evolve(current_page=clamp_page(page, total_pages))

    def view(self) -> ExplorerView:
        return derive(self._rows, self._config, self._state)

    def headers(self) -> list[HeaderCell]:
        cells = []
        for col in self._config.columns:
            indicator = ""
            if col.sortable and self._state.sort_key == col.key:
                indicator = self._state.sort_direction.indicator
            cells.append(HeaderCell(key=col.key, header=col.header, sortable=col.sortable, indicator=indicator))
        return cells

    def render(self) -> TableRender:
        view = self.view()
        body = [[render_cell(col, row) for col in self._config.columns] for row in view.page]

        pagination = None
        if view.total_pages > 1:
            pagination = PaginationInfo(
                current_page=view.current_page,
                total_pages=view.total_pages,
                total_count=view.total_count,
            )

        return TableRender(
            headers=self.headers(),
            body=body,
            colspan=len(self._config.columns),
            pagination=pagination,
        )

    def export_fields(self) -> list[ExportField]:
        return [ExportField(header=col.header, key=col.key) for col in self._config.columns]
