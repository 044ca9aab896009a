from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional, Sequence

from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import SortDirection
from .values import Row

CellRenderer = Callable[[Any, Row], str]


@dataclass(frozen=True)
class ColumnDescriptor:
    """One table column: which field it shows and how."""

    key: str
    header: str
    sortable: bool = True
    render: Optional[CellRenderer] = None


@dataclass(frozen=True)
class ExportField:
    header: str
    key: str


@dataclass(frozen=True)
class ExplorerConfig:
    """Immutable settings of one explorer instance."""

    columns: tuple[ColumnDescriptor, ...]
    page_size: int = DEFAULT_PAGE_SIZE
    searchable: bool = True
    search_keys: Optional[tuple[str, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))
        if self.search_keys is not None:
            object.__setattr__(self, "search_keys", tuple(self.search_keys))
        if int(self.page_size) < 1:
            raise ValueError("page_size must be >= 1")

    def column(self, key: str) -> Optional[ColumnDescriptor]:
        for col in self.columns:
            if col.key == key:
                return col
        return None


@dataclass(frozen=True)
class ExplorerState:
    search_term: str = ""
    sort_key: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC
    current_page: int = 1

    def evolve(self, **changes) -> "ExplorerState":
        return replace(self, **changes)


@dataclass(frozen=True)
class ExplorerView:
    """Read-only result of one pipeline run."""

    filtered: Sequence[Row]
    sorted: Sequence[Row]
    page: Sequence[Row]
    total_count: int
    total_pages: int
    current_page: int
    state: ExplorerState = field(default_factory=ExplorerState)

    @property
    def is_empty(self) -> bool:
        return not self.page

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages
