from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from ..backend.connection import extract_items, stats_from
from ..common.validators import optional_text, require_date_range
from ..explorer.model import ColumnDescriptor, ExplorerConfig
from .model import McidPunch, OperationalSummary
from .repository import McidRepository

logger = logging.getLogger(__name__)

MCID_COLUMNS = (
    ColumnDescriptor("empcode", "Employee Code"),
    ColumnDescriptor("name", "Name"),
    ColumnDescriptor("punch_date", "Punch Date"),
    ColumnDescriptor("punch_time", "Punch Time"),
    ColumnDescriptor("mcid", "MCID"),
    ColumnDescriptor("m_flag", "M Flag"),
)

PROCESS_COLUMNS = (
    ColumnDescriptor("empcode", "Employee Code"),
    ColumnDescriptor("name", "Name"),
    ColumnDescriptor("date", "Date"),
    ColumnDescriptor("in_time", "In Time"),
    ColumnDescriptor("out_time", "Out Time"),
    ColumnDescriptor("total_time", "Total Time"),
    ColumnDescriptor("break_time", "Break Time"),
    ColumnDescriptor("work_time", "Work Time"),
    ColumnDescriptor("total_punches_count", "Total Punches"),
    ColumnDescriptor("invalid_punches_count", "Invalid Punches"),
)

MCID_SEARCH_KEYS = ("empcode", "name")

FETCH_STATS = ("saved_count", "already_similar_count", "duplicate_in_batch_count", "count", "distinct_employees")
PROCESS_STATS = ("total_employees", "total_punches")


class McidMode(str, Enum):
    FETCH = "fetch"
    PROCESS = "process"


def explorer_config_for(rows: Sequence[dict]) -> ExplorerConfig:
    """Operational summaries carry ``work_time``; raw punches do not."""
    columns = PROCESS_COLUMNS if rows and "work_time" in rows[0] else MCID_COLUMNS
    return ExplorerConfig(columns=columns, search_keys=MCID_SEARCH_KEYS)


@dataclass(frozen=True)
class McidResult:
    mode: McidMode
    from_date: str
    to_date: str
    rows: list[dict]
    stats: dict[str, int] = field(default_factory=dict)

    @property
    def explorer_config(self) -> ExplorerConfig:
        return explorer_config_for(self.rows)

    @property
    def total_records(self) -> int:
        return self.stats.get("count") or self.stats.get("total_punches") or 0

    @property
    def employees(self) -> int:
        return self.stats.get("distinct_employees") or self.stats.get("total_employees") or 0

    @property
    def export_basename(self) -> str:
        return f"mcid_data_{self.from_date}_{self.to_date}".replace("/", "-")


class McidService:
    def __init__(self, mcid: McidRepository):
        self._mcid = mcid

    def fetch(self, *, from_date: str, to_date: str) -> McidResult:
        from_date, to_date = require_date_range(from_date, to_date)
        payload = self._mcid.fetch(from_date=from_date, to_date=to_date)

        rows = [McidPunch.from_api(item).as_row() for item in extract_items(payload, "data")]
        stats = stats_from(payload, FETCH_STATS)
        logger.info("MCID fetch %s-%s: %d punches, %s saved", from_date, to_date, len(rows), stats["saved_count"])
        return McidResult(McidMode.FETCH, from_date, to_date, rows, stats)

    def process(self, *, from_date: str, to_date: str, empcode: Optional[str] = None) -> McidResult:
        from_date, to_date = require_date_range(from_date, to_date)
        payload = self._mcid.process(from_date=from_date, to_date=to_date, empcode=optional_text(empcode))

        rows = [OperationalSummary.from_api(item).as_row() for item in extract_items(payload, "employees")]
        stats = stats_from(payload, PROCESS_STATS)
        logger.info("MCID process %s-%s: %d summaries", from_date, to_date, len(rows))
        return McidResult(McidMode.PROCESS, from_date, to_date, rows, stats)

    def run(self, mode: McidMode, *, from_date: str, to_date: str, empcode: Optional[str] = None) -> McidResult:
        if mode is McidMode.PROCESS:
            return self.process(from_date=from_date, to_date=to_date, empcode=empcode)
        return self.fetch(from_date=from_date, to_date=to_date)
