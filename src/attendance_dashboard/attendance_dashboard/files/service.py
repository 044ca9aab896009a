from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from markupsafe import Markup

from ..backend.connection import extract_items
from ..core.constants import MISSING_PLACEHOLDER
from ..explorer.model import ColumnDescriptor, ExplorerConfig
from .model import PunchDataFile
from .repository import FileRepository

logger = logging.getLogger(__name__)

FILE_SEARCH_KEYS = ("filename", "from_date", "to_date")


def render_text_or_dash(value: Any, row: dict) -> str:
    return value or MISSING_PLACEHOLDER


def render_count(value: Any, row: dict) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value:
        return f"{value:,}"
    return "0"


def render_timestamp(value: Any, row: dict) -> str:
    if not value:
        return MISSING_PLACEHOLDER
    try:
        stamp = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return str(value)
    if stamp.tzinfo is not None:
        stamp = stamp.astimezone()
    return stamp.strftime("%d/%m/%Y, %H:%M:%S")


def file_columns(process_url: Callable[[int], str]) -> tuple[ColumnDescriptor, ...]:
    """Columns of the files table; ``process_url`` builds the action target per file."""

    def render_actions(value: Any, row: dict) -> Markup:
        parts = []
        if row.get("blob_url"):
            parts.append(
                Markup('<a href="{}" target="_blank" rel="noopener noreferrer" class="action-btn download-btn">Download</a>').format(
                    row["blob_url"]
                )
            )
        if row.get("id") is not None:
            parts.append(
                Markup(
                    '<form method="post" action="{}" class="inline-form">'
                    '<button type="submit" class="action-btn process-btn">Process</button></form>'
                ).format(process_url(row["id"]))
            )
        return Markup('<div class="action-buttons">{}</div>').format(Markup("").join(parts))

    return (
        ColumnDescriptor("id", "ID"),
        ColumnDescriptor("filename", "Filename"),
        ColumnDescriptor("from_date", "From Date", render=render_text_or_dash),
        ColumnDescriptor("to_date", "To Date", render=render_text_or_dash),
        ColumnDescriptor("total_records", "Total Records", render=render_count),
        ColumnDescriptor("unique_employees", "Unique Employees", render=render_count),
        ColumnDescriptor("created_at", "Created At", render=render_timestamp),
        ColumnDescriptor("actions", "Actions", sortable=False, render=render_actions),
    )


def files_explorer_config(process_url: Callable[[int], str]) -> ExplorerConfig:
    return ExplorerConfig(columns=file_columns(process_url), search_keys=FILE_SEARCH_KEYS)


@dataclass(frozen=True)
class ProcessOutcome:
    file_id: int
    message: str


class FileService:
    def __init__(self, files: FileRepository):
        self._files = files

    def list_files(self, *, limit: Optional[int] = None, offset: Optional[int] = None) -> list[PunchDataFile]:
        payload = self._files.list_files(limit=limit, offset=offset)
        return [PunchDataFile.from_api(item) for item in extract_items(payload, "files", "data")]

    def get_file(self, file_id: int) -> Optional[PunchDataFile]:
        payload = self._files.get_file(file_id)
        if isinstance(payload, dict):
            item = payload.get("data") if isinstance(payload.get("data"), dict) else payload
            if item.get("id") is not None:
                return PunchDataFile.from_api(item)
        return None

    def process_file(self, file_id: int) -> ProcessOutcome:
        payload = self._files.process_file(file_id)
        message = "File processed successfully!"
        if isinstance(payload, dict) and payload.get("message"):
            message = str(payload["message"])
        logger.info("Processed file %s", file_id)
        return ProcessOutcome(file_id=int(file_id), message=message)
