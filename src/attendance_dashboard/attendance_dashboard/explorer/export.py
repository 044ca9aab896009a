from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from ..core.constants import NO_EXPORT_DATA_TEXT
from ..core.enums import ExportFormat
from ..core.exceptions import EmptyExportError
from .model import ExportField
from .table import DataExplorer
from .values import Row, display_text, resolve_path

CSV_MIMETYPE = "text/csv"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class ExportDocument:
    content: bytes
    filename: str
    mimetype: str


def _records(rows: Sequence[Row], fields: Sequence[ExportField]) -> list[list[str]]:
    if not rows:
        raise EmptyExportError(NO_EXPORT_DATA_TEXT)
    return [[display_text(resolve_path(row, f.key), placeholder="") for f in fields] for row in rows]


def to_csv(rows: Sequence[Row], fields: Sequence[ExportField]) -> str:
    """Delimited text with a header line and every value quoted."""
    records = _records(rows, fields)

    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow([f.header for f in fields])
    writer.writerows(records)
    return out.getvalue()


def to_xlsx(rows: Sequence[Row], fields: Sequence[ExportField]) -> bytes:
    records = _records(rows, fields)

    df = pd.DataFrame(records, columns=[f.header for f in fields])
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False)
    return out.getvalue()


def export_explorer(
    explorer: DataExplorer,
    *,
    basename: str,
    fmt: ExportFormat = ExportFormat.CSV,
    fields: Sequence[ExportField] | None = None,
) -> ExportDocument:
    """Export the explorer's full filtered and sorted rows, not just the current page."""
    rows = explorer.view().sorted
    fields = list(fields) if fields is not None else explorer.export_fields()

    if fmt is ExportFormat.XLSX:
        return ExportDocument(to_xlsx(rows, fields), f"{basename}.xlsx", XLSX_MIMETYPE)

    csv_bytes = to_csv(rows, fields).encode("utf-8-sig")
    return ExportDocument(csv_bytes, f"{basename}.csv", CSV_MIMETYPE)
