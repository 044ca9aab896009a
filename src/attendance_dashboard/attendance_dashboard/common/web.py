"""Flask helpers shared by the feature controllers."""

from __future__ import annotations

from typing import Mapping, Optional

from flask import Response, current_app, url_for

from ..core.enums import ExportFormat
from ..explorer.export import ExportDocument
from ..explorer.query import build_links, carry_args
from ..explorer.table import DataExplorer


def table_context(
    explorer: DataExplorer,
    *,
    endpoint: str,
    args: Mapping[str, str],
    export_endpoint: Optional[str] = None,
) -> dict:
    """Template variables for ``_table.html``."""
    base_args = carry_args(args)
    links = build_links(
        explorer,
        base_args=base_args,
        make_url=lambda a: url_for(endpoint, **a),
        make_export_url=(lambda a: url_for(export_endpoint, **a)) if export_endpoint else None,
    )
    return {
        "table": explorer.render(),
        "links": links,
        "state": explorer.state,
        "searchable": explorer.config.searchable,
        "search_action": url_for(endpoint),
        "hidden_args": base_args,
    }


def view_json(explorer: DataExplorer) -> dict:
    view = explorer.view()
    return {
        "rows": list(view.page),
        "total_count": view.total_count,
        "total_pages": view.total_pages,
        "current_page": view.current_page,
        "page_size": explorer.config.page_size,
        "search": view.state.search_term,
        "sort": {"key": view.state.sort_key, "direction": view.state.sort_direction.value},
    }


def export_format(value: Optional[str]) -> ExportFormat:
    try:
        return ExportFormat((value or "csv").lower())
    except ValueError:
        return ExportFormat.CSV


def send_export(doc: ExportDocument) -> Response:
    return current_app.response_class(
        doc.content,
        mimetype=doc.mimetype,
        headers={"Content-Disposition": f"attachment; filename={doc.filename}"},
    )
