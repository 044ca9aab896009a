from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.web import table_context, view_json
from ..container import Container
from ..core.exceptions import BackendError
from ..explorer.query import explorer_from_args
from .service import files_explorer_config


def register(app: Flask, container: Container) -> None:
    def _explorer():
        files = container.file_service.list_files()
        config = files_explorer_config(lambda file_id: url_for("files_process", file_id=file_id))
        return explorer_from_args([f.as_row() for f in files], config, request.args)

    @app.route("/files", methods=["GET"], endpoint="files")
    def files():
        ctx = {"active_page": "files", "loaded": False}
        try:
            explorer = _explorer()
            ctx["loaded"] = True
            ctx["file_count"] = len(explorer.rows)
            ctx.update(table_context(explorer, endpoint="files", args=request.args))
        except BackendError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Loading files failed")
            flash("An error occurred while loading files", "danger")
        return render_template("files.html", **ctx)

    @app.route("/files/<int:file_id>/process", methods=["POST"], endpoint="files_process")
    def files_process(file_id: int):
        try:
            outcome = container.file_service.process_file(file_id)
            flash(outcome.message, "success")
        except BackendError as e:
            flash(f"Error: {e}", "danger")
        return redirect(url_for("files"))

    @app.route("/api/files", methods=["GET"], endpoint="api_files")
    def api_files():
        try:
            explorer = _explorer()
        except BackendError as e:
            return jsonify({"error": str(e)}), 502
        payload = view_json(explorer)
        return jsonify(payload)

    @app.route("/api/files/<int:file_id>", methods=["GET"], endpoint="api_file")
    def api_file(file_id: int):
        try:
            item = container.file_service.get_file(file_id)
        except BackendError as e:
            return jsonify({"error": str(e)}), 502
        if item is None:
            return jsonify({"error": "File not found"}), 404
        return jsonify(item.as_row())
