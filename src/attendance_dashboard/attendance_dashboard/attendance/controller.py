from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import format_dmy, today_local
from ..common.web import export_format, send_export, table_context, view_json
from ..container import Container
from ..core.exceptions import BackendError, EmptyExportError, ValidationError
from ..explorer.export import export_explorer
from ..explorer.query import explorer_from_args
from .service import ATTENDANCE_EXPLORER, ATTENDANCE_EXPORT_FIELDS


def register(app: Flask, container: Container) -> None:
    def _search_args() -> dict:
        today = format_dmy(today_local())
        return {
            "from_date": request.args.get("from_date", today),
            "to_date": request.args.get("to_date", today),
            "empcode": request.args.get("empcode", ""),
        }

    def _search():
        args = _search_args()
        result = container.attendance_service.search(**args)
        return result, explorer_from_args(result.rows, ATTENDANCE_EXPLORER, request.args)

    @app.route("/attendance", methods=["GET"], endpoint="attendance")
    def attendance():
        ctx = {**_search_args(), "result": None, "active_page": "attendance"}

        if "from_date" in request.args:
            try:
                result, explorer = _search()
                ctx["result"] = result
                ctx.update(table_context(explorer, endpoint="attendance", args=request.args, export_endpoint="attendance_export"))
            except ValidationError as e:
                flash(str(e), "warning")
            except BackendError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Attendance search failed")
                flash("An error occurred while fetching data", "danger")

        return render_template("attendance.html", **ctx)

    @app.route("/attendance/export", methods=["GET"], endpoint="attendance_export")
    def attendance_export():
        back = url_for("attendance", **request.args.to_dict())
        try:
            result, explorer = _search()
            doc = export_explorer(
                explorer,
                basename=result.export_basename,
                fmt=export_format(request.args.get("format")),
                fields=ATTENDANCE_EXPORT_FIELDS,
            )
            return send_export(doc)
        except EmptyExportError as e:
            flash(str(e), "warning")
        except ValidationError as e:
            flash(str(e), "warning")
        except BackendError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Attendance export failed")
            flash("Export failed", "danger")
        return redirect(back)

    @app.route("/attendance/sync", methods=["POST"], endpoint="attendance_sync")
    def attendance_sync():
        from_date = request.form.get("from_date", "")
        to_date = request.form.get("to_date", "")
        try:
            saved = container.attendance_service.sync(from_date=from_date, to_date=to_date)
            flash(f"Fetched and saved {saved} records", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except BackendError as e:
            flash(str(e), "danger")
        return redirect(url_for("attendance", from_date=from_date, to_date=to_date))

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance")
    def api_attendance():
        try:
            result, explorer = _search()
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except BackendError as e:
            return jsonify({"error": str(e)}), 502

        return jsonify({"from_date": result.from_date, "to_date": result.to_date, **view_json(explorer)})
