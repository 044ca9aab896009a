from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import format_dmy, today_local
from ..common.web import export_format, send_export, table_context, view_json
from ..container import Container
from ..core.exceptions import BackendError, EmptyExportError, ValidationError
from ..explorer.export import export_explorer
from ..explorer.query import explorer_from_args
from .service import McidMode


def register(app: Flask, container: Container) -> None:
    def _mode() -> McidMode:
        try:
            return McidMode(request.args.get("mode", McidMode.FETCH.value))
        except ValueError:
            raise ValidationError("Unknown MCID mode") from None

    def _form_args() -> dict:
        today = format_dmy(today_local())
        return {
            "from_date": request.args.get("from_date", today),
            "to_date": request.args.get("to_date", today),
            "empcode": request.args.get("empcode", ""),
        }

    def _run():
        result = container.mcid_service.run(_mode(), **_form_args())
        return result, explorer_from_args(result.rows, result.explorer_config, request.args)

    @app.route("/mcid", methods=["GET"], endpoint="mcid")
    def mcid():
        ctx = {**_form_args(), "result": None, "active_page": "mcid"}

        if "mode" in request.args:
            try:
                result, explorer = _run()
                ctx["result"] = result
                ctx.update(table_context(explorer, endpoint="mcid", args=request.args, export_endpoint="mcid_export"))
            except ValidationError as e:
                flash(str(e), "warning")
            except BackendError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("MCID request failed")
                flash("An error occurred while fetching data", "danger")

        return render_template("mcid.html", **ctx)

    @app.route("/mcid/export", methods=["GET"], endpoint="mcid_export")
    def mcid_export():
        back = url_for("mcid", **request.args.to_dict())
        try:
            result, explorer = _run()
            doc = export_explorer(explorer, basename=result.export_basename, fmt=export_format(request.args.get("format")))
            return send_export(doc)
        except EmptyExportError as e:
            flash(str(e), "warning")
        except ValidationError as e:
            flash(str(e), "warning")
        except BackendError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("MCID export failed")
            flash("Export failed", "danger")
        return redirect(back)

    @app.route("/api/mcid", methods=["GET"], endpoint="api_mcid")
    def api_mcid():
        try:
            result, explorer = _run()
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except BackendError as e:
            return jsonify({"error": str(e)}), 502

        return jsonify({"mode": result.mode.value, "stats": result.stats, **view_json(explorer)})
