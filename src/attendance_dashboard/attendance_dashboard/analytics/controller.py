from __future__ import annotations

from dataclasses import asdict

from flask import Flask, flash, jsonify, render_template, request

from ..container import Container
from ..core.exceptions import BackendError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="dashboard")
    def dashboard():
        report = None
        try:
            report = container.analytics_service.dashboard()
        except (ValidationError, BackendError) as e:
            flash(str(e), "danger")
        except Exception:
            # Dashboard still renders with empty stats.
            app.logger.exception("Error loading dashboard data")
        return render_template("dashboard.html", report=report, active_page="dashboard")

    @app.route("/analytics", methods=["GET"], endpoint="analytics")
    def analytics():
        default_from, default_to = container.analytics_service.default_analytics_range()
        from_date = request.args.get("from_date", default_from)
        to_date = request.args.get("to_date", default_to)

        report = None
        try:
            report = container.analytics_service.report(from_date=from_date, to_date=to_date)
        except ValidationError as e:
            flash(str(e), "warning")
        except BackendError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Error loading analytics")
            flash("An error occurred while loading analytics", "danger")

        return render_template(
            "analytics.html",
            report=report,
            from_date=from_date,
            to_date=to_date,
            active_page="analytics",
        )

    @app.route("/api/analytics", methods=["GET"], endpoint="api_analytics")
    def api_analytics():
        default_from, default_to = container.analytics_service.default_analytics_range()
        try:
            report = container.analytics_service.report(
                from_date=request.args.get("from_date", default_from),
                to_date=request.args.get("to_date", default_to),
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except BackendError as e:
            return jsonify({"error": str(e)}), 502
        return jsonify(asdict(report))
