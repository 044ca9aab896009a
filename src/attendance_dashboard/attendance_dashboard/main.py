from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .files.controller import register as register_files
from .mcid.controller import register as register_mcid


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    backend_config = getattr(settings, "BACKEND_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    app.logger.setLevel(getattr(settings, "LOG_LEVEL", "INFO"))

    if app.config["DEBUG"]:
        app.logger.info("[attendance-dashboard] settings=%s backend=%s", settings_module, backend_config.get("url"))

    container = container or build_container(backend_config=backend_config)

    register_analytics(app, container)
    register_attendance(app, container)
    register_mcid(app, container)
    register_files(app, container)

    return app
