from __future__ import annotations

import importlib
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_DATA_FILE
from .events.controller import register as register_events
from .export.controller import register as register_export
from .pages.controller import register as register_pages
from .records.controller import register as register_records


def create_app(overrides: Optional[dict[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DATA_FILE"] = getattr(settings, "DATA_FILE", DEFAULT_DATA_FILE)
    app.config["TIMEZONE"] = getattr(settings, "TIMEZONE", "")
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(str(app.config["LOG_LEVEL"]).upper())

    if app.config["DEBUG"]:
        print(
            "[event-attendance] settings=", settings_module,
            " data_file=", app.config["DATA_FILE"],
            " timezone=", app.config["TIMEZONE"] or "local",
        )

    container = build_container(
        data_file=str(app.config["DATA_FILE"]),
        timezone_name=app.config["TIMEZONE"] or None,
    )
    app.extensions["event_attendance"] = container

    register_pages(app, container)
    register_records(app, container)
    register_events(app, container)
    register_export(app, container)

    return app
