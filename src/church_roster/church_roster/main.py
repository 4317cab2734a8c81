from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.enums import ALL_FILTER, AttendanceStatus, Position
from .core.logging import configure_logging
from .roster.controller import register as register_roster

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "settings=%s storage=%s",
        settings_module,
        getattr(settings, "STORAGE_BACKEND", "file"),
    )

    if container is None:
        container = build_container(settings=settings)
    app.extensions["church_roster"] = container

    @app.route("/api/meta", methods=["GET"], endpoint="meta")
    def meta():
        return jsonify(
            {
                "positions": list(Position.values()),
                "statuses": list(AttendanceStatus.values()),
                "all_filter": ALL_FILTER,
            }
        )

    register_roster(app, container)

    return app
