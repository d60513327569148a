from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_setup import configure_logging
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .attendance.controller import register as register_attendance
from .history.controller import register as register_history

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> tuple[str, dict]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in dir(module) if name.isupper()}
    settings.update(overrides or {})
    return settings_module, settings


def create_app(settings_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    settings_module, settings = _load_settings(settings_overrides)

    configure_logging(settings.get("LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = settings.get("MAX_CONTENT_LENGTH")
    app.json.ensure_ascii = False

    history_backend = str(settings.get("HISTORY_STORE", "mysql")).lower()
    db_config = settings.get("DB_CONFIG")
    logger.info("settings=%s history_store=%s", settings_module, history_backend)

    if history_backend == "mysql" and settings.get("AUTO_INIT_DB"):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(
        history_backend=history_backend,
        db_config=db_config,
        json_path=settings.get("HISTORY_JSON_PATH"),
    )
    app.extensions["timesheet_payroll"] = container

    register_attendance(app, container)
    register_history(app, container)

    return app
