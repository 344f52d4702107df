from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_utils import setup_logging
from .database.bootstrap import apply_schema, list_tables

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            office_config=getattr(settings, "OFFICE"),
            bitrix_config=getattr(settings, "BITRIX", None),
            telegram_config=getattr(settings, "TELEGRAM", None),
            backend=getattr(settings, "CHAT_BACKEND", "emulator"),
            emulator_url=getattr(settings, "EMULATOR_URL", ""),
        )

    office = container.geofence.office
    logger.info(
        "Chat backend=%s office=%s (%.6f, %.6f) radius=%.0fm",
        container.backend.value,
        office.name,
        office.lat,
        office.lon,
        office.radius_m,
    )

    register_attendance(app, container)
    register_reports(app, container)

    return app
