"""Create the employees/attendance tables in the configured MySQL database.

    APP_ENV=production python scripts/init_db.py
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import mysql.connector
from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_bot.attendance_bot.common.logging_utils import setup_logging
from src.attendance_bot.attendance_bot.database.bootstrap import apply_schema, list_tables

logger = logging.getLogger("init_db")

DEFAULT_SCHEMA = REPO_ROOT / "database" / "schema.sql"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Apply the attendance bot schema")
    parser.add_argument("--schema", type=Path, default=DEFAULT_SCHEMA, help="SQL file to apply")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('database')} on {db_config.get('host')}:{db_config.get('port', 3306)}"

    try:
        apply_schema(db_config, schema_path=args.schema)
        tables = list_tables(db_config)
    except (mysql.connector.Error, OSError):
        logger.error("Schema %s could not be applied to %s", args.schema, target, exc_info=True)
        return 1

    logger.info("Schema %s applied to %s; tables: %s", args.schema.name, target, ", ".join(tables))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
