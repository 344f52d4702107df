"""Cron entry point for reminders and the managers' daily report.

Typical crontab (weekdays):
    0 9 * * 1-5   python scripts/send_reminders.py morning
    0 18 * * 1-5  python scripts/send_reminders.py evening
    0 19 * * 1-5  python scripts/send_reminders.py report
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_bot.attendance_bot.common.datetime_utils import now_local, parse_iso_date
from src.attendance_bot.attendance_bot.common.logging_utils import setup_logging
from src.attendance_bot.attendance_bot.container import Container, build_container
from src.attendance_bot.attendance_bot.core.exceptions import InternalError
from src.attendance_bot.attendance_bot.messaging.model import OutboundMessage

logger = logging.getLogger("send_reminders")


def dispatch_all(container: Container, messages: Sequence[OutboundMessage]) -> int:
    """Send every message; a failed delivery is logged and the rest still go out."""
    sent = 0
    for m in messages:
        try:
            container.dispatcher.send(m.dialog_id, m.text, m.quick_replies)
            sent += 1
        except InternalError:
            logger.error("Reminder to %s failed", m.dialog_id, exc_info=True)
    return sent


def run(job: str, container: Container, *, today: date, manager_dialog_ids: Sequence[str] = ()) -> int:
    reports = container.report_service
    if job == "morning":
        messages = reports.morning_reminders(today=today)
    elif job == "evening":
        messages = reports.evening_reminders(today=today)
    elif job == "report":
        text = reports.render_daily_report(reports.daily_report(today=today), today=today)
        messages = [OutboundMessage(dialog_id=d, text=text) for d in manager_dialog_ids]
        if not messages:
            logger.warning("MANAGER_DIALOG_IDS is empty, daily report not sent")
    else:
        raise ValueError(f"Unknown job: {job}")

    sent = dispatch_all(container, messages)
    logger.info("%s: sent %d of %d messages", job, sent, len(messages))
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Send attendance reminders and the daily report")
    parser.add_argument("job", choices=["morning", "evening", "report"])
    parser.add_argument("--date", help="work date as YYYY-MM-DD (default: today)")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        office_config=dict(settings.OFFICE),
        bitrix_config=getattr(settings, "BITRIX", None),
        telegram_config=getattr(settings, "TELEGRAM", None),
        backend=getattr(settings, "CHAT_BACKEND", "emulator"),
        emulator_url=getattr(settings, "EMULATOR_URL", ""),
    )
    today = parse_iso_date(args.date) if args.date else now_local().date()

    try:
        run(args.job, container, today=today, manager_dialog_ids=getattr(settings, "MANAGER_DIALOG_IDS", []))
    except InternalError:
        logger.error("%s job failed", args.job, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
