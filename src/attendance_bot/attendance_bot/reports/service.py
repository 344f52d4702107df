from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..attendance.messages import CHECK_IN_BUTTON, CHECK_OUT_BUTTON
from ..attendance.model import DailyReportRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_hhmm
from ..messaging.model import OutboundMessage

logger = logging.getLogger(__name__)

MORNING_REMINDER = "⏰ Доброе утро! Не забудьте отметить приход в офисе командой 'пришел'"
EVENING_REMINDER = "🏠 Не забудьте отметить уход командой 'ушел'"
REPORT_TITLE = "📊 Ежедневный отчет по отметкам"
MISSING_MARK = "❌"


class ReportService:
    """Daily attendance overview for managers plus reminder lists for employees.

    Reminders are addressed to the employee's user id: in a private chat the
    dialog id equals the user id for both Bitrix24 and Telegram.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def daily_report(self, *, today: date) -> list[DailyReportRow]:
        return list(self._attendance.get_daily_rows(work_date=today))

    def pending_checkouts(self, *, today: date) -> list[DailyReportRow]:
        return [r for r in self.daily_report(today=today) if r.check_in and not r.check_out]

    def missing_checkins(self, *, today: date) -> list[DailyReportRow]:
        return [r for r in self.daily_report(today=today) if not r.check_in]

    def morning_reminders(self, *, today: date) -> list[OutboundMessage]:
        return [
            OutboundMessage(dialog_id=r.user_id, text=MORNING_REMINDER, quick_replies=(CHECK_IN_BUTTON,))
            for r in self.missing_checkins(today=today)
        ]

    def evening_reminders(self, *, today: date) -> list[OutboundMessage]:
        return [
            OutboundMessage(dialog_id=r.user_id, text=EVENING_REMINDER, quick_replies=(CHECK_OUT_BUTTON,))
            for r in self.pending_checkouts(today=today)
        ]

    def render_daily_report(self, rows: Sequence[DailyReportRow], *, today: date) -> str:
        lines = [f"{REPORT_TITLE} ({today.strftime('%d.%m.%Y')})", ""]
        if not rows:
            lines.append("Нет данных о сотрудниках")
        for r in rows:
            lines.append(f"👤 {r.full_name}")
            lines.append(f"   Пришел: {format_hhmm(r.check_in, missing=MISSING_MARK)}")
            lines.append(f"   Ушел: {format_hhmm(r.check_out, missing=MISSING_MARK)}")
            lines.append("")
        return "\n".join(lines).rstrip()

    def stats(self, *, today: date) -> dict:
        rows = self.daily_report(today=today)
        return {
            "date": today.isoformat(),
            "totalEmployees": len(rows),
            "employeesWithCheckIn": sum(1 for r in rows if r.check_in),
            "employeesWithCheckOut": sum(1 for r in rows if r.check_out),
            "report": [
                {
                    "user_id": r.user_id,
                    "full_name": r.full_name,
                    "check_in": format_hhmm(r.check_in, missing="-"),
                    "check_out": format_hhmm(r.check_out, missing="-"),
                }
                for r in rows
            ],
        }
