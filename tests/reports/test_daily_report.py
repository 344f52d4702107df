from datetime import date, datetime

import pytest

from src.attendance_bot.attendance_bot.core.enums import EventKind
from src.attendance_bot.attendance_bot.reports.service import EVENING_REMINDER, MORNING_REMINDER, ReportService

TODAY = date(2025, 3, 3)


@pytest.fixture
def report_service(attendance_repo) -> ReportService:
    return ReportService(attendance_repo)


@pytest.fixture
def office_day(employees_repo, attendance_repo):
    employees_repo.upsert(user_id="1", full_name="Анна", email="")
    employees_repo.upsert(user_id="2", full_name="Борис", email="")
    employees_repo.upsert(user_id="3", full_name="Вера", email="")

    attendance_repo.seed("1", EventKind.IN, datetime(2025, 3, 3, 8, 58))
    attendance_repo.seed("1", EventKind.OUT, datetime(2025, 3, 3, 18, 2))
    attendance_repo.seed("2", EventKind.IN, datetime(2025, 3, 3, 9, 15))
    # yesterday's check-in must not leak into today
    attendance_repo.seed("3", EventKind.IN, datetime(2025, 3, 2, 9, 0))


def test_daily_report_has_one_row_per_employee(report_service, office_day):
    rows = report_service.daily_report(today=TODAY)

    assert [(r.full_name, r.check_in is not None, r.check_out is not None) for r in rows] == [
        ("Анна", True, True),
        ("Борис", True, False),
        ("Вера", False, False),
    ]


def test_pending_checkouts(report_service, office_day):
    assert [r.user_id for r in report_service.pending_checkouts(today=TODAY)] == ["2"]


def test_evening_reminders_go_to_pending_employees(report_service, office_day):
    reminders = report_service.evening_reminders(today=TODAY)

    assert [(m.dialog_id, m.text) for m in reminders] == [("2", EVENING_REMINDER)]
    assert reminders[0].quick_replies[0].command == "ушел"


def test_morning_reminders_go_to_employees_without_check_in(report_service, office_day):
    reminders = report_service.morning_reminders(today=TODAY)

    assert [(m.dialog_id, m.text) for m in reminders] == [("3", MORNING_REMINDER)]


def test_render_daily_report(report_service, office_day):
    text = report_service.render_daily_report(report_service.daily_report(today=TODAY), today=TODAY)

    assert text.startswith("📊 Ежедневный отчет по отметкам (03.03.2025)")
    assert "👤 Анна\n   Пришел: 08:58\n   Ушел: 18:02" in text
    assert "👤 Борис\n   Пришел: 09:15\n   Ушел: ❌" in text
    assert "👤 Вера\n   Пришел: ❌\n   Ушел: ❌" in text


def test_render_empty_report(report_service):
    text = report_service.render_daily_report([], today=TODAY)

    assert "Нет данных о сотрудниках" in text


def test_stats_totals(report_service, office_day):
    stats = report_service.stats(today=TODAY)

    assert stats["date"] == "2025-03-03"
    assert (stats["totalEmployees"], stats["employeesWithCheckIn"], stats["employeesWithCheckOut"]) == (3, 2, 1)
    assert stats["report"][1] == {"user_id": "2", "full_name": "Борис", "check_in": "09:15", "check_out": "-"}
