from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import LocationStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.resolver import AttendanceResolver
from .core.enums import ChatBackend
from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .geofence.service import GeofenceEvaluator, office_from_config
from .messaging.bitrix import BitrixClient
from .messaging.dispatcher import MessageDispatcher
from .messaging.emulator import EmulatorDispatcher
from .messaging.telegram import TelegramClient
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    backend: ChatBackend

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    geofence: GeofenceEvaluator
    employee_service: EmployeeService
    resolver: AttendanceResolver
    report_service: ReportService

    dispatcher: MessageDispatcher
    bitrix: Optional[BitrixClient] = None
    telegram: Optional[TelegramClient] = None


def _select_dispatcher(
    backend: ChatBackend,
    bitrix: Optional[BitrixClient],
    telegram: Optional[TelegramClient],
    emulator_url: str = "",
) -> MessageDispatcher:
    if backend == ChatBackend.BITRIX:
        if bitrix is None or not bitrix.configured:
            raise ValidationError("BITRIX_DOMAIN and BITRIX_WEBHOOK_TOKEN are required for the bitrix backend")
        return bitrix
    if backend == ChatBackend.TELEGRAM:
        if telegram is None or not telegram.configured:
            raise ValidationError("TELEGRAM_BOT_TOKEN is required for the telegram backend")
        return telegram
    return EmulatorDispatcher(emulator_url)


def build_container(
    *,
    db_config: dict,
    office_config: dict,
    bitrix_config: Optional[dict] = None,
    telegram_config: Optional[dict] = None,
    backend: str = ChatBackend.EMULATOR.value,
    emulator_url: str = "",
) -> Container:
    try:
        chat_backend = ChatBackend(str(backend).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown chat backend: {backend!r}") from None

    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    geofence = GeofenceEvaluator(office_from_config(office_config))
    employee_service = EmployeeService(employees_repo)
    resolver = AttendanceResolver(
        attendance_repo,
        employee_service,
        geofence,
        strategy_factory=LocationStrategyFactory(),
    )
    report_service = ReportService(attendance_repo)

    bitrix = None
    if bitrix_config:
        bitrix = BitrixClient(
            domain=str(bitrix_config.get("domain") or ""),
            webhook_token=str(bitrix_config.get("webhook_token") or ""),
        )
    telegram = None
    if telegram_config:
        telegram = TelegramClient(token=str(telegram_config.get("token") or ""))

    return Container(
        backend=chat_backend,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        geofence=geofence,
        employee_service=employee_service,
        resolver=resolver,
        report_service=report_service,
        dispatcher=_select_dispatcher(chat_backend, bitrix, telegram, emulator_url),
        bitrix=bitrix,
        telegram=telegram,
    )
