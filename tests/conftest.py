from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.attendance_bot.attendance_bot.attendance.model import AttendanceEvent, DailyReportRow
from src.attendance_bot.attendance_bot.attendance.resolver import AttendanceResolver
from src.attendance_bot.attendance_bot.core.enums import EventKind, EventStatus
from src.attendance_bot.attendance_bot.core.exceptions import ConflictError, InternalError
from src.attendance_bot.attendance_bot.employees.model import Employee
from src.attendance_bot.attendance_bot.employees.service import EmployeeService
from src.attendance_bot.attendance_bot.geofence.model import Office
from src.attendance_bot.attendance_bot.geofence.service import GeofenceEvaluator

OFFICE_LAT = 57.1521
OFFICE_LON = 65.5921


class InMemoryEmployees:
    def __init__(self):
        self.by_id: dict[str, Employee] = {}
        self.fail = False
        self.upserts = 0

    def get_by_id(self, user_id: str) -> Optional[Employee]:
        if self.fail:
            raise InternalError("employees table unavailable")
        return self.by_id.get(user_id)

    def upsert(self, *, user_id: str, full_name: str, email: str) -> None:
        if self.fail:
            raise InternalError("employees table unavailable")
        self.upserts += 1
        self.by_id[user_id] = Employee(user_id=user_id, full_name=full_name, email=email)


class InMemoryAttendance:
    """Mirrors UNIQUE(user_id, work_date, event_type) of the real table."""

    def __init__(self, employees: InMemoryEmployees):
        self.events: list[AttendanceEvent] = []
        self.employees = employees
        self.fail = False
        self._id = 0

    def get_today_events(self, user_id: str, *, today: date):
        if self.fail:
            raise InternalError("attendance table unavailable")
        items = [e for e in self.events if e.user_id == user_id and e.work_date == today]
        return sorted(items, key=lambda e: e.timestamp)

    def add_event(self, *, user_id, kind, timestamp, lat, lon, status) -> AttendanceEvent:
        if self.fail:
            raise InternalError("attendance table unavailable")
        for e in self.events:
            if e.user_id == user_id and e.work_date == timestamp.date() and e.kind == kind:
                raise ConflictError("Duplicate event")

        self._id += 1
        event = AttendanceEvent(
            event_id=self._id,
            user_id=user_id,
            kind=kind,
            timestamp=timestamp,
            lat=lat,
            lon=lon,
            status=status,
        )
        self.events.append(event)
        return event

    def seed(self, user_id: str, kind: EventKind, timestamp: datetime, *, status=EventStatus.OK) -> AttendanceEvent:
        return self.add_event(
            user_id=user_id,
            kind=kind,
            timestamp=timestamp,
            lat=OFFICE_LAT,
            lon=OFFICE_LON,
            status=status,
        )

    def get_daily_rows(self, *, work_date: date):
        rows = []
        for emp in sorted(self.employees.by_id.values(), key=lambda e: e.full_name):
            day = self.get_today_events(emp.user_id, today=work_date)
            check_in = next((e.timestamp for e in day if e.kind == EventKind.IN), None)
            check_out = next((e.timestamp for e in day if e.kind == EventKind.OUT), None)
            rows.append(DailyReportRow(user_id=emp.user_id, full_name=emp.full_name, check_in=check_in, check_out=check_out))
        return rows


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 3, 9, 3, 0)


@pytest.fixture
def office() -> Office:
    return Office(name="Главный офис", lat=OFFICE_LAT, lon=OFFICE_LON, radius_m=100)


@pytest.fixture
def geofence(office) -> GeofenceEvaluator:
    return GeofenceEvaluator(office)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo(employees_repo) -> InMemoryAttendance:
    return InMemoryAttendance(employees_repo)


@pytest.fixture
def employee_service(employees_repo) -> EmployeeService:
    return EmployeeService(employees_repo)


@pytest.fixture
def resolver(attendance_repo, employee_service, geofence, fixed_now) -> AttendanceResolver:
    return AttendanceResolver(attendance_repo, employee_service, geofence, clock=lambda: fixed_now)
