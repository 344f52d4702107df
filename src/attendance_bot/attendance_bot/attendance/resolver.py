from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_coordinates
from ..core.enums import Command, DayState, EventKind
from ..core.exceptions import ConflictError, InternalError, ValidationError
from ..employees.model import Employee
from ..employees.service import EmployeeService, default_employee
from ..geofence.model import GeoPoint
from ..geofence.service import GeofenceEvaluator
from ..messaging.dispatcher import ProfileProvider
from ..messaging.model import InboundMessage
from . import messages
from .commands import parse_command
from .factory import LocationStrategyFactory
from .model import DayEvents, Decision
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceResolver:
    """Turns one normalized inbound event into one reply and at most one stored event.

    Stateless between calls: the day state (no check-in / checked in / checked
    out) is recomputed from today's events on every call.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeService,
        geofence: GeofenceEvaluator,
        *,
        strategy_factory: LocationStrategyFactory | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._geofence = geofence
        self._factory = strategy_factory or LocationStrategyFactory()
        self._clock = clock

    def handle(
        self,
        message: InboundMessage,
        *,
        profiles: Optional[ProfileProvider] = None,
        now: datetime | None = None,
    ) -> Decision:
        """Entry point for chat adapters: sync the employee, then resolve.

        Storage failures are logged and answered with a generic apology.
        """
        employee = self._employees.sync_on_contact(message.user_id, profiles)
        try:
            return self.resolve(
                message.user_id,
                message.dialog_id,
                message.text,
                message.location,
                now=now,
                employee=employee,
            )
        except InternalError:
            logger.error("Failed to process message from user %s in %s", message.user_id, message.dialog_id, exc_info=True)
            return messages.internal_error()

    def resolve(
        self,
        user_id: str,
        dialog_id: str,
        command: Optional[str] = None,
        location: Optional[GeoPoint] = None,
        *,
        now: datetime | None = None,
        employee: Optional[Employee] = None,
    ) -> Decision:
        """Decide the reply for a command or a location.

        Raises InternalError when the data-access collaborator fails.
        """
        now = now or self._clock()
        user_id = str(user_id)

        if location is not None:
            decision = self._resolve_location(user_id, location, now=now)
        else:
            decision = self._resolve_command(user_id, command, now=now, employee=employee)

        logger.info("User %s in %s -> %s", user_id, dialog_id, decision.outcome.value)
        return decision

    def _today(self, user_id: str, now: datetime) -> DayEvents:
        return DayEvents.of(self._attendance.get_today_events(user_id, today=now.date()))

    def _resolve_location(self, user_id: str, location: GeoPoint, *, now: datetime) -> Decision:
        try:
            lat, lon = require_coordinates(location.lat, location.lon)
        except ValidationError as e:
            logger.warning("Rejected location from user %s: %s", user_id, e)
            return messages.invalid_location()

        day = self._today(user_id, now)
        inside = self._geofence.is_in_office(lat, lon)
        verdict = self._factory.for_state(day.state).decide(inside=inside)

        if verdict.kind is None:
            return messages.location_result(verdict.outcome)

        try:
            event = self._attendance.add_event(
                user_id=user_id,
                kind=verdict.kind,
                timestamp=now,
                lat=lat,
                lon=lon,
                status=verdict.status,
            )
        except ConflictError:
            logger.info("Duplicate %s event for user %s on %s", verdict.kind.value, user_id, now.date())
            return messages.already_recorded(verdict.kind)

        logger.info("%s recorded for user %s (%s)", verdict.kind.value.upper(), user_id, verdict.status.value)
        return messages.location_result(verdict.outcome, event)

    def _resolve_command(
        self,
        user_id: str,
        text: Optional[str],
        *,
        now: datetime,
        employee: Optional[Employee],
    ) -> Decision:
        command = parse_command(text)

        if command is None:
            return messages.ready()
        if command == Command.CHECK_IN:
            return messages.request_location(EventKind.IN)
        if command == Command.CHECK_OUT:
            return self._check_out_request(user_id, now=now)
        if command == Command.STATUS:
            return self._status(user_id, now=now, employee=employee)
        if command == Command.HELP:
            return messages.help_message()
        return messages.unknown_command()

    def _check_out_request(self, user_id: str, *, now: datetime) -> Decision:
        state = self._today(user_id, now).state
        if state == DayState.NO_CHECK_IN:
            return messages.check_in_first()
        if state == DayState.CHECKED_OUT:
            return messages.already_checked_out()
        return messages.request_location(EventKind.OUT)

    def _status(self, user_id: str, *, now: datetime, employee: Optional[Employee]) -> Decision:
        day = self._today(user_id, now)
        if employee is None:
            employee = self._employees.get(user_id) or default_employee(user_id)
        return messages.status(day, employee.full_name)
