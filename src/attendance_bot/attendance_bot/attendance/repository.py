from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence

from ..core.enums import EventKind, EventStatus
from .model import AttendanceEvent, DailyReportRow


class AttendanceRepository(Protocol):
    def get_today_events(self, user_id: str, *, today: date) -> Sequence[AttendanceEvent]:
        """Events of `user_id` whose timestamp falls on `today`, oldest first."""

        raise NotImplementedError

    def add_event(
        self,
        *,
        user_id: str,
        kind: EventKind,
        timestamp: datetime,
        lat: float,
        lon: float,
        status: EventStatus,
    ) -> AttendanceEvent:
        """Append an event.

        Raises ConflictError when an event of the same kind already exists
        for that user and day.
        """

        raise NotImplementedError

    def get_daily_rows(self, *, work_date: date) -> Sequence[DailyReportRow]:
        raise NotImplementedError
