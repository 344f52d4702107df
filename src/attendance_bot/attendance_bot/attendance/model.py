from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import DayState, EventKind, EventStatus, Outcome
from ..messaging.model import QuickReply


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one check-in or check-out. Immutable once stored."""

    event_id: int
    user_id: str
    kind: EventKind
    timestamp: datetime
    lat: float
    lon: float
    status: EventStatus

    @property
    def work_date(self) -> date:
        return self.timestamp.date()

    @property
    def out_of_zone(self) -> bool:
        return self.status == EventStatus.OUT_OF_ZONE


@dataclass(frozen=True)
class DayEvents:
    """Events of one employee for one calendar day, ordered by timestamp."""

    events: tuple[AttendanceEvent, ...] = ()

    @classmethod
    def of(cls, events: Sequence[AttendanceEvent]) -> "DayEvents":
        return cls(tuple(sorted(events, key=lambda e: e.timestamp)))

    def first(self, kind: EventKind) -> Optional[AttendanceEvent]:
        return next((e for e in self.events if e.kind == kind), None)

    @property
    def check_in(self) -> Optional[AttendanceEvent]:
        return self.first(EventKind.IN)

    @property
    def check_out(self) -> Optional[AttendanceEvent]:
        return self.first(EventKind.OUT)

    @property
    def state(self) -> DayState:
        if self.check_in is None:
            return DayState.NO_CHECK_IN
        if self.check_out is None:
            return DayState.CHECKED_IN
        return DayState.CHECKED_OUT


@dataclass(frozen=True)
class Decision:
    """Result of resolving one inbound interaction: exactly one reply, at most one event."""

    outcome: Outcome
    text: str
    quick_replies: tuple[QuickReply, ...] = ()
    event: Optional[AttendanceEvent] = None


@dataclass(frozen=True)
class DailyReportRow:
    """Read-model for the daily report (one row per active employee)."""

    user_id: str
    full_name: str
    check_in: Optional[datetime]
    check_out: Optional[datetime]
