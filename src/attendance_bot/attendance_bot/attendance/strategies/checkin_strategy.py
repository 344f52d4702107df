from __future__ import annotations

from ...core.enums import EventKind, EventStatus, Outcome
from .base import EventDecision, LocationStrategy


class CheckInStrategy(LocationStrategy):
    """First location of the day: recorded only inside the geofence."""

    def decide(self, *, inside: bool) -> EventDecision:
        if inside:
            return EventDecision(kind=EventKind.IN, status=EventStatus.OK, outcome=Outcome.CHECKED_IN)
        return EventDecision(kind=None, status=EventStatus.OUT_OF_ZONE, outcome=Outcome.CHECK_IN_OUT_OF_ZONE)
