from __future__ import annotations

from ...core.enums import EventKind, EventStatus, Outcome
from .base import EventDecision, LocationStrategy


class CheckOutStrategy(LocationStrategy):
    """Location after check-in: always recorded, flagged when outside the geofence."""

    def decide(self, *, inside: bool) -> EventDecision:
        if inside:
            return EventDecision(kind=EventKind.OUT, status=EventStatus.OK, outcome=Outcome.CHECKED_OUT)
        return EventDecision(
            kind=EventKind.OUT,
            status=EventStatus.OUT_OF_ZONE,
            outcome=Outcome.CHECKED_OUT_OUT_OF_ZONE,
        )
