from __future__ import annotations

from ...core.enums import EventStatus, Outcome
from .base import EventDecision, LocationStrategy


class ClosedDayStrategy(LocationStrategy):
    """Both events already recorded: the day is closed."""

    def decide(self, *, inside: bool) -> EventDecision:
        status = EventStatus.OK if inside else EventStatus.OUT_OF_ZONE
        return EventDecision(kind=None, status=status, outcome=Outcome.ALREADY_COMPLETED)
