from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DayState
from .strategies.base import LocationStrategy
from .strategies.checkin_strategy import CheckInStrategy
from .strategies.checkout_strategy import CheckOutStrategy
from .strategies.closed_day_strategy import ClosedDayStrategy


@dataclass
class LocationStrategyFactory:
    """Factory Pattern: choose the location strategy from the derived day state."""

    def for_state(self, state: DayState) -> LocationStrategy:
        if state == DayState.NO_CHECK_IN:
            return CheckInStrategy()
        if state == DayState.CHECKED_IN:
            return CheckOutStrategy()
        return ClosedDayStrategy()
