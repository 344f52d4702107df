from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import EventKind, EventStatus, Outcome


@dataclass(frozen=True)
class EventDecision:
    """What to do with a submitted location. kind=None means persist nothing."""

    kind: Optional[EventKind]
    status: EventStatus
    outcome: Outcome


class LocationStrategy(ABC):
    """Strategy Pattern: how a location submission is handled in a given day state."""

    @abstractmethod
    def decide(self, *, inside: bool) -> EventDecision:
        raise NotImplementedError
