from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current server-local time.

    Note: Wrapped so tests can patch/mock easier. The attendance day boundary
    is the calendar date of this value.
    """
    return datetime.now()


def format_hhmm(value: Optional[datetime], *, missing: str = "--:--") -> str:
    if value is None:
        return missing
    return value.strftime("%H:%M")
