from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Attendance event type stored in the database."""

    IN = "in"
    OUT = "out"


class EventStatus(str, Enum):
    """Geofence verdict recorded together with an event."""

    OK = "ok"
    OUT_OF_ZONE = "out_of_zone"


class DayState(str, Enum):
    """Per-employee state for one calendar day, derived from the day's events."""

    NO_CHECK_IN = "no_check_in"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"


class Command(str, Enum):
    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"
    STATUS = "status"
    HELP = "help"
    UNKNOWN = "unknown"


class Outcome(str, Enum):
    """Machine-readable result of one resolved interaction."""

    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    CHECKED_OUT_OUT_OF_ZONE = "checked_out_out_of_zone"
    CHECK_IN_OUT_OF_ZONE = "check_in_out_of_zone"
    ALREADY_COMPLETED = "already_completed"
    ALREADY_RECORDED = "already_recorded"
    ALREADY_CHECKED_OUT = "already_checked_out"
    CHECK_IN_FIRST = "check_in_first"
    LOCATION_REQUESTED = "location_requested"
    STATUS = "status"
    HELP = "help"
    UNKNOWN_COMMAND = "unknown_command"
    READY = "ready"
    INVALID_LOCATION = "invalid_location"
    INTERNAL_ERROR = "internal_error"


class QuickReplyAction(str, Enum):
    """What a suggested reply button does when pressed."""

    COMMAND = "command"
    SHARE_LOCATION = "share_location"


class ChatBackend(str, Enum):
    BITRIX = "bitrix"
    TELEGRAM = "telegram"
    EMULATOR = "emulator"
