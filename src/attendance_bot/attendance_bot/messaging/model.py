from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import QuickReplyAction
from ..geofence.model import GeoPoint


@dataclass(frozen=True)
class InboundMessage:
    """Normalized inbound event, independent of the chat backend."""

    user_id: str
    dialog_id: str
    text: Optional[str] = None
    location: Optional[GeoPoint] = None


@dataclass(frozen=True)
class Profile:
    """User profile as reported by the chat backend."""

    full_name: str
    email: str = ""


@dataclass(frozen=True)
class QuickReply:
    """Suggested reply shown next to a message (not a typed command)."""

    text: str
    command: str = ""
    action: QuickReplyAction = QuickReplyAction.COMMAND


@dataclass(frozen=True)
class OutboundMessage:
    dialog_id: str
    text: str
    quick_replies: tuple[QuickReply, ...] = ()
