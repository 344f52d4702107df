"""Local emulator backend: JSON in, JSON out."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

import requests

from ..attendance.model import Decision
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from ..core.exceptions import InternalError, ValidationError
from ..geofence.model import GeoPoint
from .model import InboundMessage, OutboundMessage, QuickReply

logger = logging.getLogger(__name__)


def parse_emulator_message(payload: Mapping[str, Any]) -> InboundMessage:
    user_id = require_non_empty(payload.get("userId"), "userId")
    dialog_id = str(payload.get("dialogId") or user_id)
    text = payload.get("message")
    if text is not None and not isinstance(text, str):
        raise ValidationError("message must be a string")

    location = None
    loc = payload.get("location")
    if isinstance(loc, dict):
        location = GeoPoint(lat=loc.get("lat"), lon=loc.get("lon"))

    return InboundMessage(
        user_id=str(user_id),
        dialog_id=str(dialog_id),
        text=text,
        location=location,
    )


def quick_replies_to_list(quick_replies: Sequence[QuickReply]) -> list[dict]:
    return [{"text": r.text, "command": r.command, "action": r.action.value} for r in quick_replies]


def decision_to_dict(decision: Decision) -> dict:
    event = decision.event
    return {
        "outcome": decision.outcome.value,
        "text": decision.text,
        "quickReplies": quick_replies_to_list(decision.quick_replies),
        "event": None
        if event is None
        else {
            "eventId": event.event_id,
            "type": event.kind.value,
            "timestamp": event.timestamp.isoformat(),
            "status": event.status.value,
        },
    }


class EmulatorDispatcher:
    """Dispatcher for the emulator backend.

    Replies are always logged and kept in `sent`; when a URL is configured
    they are also posted to the local emulator UI.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ):
        self._url = (url or "").strip()
        self._session = session or requests.Session()
        self._timeout = timeout
        self.sent: list[OutboundMessage] = []

    def send(self, dialog_id: str, text: str, quick_replies: Sequence[QuickReply] = ()) -> None:
        self.sent.append(OutboundMessage(dialog_id=dialog_id, text=text, quick_replies=tuple(quick_replies)))
        logger.info("[emulator] -> %s: %s", dialog_id, text.splitlines()[0] if text else "")
        if not self._url:
            return

        payload = {"dialog_id": dialog_id, "message": text, "quickReplies": quick_replies_to_list(quick_replies)}
        try:
            self._session.post(self._url, json=payload, timeout=self._timeout).raise_for_status()
        except requests.RequestException as e:
            logger.error("Emulator delivery to %s failed: %s", self._url, e)
            raise InternalError("Emulator delivery failed") from e
