from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

import requests

from ..attendance.messages import HELP_TEXT
from ..core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from ..core.enums import QuickReplyAction
from ..core.exceptions import InternalError, ValidationError
from ..geofence.model import GeoPoint
from .model import InboundMessage, Profile, QuickReply

logger = logging.getLogger(__name__)

API_URL = "https://api.telegram.org"

# Replies written with Telegram Markdown markup.
MARKDOWN_TEXTS = frozenset({HELP_TEXT})


def _message(update: Mapping[str, Any]) -> Optional[dict]:
    # Edits (including live-location refreshes) are not new submissions.
    message = update.get("message")
    return message if isinstance(message, dict) else None


def parse_telegram_update(update: Mapping[str, Any]) -> Optional[InboundMessage]:
    """Normalize a Bot API update; None for updates without a message."""
    message = _message(update)
    if message is None:
        return None

    chat = message.get("chat") or {}
    sender = message.get("from") or {}
    chat_id = chat.get("id")
    user_id = sender.get("id", chat_id)
    if chat_id is None or user_id is None:
        raise ValidationError("Missing chat or sender id")

    location = None
    loc = message.get("location")
    if isinstance(loc, dict):
        location = GeoPoint(lat=loc.get("latitude"), lon=loc.get("longitude"))

    return InboundMessage(
        user_id=str(user_id),
        dialog_id=str(chat_id),
        text=message.get("text"),
        location=location,
    )


def profile_from_update(update: Mapping[str, Any]) -> Optional[Profile]:
    message = _message(update)
    if message is None:
        return None
    sender = message.get("from") or {}
    full_name = f"{sender.get('first_name') or ''} {sender.get('last_name') or ''}".strip()
    full_name = full_name or sender.get("username") or ""
    return Profile(full_name=full_name) if full_name else None


def _button(reply: QuickReply) -> dict:
    if reply.action == QuickReplyAction.SHARE_LOCATION:
        return {"text": reply.text, "request_location": True}
    # Keyboard buttons are sent back as plain text, so they must carry the command word.
    return {"text": reply.command.capitalize()}


def render_telegram_message(chat_id: str, text: str, quick_replies: Sequence[QuickReply] = ()) -> dict:
    payload: dict = {"chat_id": chat_id, "text": text}
    if text in MARKDOWN_TEXTS:
        payload["parse_mode"] = "Markdown"
    if quick_replies:
        payload["reply_markup"] = {
            "keyboard": [[_button(r)] for r in quick_replies],
            "resize_keyboard": True,
            "one_time_keyboard": True,
        }
    else:
        payload["reply_markup"] = {"remove_keyboard": True}
    return payload


class TelegramClient:
    def __init__(
        self,
        token: str,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ):
        self._token = (token or "").strip()
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self._token)

    def send(self, dialog_id: str, text: str, quick_replies: Sequence[QuickReply] = ()) -> None:
        if not self.configured:
            raise InternalError("Telegram token missing")

        url = f"{API_URL}/bot{self._token}/sendMessage"
        try:
            resp = self._session.post(url, json=render_telegram_message(dialog_id, text, quick_replies), timeout=self._timeout)
            body = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Telegram sendMessage failed: %s", e)
            raise InternalError("Telegram sendMessage failed") from e

        if not body.get("ok"):
            logger.error("Telegram sendMessage returned error: %s", body.get("description"))
            raise InternalError(f"Telegram error: {body.get('description')}")
        logger.info("Message sent to Telegram chat %s", dialog_id)
