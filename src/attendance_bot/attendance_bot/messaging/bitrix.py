"""Bitrix24 im-bot adapter.

Inbound: ONIMBOTMESSAGEADD webhooks (JSON or the form-encoded
`data[PARAMS][...]` flavour) are normalized into InboundMessage.
Outbound: replies go through the REST method `im.message.add`; profiles for
sync-on-contact come from `user.get`.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional, Sequence

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from ..core.enums import QuickReplyAction
from ..core.exceptions import InternalError, ValidationError
from ..geofence.model import GeoPoint
from .model import InboundMessage, Profile, QuickReply

logger = logging.getLogger(__name__)

MESSAGE_EVENT = "ONIMBOTMESSAGEADD"
DEFAULT_TEXT = "🤖 Бот учета времени"

BUTTON_COLORS = {
    "пришел": "#4caf50",
    "ушел": "#f44336",
    "статус": "#2196f3",
    "помощь": "#ff9800",
}
DEFAULT_BUTTON_COLOR = "#29619b"

_KEY_PART = re.compile(r"[^\[\]]+")


def unflatten_form(form: Mapping[str, Any]) -> dict:
    """Turn PHP-style keys (`data[PARAMS][MESSAGE]`) into nested dicts."""
    out: dict = {}
    for key, value in form.items():
        parts = _KEY_PART.findall(key)
        if not parts:
            continue
        node = out
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
    return out


def _message_params(payload: Mapping[str, Any]) -> Optional[dict]:
    data = payload.get("data")
    if not isinstance(data, dict):
        return None
    for key in ("PARAMS", "params"):
        if isinstance(data.get(key), dict):
            return data[key]
    if "DIALOG_ID" in data:
        return data
    return None


def _location(params: Mapping[str, Any]) -> Optional[GeoPoint]:
    attach = params.get("ATTACH")
    # JSON delivers a list; the form-encoded flavour unflattens to {"0": {...}, ...}.
    if isinstance(attach, dict) and "LOCATION" not in attach:
        attach = list(attach.values())
    if isinstance(attach, list):
        attach = next((a for a in attach if isinstance(a, dict) and "LOCATION" in a), None)
    if not isinstance(attach, dict):
        return None

    loc = attach.get("LOCATION")
    if not isinstance(loc, dict):
        return None
    return GeoPoint(lat=loc.get("LAT"), lon=loc.get("LNG"))


def parse_bitrix_webhook(payload: Mapping[str, Any]) -> Optional[InboundMessage]:
    """Normalize a webhook; None for events that are not user messages."""
    event = str(payload.get("event") or "").upper()
    if event and event != MESSAGE_EVENT:
        return None

    params = _message_params(payload)
    if params is None:
        return None

    user_id = params.get("FROM_USER_ID")
    dialog_id = params.get("DIALOG_ID")
    if not user_id or not dialog_id:
        raise ValidationError("Missing required webhook parameters")

    text = params.get("MESSAGE")
    return InboundMessage(
        user_id=str(user_id),
        dialog_id=str(dialog_id),
        text=str(text) if text not in (None, "") else None,
        location=_location(params),
    )


def _button(reply: QuickReply) -> dict:
    button = {
        "TEXT": reply.text,
        "TEXT_COLOR": "#fff",
        "DISPLAY": "LINE",
    }
    if reply.action == QuickReplyAction.SHARE_LOCATION:
        button.update(BG_COLOR=DEFAULT_BUTTON_COLOR, ACTION="client", ACTION_VALUE="shareLocation")
    else:
        button.update(
            BG_COLOR=BUTTON_COLORS.get(reply.command, DEFAULT_BUTTON_COLOR),
            ACTION="SEND",
            ACTION_VALUE=reply.command,
        )
    return button


def render_bitrix_message(dialog_id: str, text: str, quick_replies: Sequence[QuickReply] = ()) -> dict:
    payload: dict = {
        "DIALOG_ID": dialog_id,
        "MESSAGE": text if text and text.strip() else DEFAULT_TEXT,
        "SYSTEM": "N",
    }
    if quick_replies:
        payload["KEYBOARD"] = [_button(r) for r in quick_replies]
    return payload


class BitrixClient:
    """REST client for an incoming Bitrix24 webhook (domain + token)."""

    def __init__(
        self,
        domain: str,
        webhook_token: str,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ):
        self._domain = (domain or "").strip()
        self._token = (webhook_token or "").strip()
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self._domain and self._token)

    def _call(self, method: str, payload: dict) -> dict:
        if not self.configured:
            raise InternalError("Bitrix24 configuration missing")

        url = f"https://{self._domain}/rest/{method}.json"
        try:
            resp = self._session.post(url, json=payload, params={"auth": self._token}, timeout=self._timeout)
            resp.raise_for_status()
            body = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Bitrix24 %s failed: %s", method, e)
            raise InternalError(f"Bitrix24 {method} failed") from e

        if not isinstance(body, dict) or body.get("error"):
            error = body.get("error") if isinstance(body, dict) else body
            logger.error("Bitrix24 %s returned error: %s", method, error)
            raise InternalError(f"Bitrix24 {method} error: {error}")
        return body

    def send(self, dialog_id: str, text: str, quick_replies: Sequence[QuickReply] = ()) -> None:
        self._call("im.message.add", render_bitrix_message(dialog_id, text, quick_replies))
        logger.info("Message sent to Bitrix24 dialog %s", dialog_id)

    def get_profile(self, user_id: str) -> Optional[Profile]:
        body = self._call("user.get", {"ID": user_id})
        result = body.get("result") or []
        if not result:
            return None

        info = result[0]
        full_name = f"{info.get('NAME') or ''} {info.get('LAST_NAME') or ''}".strip()
        return Profile(full_name=full_name, email=info.get("EMAIL") or "")
