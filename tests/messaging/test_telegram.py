import pytest
import requests

from src.attendance_bot.attendance_bot.attendance import messages
from src.attendance_bot.attendance_bot.attendance.commands import parse_command
from src.attendance_bot.attendance_bot.attendance.model import DayEvents
from src.attendance_bot.attendance_bot.core.enums import EventKind
from src.attendance_bot.attendance_bot.core.exceptions import InternalError, ValidationError
from src.attendance_bot.attendance_bot.geofence.model import GeoPoint
from src.attendance_bot.attendance_bot.messaging.telegram import (
    TelegramClient,
    parse_telegram_update,
    profile_from_update,
    render_telegram_message,
)


def _update(**message):
    base = {"message_id": 1, "from": {"id": 42, "first_name": "Анна", "last_name": "Смирнова"}, "chat": {"id": 42}}
    base.update(message)
    return {"update_id": 1, "message": base}


class FakeResponse:
    def __init__(self, body):
        self._body = body

    def json(self):
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_parse_text_message():
    message = parse_telegram_update(_update(text="Статус"))

    assert (message.user_id, message.dialog_id, message.text) == ("42", "42", "Статус")


def test_parse_location_message():
    message = parse_telegram_update(_update(location={"latitude": 57.1521, "longitude": 65.5921}))

    assert message.location == GeoPoint(lat=57.1521, lon=65.5921)


def test_updates_without_message_are_ignored():
    assert parse_telegram_update({"update_id": 1, "callback_query": {}}) is None


def test_missing_chat_is_rejected():
    with pytest.raises(ValidationError):
        parse_telegram_update({"message": {"text": "hi"}})


def test_profile_from_update():
    assert profile_from_update(_update(text="hi")).full_name == "Анна Смирнова"


def test_profile_falls_back_to_username():
    update = {"message": {"from": {"id": 1, "username": "anna"}, "chat": {"id": 1}}}

    assert profile_from_update(update).full_name == "anna"


def test_keyboard_buttons_send_back_recognized_commands():
    decision = messages.help_message()

    keyboard = render_telegram_message("42", decision.text, decision.quick_replies)["reply_markup"]["keyboard"]

    for row in keyboard:
        assert parse_command(row[0]["text"]) is not None


def test_location_request_uses_request_location_button():
    decision = messages.request_location(EventKind.OUT)

    keyboard = render_telegram_message("42", decision.text, decision.quick_replies)["reply_markup"]["keyboard"]

    assert keyboard[0][0]["request_location"] is True


def test_reply_without_buttons_removes_keyboard():
    payload = render_telegram_message("42", "text")

    assert payload["reply_markup"] == {"remove_keyboard": True}


def test_client_send():
    session = FakeSession(FakeResponse({"ok": True}))

    TelegramClient("123:abc", session=session).send("42", "hi")

    url, kwargs = session.calls[0]
    assert url == "https://api.telegram.org/bot123:abc/sendMessage"
    assert kwargs["json"]["chat_id"] == "42"


def test_client_raises_when_api_rejects():
    session = FakeSession(FakeResponse({"ok": False, "description": "chat not found"}))

    with pytest.raises(InternalError):
        TelegramClient("123:abc", session=session).send("42", "hi")


def test_client_wraps_transport_errors():
    session = FakeSession(error=requests.Timeout("slow"))

    with pytest.raises(InternalError):
        TelegramClient("123:abc", session=session).send("42", "hi")


def test_edited_location_updates_are_ignored():
    location = {"latitude": 57.1521, "longitude": 65.5921}
    update = {"update_id": 2, "edited_message": {"from": {"id": 42}, "chat": {"id": 42}, "location": location}}

    assert parse_telegram_update(update) is None
    assert profile_from_update(update) is None


def test_live_location_refresh_does_not_check_out(resolver, attendance_repo):
    first = parse_telegram_update(_update(location={"latitude": 57.1521, "longitude": 65.5921}))
    refresh = parse_telegram_update(
        {"edited_message": {"from": {"id": 42}, "chat": {"id": 42}, "location": {"latitude": 57.1521, "longitude": 65.5921}}}
    )

    resolver.handle(first)

    assert refresh is None
    assert [e.kind for e in attendance_repo.events] == [EventKind.IN]


def test_help_reply_is_sent_as_markdown():
    decision = messages.help_message()

    payload = render_telegram_message("42", decision.text, decision.quick_replies)

    assert payload["parse_mode"] == "Markdown"


def test_plain_replies_have_no_parse_mode():
    decision = messages.status(DayEvents(), "user_with_underscores")

    payload = render_telegram_message("42", decision.text, decision.quick_replies)

    assert "parse_mode" not in payload
