"""Reply texts and quick replies for every resolver outcome.

User-facing texts are Russian; backends render quick replies in their own
keyboard format.
"""

from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import format_hhmm
from ..core.enums import EventKind, Outcome, QuickReplyAction
from ..messaging.model import QuickReply
from .model import AttendanceEvent, DayEvents, Decision

CHECK_IN_BUTTON = QuickReply(text="📍 Пришел", command="пришел")
CHECK_OUT_BUTTON = QuickReply(text="🚪 Ушел", command="ушел")
STATUS_BUTTON = QuickReply(text="📊 Статус", command="статус")
HELP_BUTTON = QuickReply(text="❓ Помощь", command="помощь")
SHARE_LOCATION_BUTTON = QuickReply(
    text="📍 Отправить местоположение",
    command="location",
    action=QuickReplyAction.SHARE_LOCATION,
)

AFTER_EVENT_BUTTONS = (STATUS_BUTTON, HELP_BUTTON)

HELP_TEXT = (
    "🤖 *Бот учета рабочего времени*\n\n"
    "📍 *Пришел* - отметить приход в офисе\n"
    "🚪 *Ушел* - отметить уход из офиса\n"
    "📊 *Статус* - посмотреть сегодняшние отметки\n"
    "❓ *Помощь* - показать эту справку\n\n"
    "*Для отметок требуется отправка геолокации!*"
)

NOT_RECORDED = "не отмечен"
AWAITING = "ожидание отметки"
OUT_OF_ZONE_MARK = " (вне зоны)"

_LOCATION_REPLIES: dict[Outcome, str] = {
    Outcome.CHECKED_IN: "✅ Отлично! Вы отметились о приходе.",
    Outcome.CHECKED_OUT: "✅ Спасибо за работу! Вы отметились об уходе.",
    Outcome.CHECKED_OUT_OUT_OF_ZONE: "⚠️ Уход отмечен, но вы находитесь вне офиса.",
    Outcome.CHECK_IN_OUT_OF_ZONE: "❌ Вы находитесь вне офиса. Отметка возможна только в офисе.",
    Outcome.ALREADY_COMPLETED: "ℹ️ Вы уже отметили и приход, и уход сегодня.",
}


def location_result(outcome: Outcome, event: Optional[AttendanceEvent] = None) -> Decision:
    replies: tuple[QuickReply, ...] = AFTER_EVENT_BUTTONS
    if outcome == Outcome.CHECK_IN_OUT_OF_ZONE:
        replies = (SHARE_LOCATION_BUTTON, HELP_BUTTON)
    return Decision(outcome=outcome, text=_LOCATION_REPLIES[outcome], quick_replies=replies, event=event)


def already_recorded(kind: EventKind) -> Decision:
    text = "ℹ️ Приход уже отмечен сегодня." if kind == EventKind.IN else "ℹ️ Вы уже отметили уход сегодня."
    return Decision(outcome=Outcome.ALREADY_RECORDED, text=text, quick_replies=AFTER_EVENT_BUTTONS)


def request_location(kind: EventKind) -> Decision:
    if kind == EventKind.IN:
        text = "📍 Для отметки прихода отправьте ваше местоположение:"
    else:
        text = "📍 Для отметки ухода отправьте ваше местоположение:"
    return Decision(outcome=Outcome.LOCATION_REQUESTED, text=text, quick_replies=(SHARE_LOCATION_BUTTON,))


def check_in_first() -> Decision:
    return Decision(
        outcome=Outcome.CHECK_IN_FIRST,
        text='❌ Сначала отметьтесь о приходе командой "пришел"',
        quick_replies=(CHECK_IN_BUTTON, HELP_BUTTON),
    )


def already_checked_out() -> Decision:
    return Decision(
        outcome=Outcome.ALREADY_CHECKED_OUT,
        text="ℹ️ Вы уже отметили уход сегодня.",
        quick_replies=AFTER_EVENT_BUTTONS,
    )


def _event_line(event: AttendanceEvent) -> str:
    return format_hhmm(event.timestamp) + (OUT_OF_ZONE_MARK if event.out_of_zone else "")


def status_text(day: DayEvents, employee_name: str) -> str:
    lines = ["📊 Ваш статус за сегодня:", "", f"👤 {employee_name}"]

    check_in, check_out = day.check_in, day.check_out
    if check_in:
        lines.append(f"✅ Пришел: {_event_line(check_in)}")
    else:
        lines.append(f"❌ Приход: {NOT_RECORDED}")

    if check_out:
        lines.append(f"✅ Ушел: {_event_line(check_out)}")
    elif check_in:
        lines.append(f"⏳ Уход: {AWAITING}")
    else:
        lines.append(f"❌ Уход: {NOT_RECORDED}")

    return "\n".join(lines)


def status(day: DayEvents, employee_name: str) -> Decision:
    return Decision(
        outcome=Outcome.STATUS,
        text=status_text(day, employee_name),
        quick_replies=(CHECK_IN_BUTTON, CHECK_OUT_BUTTON, HELP_BUTTON),
    )


def help_message() -> Decision:
    return Decision(
        outcome=Outcome.HELP,
        text=HELP_TEXT,
        quick_replies=(CHECK_IN_BUTTON, CHECK_OUT_BUTTON, STATUS_BUTTON),
    )


def unknown_command() -> Decision:
    return Decision(
        outcome=Outcome.UNKNOWN_COMMAND,
        text="❓ Не понимаю команду. Напишите 'помощь' для списка команд.",
        quick_replies=(HELP_BUTTON,),
    )


def ready() -> Decision:
    return Decision(
        outcome=Outcome.READY,
        text="🤖 Бот учета времени готов к работе. Напишите 'помощь' для списка команд.",
        quick_replies=(HELP_BUTTON,),
    )


def invalid_location() -> Decision:
    return Decision(
        outcome=Outcome.INVALID_LOCATION,
        text="❌ Неверные данные геолокации.",
        quick_replies=(SHARE_LOCATION_BUTTON, HELP_BUTTON),
    )


def internal_error() -> Decision:
    return Decision(
        outcome=Outcome.INTERNAL_ERROR,
        text="❌ Произошла ошибка при обработке команды. Попробуйте позже.",
    )
