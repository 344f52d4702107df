from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: a chat user tracked by the bot.

    Note: user_id is the opaque platform id (Bitrix user id, Telegram user id).
    """

    user_id: str
    full_name: str
    email: str = ""
    is_active: bool = True
