from __future__ import annotations

from typing import Optional

from ..core.constants import COMMAND_BY_ALIAS
from ..core.enums import Command


def normalize_command(text: Optional[str]) -> str:
    return (text or "").strip().lower()


def parse_command(text: Optional[str]) -> Optional[Command]:
    """Map a typed message to a command; None when the message is empty."""
    cleaned = normalize_command(text)
    if not cleaned:
        return None
    return COMMAND_BY_ALIAS.get(cleaned, Command.UNKNOWN)
