from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Profile, QuickReply


class MessageDispatcher(Protocol):
    """Delivers a reply through whatever chat backend is active."""

    def send(self, dialog_id: str, text: str, quick_replies: Sequence[QuickReply] = ()) -> None:
        raise NotImplementedError


class ProfileProvider(Protocol):
    """Looks up a user's profile on the chat backend (used by sync-on-contact)."""

    def get_profile(self, user_id: str) -> Optional[Profile]:
        raise NotImplementedError


class StaticProfileProvider:
    """Profile already known from the inbound payload (e.g. Telegram's `from` block)."""

    def __init__(self, profile: Optional[Profile]):
        self._profile = profile

    def get_profile(self, user_id: str) -> Optional[Profile]:
        return self._profile
