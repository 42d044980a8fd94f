"""Records built from incoming Telegram updates, and reply button markup.

An update is a Telegram update as a mapping, in the shape the Bot API
delivers it (``message``, ``chat_join_request``, ``my_chat_member`` ...).
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from .entity import Channel, Request, User
from .middleware import Role

CHANNEL_LINK_PREFIX = "[messaging-link]"


class RequestStatus(str, Enum):
    IN_PROGRESS = "in progress"
    APPROVED = "approved"
    REJECTED = "rejected"


def _now() -> datetime:
    return datetime.now().astimezone()


def _section(update: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    section = update.get(key)
    if not section:
        raise ValueError(f"update carries no {key}")
    return section


def channel_from_member_update(update: Mapping[str, Any]) -> Channel:
    """Build a channel from a ``my_chat_member`` update about the bot itself."""
    member = _section(update, "my_chat_member")
    chat = member["chat"]
    channel = Channel(
        telegram_id=chat["id"],
        channel_name=chat.get("title", ""),
        status=member["new_chat_member"].get("status", ""),
    )
    username = chat.get("username", "")
    if username:
        channel.channel_url = CHANNEL_LINK_PREFIX + username
    return channel


def user_from_update(update: Mapping[str, Any]) -> User:
    """Build a plain user from a message or a join request.

    A join request, when present, takes precedence over a message. An update
    with neither gives an empty user.
    """
    user = User()
    message = update.get("message")
    if message:
        sender = message["from"]
        user.id = sender["id"]
        user.username_tg = sender.get("username", "")
        user.created_at = _now()
        user.role = Role.USER.value
        user.channel_telegram_id = message["chat"]["id"]

    join = update.get("chat_join_request")
    if join:
        sender = join["from"]
        user.id = sender["id"]
        user.username_tg = sender.get("username", "")
        invite = join.get("invite_link")
        user.channel_from = invite.get("invite_link") if invite else None
        user.created_at = _now()
        user.role = Role.USER.value
        user.channel_telegram_id = join["chat"]["id"]
    return user


def request_from_join(update: Mapping[str, Any]) -> Request:
    """Build a pending join request from a ``chat_join_request`` update."""
    join = _section(update, "chat_join_request")
    return Request(
        user_id=join["from"]["id"],
        channel_telegram_id=join["chat"]["id"],
        status_request=RequestStatus.IN_PROGRESS.value,
        date_request=_now(),
    )


def button_markup(button_url: str | None, button_text: str | None) -> dict[str, Any] | None:
    """Inline keyboard with one link button, or ``None`` unless both parts are set."""
    if button_url is None or button_text is None:
        return None
    return {"inline_keyboard": [[{"text": button_text, "url": button_url}]]}