"""Role checks wrapped around bot views.

A view is a callable ``view(bot, update)``; ``update`` is a Telegram update
as a mapping. The user service must provide ``get_user_by_id(user_id)``
returning an object with a ``role`` attribute.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from .errors import (
    ERR_IS_NOT_ADMIN,
    ERR_IS_NOT_SUPER_ADMIN,
    ERR_NO_ROWS,
    BotError,
    translate_db_error,
)

View = Callable[[Any, Mapping[str, Any]], Any]

_CHAT_KEYS = ("message", "edited_message", "channel_post", "edited_channel_post")


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "superAdmin"


def _from_chat_id(update: Mapping[str, Any]) -> int:
    for key in _CHAT_KEYS:
        message = update.get(key)
        if message:
            return message["chat"]["id"]
    callback = update.get("callback_query")
    if callback and callback.get("message"):
        return callback["message"]["chat"]["id"]
    raise ValueError("update carries no chat")


def _is_no_rows(err: BaseException) -> bool:
    if err is ERR_NO_ROWS:
        return True
    return translate_db_error(err) is ERR_NO_ROWS


def _require(user_service: Any, next_view: View, allowed: frozenset[Role], denied: BotError) -> View:
    def view(bot: Any, update: Mapping[str, Any]) -> Any:
        try:
            user = user_service.get_user_by_id(_from_chat_id(update))
        except Exception as err:
            if _is_no_rows(err):
                return None
            raise
        if user.role in allowed:
            return next_view(bot, update)
        raise denied

    return view


def admin_required(user_service: Any, next_view: View) -> View:
    """Run ``next_view`` only for admins and super admins; unknown users are ignored."""
    return _require(user_service, next_view, frozenset({Role.ADMIN, Role.SUPER_ADMIN}), ERR_IS_NOT_ADMIN)


def super_admin_required(user_service: Any, next_view: View) -> View:
    """Run ``next_view`` only for super admins; unknown users are ignored."""
    return _require(user_service, next_view, frozenset({Role.SUPER_ADMIN}), ERR_IS_NOT_SUPER_ADMIN)