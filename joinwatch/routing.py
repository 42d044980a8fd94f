"""Dispatch of bot commands and inline-button callbacks to their views."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

View = Callable[..., Any]

# Callback data is matched by prefix, in this order; the first prefix that
# matches decides the route name looked up among the registered callbacks.
_CALLBACK_ROUTES: tuple[tuple[str, str], ...] = (
    ("channel_get_", "channel_get"),
    ("channel_setting", "channel_setting"),
    ("main_menu", "main_menu"),
    ("user_setting", "user_setting"),
    ("download_excel", "download_excel"),
    ("approved_all", "approved_all"),
    ("rejected_all", "rejected_all"),
    ("approved_time", "approved_time"),
    ("hello_setting", "hello_setting"),
    ("add_text_notification", "add_text_notification"),
    ("add_photo_notification", "add_photo_notification"),
    ("add_button_notification", "add_button_notification"),
    ("example_notification", "example_notification"),
    ("cancel_setting", "cancel_setting"),
    ("delete_text_notification", "delete_text_notification"),
    ("delete_photo_notification", "delete_photo_notification"),
    ("delete_button_notification", "delete_button_notification"),
    ("sender_setting", "sender_setting"),
    ("send_message", "send_message"),
    ("update_sender_message", "update_sender_message"),
    ("delete_sender_message", "delete_sender_message"),
    ("example_sender_message", "example_sender_message"),
    ("comeback", "comeback"),
    ("cancel_sender_setting", "cancel_sender_setting"),
    ("role_setting", "role_setting"),
    ("create_admin", "create_admin"),
    ("create_super_admin", "create_super_admin"),
    ("delete_admin", "delete_admin"),
    ("all_admin", "all_admin"),
    ("cancel_admin_setting", "cancel_admin_setting"),
    ("bot_spam_settings", "bot_spam_settings"),
    ("get_statistic", "get_statistic"),
    ("add_spam_bot", "add_spam_bot"),
    ("delete_spam_bot", "delete_spam_bot"),
    ("list_spam_bot", "list_spam_bot"),
    ("activate_spam_bots", "activate_spam_bots"),
    ("all_db_sender", "all_db_sender"),
    ("global_setting_notification", "global_setting_notification"),
    ("global_add_text_notification", "global_add_text_notification"),
    ("global_delete_text_notification", "global_delete_text_notification"),
    ("global_add_photo_notification", "global_add_photo_notification"),
    ("global_delete_photo_notification", "global_delete_photo_notification"),
    ("global_add_button_notification", "global_add_button_notification"),
    ("global_delete_button_notification", "global_delete_button_notification"),
    ("global_example_notification", "global_example_notification"),
    ("press_captcha", "press_captcha"),
    ("captcha_manager", "captcha_manager"),
    ("time_setting", "time_setting"),
    ("question_example", "question_example"),
    ("question_manager", "question_manager"),
    ("answer_", "answer"),
    ("question_handbrake", "question_handbrake"),
)


class RouteNotFoundError(LookupError):
    """Callback data matched a known route that has no registered view."""

    def __init__(self, name: str) -> None:
        super().__init__("not found in map")
        self.name = name


class CallbackRouter:
    """Holds the views for slash commands and for inline-button callbacks."""

    def __init__(self) -> None:
        self._commands: dict[str, View] = {}
        self._callbacks: dict[str, View] = {}

    def register_command(self, cmd: str, view: View) -> None:
        """Register ``view`` for the command ``cmd``, replacing any earlier one."""
        self._commands[cmd] = view

    def register_callback(self, name: str, view: View) -> None:
        """Register ``view`` under the route ``name``, replacing any earlier one."""
        self._callbacks[name] = view

    def resolve_command(self, cmd: str) -> View | None:
        """Return the view for ``cmd``, or ``None`` when there is none."""
        return self._commands.get(cmd)

    def resolve_callback(self, callback_data: str) -> View | None:
        """Return the view for ``callback_data``.

        Data that matches no known prefix gives ``None``. Data whose route has
        no registered view raises :class:`RouteNotFoundError`.
        """
        for prefix, name in _CALLBACK_ROUTES:
            if callback_data.startswith(prefix):
                try:
                    return self._callbacks[name]
                except KeyError:
                    raise RouteNotFoundError(name) from None
        return None