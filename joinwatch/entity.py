"""Domain records: channels, questions, notifications, requests, users."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from urllib.parse import urlsplit

_INT_RE = re.compile(r"[+-]?[0-9]+")
_BAD_URL_CHARS = re.compile(r"[\x00-\x20\x7f]")


def _or(value: str | None, placeholder: str) -> str:
    return placeholder if value is None else value


@dataclass
class Channel:
    id: int = 0
    telegram_id: int = 0
    channel_name: str = ""
    channel_url: str | None = None
    accept_timer: int = 0
    question: str | None = None
    question_enabled: bool = False
    status: str = ""
    waiting_count: int = 0
    need_captcha: bool = False

    def __str__(self) -> str:
        url = _or(self.channel_url, "nil pointer")
        need = "true" if self.need_captcha else "false"
        return (
            f"(tg_id: {self.telegram_id} | channel_name: {self.channel_name} | "
            f"ChannelURL: {url} | Status: {self.status} | need_captcha: {need})"
        )


@dataclass
class Answer:
    id: int = 0
    answer_variation: str = ""
    url: str = ""
    text_result: str = ""


@dataclass
class QuestionModel:
    """A poll sent to users: a question and its possible answers."""

    question: str = ""
    answer: list[Answer] = field(default_factory=list)
    channel_name_base64: str = ""

    @classmethod
    def from_json(cls, data: str | bytes) -> QuestionModel:
        """Parse a poll from JSON; missing fields take their defaults."""
        raw = json.loads(data)
        if not isinstance(raw, dict):
            raise ValueError("question must be a JSON object")
        answers = raw.get("answer") or []
        if not isinstance(answers, list):
            raise ValueError("answer must be a JSON array")
        return cls(
            question=_typed(raw, "question", str, ""),
            answer=[_answer_from(item) for item in answers],
        )

    def to_json(self) -> str:
        """Serialise the poll; the base64 channel name is not included."""
        payload: dict[str, Any] = {
            "question": self.question,
            "answer": [
                {
                    "id": a.id,
                    "answer_variation": a.answer_variation,
                    "url": a.url,
                    "text_result": a.text_result,
                }
                for a in self.answer
            ],
        }
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def _typed(raw: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = raw.get(key, default)
    if value is None:
        return default
    if kind is int and isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return value


def _answer_from(item: Any) -> Answer:
    if not isinstance(item, dict):
        raise ValueError("each answer must be a JSON object")
    return Answer(
        id=_typed(item, "id", int, 0),
        answer_variation=_typed(item, "answer_variation", str, ""),
        url=_typed(item, "url", str, ""),
        text_result=_typed(item, "text_result", str, ""),
    )


@dataclass
class Notification:
    id: int = 0
    channel_id: int = 0
    notification_text: str | None = None
    file_id: str | None = None
    file_type: str | None = None
    button_url: str | None = None
    button_text: str | None = None
    channel_name: str = ""

    def __str__(self) -> str:
        return (
            f"(notification_text: {_or(self.notification_text, 'nil')} | "
            f"file_id: {_or(self.file_id, 'nil')} | "
            f"file_type: {_or(self.file_type, 'nil')} | "
            f"button_url: {_or(self.button_url, 'nil')}"
            f"| button_text: {_or(self.button_text, 'nil')})"
        )

    def is_empty(self) -> bool:
        """True when there is no text, button link or file to send."""
        return self.notification_text is None and self.button_url is None and self.file_id is None


@dataclass
class Request:
    id: int = 0
    user_id: int = 0
    channel_telegram_id: int = 0
    status_request: str = ""
    date_request: datetime | None = None

    def __str__(self) -> str:
        return (
            f"(id: {self.id} | user_id: {self.user_id} | "
            f"ChannelTelegramID: {self.channel_telegram_id} | status_request: {self.status_request})"
        )


@dataclass
class Sender:
    id: int = 0
    channel_telegram_id: int = 0
    message: str = ""
    channel_name: str = ""


@dataclass
class SpamBot:
    id: int = 0
    token: str = ""
    bot_name: str = ""

    def __str__(self) -> str:
        return f"(id: {self.id} | token: {self.token} | channel_name: {self.bot_name})"


@dataclass
class User:
    id: int = 0
    username_tg: str = ""
    phone: str | None = None
    channel_from: str | None = None
    created_at: datetime | None = None
    role: str = ""
    blocked_bot: bool = False
    channel_telegram_id: int = 0
    is_passed_captcha: bool = False

    def __str__(self) -> str:
        return (
            f"(id: {self.id} | tg_username: {self.username_tg} | "
            f"channel_from: {self.channel_from} | created_at: {self.created_at} | role: {self.role})"
        )


def get_id(data: str) -> int:
    """Return the number in the third ``_``-separated part of ``data``, or 0."""
    parts = data.split("_")
    if len(parts) != 3 or not _INT_RE.fullmatch(parts[2]):
        return 0
    return int(parts[2])


def extract_values(text: str) -> tuple[str, str]:
    """Split ``prefix_a_b`` into ``(a, b)``; anything else gives two empty strings."""
    parts = text.split("_")
    if len(parts) != 3:
        return "", ""
    return parts[1], parts[2]


def is_valid_url(raw_url: str) -> bool:
    """True for an absolute URL with both a scheme and a host."""
    if _BAD_URL_CHARS.search(raw_url):
        return False
    try:
        parsed = urlsplit(raw_url)
    except ValueError:
        return False
    host = parsed.netloc.rpartition("@")[2]
    return bool(parsed.scheme) and bool(host)


def get_button_data(text: str) -> tuple[str, str]:
    """Split ``label|url`` into its two trimmed parts, or two empty strings."""
    parts = text.split("|")
    if len(parts) != 2:
        return "", ""
    return parts[0].strip(" "), parts[1].strip(" ")