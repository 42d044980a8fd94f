"""Reading channel names back out of the bot's own message texts."""

from __future__ import annotations

from datetime import datetime

CHANNEL_MARKER = "Канал:"
CAPTCHA_MARKER = "к каналу:"


def _marker_end(caption: str, marker: str) -> int | None:
    """Index of the last character of the first completed ``marker`` match.

    A mismatch restarts matching from the next character without checking
    the mismatched character against the start of the marker again.
    """
    matched = 0
    for index, char in enumerate(caption):
        if char == marker[matched]:
            matched += 1
            if matched == len(marker):
                return index
        else:
            matched = 0
    return None


def find_title(caption: str) -> str:
    """Return the channel name that follows ``Канал:`` in a settings message.

    The name runs up to the next line break and loses its last character,
    the space the bot puts before the break. A caption without the marker
    gives ``""``; one whose marker is not followed by a non-empty line raises
    ``ValueError``.
    """
    end = _marker_end(caption, CHANNEL_MARKER)
    if end is None:
        return ""
    start = end + 1
    newline = caption.find("\n", start)
    if newline == -1:
        raise ValueError("channel name is not terminated by a line break")
    name = caption[start:newline]
    if not name:
        raise ValueError("channel name is empty")
    return name[:-1]


def extract_captcha_channel(text: str) -> str:
    """Return the channel named in a captcha prompt.

    The text after ``к каналу:`` loses its leading space and its final
    character. Raises ``ValueError`` when the marker is missing or too
    little text follows it.
    """
    _, found, after = text.partition(CAPTCHA_MARKER)
    if not found:
        raise ValueError("captcha text does not name a channel")
    if len(after) < 2:
        raise ValueError("captcha text is too short after the channel marker")
    return after[1:-1]


def is_target_time(now: datetime, target_hour: int) -> bool:
    """True exactly at ``target_hour``:00:00 of ``now``."""
    return now.hour == target_hour and now.minute == 0 and now.second == 0