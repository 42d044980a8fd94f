from datetime import datetime

import pytest

from joinwatch.model import (
    CHANNEL_LINK_PREFIX,
    RequestStatus,
    button_markup,
    channel_from_member_update,
    request_from_join,
    user_from_update,
)


def _member_update(username=""):
    chat = {"id": -100500, "title": "Beta test", "type": "channel"}
    if username:
        chat["username"] = username
    return {
        "my_chat_member": {
            "chat": chat,
            "from": {"id": 7, "username": "admin"},
            "new_chat_member": {"status": "administrator", "user": {"id": 1}},
        }
    }


def _join_update(invite="invite-link"):
    join = {
        "chat": {"id": -100600, "title": "Beta test"},
        "from": {"id": 42, "username": "alice"},
    }
    if invite is not None:
        join["invite_link"] = {"invite_link": invite}
    return {"chat_join_request": join}


def _message_update():
    return {
        "message": {
            "from": {"id": 11, "username": "bob"},
            "chat": {"id": 11},
            "text": "/start",
        }
    }


def test_channel_without_username_has_no_url():
    channel = channel_from_member_update(_member_update())
    assert channel.telegram_id == -100500
    assert channel.channel_name == "Beta test"
    assert channel.status == "administrator"
    assert channel.channel_url is None


def test_channel_with_username_gets_link():
    channel = channel_from_member_update(_member_update("mychan"))
    assert channel.channel_url == CHANNEL_LINK_PREFIX + "mychan"


def test_channel_requires_member_update():
    with pytest.raises(ValueError):
        channel_from_member_update(_message_update())


def test_user_from_message():
    before = datetime.now().astimezone()
    user = user_from_update(_message_update())
    after = datetime.now().astimezone()
    assert user.id == 11
    assert user.username_tg == "bob"
    assert user.role == "user"
    assert user.channel_telegram_id == 11
    assert user.channel_from is None
    assert before <= user.created_at <= after


def test_user_from_join_request():
    user = user_from_update(_join_update())
    assert user.id == 42
    assert user.username_tg == "alice"
    assert user.channel_from == "invite-link"
    assert user.channel_telegram_id == -100600
    assert user.role == "user"


def test_user_from_join_without_invite_link():
    user = user_from_update(_join_update(invite=None))
    assert user.channel_from is None
    assert user.id == 42


def test_user_from_empty_update_is_blank():
    user = user_from_update({})
    assert user.id == 0
    assert user.role == ""
    assert user.created_at is None


def test_request_from_join():
    before = datetime.now().astimezone()
    req = request_from_join(_join_update())
    after = datetime.now().astimezone()
    assert req.user_id == 42
    assert req.channel_telegram_id == -100600
    assert req.status_request == "in progress"
    assert req.status_request == RequestStatus.IN_PROGRESS.value
    assert before <= req.date_request <= after


def test_request_from_join_requires_join():
    with pytest.raises(ValueError):
        request_from_join(_message_update())


def test_button_markup_wire_shape():
    markup = button_markup("https://example.com/", "Open")
    assert markup == {"inline_keyboard": [[{"text": "Open", "url": "https://example.com/"}]]}


@pytest.mark.parametrize(
    "url,text",
    [(None, "Open"), ("https://example.com/", None), (None, None)],
)
def test_button_markup_needs_both(url, text):
    assert button_markup(url, text) is None