import pytest

from joinwatch.entity import User
from joinwatch.errors import (
    ERR_IS_NOT_ADMIN,
    ERR_IS_NOT_SUPER_ADMIN,
    ERR_NO_ROWS,
    BotError,
    NoRowsError,
)
from joinwatch.middleware import Role, admin_required, super_admin_required


class FakeUsers:
    def __init__(self, users=None, error=None):
        self.users = users or {}
        self.error = error
        self.asked = []

    def get_user_by_id(self, user_id):
        self.asked.append(user_id)
        if self.error is not None:
            raise self.error
        if user_id not in self.users:
            raise ERR_NO_ROWS
        return self.users[user_id]


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, bot, update):
        self.calls.append((bot, update))
        return "handled"


def message_update(chat_id):
    return {"message": {"chat": {"id": chat_id}, "text": "/start"}}


def callback_update(chat_id):
    return {"callback_query": {"data": "main_menu", "message": {"chat": {"id": chat_id}}}}


@pytest.mark.parametrize("role", [Role.ADMIN, Role.SUPER_ADMIN, "admin", "superAdmin"])
def test_admin_required_allows_admins(role):
    service = FakeUsers({5: User(id=5, role=role)})
    nxt = Recorder()
    update = message_update(5)
    assert admin_required(service, nxt)("bot", update) == "handled"
    assert nxt.calls == [("bot", update)]


def test_admin_required_rejects_plain_user():
    service = FakeUsers({5: User(id=5, role="user")})
    nxt = Recorder()
    with pytest.raises(BotError) as info:
        admin_required(service, nxt)("bot", message_update(5))
    assert info.value is ERR_IS_NOT_ADMIN
    assert nxt.calls == []


def test_unknown_user_is_ignored():
    nxt = Recorder()
    assert admin_required(FakeUsers(), nxt)("bot", message_update(9)) is None
    assert super_admin_required(FakeUsers(), nxt)("bot", message_update(9)) is None
    assert nxt.calls == []


def test_database_no_rows_is_ignored():
    nxt = Recorder()
    service = FakeUsers(error=NoRowsError())
    assert admin_required(service, nxt)("bot", message_update(1)) is None
    assert nxt.calls == []


def test_other_errors_propagate():
    service = FakeUsers(error=RuntimeError("db down"))
    with pytest.raises(RuntimeError, match="db down"):
        admin_required(service, Recorder())("bot", message_update(1))


def test_super_admin_required_rejects_admin():
    service = FakeUsers({3: User(id=3, role="admin")})
    with pytest.raises(BotError) as info:
        super_admin_required(service, Recorder())("bot", message_update(3))
    assert info.value is ERR_IS_NOT_SUPER_ADMIN


def test_super_admin_required_allows_super_admin():
    service = FakeUsers({3: User(id=3, role="superAdmin")})
    nxt = Recorder()
    assert super_admin_required(service, nxt)("bot", message_update(3)) == "handled"
    assert len(nxt.calls) == 1


def test_chat_id_taken_from_callback_message():
    service = FakeUsers({8: User(id=8, role="admin")})
    nxt = Recorder()
    assert admin_required(service, nxt)("bot", callback_update(8)) == "handled"
    assert service.asked == [8]


def test_update_without_chat_raises():
    with pytest.raises(ValueError):
        admin_required(FakeUsers(), Recorder())("bot", {"poll": {}})