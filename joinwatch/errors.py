"""Bot error values, user-facing error texts and database error translation."""

from __future__ import annotations

from collections.abc import Iterator

FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"


class BotError(Exception):
    """An error the bot knows how to describe.

    ``msg`` is the human readable description, ``code`` a short stable
    identifier used to recognise the error wherever it is raised or wrapped.
    """

    def __init__(self, msg: str, code: str) -> None:
        super().__init__(msg)
        self.msg = msg
        self.code = code

    def __str__(self) -> str:
        return self.msg


class DatabaseError(Exception):
    """An error reported by the database driver, carrying its SQLSTATE code."""

    def __init__(self, message: str = "", code: str = "") -> None:
        super().__init__(message)
        self.code = code


class NoRowsError(DatabaseError):
    """A query that had to return a row returned none."""

    def __init__(self, message: str = "no rows in result set") -> None:
        super().__init__(message)


ERR_IS_NOT_ADMIN = BotError("User is not an admin", "not_admin")
ERR_IS_NOT_SUPER_ADMIN = BotError("User is not super admin", "not_super_admin")
ERR_NOT_FOUND_USER = BotError("Not found user", "not_found")
ERR_DELETE_SUPER_ADMIN = BotError("Delete super admin in tg bot", "delete_super_admin")

ERR_UNIQUE_VIOLATION = BotError("Violation must be unique", "non_unique_value")
ERR_FOREIGN_KEY_VIOLATION = BotError("Foreign Key Violation", "foreign_key_violation ")
ERR_NO_ROWS = BotError("No rows in result set", "no_rows")
ERR_NOTIFICATION_EMPTY = BotError("Notification is empty", "empty_notification")

ERR_NIL = BotError("Nil pointer value", "nil_pointer")
ERR_NOT_FOUND_ID = BotError("ID in callback not found", "empty_id")

INTERNAL_ERROR_TEXT = "Произошла внутрення ошибка на сервере"

_ERROR_TEXTS = (
    (ERR_IS_NOT_ADMIN, "Нет администраторских прав доступа"),
    (ERR_IS_NOT_SUPER_ADMIN, "Нет прав доступа супер администратора"),
    (ERR_NOT_FOUND_USER, "Пользователь с таким никнеймом не был найден"),
    (
        ERR_DELETE_SUPER_ADMIN,
        "Нельзя забирать права супер админа через бота, необходимо изменять через базу данных",
    ),
    (ERR_NOTIFICATION_EMPTY, "Отсутствуют обязательные поля для рассылки (файл/текст)"),
)


def _chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield the error and every error it was raised from or during."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = err.__cause__ if err.__cause__ is not None else err.__context__


def _is(err: BaseException | None, target: BotError) -> bool:
    return any(isinstance(e, BotError) and e.code == target.code for e in _chain(err))


def parse_err_to_text(err: BaseException | None) -> str:
    """Return the message shown to a user for ``err``."""
    for known, text in _ERROR_TEXTS:
        if _is(err, known):
            return text
    return INTERNAL_ERROR_TEXT


def db_error_code(err: BaseException | None) -> str:
    """Return the SQLSTATE code of the first database error in the chain, or ``""``."""
    for e in _chain(err):
        if isinstance(e, DatabaseError):
            return e.code
    return ""


def translate_db_error(err: BaseException | None) -> BotError | None:
    """Map a database error to the bot error it stands for, or ``None``."""
    if any(isinstance(e, NoRowsError) for e in _chain(err)):
        return ERR_NO_ROWS
    code = db_error_code(err)
    if code == FOREIGN_KEY_VIOLATION:
        return ERR_FOREIGN_KEY_VIOLATION
    if code == UNIQUE_VIOLATION:
        return ERR_UNIQUE_VIOLATION
    return None