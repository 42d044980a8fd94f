# joinwatch

Building blocks for a Telegram bot that looks after channels: it turns join
requests and other updates into records, guards management menus by role,
routes button presses to handlers, builds the bot's messages (in Russian)
and turns errors into a message a person can read.

Updates are plain mappings in the shape the Telegram Bot API delivers them
(`message`, `callback_query`, `chat_join_request`, `my_chat_member`, ...).

## Modules

- `joinwatch.config` – `load_config(path)` loads an env file (default
  `configs/bot.env`) without overriding variables already set, and returns a
  `Config` with `postgres.url` (`POSTGRES_URL`) and `telegram.token`
  (`TOKEN_TG`). A missing file raises `FileNotFoundError`.
- `joinwatch.entity` – dataclasses `Channel`, `Notification`, `Request`,
  `Sender`, `SpamBot`, `User`, and the survey `QuestionModel` with its
  `Answer` list (`QuestionModel.from_json`, `QuestionModel.to_json`).
  `Notification.is_empty()` is true when there is no text, file or button
  link. Helpers: `get_id`, `extract_values`, `is_valid_url`,
  `get_button_data`.
- `joinwatch.errors` – `BotError` and its predefined values (`ERR_IS_NOT_ADMIN`,
  `ERR_NO_ROWS`, ...), `DatabaseError` carrying an SQLSTATE code and
  `NoRowsError`; `translate_db_error` maps them to bot errors,
  `db_error_code` reads the code, and `parse_err_to_text` gives the text to
  show a user, looking through the whole `raise ... from` chain.
- `joinwatch.texts` – message constants and builders such as
  `message_get_channel_info`, `bot_captcha`, `request_statistic`.
- `joinwatch.middleware` – `Role`, and `admin_required` /
  `super_admin_required`, which wrap a view `view(bot, update)`. The user
  service must provide `get_user_by_id(user_id)`. Unknown users are ignored
  (the wrapper returns `None`); users without the role get
  `ERR_IS_NOT_ADMIN` or `ERR_IS_NOT_SUPER_ADMIN` raised.
- `joinwatch.model` – `RequestStatus`, `user_from_update`,
  `request_from_join`, `channel_from_member_update`, and `button_markup`,
  which gives a one-button inline keyboard or `None`.
- `joinwatch.routing` – `CallbackRouter` with `register_command`,
  `register_callback`, `resolve_command` and `resolve_callback`. Callback
  data is matched by prefix; a known prefix without a registered view raises
  `RouteNotFoundError`, unknown data gives `None`.
- `joinwatch.captions` – `find_title` reads the channel name out of a menu
  caption, `extract_captcha_channel` out of a captcha prompt, and
  `is_target_time` checks for an exact hour.

## Examples

```python
from joinwatch.config import load_config

config = load_config("configs/bot.env")
print(config.postgres.url)
```

```python
from joinwatch.captions import find_title

caption = "Управление каналом\nКанал:Beta test \n\nКоличество людей, которые ожидают принятия: 0"
assert find_title(caption) == "Beta test"
```

```python
from joinwatch.entity import get_button_data, get_id

assert get_id("channel_get_42") == 42
assert get_button_data("Открыть | https://example.com/") == ("Открыть", "https://example.com/")
```

```python
from joinwatch.middleware import admin_required
from joinwatch.routing import CallbackRouter


def show_channel(bot, update):
    ...


router = CallbackRouter()
router.register_callback("channel_get", admin_required(user_service, show_channel))
view = router.resolve_callback("channel_get_42")
```

```python
from joinwatch.errors import NoRowsError, parse_err_to_text, translate_db_error

assert translate_db_error(NoRowsError()).code == "no_rows"
text = parse_err_to_text(RuntimeError("boom"))  # the generic internal-error text
```

## What it does not do

The package holds no Telegram client and no database layer: it does not
poll for updates, send or edit messages, approve or decline join requests,
store users, channels or notifications, or export spreadsheets. There is no
command to start a bot; an application supplies the connection, the
services and the views and uses these pieces to wire them together.