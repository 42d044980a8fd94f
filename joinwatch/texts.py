"""Texts the bot sends to administrators and users."""

from __future__ import annotations

from datetime import datetime

MESSAGE_SHOW_ALL_CHANNEL = (
    "<strong>Ниже представлен список каналов, в которых бот является администратором</strong>"
)

GENERAL_MAIN_BOT_MENU = "<b>Главное меню бота</b>"
GENERAL_USER_SETTING_MENU = "<b>Взаимодействие с данными пользователей</b>"

USER_UPDATE_SENDER_TEXT = "Отправьте сообщение для рассылки базе"
USER_DELETE_SENDER_TEXT = "Сообщение успешно удалено"
USER_SENDER_EMPTY = "Сообщение отсутствует"
USER_SENDER_ERROR = "Внутренняя ошибка при рассылке пользователям"
USER_SENDER_ERROR_EMPTY = "Пользователей по данному каналу в базе не было найдено"
USER_SENDER_DONE = "Рассылка завершена"
USER_SUPER_ADMIN_SETTING = (
    "<strong>Управление администраторами</strong>\n\nДанная команда доступна только людям с правами "
    "<i>Супер администратор</i>\n\n"
    "<i>Супер администратор</i> - права позволяют управлять правами любого участника бота, а также самим ботом\n"
    "<i>Администратор</i> - права позволяют управлять ботом"
)
USER_SET_ADMIN = "Отправьте никнейм пользователя, которого хотите назначить администратором"
USER_SET_SUPER_ADMIN = "Отправьте никнейм пользователя, которого хотите назначить супер администратором"
USER_DELETE_ADMIN = "Отправьте никнейм пользователя, у которого хотите забрать админские права"

REQUEST_EMPTY = "Запросы отсутствуют"

NOTIFICATION_UPDATE_TEXT = "Отправьте сообщение, которое будет отправляться новым пользователям"
NOTIFICATION_UPDATE_FILE = (
    "Отправьте файл/фотографию, который будет отправляться новым пользователям\n\n"
    "Если отправляете фотографию, то поставьте галочку для сжатия изображения"
)
NOTIFICATION_UPDATE_BUTTON = (
    "Отправьте сообщение и ссылку для создания кнопки, которая будет отправляться новым пользователям. \n"
    "Пример сообщения: на чем написан бот?|https://go.dev/"
)
NOTIFICATION_EMPTY = "Рассылка отсутствует"
NOTIFICATION_DELETE_TEXT = "Текст успешно удален"
NOTIFICATION_DELETE_BUTTON = "Кнопка успешно удалена"
NOTIFICATION_DELETE_FILE = "Документ/фотография успешно удалена"

NOTIFICATION_GLOBAL_SETTING = "<strong>Управление рассылкой для всех пользователей</strong>\n"
NOTIFICATION_GLOBAL_UPDATE_TEXT = "Отправьте сообщение, которое отправится пользователям"
NOTIFICATION_GLOBAL_UPDATE_FILE = (
    "Отправьте файл/фотографию, которое отправится пользователям\n\n"
    "Если отправляете фотографию, то поставьте галочку для сжатия изображения"
)
NOTIFICATION_GLOBAL_UPDATE_BUTTON = (
    "Отправьте сообщение и ссылку для создания кнопки, которое отправится пользователям. \n"
    "Пример сообщения: на чем написан бот?|https://go.dev/"
)

SPAM_BOT_ADD = "Отправьте токен бота"
SPAM_BOT_DELETE = "Выберите бота, которого хотите удалить из базы"
SPAM_BOT_GET = "Список всех доступных ботов для рассылок"

CHANNEL_SET_TIMER = "Отправьте время в минутах, для авто принятия пользователей"

_YES = "Да"
_NO = "Нет"


def _yes_no(flag: bool) -> str:
    return _YES if flag else _NO


def message_get_channel_info(
    channel: str,
    waiting_count: int,
    user_count: int,
    is_exist_captcha: bool,
    question_enabled: bool,
) -> str:
    """Channel management summary shown to an administrator."""
    return (
        "<strong>Управление каналом</strong>\n"
        f"Канал:<i>{channel}</i> \n"
        f"Капча включена: {_yes_no(is_exist_captcha)}\n"
        f"Опрос после капчи включен: {_yes_no(question_enabled)}\n\n"
        f"Количество людей, которые ожидают принятия: {waiting_count}\n\n"
        f"Количество людей в базе бота по данному каналу: {user_count}"
    )


def user_excel_file_text(now: datetime | None = None) -> str:
    """Caption of the exported user spreadsheet, stamped with ``now``."""
    moment = datetime.now() if now is None else now
    return f"<i>Выгрузка данных на:</i> {moment.strftime('%H:%M %Y-%m-%d')}"


def user_sender_setting(channel: str) -> str:
    return (
        "<strong>Управление рассылок по базе с пользователями</strong>\n"
        f"Канал:<i>{channel}</i> \n\n"
        "Рассылка сообщения производится по пользователям выбранного канала"
    )


def request_decline_text(count_rejected: int) -> str:
    return f"Людей было отклонено: {count_rejected}"


def request_approved_text(count_approved: int) -> str:
    return f"Людей было принято: {count_approved}"


def request_error(count_err: int) -> str:
    return f"Со стороны ограничений телеграмма не удалость обработать {count_err} людей"


def request_approve_through_time(seconds: int, count_approved: int) -> str:
    return f"Было принято {count_approved} людей через заданный промежуток времени: {seconds}"


def request_statistic(day: int, count_request: int, count_sent_msg: int, channel_name: str) -> str:
    return (
        f"За число: {day}, было подано заявок: {count_request}, по каналу: {channel_name}. "
        f"Успешно отправленных сообщений {count_sent_msg}"
    )


def notification_setting_text(channel: str) -> str:
    return (
        "<strong>Управление рассылками для новых пользователей</strong>\n"
        f"Канал:<i>{channel}</i> \n\n"
        "Кнопка `<u>Отправить пример рассылки</u>` отправит вам сообщение такого же вида, "
        "как это будут видеть новые пользователи"
    )


def notification_global_sending_stat(value: int) -> str:
    return f"Рассылка по всей базе завершена, число успешно отправленных сообщений: {value}"


def bot_captcha(channel: str) -> str:
    return (
        f"Вы действительно хотите присоединиться к каналу: {channel}?\n"
        "Для подтверждения нажмите на /confirm"
    )


def channel_update_question(question: str, channel: str) -> str:
    return (
        f"Канал:<i>{channel}</i> \n"
        f"Ниже представлены поля данного опроса:\n\n{question}"
        "\n\nЕсли хотите изменить опрос, отправьте его с измененными полями в формате JSON. "
        "Если не хотите менять, нажмите кнопку отменить команду"
    )