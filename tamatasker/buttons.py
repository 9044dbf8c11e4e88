"""Responses to the inline keyboard buttons."""

from __future__ import annotations

from os import PathLike
from typing import Union

from .database import Database
from .telegram import Bot, CallbackQuery, InlineKeyboardButton, InlineKeyboardMarkup

DEFAULT_PHOTO_PATH = "photo/anime.jpg"
TASKS_PER_ROW = 3


def back_keyboard() -> InlineKeyboardMarkup:
    """Return a keyboard with a single button leading back to the menu."""
    keyboard = InlineKeyboardMarkup()
    keyboard.add_row([InlineKeyboardButton("back", "goback")])
    return keyboard


def send_pic(
    bot: Bot, query: CallbackQuery, photo_path: Union[str, PathLike] = DEFAULT_PHOTO_PATH
) -> dict:
    """Send the picture with a back button."""
    return bot.api.send_photo(query.message.chat_id, photo_path, "", back_keyboard())


def do_something(bot: Bot, query: CallbackQuery) -> dict:
    """Answer with a fixed message and a back button."""
    return bot.api.send_message(query.message.chat_id, "Something is happened", back_keyboard())


def active_tasks(bot: Bot, query: CallbackQuery, db: Database) -> dict:
    """List the chat's tasks as buttons, three per row."""
    tasks = db.show_active_tasks(query.message.chat_id)
    keyboard = InlineKeyboardMarkup()
    for start in range(0, len(tasks), TASKS_PER_ROW):
        keyboard.add_row(
            InlineKeyboardButton(task.deadline, f"taskNumber{task.id}")
            for task in tasks[start:start + TASKS_PER_ROW]
        )
    return bot.api.send_message(query.message.chat_id, "Current active tasks: ", keyboard)


def pet_status() -> None:
    """Report the pet's status; the pet has no state to report."""
    return None


def new_task(bot: Bot, query: CallbackQuery, db: Database) -> bool:
    """Start a new task awaiting its text; return whether one was started."""
    chat_id = query.message.chat_id
    tasks = db.show_active_tasks(chat_id)
    if tasks and tasks[-1].awaiting_status:
        bot.api.send_message(chat_id, "Can't add new task, until previous is awaiting")
        return False
    db.add_task(chat_id, "waiting", 0, "waiting")
    bot.api.send_message(chat_id, "Enter new task: ")
    return True