"""The main menu shown to a chat."""

from __future__ import annotations

from .telegram import Bot, InlineKeyboardButton, InlineKeyboardMarkup, Message

MENU_TEXT = "Available functions: "

MENU_BUTTONS = (
    ("Send anime pic", "sendPicButton"),
    ("Do something", "doSmthng"),
    ("Add new task", "addNewTask"),
    ("Active tasks", "activeTasks"),
)


def build_menu_keyboard() -> InlineKeyboardMarkup:
    """Return the menu keyboard: one row holding every menu button."""
    keyboard = InlineKeyboardMarkup()
    keyboard.add_row(InlineKeyboardButton(text, data) for text, data in MENU_BUTTONS)
    return keyboard


def menu(bot: Bot, message: Message) -> dict:
    """Send the menu to the chat the message came from."""
    return bot.api.send_message(message.chat_id, MENU_TEXT, build_menu_keyboard())