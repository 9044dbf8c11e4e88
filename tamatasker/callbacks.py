"""Dispatch of inline keyboard presses."""

from __future__ import annotations

from .buttons import active_tasks, do_something, new_task, send_pic
from .database import Database
from .menu import menu
from .telegram import Bot, CallbackQuery

_ACTIONS = {
    "sendPicButton": lambda bot, db, query: send_pic(bot, query),
    "doSmthng": lambda bot, db, query: do_something(bot, query),
    "goback": lambda bot, db, query: menu(bot, query.message),
    "addNewTask": lambda bot, db, query: new_task(bot, query, db),
    "activeTasks": lambda bot, db, query: active_tasks(bot, query, db),
}


def handle_callback(bot: Bot, db: Database, query: CallbackQuery) -> bool:
    """Run the response for a button press; return False for unknown buttons."""
    action = _ACTIONS.get(query.data)
    if action is None or query.message is None:
        return False
    action(bot, db, query)
    return True


def register_callbacks(bot: Bot, db: Database) -> None:
    """Route every callback query of the bot through handle_callback."""
    bot.events.on_callback_query(lambda query: handle_callback(bot, db, query))