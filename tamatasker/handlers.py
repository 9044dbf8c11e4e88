"""Command and message handlers of the bot."""

from __future__ import annotations

from .callbacks import register_callbacks
from .database import Database
from .menu import menu
from .telegram import Bot, Message

GREETING = "Hello, this is test message"
HELP_TEXT = "This is test help message"
DEFAULT_DEADLINE = "18:30"


def start(bot: Bot) -> None:
    """Answer /start with a greeting followed by the menu."""

    def on_start(message: Message) -> None:
        bot.api.send_message(message.chat_id, GREETING)
        menu(bot, message)

    bot.events.on_command("start", on_start)


def register_help(bot: Bot) -> None:
    """Answer /help with the help text."""
    bot.events.on_command(
        "help", lambda message: bot.api.send_message(message.chat_id, HELP_TEXT)
    )


def read_task(bot: Bot, db: Database) -> None:
    """Store plain text as the chat's newest task when one is awaiting its text."""

    def on_text(message: Message) -> None:
        tasks = db.show_active_tasks(message.chat_id)
        if not tasks or not tasks[-1].awaiting_status:
            return
        db.update_task(message.chat_id, tasks[-1].id, message.text, DEFAULT_DEADLINE)

    bot.events.on_non_command_message(on_text)


def assembled(bot: Bot, db: Database) -> None:
    """Register every handler of the bot."""
    start(bot)
    register_help(bot)
    register_callbacks(bot, db)
    read_task(bot, db)