"""A small Telegram Bot API client with event dispatch and long polling."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

import requests

API_URL = "https://api.telegram.org"


class TelegramError(Exception):
    """Raised when a Bot API request fails."""


@dataclass
class InlineKeyboardButton:
    """A button of an inline keyboard carrying callback data."""

    text: str
    callback_data: str

    def to_dict(self) -> dict:
        return {"text": self.text, "callback_data": self.callback_data}


@dataclass
class InlineKeyboardMarkup:
    """Rows of inline keyboard buttons."""

    inline_keyboard: list[list[InlineKeyboardButton]] = field(default_factory=list)

    def add_row(self, buttons) -> None:
        self.inline_keyboard.append(list(buttons))

    def to_dict(self) -> dict:
        return {"inline_keyboard": [[b.to_dict() for b in row] for row in self.inline_keyboard]}


@dataclass
class Message:
    """The parts of an incoming message the bot uses."""

    message_id: int
    chat_id: int
    date: int = 0
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Message":
        return cls(data["message_id"], data["chat"]["id"], data.get("date", 0), data.get("text", ""))


@dataclass
class CallbackQuery:
    """A press of an inline keyboard button."""

    id: str
    data: str = ""
    message: Optional[Message] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CallbackQuery":
        message = data.get("message")
        return cls(str(data["id"]), data.get("data", ""), Message.from_dict(message) if message else None)


class Api:
    """Calls to the Bot API methods the bot needs."""

    def __init__(self, token: str, session: Optional[requests.Session] = None) -> None:
        self.token = token
        self.session = session or requests.Session()

    def _call(self, method: str, timeout: float = 30, **kwargs) -> Any:
        try:
            body = self.session.post(f"{API_URL}/bot{self.token}/{method}", timeout=timeout, **kwargs).json()
        except (requests.RequestException, ValueError) as exc:
            raise TelegramError(f"{method} failed: {exc}") from exc
        if not body.get("ok"):
            raise TelegramError(body.get("description", f"{method} failed"))
        return body.get("result")

    def send_message(self, chat_id: int, text: str, reply_markup: Optional[InlineKeyboardMarkup] = None) -> dict:
        payload: dict[str, Any] = {"chat_id": chat_id, "text": text}
        if reply_markup is not None:
            payload["reply_markup"] = reply_markup.to_dict()
        return self._call("sendMessage", json=payload)

    def send_photo(self, chat_id: int, photo_path, caption: str = "",
                   reply_markup: Optional[InlineKeyboardMarkup] = None) -> dict:
        """Upload a JPEG file as a photo message."""
        path = Path(photo_path)
        data: dict[str, Any] = {"chat_id": str(chat_id), "caption": caption}
        if reply_markup is not None:
            data["reply_markup"] = json.dumps(reply_markup.to_dict())
        with path.open("rb") as handle:
            return self._call("sendPhoto", data=data, files={"photo": (path.name, handle, "image/jpeg")})

    def delete_webhook(self) -> bool:
        return bool(self._call("deleteWebhook", json={}))

    def get_updates(self, offset: Optional[int] = None, timeout: int = 0) -> list[dict]:
        payload: dict[str, Any] = {"timeout": timeout, "offset": offset}
        return self._call("getUpdates", timeout=timeout + 30, json=payload) or []


class EventBroadcaster:
    """Routes incoming updates to registered handlers."""

    def __init__(self) -> None:
        self._commands: dict[str, list[Callable]] = {}
        self._non_command: list[Callable] = []
        self._callback: list[Callable] = []

    def on_command(self, name: str, handler: Callable[[Message], Any]) -> None:
        self._commands.setdefault(name, []).append(handler)

    def on_non_command_message(self, handler: Callable[[Message], Any]) -> None:
        self._non_command.append(handler)

    def on_callback_query(self, handler: Callable[[CallbackQuery], Any]) -> None:
        self._callback.append(handler)

    def dispatch(self, update: dict) -> bool:
        """Call the handlers for one update; return whether any ran."""
        calls: list[tuple[Callable, Any]] = []
        if update.get("message"):
            message = Message.from_dict(update["message"])
            if message.text.startswith("/"):
                name = message.text[1:].split(" ", 1)[0].split("@", 1)[0]
                handlers = self._commands.get(name, [])
            else:
                handlers = self._non_command
            calls += [(h, message) for h in handlers]
        if update.get("callback_query"):
            query = CallbackQuery.from_dict(update["callback_query"])
            calls += [(h, query) for h in self._callback]
        for handler, arg in calls:
            handler(arg)
        return bool(calls)


class Bot:
    """A bot: its API client and its event handlers."""

    def __init__(self, token: str, api: Optional[Api] = None) -> None:
        self.token = token
        self.api = api or Api(token)
        self.events = EventBroadcaster()


class LongPoll:
    """Fetches updates for a bot and dispatches them."""

    def __init__(self, bot: Bot, timeout: int = 10) -> None:
        self.bot = bot
        self.timeout = timeout
        self.offset: Optional[int] = None

    def start(self) -> int:
        """Run one polling round; return the number of updates received."""
        updates = self.bot.api.get_updates(offset=self.offset, timeout=self.timeout)
        for update in updates:
            self.offset = update["update_id"] + 1
            self.bot.events.dispatch(update)
        return len(updates)