"""A Telegram task-tracking bot with SQLite storage and a long-polling client."""

__version__ = "0.1.0"