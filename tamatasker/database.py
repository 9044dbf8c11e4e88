"""SQLite storage for chat tasks."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from os import PathLike
from typing import Union

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS tasks("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "chatID INTEGER,"
    "task TEXT,"
    "taskTime INTEGER,"
    "awaitingStatus BOOLEAN,"
    "deadline TEXT);"
)
_INSERT = (
    "INSERT INTO tasks (chatID, task, taskTime, awaitingStatus, deadline) "
    "VALUES (?, ?, ?, 1, ?);"
)
_UPDATE = (
    "UPDATE tasks SET task = ?, deadline = ?, awaitingStatus = 0 "
    "WHERE chatID = ? AND id = ?"
)
_SELECT = (
    "SELECT id, taskTime, task, awaitingStatus, deadline FROM tasks "
    "WHERE chatID = ? ORDER BY id;"
)
_DELETE = "DELETE FROM tasks WHERE id = ? AND chatID = ?;"


class DatabaseError(Exception):
    """Raised when the task database cannot be opened or queried."""


@dataclass
class Task:
    """One stored task of a chat."""

    id: int
    task_time: int
    awaiting_status: bool
    task: str
    deadline: str


class Database:
    """Task storage backed by an SQLite file."""

    def __init__(self, path: Union[str, PathLike]) -> None:
        try:
            self._conn = sqlite3.connect(path)
            # Touch the file so that an unusable path fails here.
            self._conn.execute("PRAGMA schema_version;")
        except sqlite3.Error as exc:
            raise DatabaseError(f"Cannot open database: {exc}") from exc

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _write(self, sql: str, params: tuple) -> sqlite3.Cursor:
        try:
            cursor = self._conn.execute(sql, params)
            self._conn.commit()
        except sqlite3.Error as exc:
            raise DatabaseError(f"SQL error: {exc}") from exc
        return cursor

    def create_table(self) -> None:
        """Create the tasks table if it does not exist yet."""
        try:
            self._conn.executescript(_CREATE_TABLE)
        except sqlite3.Error as exc:
            raise DatabaseError(f"SQL error: {exc}") from exc

    def add_task(self, chat_id: int, task: str, task_time: int, deadline: str) -> int:
        """Insert a task awaiting its text; return its id."""
        cursor = self._write(_INSERT, (chat_id, task, task_time, deadline))
        return cursor.lastrowid

    def update_task(self, chat_id: int, task_id: int, new_task: str, new_deadline: str) -> int:
        """Set a task's text and deadline and mark it no longer awaiting.

        Returns the number of rows changed.
        """
        cursor = self._write(_UPDATE, (new_task, new_deadline, chat_id, task_id))
        return cursor.rowcount

    def show_active_tasks(self, chat_id: int) -> list[Task]:
        """Return every task of a chat, oldest first."""
        try:
            rows = self._conn.execute(_SELECT, (chat_id,)).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(f"SQL error: {exc}") from exc
        return [
            Task(
                id=row[0],
                task_time=row[1] or 0,
                task=row[2] if row[2] is not None else "",
                awaiting_status=bool(row[3]),
                deadline=row[4] if row[4] is not None else "",
            )
            for row in rows
        ]

    def delete_task(self, task_id: int, chat_id: int) -> int:
        """Delete a task of a chat; return the number of rows removed."""
        cursor = self._write(_DELETE, (task_id, chat_id))
        return cursor.rowcount