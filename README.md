# tamatasker

A small Telegram bot for keeping track of tasks. It stores tasks per chat in a
local SQLite database and offers an inline-keyboard menu for adding tasks and
listing them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the bot

```
tamatasker --token <bot token>
```

Options:

- `--token` – the bot token. When omitted, the value of the
  `TAMATASKER_TOKEN` environment variable is used; if neither is given the
  command stops with a usage error.
- `--db` – path of the task database (default `data.db`). It is created if it
  does not exist.
- `--timeout` – long-poll timeout in seconds (default `10`).

Run `tamatasker --help` to see them listed.

The command opens the task database, creates the `tasks` table if needed,
registers the bot's handlers, removes any webhook and then long-polls Telegram
for updates. It keeps polling until a request fails, at which point it prints
`Error: ...` to standard error and exits; it can also be stopped with Ctrl-C.

## What the bot does

- `/start` replies with a greeting and then shows the menu.
- `/help` replies with a short help message.
- The menu is one row of four buttons:
  - **Send anime pic** uploads `photo/anime.jpg` (relative to the working
    directory) as a photo with a "back" button.
  - **Do something** replies with a fixed message and a "back" button.
  - **Add new task** stores a placeholder task for the chat and asks for its
    text. While the chat's newest task is still awaiting its text, no further
    task can be added.
  - **Active tasks** lists all of the chat's tasks as buttons, three per row,
    each labelled with the task's deadline.
- "back" shows the menu again.
- A plain text message, when the chat's newest task is awaiting its text,
  becomes that task's text, with the deadline set to `18:30`. Otherwise it is
  ignored.

## Using the pieces directly

The task store can be used without Telegram:

```python
from tamatasker.database import Database

with Database(":memory:") as db:
    db.create_table()
    task_id = db.add_task(42, "waiting", 0, "waiting")
    db.update_task(42, task_id, "Water the plants", "18:30")
    for task in db.show_active_tasks(42):
        print(task.id, task.task, task.deadline, task.awaiting_status)
```

`Database` raises `DatabaseError` when the file cannot be opened or a query
fails. `add_task` returns the new task's id; `update_task` and `delete_task`
return the number of rows they changed.

`tamatasker.telegram` holds the Bot API client: `Api` (`send_message`,
`send_photo`, `delete_webhook`, `get_updates`), `Bot`, `EventBroadcaster`,
`LongPoll`, `InlineKeyboardMarkup`, `InlineKeyboardButton`, `Message` and
`CallbackQuery`. Failed requests raise `TelegramError`.

The handlers are registered on a `Bot` with
`tamatasker.handlers.assembled(bot, db)`. Button presses are routed by
`tamatasker.callbacks.handle_callback`, and the menu keyboard is built by
`tamatasker.menu.build_menu_keyboard`.

## Limitations

- Pressing one of the task buttons shown under **Active tasks** does nothing;
  there is no view, edit or delete action for a single task in the chat.
  Tasks can only be deleted through `Database.delete_task`.
- Every task gets the same deadline, `18:30`; the bot does not ask for one.
- `tamatasker.buttons.pet_status` reports nothing: there is no pet state.
- The photo path for **Send anime pic** is fixed; if the file is missing the
  upload fails with an error.