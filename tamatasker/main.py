"""Command-line entry point that runs the bot."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from .database import Database
from .handlers import assembled
from .telegram import Bot, LongPoll

TOKEN_ENV = "TAMATASKER_TOKEN"


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tamatasker", description="Run the task bot.")
    parser.add_argument("--token", default=os.environ.get(TOKEN_ENV), help="bot token")
    parser.add_argument("--db", default="data.db", help="path of the task database")
    parser.add_argument("--timeout", type=int, default=10, help="long-poll timeout in seconds")
    args = parser.parse_args(argv)
    if not args.token:
        parser.error(f"a bot token is required (--token or {TOKEN_ENV})")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the bot until polling fails."""
    args = _parse_args(argv)
    bot = Bot(args.token)
    with Database(args.db) as db:
        db.create_table()
        assembled(bot, db)
        try:
            bot.api.delete_webhook()
            poll = LongPoll(bot, timeout=args.timeout)
            while True:
                poll.start()
        except Exception as exc:
            print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())