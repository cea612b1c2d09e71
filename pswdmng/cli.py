"""Command-line entry point of the password manager."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from .commands import CommandError, Commands, Console
from .repository import RepositoryError, SqliteRepository


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pass", description="password manager")
    sub = parser.add_subparsers(dest="command")

    init = sub.add_parser("init", help="Initialize password store")
    init.add_argument(
        "-n", "--new", action="store_true", help="Create new passwords account"
    )

    add = sub.add_parser("add", help="add row in password manager")
    add.add_argument("-l", "--login", required=True, help="Your new login")
    add.add_argument("-u", "--url", required=True, help="URL of site to add new row")

    sub.add_parser("get", help="get row from password manager")
    sub.add_parser("list", help="get rows list from password manager")
    sub.add_parser("login", help="login in password manager")
    sub.add_parser("remove", help="remove row from password manager")
    return parser


class App:
    """Ties the repository, the console and the commands together."""

    def __init__(
        self, store_path: str | Path | None = None, console: Console | None = None
    ) -> None:
        self.console = console or Console()
        self.repo = SqliteRepository(store_path or None)
        self.commands = Commands(self.repo, self.console)

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run one command and return the process exit status."""
        args = build_parser().parse_args(argv)
        try:
            if args.command is None:
                self.console.write("root cmd\n")
            elif args.command == "init":
                self.commands.init(new=args.new)
            elif args.command == "add":
                self.commands.add(args.login, args.url)
            elif args.command == "get":
                self.commands.get()
        except (CommandError, RepositoryError) as exc:
            self.console.write(f"error: {exc}\n")
            return 1
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    try:
        app = App()
    except RepositoryError as exc:
        print(f"error: {exc}")
        return 1
    return app.run(argv)


if __name__ == "__main__":
    sys.exit(main())