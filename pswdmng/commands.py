"""Interactive actions of the password manager."""

from __future__ import annotations

import getpass
import re
import sys
from collections import deque
from collections.abc import Callable, Sequence
from typing import TextIO

from .repository import Repository, RepositoryError

_INTEGER = re.compile(r"[+-]?\d+")
_NO_ACCOUNT = "At first you need to initialize your first account\n"


class CommandError(Exception):
    """Raised when a command cannot complete."""


class Console:
    """Terminal input and output used by the commands."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        password_reader: Callable[[], str] | None = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._password_reader = password_reader or (lambda: getpass.getpass(""))
        self._pending: deque[str] = deque()

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def read_token(self) -> str:
        """Return the next whitespace-separated word from the input."""
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise CommandError("unexpected end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_password(self) -> str:
        """Prompt for the master password and read it without echo."""
        self.write("Enter master password for access to account:\n")
        try:
            return self._password_reader()
        except (EOFError, OSError) as exc:
            raise CommandError(f"cannot read password: {exc}") from exc


def _read_index(console: Console, count: int) -> int:
    text = console.read_token()
    if not _INTEGER.fullmatch(text):
        raise CommandError(f"invalid number: {text!r}")
    index = int(text) - 1
    if not 0 <= index < count:
        raise CommandError(f"number out of range: {text}")
    return index


def choose_account(console: Console, accounts: Sequence[str]) -> int:
    """Return the index of the account the user picks."""
    if len(accounts) == 1:
        return 0
    console.write("founded accounts:\n")
    for number, name in enumerate(accounts, start=1):
        console.write(f"{number}: {name}\n")
    console.write("Enter account number: ")
    return _read_index(console, len(accounts))


def choose_login(console: Console, entries: Sequence[tuple[str, str]]) -> int:
    """Return the index of the entry the user picks."""
    if len(entries) == 1:
        return 0
    console.write("Enter login number: ")
    return _read_index(console, len(entries))


class Commands:
    """The actions behind the command-line subcommands."""

    def __init__(self, repo: Repository, console: Console) -> None:
        self.repo = repo
        self.console = console

    def existing_accounts(self) -> list[str]:
        self.console.write("Check existing passwords files\n")
        try:
            return self.repo.check_exist()
        except RepositoryError as exc:
            raise CommandError(str(exc)) from exc

    def create_account(self) -> None:
        self.console.write("psw files not exist\n")
        self.console.write("Create login\n")
        login = self.console.read_token()
        try:
            self.repo.create_file(login)
        except RepositoryError as exc:
            raise CommandError(str(exc)) from exc

    def _select_account(self, accounts: Sequence[str]) -> str:
        account = accounts[choose_account(self.console, accounts)]
        self.console.write(f"current account: {account}\n")
        return account

    def _show_entries(self, account: str) -> list[tuple[str, str]]:
        password = self.console.read_password()
        self.console.write(f"psw: {password}\n")
        try:
            entries = self.repo.list(account)
        except RepositoryError as exc:
            raise CommandError(str(exc)) from exc
        self.console.write("Url | Login\n")
        for number, (login, url) in enumerate(entries, start=1):
            self.console.write(f"{number}: {url} - {login}\n")
        return entries

    def init(self, new: bool = False) -> None:
        """Create an account, or show the entries of an existing one."""
        if new:
            self.create_account()
            return
        accounts = self.existing_accounts()
        if accounts:
            self._show_entries(self._select_account(accounts))
            return
        self.create_account()
        self.console.write("Passwords files founded\n")
        self.console.write("Enter master password for access to account:\n")
        self.console.write("init cmd\n")

    def add(self, login: str, url: str) -> None:
        """Add an entry for ``login`` at ``url`` to a chosen account."""
        accounts = self.existing_accounts()
        if not accounts:
            self.console.write(_NO_ACCOUNT)
            return
        account = self._select_account(accounts)
        try:
            self.repo.add(account, login, url)
        except RepositoryError as exc:
            self.console.write(f"error: {exc}\n")

    def get(self) -> str | None:
        """Show the stored secret of a chosen entry and return it."""
        accounts = self.existing_accounts()
        if not accounts:
            self.console.write(_NO_ACCOUNT)
            return None
        account = self._select_account(accounts)
        entries = self._show_entries(account)
        login, url = entries[choose_login(self.console, entries)]
        try:
            secret = self.repo.get(account, url, login)
        except RepositoryError as exc:
            raise CommandError(str(exc)) from exc
        self.console.write(f"pswd: {secret}\n")
        return secret