"""Account storage backed by one SQLite file per account."""

from __future__ import annotations

import abc
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

STORE_DIR_NAME = ".pswdmng"
_FILE_SUFFIX = "_data.db"
_INITIAL_ENTRY_VALUE = "123"


class RepositoryError(Exception):
    """Raised when the password store cannot be read or written."""


class EntryNotFoundError(RepositoryError):
    """Raised when no entry matches the requested url and login."""


def default_store_dir() -> Path:
    """Return the directory holding the account files in the user's home."""
    try:
        return Path.home() / STORE_DIR_NAME
    except RuntimeError as exc:
        raise RepositoryError(f"cannot determine home directory: {exc}") from exc


class Repository(abc.ABC):
    """Storage of accounts and their (url, login) entries."""

    @abc.abstractmethod
    def check_exist(self) -> list[str]:
        """Return the names of the existing accounts; empty if there are none."""

    @abc.abstractmethod
    def add(self, account: str, login: str, url: str) -> None:
        """Store a new entry for ``login`` at ``url`` in ``account``."""

    @abc.abstractmethod
    def get(self, account: str, url: str, login: str) -> str:
        """Return the stored secret of the entry matching ``url`` and ``login``."""

    @abc.abstractmethod
    def list(self, login: str) -> list[tuple[str, str]]:
        """Return the ``(login, url)`` pairs stored in the account ``login``."""

    @abc.abstractmethod
    def create_file(self, login: str) -> None:
        """Create the store of a new account named ``login``."""


class SqliteRepository(Repository):
    """Repository keeping each account in ``<store_dir>/<account>_data.db``."""

    def __init__(self, store_dir: str | Path | None = None) -> None:
        self.store_dir = Path(store_dir) if store_dir else default_store_dir()

    def _path(self, account: str) -> Path:
        return self.store_dir / f"{account}{_FILE_SUFFIX}"

    @contextmanager
    def _open(self, account: str) -> Iterator[sqlite3.Connection]:
        try:
            conn = sqlite3.connect(str(self._path(account)))
        except sqlite3.Error as exc:
            raise RepositoryError(f"cannot open store of {account!r}: {exc}") from exc
        try:
            with conn:
                yield conn
        except sqlite3.Error as exc:
            raise RepositoryError(str(exc)) from exc
        finally:
            conn.close()

    def create_file(self, login: str) -> None:
        with self._open(login) as conn:
            conn.execute(
                "CREATE TABLE passwords(url text, login text, password text)"
            )

    def add(self, account: str, login: str, url: str) -> None:
        with self._open(account) as conn:
            conn.execute(
                "INSERT INTO passwords (login, url, password) VALUES (?, ?, ?)",
                (login, url, _INITIAL_ENTRY_VALUE),
            )

    def get(self, account: str, url: str, login: str) -> str:
        with self._open(account) as conn:
            row = conn.execute(
                "SELECT password FROM passwords WHERE url = ? AND login = ?",
                (url, login),
            ).fetchone()
        if row is None:
            raise EntryNotFoundError(f"no entry for login {login!r} at {url!r}")
        return row[0]

    def list(self, login: str) -> list[tuple[str, str]]:
        with self._open(login) as conn:
            rows = conn.execute("SELECT url, login FROM passwords").fetchall()
        return [(entry_login, url) for url, entry_login in rows]

    def check_exist(self) -> list[str]:
        try:
            names = sorted(entry.name for entry in self.store_dir.iterdir())
        except FileNotFoundError:
            try:
                self.store_dir.mkdir(mode=0o700)
            except OSError as exc:
                raise RepositoryError(f"cannot create {self.store_dir}: {exc}") from exc
            names = []
        except OSError as exc:
            raise RepositoryError(f"cannot read {self.store_dir}: {exc}") from exc
        return [name.split("_")[0] for name in names]