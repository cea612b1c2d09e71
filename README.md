# pswdmng

pswdmng is a small command-line password manager. Each account has its own
SQLite database in a store directory, which is `~/.pswdmng` by default. A
database file is named `<account>_data.db`. It holds one table, `passwords`,
with a URL, a login and a stored value in each row.

## Installation

```
pip install .
```

This installs the `pswdmng` command. It needs nothing beyond the standard
library. The usage and help messages give the program name as `pass`.

## Usage

```
pswdmng init          # create the first account, or open an existing one
pswdmng init --new    # create another account (short form: -n)
pswdmng add --login alice --url example.com
pswdmng get           # choose an entry and show its stored value
```

If a command fails, it prints `error: <message>` and exits with status 1.

### `init`

When no account exists yet, `init` asks for an account name and creates an
empty store for it. When accounts already exist, it works like this:

1. If there is more than one account, it lists them and asks for a number.
2. It asks for the master password and prints it back (`psw: ...`).
3. It lists the account's entries as `number: url - login`.

With `--new` / `-n`, `init` always creates a new account. Creating an account
that already exists is an error.

### `add`

Adds a row to the chosen account. Both `--login` / `-l` and `--url` / `-u`
are required. If no account exists, it prints a message and does nothing.

`add` does not ask for a password. Every new row gets the same fixed
placeholder value.

### `get`

`get` works like this:

1. It asks for the master password.
2. It lists the entries of the chosen account.
3. If there is more than one entry, it asks for a number.
4. It prints the stored value of that entry (`pswd: ...`).

### `list`, `login`, `remove`

These commands are accepted but do nothing.

### Input

Account names and numbers are read as whitespace-separated words from
standard input. The master password is read without echo.

## What it does not do

- Nothing is encrypted. The store files are plain SQLite databases.
- The master password is never checked. It is read and printed back, and
  that is all.
- You cannot choose the password of an entry. `add` always stores the same
  placeholder value.
- Entries cannot be removed or edited.
- The `list`, `login` and `remove` commands are not implemented.
- Every file in the store directory counts as an account. The account name is
  the part of the file name before the first `_`. For that reason, account
  names that contain `_` are not listed correctly.

## Using it from Python

The pieces behind the command can be used on their own.

### `pswdmng.repository`

- `SqliteRepository(store_dir)` is the storage layer. Its methods are:
  - `create_file(account)`
  - `add(account, login, url)`
  - `list(account)`, which returns `(login, url)` pairs
  - `get(account, url, login)`
  - `check_exist()`, which returns the account names and creates the store
    directory if it is missing
- `Repository` is the abstract interface that `SqliteRepository` implements.
- `default_store_dir()` returns `~/.pswdmng`.
- Storage errors raise `RepositoryError`.
- A missing entry raises `EntryNotFoundError`, a subclass of `RepositoryError`.

### `pswdmng.commands`

- `Commands(repo, console)` runs the interactive flows. Its methods are
  `init(new)`, `add(login, url)`, `get()`, `create_account()` and
  `existing_accounts()`.
- `Console(stdin, stdout, password_reader)` does all input and output, so
  other streams can be supplied in place of the terminal.
- `choose_account` and `choose_login` ask for a 1-based number. They raise
  `CommandError` for input that is not a number or is out of range.

### `pswdmng.cli`

- `App(store_path, console)` wires the repository, the console and the
  commands together.
- `App.run(argv)` runs one command line and returns its exit status.
- `build_parser()` returns the argument parser.
- `main(argv)` is the entry point of the `pswdmng` command.

## Running the tests

```
pip install .[test]
pytest
```