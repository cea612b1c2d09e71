import io

import pytest

from pswdmng.cli import App, build_parser, main
from pswdmng.commands import Console
from pswdmng.repository import SqliteRepository


def make_app(store, text=""):
    out = io.StringIO()
    console = Console(io.StringIO(text), out, lambda: "password")
    return App(store_path=str(store), console=console), out


def test_parser_init_flag():
    assert build_parser().parse_args(["init", "-n"]).new is True
    assert build_parser().parse_args(["init"]).new is False


def test_parser_add_flags():
    args = build_parser().parse_args(["add", "-l", "user", "--url", "example.com"])
    assert (args.command, args.login, args.url) == ("add", "user", "example.com")


@pytest.mark.parametrize(
    "argv", [["add", "-l", "user"], ["add", "-u", "example.com"], ["bogus"]]
)
def test_parser_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit):
        build_parser().parse_args(argv)


def test_root_command(tmp_path):
    app, out = make_app(tmp_path)
    assert app.run([]) == 0
    assert out.getvalue() == "root cmd\n"


def test_init_add_get_flow(tmp_path):
    app, out = make_app(tmp_path, "alice\n")
    assert app.run(["init"]) == 0
    assert app.run(["add", "-l", "user", "-u", "example.com"]) == 0
    assert app.run(["get"]) == 0
    assert out.getvalue().endswith("pswd: 123\n")
    assert SqliteRepository(tmp_path).list("alice") == [("user", "example.com")]


@pytest.mark.parametrize("command", ["list", "login", "remove"])
def test_inert_commands(tmp_path, command):
    app, out = make_app(tmp_path)
    assert app.run([command]) == 0
    assert out.getvalue() == ""


def test_failure_returns_one(tmp_path):
    repo = SqliteRepository(tmp_path)
    repo.create_file("alice")
    repo.create_file("bob")
    app, out = make_app(tmp_path, "x\n")
    assert app.run(["get"]) == 1
    assert "error:" in out.getvalue()


def test_main_uses_home_store(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert main([]) == 0
    assert capsys.readouterr().out == "root cmd\n"