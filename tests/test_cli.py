"""Tests for the command-line front end."""

import logging

import pytest

from reisbase import (
    Clear,
    Del,
    Flag,
    Get,
    GetAll,
    InvalidActionArguments,
    InvalidInput,
    Put,
    ReisConfig,
    Reisbase,
    Set,
    UnknownActionRequested,
)
from reisbase.cli import main, parse_command, run


@pytest.fixture
def config(tmp_path):
    return ReisConfig(path=str(tmp_path / "reis.db"))


class Console:
    """Captures written lines and answers prompts from a script."""

    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    def confirm(self, prompt: str) -> bool:
        self.lines.append(prompt)
        return self.answers.pop(0)


def reis(config, *argv, answers=(), clipboard=None):
    console = Console(*answers)
    status = run(list(argv), config, confirm=console.confirm, clipboard=clipboard, write=console.write)
    return status, console.lines


class TestParseCommand:
    def test_set(self):
        assert parse_command(["set", "k", "v"]) == Set("k", "v")

    def test_short_name(self):
        assert parse_command(["s", "k", "v"]) == Set("k", "v")

    def test_get_with_clipboard(self):
        assert parse_command(["g", "k", "-c"]) == Get("k", frozenset({Flag.CLIPBOARD}))

    def test_key_only_actions_leave_rest_as_flags(self):
        assert parse_command(["del", "k", "-f", "extra"]) == Del("k", frozenset({Flag.FORCE}))

    def test_keyless_actions(self):
        assert parse_command(["ga"]) == GetAll()
        assert parse_command(["c", "-f"]) == Clear(frozenset({Flag.FORCE}))

    def test_put(self):
        assert parse_command(["p", "k", "v", "-h", "-z"]) == Put("k", "v", frozenset({Flag.HELP}))

    def test_no_action(self):
        with pytest.raises(InvalidInput, match="should contain an action"):
            parse_command([])

    def test_unknown_action(self):
        with pytest.raises(UnknownActionRequested):
            parse_command(["bogus", "k"])

    def test_missing_value(self):
        with pytest.raises(InvalidActionArguments):
            parse_command(["set", "k"])

    def test_missing_key(self):
        with pytest.raises(InvalidActionArguments):
            parse_command(["get"])


class TestRun:
    def test_set_then_get(self, config):
        assert reis(config, "set", "k", "v") == (
            0,
            ["Successfully set the key k with the value v in the database!"],
        )
        assert reis(config, "get", "k") == (0, ["v"])

    def test_changes_are_persisted(self, config):
        reis(config, "s", "k", "v")
        assert Reisbase.open(config.path).get("k") == "v"

    def test_get_missing_suggests_set(self, config):
        status, lines = reis(config, "get", "k")
        assert status == 0
        assert lines == ["The entry for k doesn't exist! Try: reis set k value"]

    def test_put_missing_suggests_value(self, config):
        _, lines = reis(config, "put", "k", "v")
        assert lines == ["The entry for k doesn't exist! Try: reis set k v"]

    def test_overwrite_confirmed(self, config):
        reis(config, "set", "k", "old")
        status, lines = reis(config, "set", "k", "new", answers=[True])
        assert status == 0
        assert len(lines) == 2
        assert lines[-1] == "Successfully set the key k with the value new in the database!"
        assert Reisbase.open(config.path).get("k") == "new"

    def test_overwrite_declined(self, config):
        reis(config, "set", "k", "old")
        _, lines = reis(config, "set", "k", "new", answers=[False])
        assert lines[-1] == "Operation canceled!"
        assert Reisbase.open(config.path).get("k") == "old"

    def test_clear_confirmed(self, config):
        reis(config, "set", "k", "v")
        _, lines = reis(config, "clr", answers=[True])
        assert lines[-1] == "Successfully cleared all database values!"
        assert Reisbase.open(config.path).is_empty()

    def test_clear_forced_without_prompt(self, config):
        reis(config, "set", "k", "v")
        _, lines = reis(config, "c", "-f")
        assert lines == ["Successfully cleared all database values!"]

    def test_clear_empty(self, config):
        _, lines = reis(config, "c", "-f")
        assert lines == ["Your database is empty! Try: reis set <key> <value>"]

    def test_get_all_prints_dump(self, config):
        reis(config, "set", "a", "1")
        reis(config, "set", "b", "2")
        _, lines = reis(config, "ga")
        assert len(lines) == 1
        assert sorted(lines[0].split("\n")) == ["#-#a\t1", "#-#b\t2"]

    def test_get_copies_to_clipboard(self, config):
        reis(config, "set", "k", "v")
        copied = []
        reis(config, "get", "k", "-c", clipboard=copied.append)
        assert copied == ["v"]

    def test_prompt_goes_through_writer(self, config, monkeypatch):
        reis(config, "set", "k", "old")
        monkeypatch.setattr("builtins.input", lambda: "y")
        lines = []
        assert run(["set", "k", "new"], config, write=lines.append) == 0
        assert lines == [
            "The key k already exists with the value old. Do you want to replace it? (Y/n)",
            "Successfully set the key k with the value new in the database!",
        ]

    def test_end_of_input_cancels(self, config, monkeypatch, caplog):
        reis(config, "set", "k", "old")

        def read():
            raise EOFError

        monkeypatch.setattr("builtins.input", read)
        lines = []
        with caplog.at_level(logging.WARNING):
            assert run(["set", "k", "new"], config, write=lines.append) == 0
        assert lines == [
            "The key k already exists with the value old. Do you want to replace it? (Y/n)",
            "Operation canceled!",
        ]
        assert not caplog.records
        assert Reisbase.open(config.path).get("k") == "old"

    def test_unreadable_input_prints_one_line(self, config, monkeypatch, caplog):
        reis(config, "s", "k", "v")

        def read():
            raise OSError("bad fd")

        monkeypatch.setattr("builtins.input", read)
        lines = []
        with caplog.at_level(logging.ERROR, logger="reisbase.retry"):
            assert run(["clr"], config, write=lines.append) == 0
        assert lines == [
            "This action is permanent! Do you want to continue? (Y/n)",
            "Sorry, an error occurred when attempting to read your input!",
        ]
        assert "bad fd" in caplog.text
        assert Reisbase.open(config.path).get("k") == "v"

    def test_failure_exit_status(self, config, caplog):
        with caplog.at_level(logging.ERROR, logger="reisbase.cli"):
            status, lines = reis(config, "bogus")
        assert status == 1
        assert lines == ["Error: Unknown action requested: 'bogus'!"]
        assert caplog.records

    def test_failure_does_not_touch_database(self, config, tmp_path):
        reis(config, "set")
        assert not (tmp_path / "reis.db").exists()

    def test_open_failure(self, tmp_path):
        config = ReisConfig(path=str(tmp_path))
        status, lines = reis(config, "ga")
        assert status == 1
        assert lines[0].startswith("Error: ")


class TestMain:
    def test_uses_environment_path(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "custom.db"
        monkeypatch.setenv("REISBASE_PATH", str(path))
        assert main(["set", "k", "v"]) == 0
        assert path.read_text(encoding="utf-8") == "#-#k\tv\n"
        assert "Successfully set the key k" in capsys.readouterr().out

    def test_failure_prints_diagnostic(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("REISBASE_PATH", str(tmp_path / "reis.db"))
        assert main([]) == 1
        assert capsys.readouterr().out == "Error: Operation should contain an action!\n"
