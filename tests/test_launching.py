"""Tests for editor command building and detached launching."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock

import pytest

from executor.command_builder import LaunchCommand, build_open_command
from executor.process_launcher import launch_detached
from protocol.errors import SpawnFailure
from protocol.open_args import OpenArgs


def test_command_with_line_and_column() -> None:
    command = build_open_command(OpenArgs(file="/a/b.txt", line="10", column="5"))
    assert command.argv == (
        "/usr/bin/env", "phpstorm", "--line", "10", "--column", "5", "/a/b.txt",
    )


def test_column_without_line_is_dropped() -> None:
    command = build_open_command(OpenArgs(file="/a/b.txt", line="", column="5"))
    assert "--column" not in command.argv
    assert "--line" not in command.argv
    assert command.argv[-1] == "/a/b.txt"


def test_custom_editor_prefix() -> None:
    command = build_open_command(OpenArgs(file="/x"), editor=["pstorm"])
    assert command.argv == ("pstorm", "/x")


def test_shell_line_quotes_user_input() -> None:
    command = build_open_command(OpenArgs(file="/tmp/it's here.php", line="1"))
    line = command.shell_line()

    assert line.startswith("/usr/bin/env phpstorm --line 1 ")
    assert "'/tmp/it'\"'\"'s here.php'" in line
    assert line.endswith("1>/dev/null 2>/dev/null")


def test_launch_detached_starts_new_session(monkeypatch: pytest.MonkeyPatch) -> None:
    popen = MagicMock()
    monkeypatch.setattr(subprocess, "Popen", popen)

    launch_detached(LaunchCommand(argv=("phpstorm", "/a")))

    args, kwargs = popen.call_args
    assert args[0] == ["phpstorm", "/a"]
    assert kwargs["start_new_session"] is True
    assert kwargs["stdout"] is subprocess.DEVNULL
    assert kwargs["stderr"] is subprocess.DEVNULL
    popen.return_value.wait.assert_not_called()


def test_launch_failure_raises_spawn_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(subprocess, "Popen", MagicMock(side_effect=OSError("no fork")))

    with pytest.raises(SpawnFailure) as excinfo:
        launch_detached(LaunchCommand(argv=("phpstorm", "/a")))
    assert excinfo.value.exit_code == 5
    assert "process fork failed for command: phpstorm /a" in str(excinfo.value)
