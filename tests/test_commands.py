from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shutdown_timer import commands  # noqa: E402


@pytest.fixture
def calls(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    recorded: list[list[str]] = []

    def fake_run(command: list[str]) -> subprocess.CompletedProcess:
        recorded.append(command)
        return subprocess.CompletedProcess(command, 0)

    monkeypatch.setattr(commands.subprocess, "run", fake_run)
    return recorded


def test_build_shutdown_command() -> None:
    assert commands.build_shutdown_command(4854) == ["shutdown", "/s", "/t", "4854"]
    assert commands.build_abort_command() == ["shutdown", "/a"]


@pytest.mark.parametrize("delay", [-1, 1.5, "10", True])
def test_build_shutdown_command_rejects_invalid_delay(delay: object) -> None:
    with pytest.raises(ValueError):
        commands.build_shutdown_command(delay)


def test_schedule_shutdown_runs_command(calls: list[list[str]]) -> None:
    result = commands.schedule_shutdown(90)
    assert calls == [["shutdown", "/s", "/t", "90"]]
    assert result.returncode == 0


def test_cancel_shutdown_runs_command(calls: list[list[str]]) -> None:
    commands.cancel_shutdown()
    assert calls == [["shutdown", "/a"]]


def test_dry_run_does_not_execute(calls: list[list[str]], caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO", logger="shutdown_timer.commands")
    assert commands.schedule_shutdown(30, dry_run=True) is None
    assert commands.cancel_shutdown(dry_run=True) is None
    assert calls == []
    assert "shutdown /s /t 30" in caplog.text


def test_non_zero_exit_is_logged(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setattr(
        commands.subprocess, "run", lambda command: subprocess.CompletedProcess(command, 1116)
    )
    result = commands.cancel_shutdown()
    assert result.returncode == 1116
    assert "exited with status 1116" in caplog.text


def test_spawn_failure_propagates(monkeypatch: pytest.MonkeyPatch) -> None:
    def missing(command: list[str]) -> None:
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(commands.subprocess, "run", missing)
    with pytest.raises(FileNotFoundError):
        commands.schedule_shutdown(10)
