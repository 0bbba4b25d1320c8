"""Tests for the shared rich console helper."""

from __future__ import annotations

from rich.console import Console

from pomodoro_cli.utils.ui.console import get_console


def test_returns_cached_console():
    assert get_console() is get_console()
    assert isinstance(get_console(), Console)


def test_stderr_console_is_separate():
    err = get_console(stderr=True)

    assert err is not get_console()
    assert err.stderr is True
    assert get_console().stderr is False
