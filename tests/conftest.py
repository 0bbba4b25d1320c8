"""Shared test fixtures and configuration.

Provides a hand-driven tick scheduler, a recording notifier and isolation
from the real config/log directories.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from pomodoro_cli.models.timer.machine import TimerStateMachine


class ManualScheduler:
    """Records every arm() call; tests deliver the ticks themselves."""

    def __init__(self) -> None:
        self.armed: list[int] = []

    def arm(self, generation: int) -> None:
        self.armed.append(generation)

    @property
    def last(self) -> int | None:
        return self.armed[-1] if self.armed else None


class RecordingNotifier:
    """Collects notifications and sound requests instead of dispatching them."""

    def __init__(self) -> None:
        self.notifications: list[tuple[str, str]] = []
        self.sounds = 0

    def notify(self, title: str, message: str) -> None:
        self.notifications.append((title, message))

    def alert_sound(self) -> None:
        self.sounds += 1

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.notifications]


# ---------------------------------------------------------------------------
# Timer fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def completions() -> list[bool]:
    return []


@pytest.fixture()
def run_ticks():
    """Deliver current-generation ticks the way a live scheduler would."""

    def _run(machine: TimerStateMachine, count: int) -> None:
        for _ in range(count):
            machine.on_tick(machine.session.generation)

    return _run


@pytest.fixture()
def machine(scheduler, notifier, completions) -> TimerStateMachine:
    return TimerStateMachine(
        scheduler, notifier, on_complete=lambda: completions.append(True)
    )


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Keep config and log files inside tmp_path for every test."""
    import pomodoro_cli.utils.logger as logger_mod
    from pomodoro_cli.config import get_config_service

    config_dir = tmp_path / "config"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("pomodoro_cli").handlers.clear()

    with patch("pomodoro_cli.config.user_config_dir", return_value=str(config_dir)):
        with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
            yield tmp_path

    get_config_service.cache_clear()
    logger_mod._logger = None
    for handler in logging.getLogger("pomodoro_cli").handlers:
        handler.close()
    logging.getLogger("pomodoro_cli").handlers.clear()
