"""Pomodoro Textual application."""

from __future__ import annotations

import logging
from typing import Any

from textual.app import App
from textual.binding import Binding

from pomodoro_cli.config import PomodoroConfig
from pomodoro_cli.models.timer.controller import SessionController
from pomodoro_cli.models.timer.duration import RunSettings
from pomodoro_cli.models.timer.machine import TimerStateMachine
from pomodoro_cli.models.timer.scheduler import TickScheduler
from pomodoro_cli.services.notifier import DesktopNotifier, Notifier
from pomodoro_cli.utils.exit_codes import SUCCESS

from .messages import TickElapsed
from .scheduler import AppTickScheduler
from .setup_screen import SetupScreen, SetupValues
from .timer_screen import TimerScreen

logger = logging.getLogger(__name__)


class PomodoroApp(App[int]):
    """Runs the setup form (unless settings were given) and then the timer.

    The app owns the single :class:`TimerStateMachine`. Ticks, key commands
    and setup completion all arrive through Textual's message queue, so the
    machine only ever sees one event at a time.
    """

    TITLE = "Pomodoro"

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
    ]

    CSS = """
    Screen {
        background: $background;
    }
    """

    def __init__(
        self,
        settings: RunSettings | None = None,
        *,
        config: PomodoroConfig | None = None,
        notifier: Notifier | None = None,
        scheduler: TickScheduler | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.config = config or PomodoroConfig()
        self.initial_settings = settings
        alerts = self.config.alerts
        self.notifier = notifier or DesktopNotifier(
            sound=alerts.sound,
            notifications=alerts.notifications,
            app_name=alerts.title,
            timeout=alerts.timeout,
            bell=self.bell,
        )
        self.machine = TimerStateMachine(
            scheduler or AppTickScheduler(self),
            self.notifier,
            controller=SessionController(self.notifier, title=alerts.title),
            on_complete=self._on_sessions_complete,
        )

    def on_mount(self) -> None:
        if self.initial_settings is not None:
            self.begin(self.initial_settings)
        else:
            self.push_screen(SetupScreen(), callback=self._on_setup_complete)

    def begin(self, settings: RunSettings) -> None:
        """Start the run and switch to the timer display."""
        self.machine.start_with(settings)
        self.push_screen(TimerScreen(self.machine))

    def _on_setup_complete(self, values: SetupValues | None) -> None:
        if values is None:
            return
        work, break_, sessions = values
        timer = self.config.timer
        self.begin(
            RunSettings.from_text(
                work,
                break_,
                sessions,
                work_default=timer.setup_work_minutes,
                break_default=timer.break_minutes,
                sessions_default=timer.sessions,
            )
        )

    def on_tick_elapsed(self, message: TickElapsed) -> None:
        self.machine.on_tick(message.generation)
        if isinstance(self.screen, TimerScreen):
            self.screen.refresh_view()

    def _on_sessions_complete(self) -> None:
        logger.info("Exiting after completing all sessions")
        self.exit(SUCCESS)
