"""Tick scheduler backed by Textual timers."""

from __future__ import annotations

from textual.app import App

from pomodoro_cli.models.timer.scheduler import TICK_INTERVAL

from .messages import TickElapsed


class AppTickScheduler:
    """Arms one-shot Textual timers that post :class:`TickElapsed` to the app.

    Delivery goes through the app's message queue, so ticks are handled one at
    a time alongside key events. Timers are never cancelled; stale ones are
    filtered by generation when they arrive.
    """

    def __init__(self, app: App, interval: float = TICK_INTERVAL) -> None:
        self.app = app
        self.interval = interval

    def arm(self, generation: int) -> None:
        self.app.set_timer(
            self.interval,
            lambda: self.app.post_message(TickElapsed(generation)),
            name=f"tick-{generation}",
        )
