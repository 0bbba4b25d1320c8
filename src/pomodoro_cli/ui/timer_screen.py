"""Running-timer screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Static

from pomodoro_cli.models.timer.machine import TimerStateMachine

from .render import render_timer


class TimerScreen(Screen):
    """Shows the live session and turns key presses into timer commands."""

    BINDINGS = [
        Binding("space", "toggle_pause", "Pause"),
        Binding("s", "skip", "Skip"),
        Binding("up", "extend", "+1m"),
        Binding("down", "shrink", "-1m"),
        Binding("r", "restart", "Restart"),
    ]

    DEFAULT_CSS = """
    TimerScreen {
        align: center middle;
    }

    #timer-display {
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, machine: TimerStateMachine, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.machine = machine

    def compose(self) -> ComposeResult:
        yield Static(id="timer-display")

    def on_mount(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        session = self.machine.session
        if session is None:
            return
        self.query_one("#timer-display", Static).update(render_timer(session.view()))

    def action_toggle_pause(self) -> None:
        self.machine.on_toggle_pause()
        self.refresh_view()

    def action_skip(self) -> None:
        self.machine.on_skip()
        self.refresh_view()

    def action_extend(self) -> None:
        self.machine.on_extend()
        self.refresh_view()

    def action_shrink(self) -> None:
        self.machine.on_shrink()
        self.refresh_view()

    def action_restart(self) -> None:
        self.machine.restart()
        self.refresh_view()
