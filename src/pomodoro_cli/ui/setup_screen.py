"""Interactive setup form: work length, break length and session count."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Input, Label, Static

from .render import COLOR_SUBTLE, COLOR_WORK, SETUP_HELP

SetupValues = tuple[str, str, str]

FIELDS = (
    ("work", "Work Duration:", "Work (e.g. 25, 30s)"),
    ("break", "Break Duration:", "Break (e.g. 5m)"),
    ("sessions", "Sessions:", "Sessions (e.g. 4)"),
)


class SetupScreen(Screen[SetupValues]):
    """Collects the three raw setup strings and dismisses with them."""

    BINDINGS = [
        Binding("tab", "move_focus(1)", "Next", show=False),
        Binding("down", "move_focus(1)", "Next", show=False),
        Binding("shift+tab", "move_focus(-1)", "Previous", show=False),
        Binding("up", "move_focus(-1)", "Previous", show=False),
    ]

    DEFAULT_CSS = f"""
    SetupScreen {{
        align: center middle;
    }}

    #setup-form {{
        width: 48;
        height: auto;
    }}

    #setup-title {{
        text-style: bold;
        color: {COLOR_WORK};
        margin-bottom: 1;
    }}

    .field-label {{
        color: {COLOR_SUBTLE};
    }}

    SetupScreen Input {{
        border: round {COLOR_SUBTLE};
        margin-bottom: 1;
    }}

    SetupScreen Input:focus {{
        border: round {COLOR_WORK};
    }}

    #setup-help {{
        color: {COLOR_SUBTLE};
        margin-top: 2;
    }}
    """

    def __init__(self, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.focus_index = 0

    def compose(self) -> ComposeResult:
        with Vertical(id="setup-form"):
            yield Static("POMODORO SETUP", id="setup-title")
            for field_id, label, placeholder in FIELDS:
                yield Label(label, classes="field-label")
                yield Input(placeholder=placeholder, id=f"{field_id}-input")
            yield Static(SETUP_HELP, id="setup-help", markup=False)

    @property
    def inputs(self) -> list[Input]:
        return list(self.query(Input))

    def on_mount(self) -> None:
        self.inputs[0].focus()

    def values(self) -> SetupValues:
        work, break_, sessions = (field.value for field in self.inputs)
        return work, break_, sessions

    def action_move_focus(self, step: int) -> None:
        """Move focus between fields, wrapping at either end."""
        inputs = self.inputs
        if self.focused in inputs:
            self.focus_index = inputs.index(self.focused)
        self.focus_index = (self.focus_index + step) % len(inputs)
        inputs[self.focus_index].focus()

    @on(Input.Submitted)
    def handle_submit(self, event: Input.Submitted) -> None:
        """Enter moves to the next field; on the last one it starts the timer."""
        inputs = self.inputs
        if event.input is inputs[-1]:
            self.dismiss(self.values())
        else:
            self.focus_index = inputs.index(event.input)
            self.action_move_focus(1)
