"""Rich renderables for the timer display."""

from __future__ import annotations

from datetime import timedelta

from rich.align import Align
from rich.console import Group
from rich.text import Text

from pomodoro_cli.models.timer.state import Phase, RunState, TimerView

COLOR_WORK = "#0087ff"
COLOR_BREAK = "#ffd700"
COLOR_SUBTLE = "#626262"

DIGIT_HEIGHT = 5

BIG_DIGITS: dict[str, tuple[str, ...]] = {
    "0": ("██████", "█    █", "█    █", "█    █", "██████"),
    "1": ("  ██  ", "  ██  ", "  ██  ", "  ██  ", "  ██  "),
    "2": ("██████", "     █", "██████", "█     ", "██████"),
    "3": ("██████", "     █", "██████", "     █", "██████"),
    "4": ("█    █", "█    █", "██████", "     █", "     █"),
    "5": ("██████", "█     ", "██████", "     █", "██████"),
    "6": ("██████", "█     ", "██████", "█    █", "██████"),
    "7": ("██████", "     █", "     █", "     █", "     █"),
    "8": ("██████", "█    █", "██████", "█    █", "██████"),
    "9": ("██████", "█    █", "██████", "     █", "██████"),
    ":": ("      ", "  ██  ", "      ", "  ██  ", "      "),
}

TIMER_HELP = "[SPACE] Pause  •  [s] Skip  •  [↑/↓] +/- 1m  •  [r] Restart  •  [q] Quit"
SETUP_HELP = "[TAB] Switch  •  [ENTER] Start  •  [q] Quit"


def format_clock(remaining: timedelta) -> str:
    """``MM:SS`` for ``remaining``; minutes are not wrapped into hours."""
    total = max(int(remaining.total_seconds()), 0)
    minutes, seconds = divmod(total, 60)
    return f"{minutes:02d}:{seconds:02d}"


def render_big_time(remaining: timedelta, color: str) -> Text:
    """Draw the clock in five-row block digits."""
    lines = [""] * DIGIT_HEIGHT
    for char in format_clock(remaining):
        block = BIG_DIGITS.get(char)
        if block is None:
            continue
        for row in range(DIGIT_HEIGHT):
            lines[row] += block[row] + " "
    return Text("\n".join(lines), style=color)


def phase_color(phase: Phase) -> str:
    return COLOR_BREAK if phase is Phase.BREAK else COLOR_WORK


def phase_title(view: TimerView) -> str:
    if view.phase is Phase.BREAK:
        return "BREAK TIME"
    return f"WORK SESSION {view.session_index}/{view.session_total}"


def render_timer(view: TimerView) -> Group:
    """Title, block clock, run state and key help, centred."""
    color = phase_color(view.phase)
    status = "PAUSED" if view.run_state is RunState.PAUSED else "RUNNING"
    return Group(
        Align.center(Text(phase_title(view), style=f"bold {color}")),
        Text(""),
        Align.center(render_big_time(view.remaining, color)),
        Text(""),
        Align.center(Text(status, style=COLOR_SUBTLE)),
        Text("\n\n"),
        Align.center(Text(TIMER_HELP, style=COLOR_SUBTLE)),
    )
