"""Timer session state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import NamedTuple


class Phase(str, Enum):
    """Kind of interval currently counting down."""

    WORK = "work"
    BREAK = "break"


class RunState(str, Enum):
    """Whether time is advancing."""

    RUNNING = "running"
    PAUSED = "paused"


class TimerView(NamedTuple):
    """Read-only snapshot handed to the renderer."""

    phase: Phase
    run_state: RunState
    remaining: timedelta
    session_index: int
    session_total: int


@dataclass
class TimerSession:
    """The single live timer run.

    ``work_length``/``break_length``/``session_total`` are fixed for the run;
    only ``remaining``, ``phase``, ``run_state``, ``session_index`` and
    ``generation`` change while it is going. ``generation`` tags scheduled
    ticks: a tick is only honoured if it carries the current value.
    """

    work_length: timedelta
    break_length: timedelta
    session_total: int
    remaining: timedelta
    phase: Phase = Phase.WORK
    run_state: RunState = RunState.RUNNING
    session_index: int = 1
    generation: int = 0

    @property
    def is_running(self) -> bool:
        return self.run_state is RunState.RUNNING

    def length_of(self, phase: Phase) -> timedelta:
        """Full configured length of ``phase``."""
        return self.work_length if phase is Phase.WORK else self.break_length

    def view(self) -> TimerView:
        return TimerView(
            phase=self.phase,
            run_state=self.run_state,
            remaining=self.remaining,
            session_index=self.session_index,
            session_total=self.session_total,
        )
