"""Timer core - session state, tick generations and phase transitions."""

from .controller import SessionController
from .duration import RunSettings, parse_duration, parse_session_count
from .machine import TimerStateMachine
from .scheduler import TICK_INTERVAL, TickScheduler
from .state import Phase, RunState, TimerSession, TimerView

__all__ = [
    "Phase",
    "RunState",
    "RunSettings",
    "SessionController",
    "TICK_INTERVAL",
    "TickScheduler",
    "TimerSession",
    "TimerStateMachine",
    "TimerView",
    "parse_duration",
    "parse_session_count",
]
