"""Timer state machine.

All mutations of the live :class:`TimerSession` go through here, one event at
a time: ticks from the scheduler, key commands from the UI, and the start of
a run. Ticks are tagged with the generation they were armed for; a tick whose
tag no longer matches is a leftover from before a skip, transition or restart
and is dropped without touching any state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import timedelta
from typing import TYPE_CHECKING

from .controller import SessionController
from .duration import DEFAULT_SESSIONS, ZERO, RunSettings
from .scheduler import TICK, TickScheduler
from .state import Phase, RunState, TimerSession

if TYPE_CHECKING:
    from pomodoro_cli.services.notifier import Notifier

logger = logging.getLogger(__name__)

ADJUST_STEP = timedelta(minutes=1)


class TimerStateMachine:
    """Owns the timer session and applies events to it.

    At most one tick is outstanding for the live generation: the next one is
    armed only once the previous one has been delivered.
    """

    def __init__(
        self,
        scheduler: TickScheduler,
        notifier: Notifier,
        controller: SessionController | None = None,
        on_complete: Callable[[], None] | None = None,
    ):
        self.scheduler = scheduler
        self.notifier = notifier
        self.controller = controller or SessionController(notifier)
        self.on_complete = on_complete
        self.session: TimerSession | None = None
        self.completed = False
        self._in_flight: int | None = None

    @property
    def active(self) -> bool:
        """True while a run exists and has not completed."""
        return self.session is not None and not self.completed

    @property
    def tick_in_flight(self) -> bool:
        """Whether a tick for the live generation is still due to arrive."""
        return self.session is not None and self._in_flight == self.session.generation

    def start(
        self,
        work_length: timedelta,
        break_length: timedelta,
        session_total: int,
    ) -> TimerSession:
        """Begin a new run in the Work phase and arm its first tick.

        The generation continues from any previous run so ticks still in
        flight from it can never match.
        """
        if session_total < 1:
            session_total = DEFAULT_SESSIONS

        previous = self.session.generation if self.session is not None else 0
        self.session = TimerSession(
            work_length=work_length,
            break_length=break_length,
            session_total=session_total,
            remaining=work_length,
            phase=Phase.WORK,
            run_state=RunState.RUNNING,
            session_index=1,
            generation=previous + 1,
        )
        self.completed = False
        logger.info(
            "Run started: work=%s break=%s sessions=%d generation=%d",
            work_length,
            break_length,
            session_total,
            self.session.generation,
        )
        self._arm()
        return self.session

    def start_with(self, settings: RunSettings) -> TimerSession:
        return self.start(
            settings.work_length, settings.break_length, settings.session_total
        )

    def restart(self) -> None:
        """Start the current run over from session 1 with the same settings."""
        if self.session is None:
            return
        logger.info("Restarting run")
        self.start(
            self.session.work_length,
            self.session.break_length,
            self.session.session_total,
        )

    def on_tick(self, generation: int) -> None:
        """Consume one tick armed for ``generation``."""
        session = self.session
        if not self.active or generation != session.generation:
            logger.debug("Dropped stale tick (generation %d)", generation)
            return

        self._in_flight = None
        if not session.is_running or session.remaining <= ZERO:
            return

        session.remaining = max(session.remaining - TICK, ZERO)
        if session.remaining == ZERO:
            self._transition()
            return
        self._arm()

    def on_toggle_pause(self) -> None:
        if not self.active:
            return
        session = self.session
        if session.is_running:
            session.run_state = RunState.PAUSED
            logger.info("Paused with %s remaining", session.remaining)
            return

        session.run_state = RunState.RUNNING
        logger.info("Resumed with %s remaining", session.remaining)
        # A tick armed before the pause that hasn't landed yet carries on the
        # countdown; otherwise start a fresh one-second window from here.
        if not self.tick_in_flight:
            self._arm()

    def on_skip(self) -> None:
        """End the current phase now, whatever is left on it."""
        if not self.active:
            return
        logger.info("Skipping %s phase", self.session.phase.value)
        self._transition()

    def on_extend(self) -> None:
        if not self.active:
            return
        self.session.remaining += ADJUST_STEP

    def on_shrink(self) -> None:
        """Take a minute off, never going below one minute."""
        if not self.active:
            return
        session = self.session
        if session.remaining > ADJUST_STEP:
            session.remaining = max(session.remaining - ADJUST_STEP, ADJUST_STEP)

    def _arm(self) -> None:
        self._in_flight = self.session.generation
        self.scheduler.arm(self.session.generation)

    def _transition(self) -> None:
        if self.controller.advance(self.session):
            self.completed = True
            self._in_flight = None
            if self.on_complete:
                self.on_complete()
            return
        self._arm()
