"""Phase transitions and session counting."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .state import Phase, RunState, TimerSession

if TYPE_CHECKING:
    from pomodoro_cli.services.notifier import Notifier

logger = logging.getLogger(__name__)

ALERT_TITLE = "Pomodoro"
WORK_FINISHED = "Work session finished! Time for a break."
BREAK_FINISHED = "Break finished! Back to work."
ALL_SESSIONS_COMPLETE = "All sessions completed!"


class SessionController:
    """Moves a session from the phase that just ended to the next one.

    Work is always followed by Break. A Break is followed by the next Work
    session, unless it closed the last configured session, in which case the
    run is complete and nothing further is scheduled.
    """

    def __init__(self, notifier: Notifier, title: str = ALERT_TITLE):
        self.notifier = notifier
        self.title = title

    def advance(self, session: TimerSession) -> bool:
        """Run one phase transition. Returns True when every session is done.

        On False the session has moved to its next phase, running, under a new
        generation; the caller arms that generation's first tick.
        """
        # Ticks armed for the phase that just ended must not touch the next one.
        session.generation += 1
        ended = session.phase

        if ended is Phase.WORK:
            self._alert(WORK_FINISHED)
            session.phase = Phase.BREAK
        else:
            self._alert(BREAK_FINISHED)
            session.session_index += 1
            if session.session_index > session.session_total:
                logger.info(
                    "All %d sessions complete (generation %d)",
                    session.session_total,
                    session.generation,
                )
                self._notify(ALL_SESSIONS_COMPLETE)
                return True
            session.phase = Phase.WORK

        session.remaining = session.length_of(session.phase)

        # Pausing only ever applies to the phase it happened in.
        session.run_state = RunState.RUNNING
        logger.info(
            "%s -> %s, session %d/%d, generation %d",
            ended.value,
            session.phase.value,
            session.session_index,
            session.session_total,
            session.generation,
        )
        return False

    def _alert(self, message: str) -> None:
        try:
            self.notifier.alert_sound()
        except Exception:
            logger.debug("Alert sound dispatch failed", exc_info=True)
        self._notify(message)

    def _notify(self, message: str) -> None:
        try:
            self.notifier.notify(self.title, message)
        except Exception:
            logger.debug("Notification dispatch failed: %s", message, exc_info=True)
