"""Fire-and-forget phase alerts: desktop notification plus a sound.

Nothing here reports back to the timer. Notification calls run on a detached
worker thread and the Windows sound plays in a detached process, so a slow or
broken notification backend can never hold up the next tick. Failures are
logged and otherwise ignored.
"""

from __future__ import annotations

import logging
import subprocess
import sys
import threading
from collections.abc import Callable
from typing import Protocol

from plyer import notification

from pomodoro_cli.utils.ui.console import get_console

logger = logging.getLogger(__name__)

WINDOWS_SOUND_COMMAND = [
    "powershell",
    "-c",
    "(New-Object Media.SoundPlayer "
    "'C:\\Windows\\Media\\Windows Notify System Generic.wav').PlaySync()",
]


class Notifier(Protocol):
    """What the timer core needs from the alerting side."""

    def notify(self, title: str, message: str) -> None: ...

    def alert_sound(self) -> None: ...


class DesktopNotifier:
    """Sends system notifications via plyer and plays an alert sound."""

    def __init__(
        self,
        *,
        sound: bool = True,
        notifications: bool = True,
        app_name: str = "Pomodoro",
        timeout: int = 5,
        bell: Callable[[], None] | None = None,
    ):
        self.sound = sound
        self.notifications = notifications
        self.app_name = app_name
        self.timeout = timeout
        self.bell = bell

    def notify(self, title: str, message: str) -> None:
        if not self.notifications:
            return
        self._detach(self._send_notification, title, message)

    def alert_sound(self) -> None:
        if not self.sound:
            return
        if sys.platform == "win32":
            self._play_windows_sound()
            return
        try:
            if self.bell is not None:
                self.bell()
            else:
                get_console().bell()
        except Exception:
            logger.debug("Terminal bell failed", exc_info=True)

    def _send_notification(self, title: str, message: str) -> None:
        notification.notify(
            title=title,
            message=message,
            app_name=self.app_name,
            timeout=self.timeout,
        )

    def _play_windows_sound(self) -> None:
        try:
            subprocess.Popen(
                WINDOWS_SOUND_COMMAND,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
            )
        except OSError:
            logger.debug("Could not launch alert sound", exc_info=True)

    @staticmethod
    def _detach(func: Callable[..., None], *args: object) -> None:
        def _run() -> None:
            try:
                func(*args)
            except Exception:
                logger.debug("Alert dispatch failed", exc_info=True)

        threading.Thread(target=_run, name="pomodoro-alert", daemon=True).start()
