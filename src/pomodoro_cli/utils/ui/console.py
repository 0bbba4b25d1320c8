"""Console utilities for Pomodoro CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(highlight: bool = True, stderr: bool = False) -> Console:
    """Get a Rich Console for output outside the timer UI.

    ``stderr=True`` gives the console used for error lines, so they stay out
    of anything piping the version/help output.
    """
    return Console(highlight=highlight, stderr=stderr)
