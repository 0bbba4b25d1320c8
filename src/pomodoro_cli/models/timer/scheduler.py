"""Tick scheduling contract.

A scheduler delivers exactly one delayed tick per ``arm`` call, carrying the
generation it was armed with. There is no cancel: consumers compare the tag
with the live generation on delivery and drop mismatches.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol

TICK_INTERVAL = 1.0  # seconds between ticks
TICK = timedelta(seconds=TICK_INTERVAL)


class TickScheduler(Protocol):
    """Anything that can deliver a tagged tick one interval from now."""

    def arm(self, generation: int) -> None:
        """Schedule a single tick tagged with ``generation``."""
        ...
