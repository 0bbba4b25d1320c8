"""Lenient parsing of duration and session-count text.

Every parser here is total: unparseable input resolves to a documented
default instead of raising. Accepted duration forms, tried in order:

* empty / whitespace            -> default minutes
* unit-suffixed groups          -> ``30s``, ``5m``, ``1h30m``, ``1.5h``, ``250ms``
* bare integer                  -> that many minutes (``7`` == 7 minutes)
* anything else                 -> default minutes
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

DEFAULT_WORK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5
DEFAULT_SESSIONS = 4

ZERO = timedelta(0)

_UNIT_SECONDS: dict[str, float] = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 1e-3,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ns": 1e-9,
}

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_UNIT = r"(?:ns|us|µs|μs|ms|h|m|s)"
_GROUP_RE = re.compile(rf"({_NUMBER})({_UNIT})")
_STRUCTURED_RE = re.compile(rf"[+-]?(?:{_NUMBER}{_UNIT})+")
_INTEGER_RE = re.compile(r"[+-]?\d+")


def _parse_structured(text: str) -> timedelta | None:
    if not _STRUCTURED_RE.fullmatch(text):
        return None

    seconds = sum(
        float(number) * _UNIT_SECONDS[unit] for number, unit in _GROUP_RE.findall(text)
    )
    try:
        total = timedelta(seconds=seconds)
    except OverflowError:
        return None
    return -total if text.startswith("-") else total


def _parse_bare_minutes(text: str) -> timedelta | None:
    if not _INTEGER_RE.fullmatch(text):
        return None
    try:
        return timedelta(minutes=int(text))
    except (OverflowError, ValueError):
        return None


_DURATION_PARSERS: tuple[Callable[[str], timedelta | None], ...] = (
    _parse_structured,
    _parse_bare_minutes,
)


def parse_duration(text: str | None, default_minutes: int) -> timedelta:
    """Parse free-form duration text, falling back to ``default_minutes``.

    Zero or negative results also fall back, since a phase with no time in it
    would never be ticked down.
    """
    fallback = timedelta(minutes=default_minutes)
    text = (text or "").strip()
    if not text:
        return fallback

    for parser in _DURATION_PARSERS:
        value = parser(text)
        if value is not None:
            return value if value > ZERO else fallback
    return fallback


def parse_session_count(text: str | None, default: int = DEFAULT_SESSIONS) -> int:
    """Parse a session count; non-integers and values below 1 become ``default``."""
    text = (text or "").strip()
    if not _INTEGER_RE.fullmatch(text):
        return default
    try:
        count = int(text)
    except ValueError:
        return default
    return count if count >= 1 else default


@dataclass(frozen=True)
class RunSettings:
    """The three values a run is started with."""

    work_length: timedelta
    break_length: timedelta
    session_total: int

    @classmethod
    def from_text(
        cls,
        work: str | None,
        break_: str | None,
        sessions: str | None,
        *,
        work_default: int = DEFAULT_WORK_MINUTES,
        break_default: int = DEFAULT_BREAK_MINUTES,
        sessions_default: int = DEFAULT_SESSIONS,
    ) -> RunSettings:
        """Build settings from raw user text (CLI arguments or setup fields)."""
        return cls(
            work_length=parse_duration(work, work_default),
            break_length=parse_duration(break_, break_default),
            session_total=parse_session_count(sessions, sessions_default),
        )
