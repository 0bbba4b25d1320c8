"""Custom Textual messages for the timer."""

from __future__ import annotations

from textual.message import Message


class TickElapsed(Message):
    """One tick interval has passed for the given generation."""

    def __init__(self, generation: int) -> None:
        self.generation = generation
        super().__init__()
