"""
Event capability - what a score treats chords, notes and rests as.

Events are structural: anything with a tick duration and an equality
check can sit in an event sequence.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Event(Protocol):
    """A timed musical event."""

    duration: int

    def equals(self, other: object) -> bool:
        """Whether this event is musically identical to another."""
        ...
