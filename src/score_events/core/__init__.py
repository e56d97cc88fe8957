"""
Core event primitives.

- Event: The capability shared by every timed event in a score
- Chord: Several pitches sounding together for one duration
"""

from score_events.core.chord import Chord
from score_events.core.event import Event

__all__ = [
    "Chord",
    "Event",
]
