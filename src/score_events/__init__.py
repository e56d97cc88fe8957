"""
Chord events for score models.

A Chord is a stack of pitches with one rhythmic duration and a set of
articulation and phrasing flags. Durations are ticks from NoteDuration.
"""

from score_events.constants import (
    C_MAJOR_CHORD,
    MAX_PITCH,
    MIN_PITCH,
    TICKS_PER_BEAT,
    DotState,
    NoteDuration,
)
from score_events.core import Chord, Event
from score_events.models import ChordModel

__all__ = [
    # Events
    "Chord",
    "Event",
    "ChordModel",
    # Constants
    "C_MAJOR_CHORD",
    "MAX_PITCH",
    "MIN_PITCH",
    "TICKS_PER_BEAT",
    "DotState",
    "NoteDuration",
]
