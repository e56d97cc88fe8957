"""
Pytest configuration and shared fixtures.
"""

import pytest

from score_events.constants import NoteDuration
from score_events.core import Chord


@pytest.fixture
def c_major() -> Chord:
    """A default C major triad at a quarter note."""
    return Chord()


@pytest.fixture
def annotated_chord() -> Chord:
    """A chord with every annotation set."""
    return Chord(
        [48, 55, 64],
        NoteDuration.HALF,
        staccato=True,
        tenuto=True,
        accent=True,
        fermata=True,
        tied=True,
        slurred=True,
    )
