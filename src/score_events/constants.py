"""
Constants and enums for chord events.

No magic numbers - durations are named tick values, pitch bounds are named.
"""

from enum import Enum, IntEnum

# Ticks per quarter note - same resolution the MIDI layer uses
TICKS_PER_BEAT = 480

# Pitch range a chord may occupy
MIN_PITCH = 0
MAX_PITCH = 126
OCTAVE = 12

# Default voicing for a new chord (C4 E4 G4)
C_MAJOR_CHORD: tuple[int, ...] = (60, 64, 67)


class NoteDuration(IntEnum):
    """
    Named note durations in ticks.

    Every value is distinct so no member aliases another.
    """

    WHOLE = 1920
    HALF = 960
    QUARTER = 480
    EIGHTH = 240
    SIXTEENTH = 120
    THIRTY_SECOND = 60
    SIXTY_FOURTH = 30
    ONE_TWENTY_EIGHTH = 15  # Finest subdivision

    # Dotted (1.5x)
    DOTTED_WHOLE = 2880
    DOTTED_HALF = 1440
    DOTTED_QUARTER = 720
    DOTTED_EIGHTH = 360
    DOTTED_SIXTEENTH = 180
    DOTTED_THIRTY_SECOND = 90
    DOTTED_SIXTY_FOURTH = 45

    # Double dotted (1.75x)
    DOUBLE_DOTTED_HALF = 1680
    DOUBLE_DOTTED_QUARTER = 840
    DOUBLE_DOTTED_EIGHTH = 420

    # Triplets (2/3x)
    QUARTER_TRIPLET = 320
    EIGHTH_TRIPLET = 160
    SIXTEENTH_TRIPLET = 80
    THIRTY_SECOND_TRIPLET = 40


class DotState(str, Enum):
    """How many dots a duration carries."""

    UNDOTTED = "undotted"
    DOTTED = "dotted"
    DOUBLE_DOTTED = "double_dotted"


_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


def duration_name(ticks: int) -> str | None:
    """
    Get the human-readable name for a tick value.

    Args:
        ticks: Duration in ticks

    Returns:
        Name like "dotted quarter", or None if the value is not in the table
    """
    try:
        member = NoteDuration(ticks)
    except ValueError:
        return None
    return member.name.lower().replace("_", " ")


def spell_pitch(pitch: int) -> str:
    """Spell a pitch number in scientific notation. 60 = C4."""
    octave = pitch // OCTAVE - 1
    return f"{_SHARP_NAMES[pitch % OCTAVE]}{octave}"


class ErrorMessages:
    """Standardized error messages."""

    PITCH_OUT_OF_RANGE = "Pitch must be {low}-{high}, got {pitch}"
    DURATION_NEGATIVE = "Duration must be non-negative, got {duration}"
    DOUBLE_DOTTED_WITHOUT_DOT = "A double dotted chord must also be dotted"
