"""
Chord event - a stack of pitches sharing one duration.

A Chord owns its pitch list and its flags outright. Every mutator is
all-or-nothing: it returns True when the chord changed and False when
the change was refused, in which case nothing was touched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any

from score_events.constants import (
    C_MAJOR_CHORD,
    MAX_PITCH,
    MIN_PITCH,
    OCTAVE,
    DotState,
    ErrorMessages,
    NoteDuration,
    duration_name,
    spell_pitch,
)

logger = logging.getLogger(__name__)

# Printed after the pitches, in this order, when set
_ANNOTATIONS = ("staccato", "tenuto", "accent", "fermata", "tied", "slurred")


@dataclass(eq=False)
class Chord:
    """
    Several pitches sounding together for one duration.

    Pitches are MIDI-style numbers (0-126) kept in voicing order:
    index 0 is the bottom voice, but the list is never re-sorted.
    Duration is in ticks (see NoteDuration).

    Mutable and unhashable.
    """

    pitches: list[int] = field(default_factory=lambda: list(C_MAJOR_CHORD))
    duration: int = int(NoteDuration.QUARTER)

    # Duration modifiers
    triplet: bool = False
    dotted: bool = False
    double_dotted: bool = False

    # Articulation and phrasing
    staccato: bool = False
    tenuto: bool = False
    accent: bool = False
    fermata: bool = False
    tied: bool = False
    slurred: bool = False

    def __post_init__(self) -> None:
        self.pitches = list(self.pitches)
        self.duration = int(self.duration)
        for pitch in self.pitches:
            if not MIN_PITCH <= pitch <= MAX_PITCH:
                raise ValueError(
                    ErrorMessages.PITCH_OUT_OF_RANGE.format(
                        low=MIN_PITCH, high=MAX_PITCH, pitch=pitch
                    )
                )
        if self.duration < 0:
            raise ValueError(ErrorMessages.DURATION_NEGATIVE.format(duration=self.duration))
        if self.double_dotted and not self.dotted:
            raise ValueError(ErrorMessages.DOUBLE_DOTTED_WITHOUT_DOT)

    # ------------------------------------------------------------------
    # Duration modifiers
    # ------------------------------------------------------------------

    def dot(self) -> bool:
        """
        Add a dot.

        The first dot makes the chord 3/2 as long. A second dot extends the
        dotted value by 7/6, so two dots give 7/4 of the undotted duration.

        Returns:
            Whether the chord was dotted
        """
        if not self.dotted:
            if self.duration == NoteDuration.ONE_TWENTY_EIGHTH:
                logger.debug(f"Cannot dot {self.duration} ticks: finest subdivision")
                return False
            self.dotted = True
            self.duration = self.duration * 3 // 2
            return True

        if not self.double_dotted:
            if self.duration == NoteDuration.DOTTED_SIXTY_FOURTH:
                logger.debug(f"Cannot add a second dot to {self.duration} ticks")
                return False
            self.double_dotted = True
            self.duration = self.duration // 6 * 7
            return True

        logger.debug("Cannot dot: chord is already double dotted")
        return False

    def double_dot(self) -> bool:
        """
        Add two dots at once, making the chord 7/4 as long.

        Only an undotted chord can be double dotted this way.

        Returns:
            Whether the chord was double dotted
        """
        if self.dotted:
            logger.debug("Cannot double dot: chord is already dotted")
            return False
        if self.duration in (NoteDuration.ONE_TWENTY_EIGHTH, NoteDuration.SIXTY_FOURTH):
            logger.debug(f"Cannot double dot {self.duration} ticks: too fine")
            return False
        self.dotted = True
        self.double_dotted = True
        self.duration = self.duration // 4 * 7
        return True

    def put_in_triplet(self) -> bool:
        """
        Put the chord in a triplet, making it 2/3 as long.

        Triplets don't nest; a chord already in a triplet is refused.

        Returns:
            Whether the chord was put in a triplet
        """
        if self.triplet:
            logger.debug("Cannot put chord in triplet: already in one")
            return False
        self.triplet = True
        self.duration = self.duration // 3 * 2
        return True

    @property
    def dot_state(self) -> DotState:
        """The dot flags as a single state."""
        if self.double_dotted:
            return DotState.DOUBLE_DOTTED
        if self.dotted:
            return DotState.DOTTED
        return DotState.UNDOTTED

    @property
    def duration_name(self) -> str | None:
        """Name of the duration if it is a table value, e.g. "dotted quarter"."""
        return duration_name(self.duration)

    # ------------------------------------------------------------------
    # Transposition and inversion
    # ------------------------------------------------------------------

    def add_octave(self) -> bool:
        """
        Move every pitch up an octave.

        Returns:
            Whether the chord moved (False if empty or the top would pass 126)
        """
        if not self.pitches or max(self.pitches) + OCTAVE > MAX_PITCH:
            logger.debug(f"Cannot raise {self.pitches} an octave")
            return False
        self.pitches = [pitch + OCTAVE for pitch in self.pitches]
        return True

    def drop_octave(self) -> bool:
        """
        Move every pitch down an octave.

        Returns:
            Whether the chord moved (False if empty or the bottom would go below 0)
        """
        if not self.pitches or min(self.pitches) - OCTAVE < MIN_PITCH:
            logger.debug(f"Cannot drop {self.pitches} an octave")
            return False
        self.pitches = [pitch - OCTAVE for pitch in self.pitches]
        return True

    def invert(self) -> bool:
        """
        Move the bottom voice up an octave to become the top voice.

        The bottom voice is the first pitch in the list, not the lowest value.

        [60, 64, 67] -> [64, 67, 72]

        Returns:
            Whether the chord was inverted
        """
        if len(self.pitches) < 2 or self.pitches[0] + OCTAVE > MAX_PITCH:
            logger.debug(f"Cannot invert {self.pitches}")
            return False
        bottom = self.pitches.pop(0)
        self.pitches.append(bottom + OCTAVE)
        return True

    # ------------------------------------------------------------------
    # Comparison and conversion
    # ------------------------------------------------------------------

    def equals(self, other: object) -> bool:
        """
        Check whether another chord is musically identical.

        Pitches are compared in order, then every flag and the duration.
        Stops at the first difference.
        """
        if not isinstance(other, Chord):
            return False
        if len(self.pitches) != len(other.pitches):
            return False
        for mine, theirs in zip(self.pitches, other.pitches):
            if mine != theirs:
                return False
        for f in fields(self):
            if f.name == "pitches":
                continue
            if getattr(self, f.name) != getattr(other, f.name):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chord):
            return NotImplemented
        return self.equals(other)

    def copy(self) -> Chord:
        """Return an independent copy with its own pitch list."""
        return Chord(**self.to_dict())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        d: dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
        d["pitches"] = list(self.pitches)
        d["duration"] = int(self.duration)
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Chord:
        """Create from dictionary. Missing flags default to False."""
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in d.items() if key in names})

    def __str__(self) -> str:
        voices = " ".join(spell_pitch(pitch) for pitch in self.pitches) or "(empty)"
        length = self.duration_name or f"{self.duration} ticks"
        marks = ["triplet"] if self.triplet else []
        marks += [name for name in _ANNOTATIONS if getattr(self, name)]
        if marks:
            return f"{voices} ({length}; {', '.join(marks)})"
        return f"{voices} ({length})"
