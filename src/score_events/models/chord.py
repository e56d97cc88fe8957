"""
Chord model - the validated, serializable shape of a chord event.

The core Chord is a plain mutable object. ChordModel is what crosses a
boundary: frozen, validated, and JSON-friendly.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from score_events.constants import MAX_PITCH, MIN_PITCH, ErrorMessages, NoteDuration
from score_events.core.chord import Chord

Pitch = Annotated[int, Field(ge=MIN_PITCH, le=MAX_PITCH)]


class ChordModel(BaseModel):
    """
    A chord event as data.

    Mirrors every field of Chord. Round-trips through from_chord/to_chord.
    """

    pitches: list[Pitch] = Field(..., description="Pitch numbers in voicing order (0-126)")
    duration: int = Field(int(NoteDuration.QUARTER), ge=0, description="Duration in ticks")

    triplet: bool = Field(False, description="Duration is in a triplet")
    dotted: bool = Field(False, description="Duration carries a dot")
    double_dotted: bool = Field(False, description="Duration carries a second dot")

    staccato: bool = Field(False, description="Played short")
    tenuto: bool = Field(False, description="Held full value")
    accent: bool = Field(False, description="Accented")
    fermata: bool = Field(False, description="Held beyond value")
    tied: bool = Field(False, description="Tied to the next event")
    slurred: bool = Field(False, description="Slurred to the next event")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_dots(self) -> ChordModel:
        if self.double_dotted and not self.dotted:
            raise ValueError(ErrorMessages.DOUBLE_DOTTED_WITHOUT_DOT)
        return self

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordModel:
        """Snapshot a chord."""
        return cls(**chord.to_dict())

    def to_chord(self) -> Chord:
        """Build a new, independently mutable chord."""
        return Chord.from_dict(self.model_dump())
