"""
Tests for the ChordModel pydantic model.
"""

import pytest
from pydantic import ValidationError

from score_events.constants import NoteDuration
from score_events.core import Chord
from score_events.models import ChordModel


class TestChordModel:
    """Tests for ChordModel validation."""

    def test_minimal(self) -> None:
        """Only pitches are required."""
        model = ChordModel(pitches=[60, 64, 67])
        assert model.duration == NoteDuration.QUARTER
        assert not model.dotted
        assert not model.tied

    def test_pitch_range(self) -> None:
        """Pitches outside 0-126 are rejected."""
        with pytest.raises(ValidationError):
            ChordModel(pitches=[60, 127])
        with pytest.raises(ValidationError):
            ChordModel(pitches=[-1])

    def test_duration_non_negative(self) -> None:
        """Duration must be non-negative."""
        with pytest.raises(ValidationError):
            ChordModel(pitches=[60], duration=-1)

    def test_double_dotted_requires_dotted(self) -> None:
        """Double dotted without dotted is rejected."""
        with pytest.raises(ValidationError, match="must also be dotted"):
            ChordModel(pitches=[60], duration=840, double_dotted=True)

    def test_frozen(self) -> None:
        """Models are immutable."""
        model = ChordModel(pitches=[60])
        with pytest.raises(ValidationError):
            model.tied = True


class TestChordModelConversion:
    """Tests for converting between Chord and ChordModel."""

    def test_from_chord(self, annotated_chord: Chord) -> None:
        """Snapshot carries every field."""
        model = ChordModel.from_chord(annotated_chord)
        assert model.pitches == [48, 55, 64]
        assert model.duration == 960
        assert model.staccato and model.slurred

    def test_to_chord(self, annotated_chord: Chord) -> None:
        """Model builds an equal chord."""
        chord = ChordModel.from_chord(annotated_chord).to_chord()
        assert chord == annotated_chord

    def test_snapshot_is_independent(self, c_major: Chord) -> None:
        """Mutating the chord after a snapshot leaves the model unchanged."""
        model = ChordModel.from_chord(c_major)
        c_major.invert()
        assert model.pitches == [60, 64, 67]

    def test_to_chord_is_mutable(self) -> None:
        """Chords built from a model can be modified."""
        chord = ChordModel(pitches=[60, 64, 67]).to_chord()
        assert chord.dot()
        assert chord.duration == NoteDuration.DOTTED_QUARTER

    def test_json(self, c_major: Chord) -> None:
        """Models serialize to and from JSON."""
        c_major.put_in_triplet()
        payload = ChordModel.from_chord(c_major).model_dump_json()
        restored = ChordModel.model_validate_json(payload).to_chord()
        assert restored == c_major
        assert restored.triplet

    def test_zero_tick_chord(self) -> None:
        """A chord whose triplet truncated to zero ticks can be snapshotted."""
        chord = Chord([60], 1)
        assert chord.put_in_triplet()
        model = ChordModel.from_chord(chord)
        assert model.duration == 0
        assert model.to_chord() == chord
