"""
Pydantic models for chord events.

This module provides:
- ChordModel: Validated, frozen snapshot of a Chord
"""

from score_events.models.chord import ChordModel

__all__ = [
    "ChordModel",
]
