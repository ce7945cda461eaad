"""
Pydantic models for the harmony system.

This module provides:
- ChordRef: Stored (root, quality) pair
- ChordSlot: Chord with a duration
- ProgressionSection: Labelled run of chord slots
- Progression: Complete progression in a key
"""

from chuk_mcp_harmony.models.progression import (
    ChordRef,
    ChordSlot,
    Progression,
    ProgressionSection,
)

__all__ = [
    "ChordRef",
    "ChordSlot",
    "Progression",
    "ProgressionSection",
]
