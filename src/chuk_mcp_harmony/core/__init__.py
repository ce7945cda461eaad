"""
Core harmony primitives.

These are the value types everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- ChordQuality: The nine interval templates
- Chord: Root + quality, with derived pitch classes
- Mode / Scale: Major and natural minor scales
- ChordFactory: Bulk and diatonic chord generation
"""

from chuk_mcp_harmony.core.chord import Chord, ChordQuality, InvalidChordSymbol
from chuk_mcp_harmony.core.factory import ChordFactory
from chuk_mcp_harmony.core.pitch import InvalidNoteName, PitchClass
from chuk_mcp_harmony.core.scale import FLAT_KEY_ROOTS, InvalidKey, Mode, Scale

__all__ = [
    # Pitch
    "PitchClass",
    "InvalidNoteName",
    # Chord
    "ChordQuality",
    "Chord",
    "InvalidChordSymbol",
    # Scale
    "Mode",
    "Scale",
    "InvalidKey",
    "FLAT_KEY_ROOTS",
    # Generation
    "ChordFactory",
]
