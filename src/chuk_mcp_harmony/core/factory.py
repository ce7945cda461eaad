"""
Chord generation - bulk and diatonic chord sets.

Quality patterns are fixed per mode; diatonic chords are built on the
scale-degree intervals of the key.
"""

from __future__ import annotations

from collections.abc import Sequence

from .chord import Chord, ChordQuality
from .pitch import PitchClass
from .scale import SCALE_INTERVALS, Mode

_Q = ChordQuality

# Triad qualities for degrees I-vii° (major) and i-VII (natural minor)
DIATONIC_TRIAD_QUALITIES: dict[Mode, tuple[ChordQuality, ...]] = {
    Mode.MAJOR: (_Q.MAJOR, _Q.MINOR, _Q.MINOR, _Q.MAJOR, _Q.MAJOR, _Q.MINOR, _Q.DIMINISHED),
    Mode.MINOR: (_Q.MINOR, _Q.DIMINISHED, _Q.MAJOR, _Q.MINOR, _Q.MINOR, _Q.MAJOR, _Q.MAJOR),
}

# Seventh qualities for Imaj7-viim7b5 (major) and im7-VII7 (natural minor)
DIATONIC_SEVENTH_QUALITIES: dict[Mode, tuple[ChordQuality, ...]] = {
    Mode.MAJOR: (_Q.MAJ7, _Q.MIN7, _Q.MIN7, _Q.MAJ7, _Q.DOM7, _Q.MIN7, _Q.MIN7B5),
    Mode.MINOR: (_Q.MIN7, _Q.MIN7B5, _Q.MAJ7, _Q.MIN7, _Q.MIN7, _Q.MAJ7, _Q.DOM7),
}

TRIAD_SET: tuple[ChordQuality, ...] = (_Q.MAJOR, _Q.MINOR)
SEVENTH_SET: tuple[ChordQuality, ...] = (_Q.DOM7, _Q.MAJ7, _Q.MIN7, _Q.DIM7, _Q.MIN7B5)
ALL_QUALITIES: tuple[ChordQuality, ...] = tuple(ChordQuality)


class ChordFactory:
    """Produces collections of chords. Stateless; all methods are class-level."""

    @classmethod
    def all_triads(cls) -> list[Chord]:
        """All 24 major and minor triads (12 roots x 2 qualities)."""
        return cls._generate_for_qualities(TRIAD_SET)

    @classmethod
    def all_sevenths(cls) -> list[Chord]:
        """All 60 seventh chords (12 roots x 5 qualities)."""
        return cls._generate_for_qualities(SEVENTH_SET)

    @classmethod
    def all_chords(cls) -> list[Chord]:
        """Every chord across all nine qualities."""
        return cls._generate_for_qualities(ALL_QUALITIES)

    @classmethod
    def diatonic_triads(cls, root: int, mode: Mode | str) -> list[Chord]:
        """The 7 diatonic triads of a key, in degree order."""
        mode = Mode(mode)
        return cls._diatonic(root, mode, DIATONIC_TRIAD_QUALITIES[mode])

    @classmethod
    def diatonic_sevenths(cls, root: int, mode: Mode | str) -> list[Chord]:
        """The 7 diatonic seventh chords of a key, in degree order."""
        mode = Mode(mode)
        return cls._diatonic(root, mode, DIATONIC_SEVENTH_QUALITIES[mode])

    @staticmethod
    def _diatonic(root: int, mode: Mode, qualities: Sequence[ChordQuality]) -> list[Chord]:
        return [
            Chord(PitchClass(root + interval), quality)
            for interval, quality in zip(SCALE_INTERVALS[mode], qualities, strict=True)
        ]

    @staticmethod
    def _generate_for_qualities(qualities: Sequence[ChordQuality]) -> list[Chord]:
        # Root-major nesting: every quality for C, then C#, ...
        return [Chord(PitchClass(root), quality) for root in range(12) for quality in qualities]
