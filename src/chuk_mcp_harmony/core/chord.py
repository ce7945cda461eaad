"""
Chord primitives - ChordQuality and Chord.

Chords are a root plus a quality. The quality selects a fixed interval
template; the chord's pitch classes are derived from it in template order
(not sorted), so a wrap-around note such as the C of Dm7 comes last.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .pitch import PitchClass


class ChordQuality(str, Enum):
    """The nine supported chord qualities."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    DOM7 = "dom7"
    MAJ7 = "maj7"
    MIN7 = "min7"
    DIM7 = "dim7"
    MIN7B5 = "min7b5"

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitones from the root, in template order."""
        return CHORD_INTERVALS[self]

    @property
    def suffix(self) -> str:
        """Suffix appended to the root name in a chord symbol."""
        return QUALITY_SUFFIX[self]

    @property
    def is_triad(self) -> bool:
        return self in TRIAD_QUALITIES


# Interval templates (semitones from root)
CHORD_INTERVALS: dict[ChordQuality, tuple[int, ...]] = {
    ChordQuality.MAJOR: (0, 4, 7),
    ChordQuality.MINOR: (0, 3, 7),
    ChordQuality.DIMINISHED: (0, 3, 6),
    ChordQuality.AUGMENTED: (0, 4, 8),
    ChordQuality.DOM7: (0, 4, 7, 10),
    ChordQuality.MAJ7: (0, 4, 7, 11),
    ChordQuality.MIN7: (0, 3, 7, 10),
    ChordQuality.DIM7: (0, 3, 6, 9),
    ChordQuality.MIN7B5: (0, 3, 6, 10),
}

QUALITY_SUFFIX: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "",
    ChordQuality.MINOR: "m",
    ChordQuality.DIMINISHED: "dim",
    ChordQuality.AUGMENTED: "aug",
    ChordQuality.DOM7: "7",
    ChordQuality.MAJ7: "maj7",
    ChordQuality.MIN7: "m7",
    ChordQuality.DIM7: "dim7",
    ChordQuality.MIN7B5: "m7b5",
}

TRIAD_QUALITIES: frozenset[ChordQuality] = frozenset(
    {
        ChordQuality.MAJOR,
        ChordQuality.MINOR,
        ChordQuality.DIMINISHED,
        ChordQuality.AUGMENTED,
    }
)

# Suffix -> quality, longest suffixes first so "m7b5" wins over "m7" and "m"
_SUFFIX_LOOKUP: dict[str, ChordQuality] = {
    suffix: quality
    for quality, suffix in sorted(QUALITY_SUFFIX.items(), key=lambda item: -len(item[1]))
}

_SYMBOL_RE = re.compile(r"^([A-G](?:#|b)?)(.*)$")


class InvalidChordSymbol(ValueError):
    """Raised when a chord symbol cannot be parsed."""


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord with a root pitch and quality.

    Equality is nominal: two chords are equal when root and quality match,
    even if another quality would spell the same pitch-class set. Use
    pitch_set for structural comparison.
    """

    root: PitchClass
    quality: ChordQuality

    def __post_init__(self) -> None:
        # Accept plain ints and quality names at the boundary
        object.__setattr__(self, "root", PitchClass(self.root))
        object.__setattr__(self, "quality", ChordQuality(self.quality))

    @property
    def pitch_classes(self) -> tuple[PitchClass, ...]:
        """Pitch classes in interval-template order."""
        return tuple(self.root.transpose(interval) for interval in self.quality.intervals)

    @property
    def pitch_set(self) -> frozenset[int]:
        """Pitch-class values as a set, for structural comparison."""
        return frozenset(pc.value for pc in self.pitch_classes)

    @property
    def is_triad(self) -> bool:
        """Whether this chord is a triad (3 notes)."""
        return self.quality.is_triad

    @property
    def is_seventh(self) -> bool:
        """Whether this chord is a seventh chord (4 notes)."""
        return not self.quality.is_triad

    def symbol(self, prefer_flats: bool = False) -> str:
        """Get the chord symbol (e.g., 'Am7', 'Db', 'G7')."""
        return f"{self.root.spell(prefer_flats)}{self.quality.suffix}"

    def get_midi_notes(self, octave: int = 4) -> list[int]:
        """
        Get MIDI note numbers for this chord in close position.

        Args:
            octave: Octave for the root (default 4)

        Returns:
            List of MIDI note numbers, ascending
        """
        root_midi = self.root.to_midi(octave)
        return [root_midi + interval for interval in self.quality.intervals]

    @classmethod
    def of(cls, root: int, quality: ChordQuality | str) -> Chord:
        """Build a chord from any integer root and a quality or quality name."""
        return cls(PitchClass(root), ChordQuality(quality))

    @classmethod
    def parse(cls, symbol: str) -> Chord:
        """
        Parse a chord symbol like 'C', 'F#m', 'Bbmaj7', 'Bm7b5'.

        Raises:
            InvalidChordSymbol: If the suffix is not a known quality
            InvalidNoteName: If the root is not a note name
        """
        match = _SYMBOL_RE.match(symbol.strip())
        if match is None:
            raise InvalidChordSymbol(f"Invalid chord symbol: {symbol!r}")

        root_name, suffix = match.groups()
        root = PitchClass.from_name(root_name)

        if suffix not in _SUFFIX_LOOKUP:
            raise InvalidChordSymbol(f"Unknown chord quality in symbol: {symbol!r}")

        return cls(root, _SUFFIX_LOOKUP[suffix])

    def __str__(self) -> str:
        return self.symbol()

    def __repr__(self) -> str:
        return f"Chord({self.root!r}, {self.quality!r})"
