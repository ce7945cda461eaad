"""
Pitch primitives - PitchClass and note-name parsing.

PitchClass represents the 12 chromatic pitches (octave-independent).
Any integer is accepted on construction and reduced mod 12, so no
pitch class outside 0-11 is ever observable.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)
_FLAT_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)


class InvalidNoteName(ValueError):
    """Raised when a string is not a note name in the sharp or flat table."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Invalid note name: "{name}"')
        self.name = name


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    PitchClass(n) normalizes any integer: PitchClass(-1) is B,
    PitchClass(14) is D.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @classmethod
    def _missing_(cls, value: object) -> PitchClass | None:
        if isinstance(value, int):
            return cls(value % 12)
        return None

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def semitone_distance(self, other: PitchClass) -> int:
        """Ascending distance in semitones to another pitch class (0-11)."""
        return (other.value - self.value) % 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get the note name using the sharp or flat spelling table."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def from_name(cls, name: str) -> PitchClass:
        """
        Parse a note name like 'C', 'C#' or 'Db'.

        Sharp names are tried first, then flat names.

        Raises:
            InvalidNoteName: If the name is in neither table
        """
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))
        raise InvalidNoteName(name)

    @staticmethod
    def shared_notes(
        set_a: Iterable[PitchClass], set_b: Iterable[PitchClass]
    ) -> list[PitchClass]:
        """
        Pitch classes of set_a that also occur in set_b.

        Order follows set_a, and every element of set_a is tested on its
        own, so duplicates in set_a are kept.
        """
        values_b = {pc.value for pc in set_b}
        return [pc for pc in set_a if pc.value in values_b]


def note_names(prefer_flats: bool = False) -> tuple[str, ...]:
    """The 12 note names in pitch-class order."""
    return _FLAT_NAMES if prefer_flats else _SHARP_NAMES
