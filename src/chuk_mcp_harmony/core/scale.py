"""
Scale primitives - Mode and Scale.

A scale is a root pitch class plus a mode (major or natural minor).
Its seven degrees come from fixed interval sets transposed by the root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .chord import Chord, ChordQuality
from .pitch import InvalidNoteName, PitchClass


class Mode(str, Enum):
    """Key modes supported by the engine."""

    MAJOR = "major"
    MINOR = "minor"


# Semitones from the root for each scale degree
SCALE_INTERVALS: dict[Mode, tuple[int, ...]] = {
    Mode.MAJOR: (0, 2, 4, 5, 7, 9, 11),
    Mode.MINOR: (0, 2, 3, 5, 7, 8, 10),
}

# Keys that conventionally use flat spellings: Db, Eb, F, Ab, Bb
FLAT_KEY_ROOTS: frozenset[int] = frozenset({1, 3, 5, 8, 10})


class InvalidKey(ValueError):
    """Raised when a key string cannot be parsed."""


@dataclass(frozen=True)
class Scale:
    """
    A major or natural minor scale.

    Examples:
        Scale.major(0) = C major
        Scale.minor(9) = A minor
    """

    root: PitchClass
    mode: Mode
    degrees: tuple[PitchClass, ...] = field(init=False, compare=False)
    prefer_flats: bool = field(init=False, compare=False)

    def __post_init__(self) -> None:
        root = PitchClass(self.root)
        mode = Mode(self.mode)
        object.__setattr__(self, "root", root)
        object.__setattr__(self, "mode", mode)
        object.__setattr__(
            self, "degrees", tuple(root.transpose(i) for i in SCALE_INTERVALS[mode])
        )
        # Flat preference depends on the root only, not the mode
        object.__setattr__(self, "prefer_flats", root.value in FLAT_KEY_ROOTS)

    @classmethod
    def major(cls, root: int) -> Scale:
        """Create a major scale from any integer root."""
        return cls(PitchClass(root), Mode.MAJOR)

    @classmethod
    def minor(cls, root: int) -> Scale:
        """Create a natural minor scale from any integer root."""
        return cls(PitchClass(root), Mode.MINOR)

    def contains(self, pc: PitchClass) -> bool:
        """Check if a pitch class belongs to this scale."""
        return pc in self.degrees

    def degree_of(self, pc: PitchClass) -> int | None:
        """
        Get the 1-indexed scale degree of a pitch class.

        Returns None if the pitch is not in the scale.
        """
        for i, degree in enumerate(self.degrees):
            if degree == pc:
                return i + 1
        return None

    def tonic_chord(self) -> Chord:
        """The tonic triad (major in major keys, minor in minor keys)."""
        quality = ChordQuality.MAJOR if self.mode == Mode.MAJOR else ChordQuality.MINOR
        return Chord(self.root, quality)

    def name(self) -> str:
        """Conventional key name, e.g. 'Eb minor'."""
        return f"{self.root.spell(self.prefer_flats)} {self.mode.value}"

    def __str__(self) -> str:
        return self.name()

    @classmethod
    def parse(cls, name: str) -> Scale:
        """
        Parse a key from a string like 'C_major', 'Eb_minor', 'F#_major'.

        Args:
            name: Key name with underscore separator

        Returns:
            Parsed Scale
        """
        parts = name.strip().split("_")
        if len(parts) != 2:
            raise InvalidKey(f"Invalid key format: {name}. Expected 'root_mode' like 'C_major'")

        root_str, mode_str = parts
        try:
            root = PitchClass.from_name(root_str)
        except InvalidNoteName as e:
            raise InvalidKey(f"Invalid key root in {name!r}: {e}") from e

        try:
            mode = Mode(mode_str.lower())
        except ValueError as e:
            raise InvalidKey(f"Unknown mode: {mode_str}") from e

        return cls(root, mode)
