"""
Harmonic function analysis - classical and syntactical strategies.

Two independent strategies label chords with a function:

- ClassicalFunctionAnalyzer: Riemannian T/S/D by scale degree, with a
  shared-note fallback for chromatic chords.
- SyntacticalFunctionAnalyzer: position within a section (opening,
  transitional, penultimate, closing), ignoring pitch content.

They share no base class. Both satisfy SectionAnalyzer, and callers pick
one with get_section_analyzer().
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from chuk_mcp_harmony.core import Chord, ChordQuality, Mode, PitchClass, Scale

logger = logging.getLogger(__name__)


class HarmonicFunction(str, Enum):
    """Classical harmonic function categories."""

    TONIC = "T"
    SUBDOMINANT = "S"
    DOMINANT = "D"

    @property
    def label(self) -> str:
        return _FUNCTION_NAMES[self]


_FUNCTION_NAMES: dict[HarmonicFunction, str] = {
    HarmonicFunction.TONIC: "Tonic",
    HarmonicFunction.SUBDOMINANT: "Subdominant",
    HarmonicFunction.DOMINANT: "Dominant",
}


class SyntacticalRole(str, Enum):
    """Positional roles in the T -> S -> D -> T circuit of a section."""

    T_OPENING = "T-opening"
    S_TRANSITIONAL = "S-transitional"
    D_PENULTIMATE = "D-penultimate"
    T_CLOSING = "T-closing"


class AnalysisSystem(str, Enum):
    """Available function analysis strategies."""

    CLASSICAL = "classical"
    SYNTACTICAL = "syntactical"


@dataclass(frozen=True)
class FunctionLabel:
    """Classical function of a single chord."""

    func: HarmonicFunction
    roman_numeral: str
    explanation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "func": self.func.value,
            "roman_numeral": self.roman_numeral,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class SyntacticalLabel:
    """Positional function of a chord within a section."""

    role: SyntacticalRole
    circuit_position: int  # 1-4
    explanation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.value,
            "circuit_position": self.circuit_position,
            "explanation": self.explanation,
        }


class SectionAnalyzer(Protocol):
    """Anything that labels every chord of a section."""

    def analyze_section(
        self, chords: Sequence[Chord], key_root: int, mode: Mode | str
    ) -> list[FunctionLabel] | list[SyntacticalLabel]: ...


# =============================================================================
# Classical
# =============================================================================

_T = HarmonicFunction.TONIC
_S = HarmonicFunction.SUBDOMINANT
_D = HarmonicFunction.DOMINANT

# Function of each diatonic degree (index = degree - 1)
DEGREE_FUNCTIONS: dict[Mode, tuple[HarmonicFunction, ...]] = {
    Mode.MAJOR: (_T, _S, _T, _S, _D, _T, _D),
    Mode.MINOR: (_T, _S, _T, _S, _D, _S, _D),
}

# Roman numerals by (quality row, degree index); "" means no entry
ROMAN_GRID: dict[Mode, dict[ChordQuality, tuple[str, ...]]] = {
    Mode.MAJOR: {
        ChordQuality.MAJOR: ("I", "", "", "IV", "V", "", ""),
        ChordQuality.MINOR: ("", "ii", "iii", "", "", "vi", ""),
        ChordQuality.DIMINISHED: ("", "", "", "", "", "", "vii°"),
    },
    Mode.MINOR: {
        ChordQuality.MAJOR: ("", "", "III", "", "V", "VI", "VII"),
        ChordQuality.MINOR: ("i", "", "", "iv", "v", "", ""),
        ChordQuality.DIMINISHED: ("", "ii°", "", "", "", "", ""),
    },
}

NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")

# Approximate degree index for each semitone distance from the key root
CHROMATIC_DEGREE: tuple[int, ...] = (0, 0, 1, 2, 2, 3, 3, 4, 5, 5, 6, 6)

DIATONIC_SEMITONES: dict[Mode, frozenset[int]] = {
    Mode.MAJOR: frozenset({0, 2, 4, 5, 7, 9, 11}),
    Mode.MINOR: frozenset({0, 2, 3, 5, 7, 8, 10}),
}

FLAT_MARK = "♭"

_MINOR_FAMILY = frozenset({ChordQuality.MINOR, ChordQuality.MIN7})
_DIMINISHED_FAMILY = frozenset({ChordQuality.DIMINISHED, ChordQuality.DIM7})

_SEVENTH_SUFFIX: dict[ChordQuality, str] = {
    ChordQuality.DOM7: "7",
    ChordQuality.MAJ7: "maj7",
    ChordQuality.MIN7: "7",
    ChordQuality.DIM7: "7",
    ChordQuality.MIN7B5: "7",
}


class ClassicalFunctionAnalyzer:
    """
    Classical/Riemannian function analysis.

    Diatonic chords take their function from the degree of their root.
    Chromatic chords are compared with the I, IV (iv) and V chords of the
    key and take the function of the one they share most notes with.
    """

    def analyze(self, chord: Chord, key_root: int, mode: Mode | str) -> FunctionLabel:
        """
        Label a single chord in a key.

        Args:
            chord: The chord to label
            key_root: Key root as any integer
            mode: Key mode

        Returns:
            FunctionLabel with T/S/D, Roman numeral and explanation
        """
        mode = Mode(mode)
        scale = Scale(PitchClass(key_root), mode)
        degree = scale.degree_of(chord.root)

        if degree is None:
            return self._analyze_chromatic(chord, scale)

        index = degree - 1
        func = DEGREE_FUNCTIONS[mode][index]
        numeral = self._roman_numeral(index, chord, mode)
        return FunctionLabel(func, numeral, _explain(func, numeral))

    def analyze_section(
        self, chords: Sequence[Chord], key_root: int, mode: Mode | str
    ) -> list[FunctionLabel]:
        """Label every chord of a section independently."""
        return [self.analyze(chord, key_root, mode) for chord in chords]

    def _roman_numeral(self, index: int, chord: Chord, mode: Mode) -> str:
        # Dominant sevenths read as major triads in the grid
        row_key = ChordQuality.MAJOR if chord.quality == ChordQuality.DOM7 else chord.quality
        row = ROMAN_GRID[mode].get(row_key)
        if row and row[index]:
            return row[index]
        return self._computed_numeral(index, chord)

    def _computed_numeral(self, index: int, chord: Chord) -> str:
        is_minor = chord.quality in _MINOR_FAMILY
        is_dim = chord.quality in _DIMINISHED_FAMILY

        numeral = NUMERALS[index]
        if is_minor or is_dim:
            numeral = numeral.lower()
        if is_dim:
            numeral += "°"
        return numeral + _SEVENTH_SUFFIX.get(chord.quality, "")

    def _analyze_chromatic(self, chord: Chord, scale: Scale) -> FunctionLabel:
        key_root = scale.root
        home_quality = ChordQuality.MAJOR if scale.mode == Mode.MAJOR else ChordQuality.MINOR

        tonic = Chord(key_root, home_quality)
        subdominant = Chord(key_root.transpose(5), home_quality)
        dominant = Chord(key_root.transpose(7), ChordQuality.MAJOR)

        with_tonic = len(PitchClass.shared_notes(tonic.pitch_classes, chord.pitch_classes))
        with_sub = len(PitchClass.shared_notes(subdominant.pitch_classes, chord.pitch_classes))
        with_dom = len(PitchClass.shared_notes(dominant.pitch_classes, chord.pitch_classes))

        if with_tonic >= with_sub and with_tonic >= with_dom:
            func = HarmonicFunction.TONIC
        elif with_dom >= with_sub:
            func = HarmonicFunction.DOMINANT
        else:
            func = HarmonicFunction.SUBDOMINANT

        distance = key_root.semitone_distance(chord.root)
        numeral = NUMERALS[CHROMATIC_DEGREE[distance]]
        if chord.quality in _MINOR_FAMILY:
            numeral = numeral.lower()
        if distance not in DIATONIC_SEMITONES[scale.mode]:
            numeral = FLAT_MARK + numeral

        logger.debug(
            "Chromatic %s in %s: I=%d IV=%d V=%d -> %s",
            chord,
            scale,
            with_tonic,
            with_sub,
            with_dom,
            func.value,
        )
        return FunctionLabel(func, numeral, _explain(func, numeral))


def _explain(func: HarmonicFunction, numeral: str) -> str:
    return f"{numeral}: {func.label} function"


# =============================================================================
# Syntactical
# =============================================================================

_ROLE_POSITIONS: dict[SyntacticalRole, int] = {
    SyntacticalRole.T_OPENING: 1,
    SyntacticalRole.S_TRANSITIONAL: 2,
    SyntacticalRole.D_PENULTIMATE: 3,
    SyntacticalRole.T_CLOSING: 4,
}

_ROLE_EXPLANATIONS: dict[SyntacticalRole, str] = {
    SyntacticalRole.T_OPENING: "Opening position: tonic function, establishes home",
    SyntacticalRole.S_TRANSITIONAL: "Mid-section: subdominant, departure from home",
    SyntacticalRole.D_PENULTIMATE: "Penultimate position: dominant, drives toward resolution",
    SyntacticalRole.T_CLOSING: "Closing position: tonic resolution, return home",
}


class SyntacticalFunctionAnalyzer:
    """
    Syntactical function analysis.

    Function comes from position within a formal section, not from chord
    identity: the T -> S -> D -> T circuit spans each section.
    """

    def analyze_section(
        self, chords: Sequence[Chord], key_root: int = 0, mode: Mode | str = Mode.MAJOR
    ) -> list[SyntacticalLabel]:
        """
        Label each chord position of a section.

        The key is accepted for interface parity and does not affect the
        result.
        """
        length = len(chords)
        if length == 0:
            return []
        if length == 1:
            return [_make_label(SyntacticalRole.T_OPENING)]
        return [_make_label(self._role_at(index, length)) for index in range(length)]

    @staticmethod
    def _role_at(index: int, length: int) -> SyntacticalRole:
        if index == 0:
            return SyntacticalRole.T_OPENING
        if index == length - 1:
            return SyntacticalRole.T_CLOSING
        if index == length - 2:
            return SyntacticalRole.D_PENULTIMATE
        return SyntacticalRole.S_TRANSITIONAL


def _make_label(role: SyntacticalRole) -> SyntacticalLabel:
    return SyntacticalLabel(role, _ROLE_POSITIONS[role], _ROLE_EXPLANATIONS[role])


classical_analyzer = ClassicalFunctionAnalyzer()
syntactical_analyzer = SyntacticalFunctionAnalyzer()

_ANALYZERS: dict[AnalysisSystem, SectionAnalyzer] = {
    AnalysisSystem.CLASSICAL: classical_analyzer,
    AnalysisSystem.SYNTACTICAL: syntactical_analyzer,
}


def get_section_analyzer(system: AnalysisSystem | str) -> SectionAnalyzer:
    """
    Select a function analysis strategy.

    Raises:
        ValueError: If the system name is unknown
    """
    return _ANALYZERS[AnalysisSystem(system)]
