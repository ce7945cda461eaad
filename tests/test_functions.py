"""
Tests for harmonic function analysis.

Tests cover:
- ClassicalFunctionAnalyzer: diatonic and chromatic chords
- SyntacticalFunctionAnalyzer: positional roles
- get_section_analyzer: strategy selection
"""

import pytest

from chuk_mcp_harmony.analysis import (
    AnalysisSystem,
    ClassicalFunctionAnalyzer,
    HarmonicFunction,
    SyntacticalFunctionAnalyzer,
    SyntacticalRole,
    classical_analyzer,
    get_section_analyzer,
    syntactical_analyzer,
)
from chuk_mcp_harmony.core import Chord, ChordFactory, Mode

T = HarmonicFunction.TONIC
S = HarmonicFunction.SUBDOMINANT
D = HarmonicFunction.DOMINANT


def analyze(symbol: str, key_root: int = 0, mode: str = "major"):
    return classical_analyzer.analyze(Chord.parse(symbol), key_root, mode)


class TestClassicalDiatonic:
    """Diatonic chords take their function from the degree."""

    def test_c_major_triads(self) -> None:
        """I ii iii IV V vi vii° in C major."""
        labels = classical_analyzer.analyze_section(
            ChordFactory.diatonic_triads(0, Mode.MAJOR), 0, Mode.MAJOR
        )
        assert [label.roman_numeral for label in labels] == [
            "I",
            "ii",
            "iii",
            "IV",
            "V",
            "vi",
            "vii°",
        ]
        assert [label.func for label in labels] == [T, S, T, S, D, T, D]

    def test_a_minor_triads(self) -> None:
        """Natural minor degrees in A minor."""
        labels = classical_analyzer.analyze_section(
            ChordFactory.diatonic_triads(9, Mode.MINOR), 9, Mode.MINOR
        )
        assert [label.roman_numeral for label in labels] == [
            "i",
            "ii°",
            "III",
            "iv",
            "v",
            "VI",
            "VII",
        ]
        assert [label.func for label in labels] == [T, S, T, S, D, S, D]

    def test_transposed_key(self) -> None:
        """Same numerals in G major."""
        assert analyze("D", 7).roman_numeral == "V"
        assert analyze("Em", 7).roman_numeral == "vi"
        assert analyze("F#dim", 7).roman_numeral == "vii°"

    def test_dominant_seventh_reads_as_major(self, g7: Chord) -> None:
        """G7 in C major is V."""
        label = classical_analyzer.analyze(g7, 0, "major")
        assert label.func == D
        assert label.roman_numeral == "V"

    def test_major_triad_on_minor_degree(self) -> None:
        """E major in A minor is V, dominant."""
        label = analyze("E", 9, "minor")
        assert label.roman_numeral == "V"
        assert label.func == D

    def test_seventh_chords_computed(self) -> None:
        """Seventh qualities outside the grid get computed numerals."""
        assert analyze("Cmaj7").roman_numeral == "Imaj7"
        assert analyze("Dm7").roman_numeral == "ii7"
        assert analyze("Am7").roman_numeral == "vi7"
        assert analyze("Bdim7").roman_numeral == "vii°7"

    def test_half_diminished_numeral(self) -> None:
        """Half-diminished is not lowercased."""
        label = analyze("Bm7b5")
        assert label.roman_numeral == "VII7"
        assert label.func == D

    def test_quality_mismatch_computed(self) -> None:
        """A minor chord on a major degree is lowercased."""
        assert analyze("Fm").roman_numeral == "iv"
        assert analyze("Fm").func == S
        assert analyze("Caug").roman_numeral == "I"

    def test_explanation(self) -> None:
        """Explanation names the numeral and function."""
        assert analyze("F").explanation == "IV: Subdominant function"
        assert analyze("G").explanation == "V: Dominant function"

    def test_key_root_normalized(self) -> None:
        """Any integer key root works."""
        assert analyze("G", 12) == analyze("G", 0)

    def test_unknown_mode(self) -> None:
        """Modes other than major/minor are rejected."""
        with pytest.raises(ValueError):
            analyze("C", 0, "dorian")


class TestClassicalChromatic:
    """Chromatic chords take the function they share most notes with."""

    def test_flat_supertonic(self) -> None:
        """Db in C major shares F with IV."""
        label = analyze("Db")
        assert label.func == S
        assert label.roman_numeral == "♭I"

    def test_flat_seven(self) -> None:
        """Bb in C major ties IV and V; dominant wins."""
        label = analyze("Bb")
        assert label.func == D
        assert label.roman_numeral == "♭VII"

    def test_flat_three(self) -> None:
        """Eb in C major ties I and V; tonic wins."""
        label = analyze("Eb")
        assert label.func == T
        assert label.roman_numeral == "♭III"
        assert label.explanation == "♭III: Tonic function"

    def test_minor_chromatic(self) -> None:
        """Chromatic minor chords are lowercased."""
        label = analyze("F#m")
        assert label.func == S
        assert label.roman_numeral == "♭iv"

    def test_chromatic_in_minor_key(self) -> None:
        """C# major in A minor."""
        label = analyze("C#", 9, "minor")
        assert label.func == D
        assert label.roman_numeral == "♭III"

    def test_chromatic_sevenths_drop_suffix(self) -> None:
        """Chromatic numerals carry no seventh suffix."""
        assert analyze("Db7").roman_numeral == "♭I"

    def test_every_chord_labelled(self) -> None:
        """Every chord gets a function and a non-empty numeral."""
        for chord in ChordFactory.all_chords():
            label = classical_analyzer.analyze(chord, 0, Mode.MAJOR)
            assert label.func in HarmonicFunction
            assert label.roman_numeral

    def test_diatonic_roots_have_no_flat_mark(self) -> None:
        """The flat mark only appears for non-diatonic roots."""
        for chord in ChordFactory.diatonic_sevenths(3, "minor"):
            assert "♭" not in classical_analyzer.analyze(chord, 3, "minor").roman_numeral


class TestSyntactical:
    """Tests for positional analysis."""

    def roles(self, count: int) -> list[SyntacticalRole]:
        chords = [Chord.parse("C")] * count
        return [label.role for label in syntactical_analyzer.analyze_section(chords)]

    def test_empty(self) -> None:
        """No chords, no labels."""
        assert syntactical_analyzer.analyze_section([]) == []

    def test_single(self) -> None:
        """A lone chord opens."""
        assert self.roles(1) == [SyntacticalRole.T_OPENING]

    def test_two(self) -> None:
        """Two chords open and close."""
        assert self.roles(2) == [SyntacticalRole.T_OPENING, SyntacticalRole.T_CLOSING]

    def test_three(self) -> None:
        """The middle chord is penultimate."""
        assert self.roles(3) == [
            SyntacticalRole.T_OPENING,
            SyntacticalRole.D_PENULTIMATE,
            SyntacticalRole.T_CLOSING,
        ]

    def test_five(self) -> None:
        """Inner chords before the penultimate are transitional."""
        assert self.roles(5) == [
            SyntacticalRole.T_OPENING,
            SyntacticalRole.S_TRANSITIONAL,
            SyntacticalRole.S_TRANSITIONAL,
            SyntacticalRole.D_PENULTIMATE,
            SyntacticalRole.T_CLOSING,
        ]

    def test_circuit_positions(self) -> None:
        """Circuit position follows the role."""
        labels = syntactical_analyzer.analyze_section([Chord.parse("C")] * 4)
        assert [label.circuit_position for label in labels] == [1, 2, 3, 4]
        assert labels[0].explanation.startswith("Opening position")

    def test_ignores_pitch_content_and_key(self) -> None:
        """Only length matters."""
        a = syntactical_analyzer.analyze_section(
            [Chord.parse(s) for s in ("C", "F", "G", "C")], 0, "major"
        )
        b = SyntacticalFunctionAnalyzer().analyze_section(
            [Chord.parse(s) for s in ("F#m7", "Bb", "Ebdim7", "Caug")], 5, "minor"
        )
        assert a == b

    def test_to_dict(self) -> None:
        """Labels serialize to plain values."""
        label = syntactical_analyzer.analyze_section([Chord.parse("C")])[0]
        assert label.to_dict() == {
            "role": "T-opening",
            "circuit_position": 1,
            "explanation": "Opening position: tonic function, establishes home",
        }


class TestGetSectionAnalyzer:
    """Tests for strategy selection."""

    def test_select(self) -> None:
        """Both systems are selectable by enum or name."""
        assert isinstance(get_section_analyzer("classical"), ClassicalFunctionAnalyzer)
        assert isinstance(
            get_section_analyzer(AnalysisSystem.SYNTACTICAL), SyntacticalFunctionAnalyzer
        )

    def test_unknown(self) -> None:
        """Unknown systems raise ValueError."""
        with pytest.raises(ValueError):
            get_section_analyzer("schenkerian")

    def test_same_interface(self) -> None:
        """Both label every chord of a section."""
        chords = [Chord.parse(s) for s in ("C", "Am", "F", "G")]
        for system in AnalysisSystem:
            labels = get_section_analyzer(system).analyze_section(chords, 0, Mode.MAJOR)
            assert len(labels) == 4
