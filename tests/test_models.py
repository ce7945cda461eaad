"""
Tests for the progression model.
"""

import pytest
import yaml
from pydantic import ValidationError

from chuk_mcp_harmony.core import Chord, ChordFactory, ChordQuality, Scale
from chuk_mcp_harmony.models import ChordRef, ChordSlot, Progression, ProgressionSection


class TestChordRef:
    """Tests for stored chord references."""

    def test_root_normalized(self) -> None:
        """Roots are reduced mod 12."""
        assert ChordRef(root=14, quality=ChordQuality.MINOR).root == 2
        assert ChordRef(root=-1, quality="major").root == 11

    def test_invalid_quality(self) -> None:
        """Unknown qualities are rejected."""
        with pytest.raises(ValidationError):
            ChordRef(root=0, quality="sus2")

    def test_roundtrip(self) -> None:
        """Every chord survives storage as (root, quality)."""
        for chord in ChordFactory.all_chords():
            rebuilt = ChordRef.from_chord(chord).to_chord()
            assert rebuilt == chord
            assert rebuilt.pitch_classes == chord.pitch_classes

    def test_frozen(self) -> None:
        """References are immutable."""
        ref = ChordRef(root=0, quality="major")
        with pytest.raises(ValidationError):
            ref.root = 5  # type: ignore[misc]


class TestChordSlot:
    """Tests for chord slots."""

    def test_default_duration(self) -> None:
        """Slots default to four beats."""
        slot = ChordSlot(chord=ChordRef(root=0, quality="major"))
        assert slot.duration_beats == 4

    def test_positive_duration(self) -> None:
        """Durations must be positive."""
        with pytest.raises(ValidationError):
            ChordSlot(chord=ChordRef(root=0, quality="major"), duration_beats=0)


class TestProgression:
    """Tests for the Progression model."""

    def test_defaults(self) -> None:
        """Defaults give an empty C major progression."""
        progression = Progression()
        assert progression.schema_version == "progression/v1"
        assert progression.name == "Untitled"
        assert progression.key == "C_major"
        assert progression.sections == []
        assert progression.all_chords() == []

    def test_invalid_key(self) -> None:
        """Keys are validated on construction."""
        with pytest.raises(ValidationError):
            Progression(key="C_lydian")

    def test_section_label_required(self) -> None:
        """Section labels must be non-empty."""
        with pytest.raises(ValidationError):
            ProgressionSection(label="")

    def test_from_symbols(self) -> None:
        """Build a progression from chord symbols."""
        progression = Progression.from_symbols(
            ["C", "Am", "F", "G7"], key="C_major", name="doo-wop", duration_beats=2
        )
        assert progression.name == "doo-wop"
        assert progression.get_scale() == Scale.major(0)
        section = progression.get_section("A")
        assert section is not None
        assert section.total_beats() == 8
        assert [c.symbol() for c in progression.all_chords()] == ["C", "Am", "F", "G7"]
        assert progression.get_section("B") is None

    def test_from_symbols_invalid_chord(self) -> None:
        """Bad symbols raise."""
        with pytest.raises(ValueError):
            Progression.from_symbols(["C", "Qm"])

    def test_yaml_dict(self) -> None:
        """YAML dict stores root, quality and beats."""
        progression = Progression.from_symbols(["Bb", "Ebmaj7"], key="Bb_major", name="flat")
        data = progression.to_yaml_dict()
        assert data["schema"] == "progression/v1"
        assert data["key"] == "Bb_major"
        assert data["sections"][0]["chords"] == [
            {"root": 10, "quality": "major", "symbol": "Bb", "beats": 4},
            {"root": 3, "quality": "maj7", "symbol": "Ebmaj7", "beats": 4},
        ]

    def test_yaml_roundtrip(self) -> None:
        """A progression survives dump and load through YAML text."""
        progression = Progression.from_symbols(
            ["Am", "Bm7b5", "E7", "Am"], key="A_minor", name="cadence", label="tag"
        )
        text = yaml.safe_dump(progression.to_yaml_dict(), sort_keys=False)
        loaded = Progression.from_yaml_dict(yaml.safe_load(text))

        assert loaded.name == "cadence"
        assert loaded.key == "A_minor"
        assert loaded.sections[0].label == "tag"
        assert loaded.all_chords() == progression.all_chords()

    def test_yaml_symbols(self) -> None:
        """Chords may be written as plain symbols."""
        data = {
            "name": "hand-written",
            "key": "G_major",
            "sections": [{"label": "A", "chords": ["G", "Em", {"root": 0, "quality": "major"}]}],
        }
        progression = Progression.from_yaml_dict(data)
        assert progression.all_chords() == [
            Chord.parse("G"),
            Chord.parse("Em"),
            Chord.parse("C"),
        ]

    def test_yaml_ignores_stored_symbol(self) -> None:
        """Root and quality win over the readable symbol."""
        data = {
            "sections": [
                {"label": "A", "chords": [{"root": 7, "quality": "dom7", "symbol": "C"}]}
            ]
        }
        assert Progression.from_yaml_dict(data).all_chords() == [Chord.parse("G7")]
