"""
Progression model - the record exchanged with persistence and export layers.

A Progression contains:
- Key context (e.g. 'C_major')
- Sections (labelled runs of chord slots)
- Chord slots (a stored root/quality pair plus a duration in beats)

Chords are stored only as (root, quality); pitch content is always rebuilt
from the chord templates, so a stored progression round-trips exactly.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_harmony.constants import DEFAULT_KEY, SchemaVersion
from chuk_mcp_harmony.core import Chord, ChordQuality, Scale


class ChordRef(BaseModel):
    """
    A stored chord: root pitch-class value and quality.

    Any integer root is accepted and normalized to 0-11.
    """

    root: int = Field(..., description="Root pitch class (normalized to 0-11)")
    quality: ChordQuality = Field(..., description="Chord quality")

    model_config = {"frozen": True}

    @field_validator("root")
    @classmethod
    def normalize_root(cls, v: int) -> int:
        """Reduce the root mod 12."""
        return v % 12

    def to_chord(self) -> Chord:
        """Rebuild the chord, including its derived pitch classes."""
        return Chord.of(self.root, self.quality)

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordRef:
        """Store a chord as its (root, quality) pair."""
        return cls(root=chord.root.value, quality=chord.quality)


class ChordSlot(BaseModel):
    """A chord placed in a section with a duration."""

    chord: ChordRef = Field(..., description="The stored chord")
    duration_beats: int = Field(4, gt=0, description="Duration in beats")

    model_config = {"frozen": True}


class ProgressionSection(BaseModel):
    """A labelled run of chords (e.g. 'A', 'verse', 'bridge')."""

    label: str = Field(..., min_length=1, description="Section label")
    chords: list[ChordSlot] = Field(default_factory=list, description="Chord slots in order")

    def get_chords(self) -> list[Chord]:
        """Rebuild the section's chords in order."""
        return [slot.chord.to_chord() for slot in self.chords]

    def total_beats(self) -> int:
        return sum(slot.duration_beats for slot in self.chords)


class Progression(BaseModel):
    """A named chord progression in a key, split into sections."""

    schema_version: SchemaVersion = Field("progression/v1", description="Schema version")
    name: str = Field("Untitled", description="Progression name")
    notes: str = Field("", description="Free-form notes")
    key: str = Field(DEFAULT_KEY, description="Key (e.g., 'C_major', 'Eb_minor')")
    sections: list[ProgressionSection] = Field(
        default_factory=list, description="Progression sections"
    )
    created: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="Creation timestamp"
    )

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Validate key format."""
        Scale.parse(v)
        return v

    def get_scale(self) -> Scale:
        """Get the parsed key."""
        return Scale.parse(self.key)

    def get_section(self, label: str) -> ProgressionSection | None:
        """Get a section by label."""
        for section in self.sections:
            if section.label == label:
                return section
        return None

    def all_chords(self) -> list[Chord]:
        """Every chord across all sections, in order."""
        return [chord for section in self.sections for chord in section.get_chords()]

    @classmethod
    def from_symbols(
        cls,
        symbols: list[str],
        key: str = DEFAULT_KEY,
        name: str = "Untitled",
        label: str = "A",
        duration_beats: int = 4,
    ) -> Progression:
        """
        Build a single-section progression from chord symbols.

        Args:
            symbols: Chord symbols like ['C', 'Am', 'F', 'G7']
            key: Key string
            name: Progression name
            label: Section label
            duration_beats: Duration of every slot

        Returns:
            The progression
        """
        slots = [
            ChordSlot(chord=ChordRef.from_chord(Chord.parse(s)), duration_beats=duration_beats)
            for s in symbols
        ]
        return cls(name=name, key=key, sections=[ProgressionSection(label=label, chords=slots)])

    def to_yaml_dict(self) -> dict[str, Any]:
        """
        Convert to a YAML-friendly dict.

        Chords are written as root/quality pairs with their symbol alongside
        for readability; the symbol is ignored on load.
        """
        prefer_flats = self.get_scale().prefer_flats
        return {
            "schema": self.schema_version,
            "name": self.name,
            "notes": self.notes,
            "key": self.key,
            "sections": [
                {
                    "label": section.label,
                    "chords": [
                        {
                            "root": slot.chord.root,
                            "quality": slot.chord.quality.value,
                            "symbol": slot.chord.to_chord().symbol(prefer_flats),
                            "beats": slot.duration_beats,
                        }
                        for slot in section.chords
                    ],
                }
                for section in self.sections
            ],
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> Progression:
        """
        Create a Progression from a YAML-parsed dict.

        Chord entries may be root/quality mappings or plain chord symbols.
        """
        sections = []
        for section_data in data.get("sections", []):
            slots = []
            for entry in section_data.get("chords", []):
                if isinstance(entry, str):
                    # Simple symbol reference
                    slots.append(ChordSlot(chord=ChordRef.from_chord(Chord.parse(entry))))
                else:
                    slots.append(
                        ChordSlot(
                            chord=ChordRef(root=entry["root"], quality=entry["quality"]),
                            duration_beats=entry.get("beats", 4),
                        )
                    )
            sections.append(ProgressionSection(label=section_data["label"], chords=slots))

        return cls(
            schema_version=data.get("schema", "progression/v1"),
            name=data.get("name", "Untitled"),
            notes=data.get("notes", ""),
            key=data.get("key", DEFAULT_KEY),
            sections=sections,
        )
