"""
Progression report - every per-chord analysis for a whole progression.

For each section this collects the classical and syntactical labels and
the voice leading between neighbouring chords, and flags the rough moves
(no common tone) so a front end can highlight them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_harmony.analysis.functions import (
    FunctionLabel,
    SyntacticalLabel,
    classical_analyzer,
    syntactical_analyzer,
)
from chuk_mcp_harmony.analysis.voice_leading import VoiceLeadingResult, voice_leading_analyzer
from chuk_mcp_harmony.core import Chord
from chuk_mcp_harmony.models import Progression

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionAnalysis:
    """Analysis of one section."""

    label: str
    chords: tuple[Chord, ...]
    classical: tuple[FunctionLabel, ...]
    syntactical: tuple[SyntacticalLabel, ...]
    voice_leading: tuple[VoiceLeadingResult, ...]

    def rough_transitions(self) -> list[int]:
        """Indices i where the move from chord i to chord i+1 has no common tone."""
        return [i for i, result in enumerate(self.voice_leading) if not result.is_smooth]


@dataclass(frozen=True)
class ProgressionAnalysis:
    """Analysis of a whole progression."""

    name: str
    key: str
    sections: tuple[SectionAnalysis, ...] = field(default_factory=tuple)

    @property
    def rough_transitions(self) -> list[tuple[str, int]]:
        """(section label, index) of every move without a common tone."""
        return [
            (section.label, index)
            for section in self.sections
            for index in section.rough_transitions()
        ]

    def to_dict(self, prefer_flats: bool = False) -> dict[str, Any]:
        """Plain dict for JSON output."""
        return {
            "name": self.name,
            "key": self.key,
            "sections": [
                {
                    "label": section.label,
                    "chords": [
                        {
                            "symbol": chord.symbol(prefer_flats),
                            "classical": label.to_dict(),
                            "syntactical": role.to_dict(),
                        }
                        for chord, label, role in zip(
                            section.chords, section.classical, section.syntactical, strict=True
                        )
                    ],
                    "voice_leading": [result.to_dict() for result in section.voice_leading],
                }
                for section in self.sections
            ],
            "rough_transitions": [
                {"section": label, "index": index} for label, index in self.rough_transitions
            ],
        }


def analyze_progression(progression: Progression) -> ProgressionAnalysis:
    """
    Analyze every section of a progression in its key.

    Args:
        progression: The progression to analyze

    Returns:
        ProgressionAnalysis with one SectionAnalysis per section
    """
    scale = progression.get_scale()
    key_root = scale.root.value

    sections = []
    for section in progression.sections:
        chords = section.get_chords()
        sections.append(
            SectionAnalysis(
                label=section.label,
                chords=tuple(chords),
                classical=tuple(classical_analyzer.analyze_section(chords, key_root, scale.mode)),
                syntactical=tuple(
                    syntactical_analyzer.analyze_section(chords, key_root, scale.mode)
                ),
                voice_leading=tuple(voice_leading_analyzer.analyze_progression(chords)),
            )
        )

    analysis = ProgressionAnalysis(
        name=progression.name, key=progression.key, sections=tuple(sections)
    )
    logger.debug(
        "Analyzed progression %s: %d sections, %d rough transitions",
        progression.name,
        len(sections),
        len(analysis.rough_transitions),
    )
    return analysis
