"""
Voice leading between adjacent chords, approximated by shared pitch classes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from chuk_mcp_harmony.core import Chord, PitchClass


@dataclass(frozen=True)
class VoiceLeadingResult:
    """Shared notes between two adjacent chords."""

    shared_notes: tuple[PitchClass, ...]
    shared_note_count: int
    is_smooth: bool  # at least one common tone

    def to_dict(self) -> dict[str, Any]:
        return {
            "shared_notes": [pc.value for pc in self.shared_notes],
            "shared_note_count": self.shared_note_count,
            "is_smooth": self.is_smooth,
        }


class VoiceLeadingAnalyzer:
    """Finds common tones between consecutive chords and flags rough moves."""

    def analyze(self, from_chord: Chord, to_chord: Chord) -> VoiceLeadingResult:
        """Analyze the move from one chord to the next."""
        shared = tuple(PitchClass.shared_notes(from_chord.pitch_classes, to_chord.pitch_classes))
        return VoiceLeadingResult(shared, len(shared), len(shared) > 0)

    def analyze_progression(self, chords: Sequence[Chord]) -> list[VoiceLeadingResult]:
        """One result per consecutive pair; fewer than two chords gives []."""
        return [self.analyze(a, b) for a, b in zip(chords, chords[1:])]


voice_leading_analyzer = VoiceLeadingAnalyzer()
