"""
Proximity ranking - how close a chord sits to the tonic.

Closeness is the number of pitch classes a candidate shares with the
tonic chord: two or more is close, one is medium, none is far. The tonic
itself gets its own level.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from chuk_mcp_harmony.core import Chord, PitchClass

logger = logging.getLogger(__name__)


class ProximityLevel(str, Enum):
    """Proximity buckets relative to the tonic."""

    TONIC = "tonic"
    CLOSE = "close"
    MEDIUM = "medium"
    FAR = "far"


@dataclass(frozen=True)
class RankedChord:
    """A chord annotated with its proximity to the tonic."""

    chord: Chord
    shared_notes: tuple[PitchClass, ...]
    shared_note_count: int
    proximity: ProximityLevel


class ProximityEngine:
    """
    Ranks chords by harmonic proximity to a tonic chord.

    Holds no state; the module-level `proximity_engine` is shared.
    """

    def compute_proximity(self, tonic: Chord, candidate: Chord) -> RankedChord:
        """
        Compute the proximity of a single chord relative to a tonic.

        Args:
            tonic: The tonic chord
            candidate: The chord to grade

        Returns:
            RankedChord with shared notes and proximity level
        """
        if candidate == tonic:
            notes = candidate.pitch_classes
            return RankedChord(candidate, notes, len(notes), ProximityLevel.TONIC)

        shared = tuple(PitchClass.shared_notes(tonic.pitch_classes, candidate.pitch_classes))
        count = len(shared)
        if count >= 2:
            proximity = ProximityLevel.CLOSE
        elif count == 1:
            proximity = ProximityLevel.MEDIUM
        else:
            proximity = ProximityLevel.FAR

        return RankedChord(candidate, shared, count, proximity)

    def rank_all(self, tonic: Chord, candidates: Iterable[Chord]) -> list[RankedChord]:
        """
        Rank every candidate by shared-note count, descending.

        The tonic is kept if it is among the candidates. The sort is
        stable, so ties keep their input order.
        """
        ranked = [self.compute_proximity(tonic, candidate) for candidate in candidates]
        ranked.sort(key=lambda r: r.shared_note_count, reverse=True)
        logger.debug("Ranked %d candidates against %s", len(ranked), tonic)
        return ranked

    def group_by_proximity(
        self, ranked: Iterable[RankedChord]
    ) -> dict[ProximityLevel, list[RankedChord]]:
        """Partition ranked chords into buckets, preserving ranked order."""
        groups: dict[ProximityLevel, list[RankedChord]] = {level: [] for level in ProximityLevel}
        for item in ranked:
            groups[item.proximity].append(item)
        return groups


proximity_engine = ProximityEngine()
