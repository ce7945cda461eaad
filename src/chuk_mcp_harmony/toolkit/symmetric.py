"""
Symmetric-chord tools - diminished bridges and augmented connections.

Diminished sevenths repeat every 3 semitones and augmented triads every 4,
so only 3 and 4 distinct pitch sets exist. These tools dedupe by pitch-set
content, not by chord equality: C dim7 and Eb dim7 are different chords
with the same notes.
"""

from __future__ import annotations

import logging

from chuk_mcp_harmony.core import Chord, ChordFactory, ChordQuality, PitchClass

logger = logging.getLogger(__name__)


def _structural_key(chord: Chord) -> tuple[int, ...]:
    return tuple(sorted(pc.value for pc in chord.pitch_classes))


def _connecting(quality: ChordQuality, source: Chord, target: Chord) -> list[Chord]:
    seen: set[tuple[int, ...]] = set()
    connections = []

    for root in range(12):
        candidate = Chord(PitchClass(root), quality)
        key = _structural_key(candidate)
        if key in seen:
            continue
        seen.add(key)

        with_source = PitchClass.shared_notes(candidate.pitch_classes, source.pitch_classes)
        with_target = PitchClass.shared_notes(candidate.pitch_classes, target.pitch_classes)
        if with_source and with_target:
            connections.append(candidate)

    return connections


def diminished_bridge(source: Chord, target: Chord) -> list[Chord]:
    """
    Diminished sevenths sharing at least one note with both chords.

    At most 3 results, one per distinct dim7 pitch set, lowest root first.
    """
    return _connecting(ChordQuality.DIM7, source, target)


def augmented_connections(source: Chord, target: Chord) -> list[Chord]:
    """
    Augmented triads sharing at least one note with both chords.

    At most 4 results, one per distinct augmented pitch set.
    """
    return _connecting(ChordQuality.AUGMENTED, source, target)


def augmented_reachable_triads(aug: Chord) -> list[Chord]:
    """
    Major and minor triads reachable by moving one note of a triad a semitone.

    Each note is moved down and then up while the others stay put. For an
    augmented triad every move lands on a major or minor triad, giving
    exactly 6 distinct chords.
    """
    notes = aug.pitch_classes
    results: list[Chord] = []

    for i in range(len(notes)):
        for delta in (-1, 1):
            moved = [note.transpose(delta) if j == i else note for j, note in enumerate(notes)]
            triad = _identify_triad(frozenset(pc.value for pc in moved))
            if triad is not None and triad not in results:
                results.append(triad)

    logger.debug("%s reaches %d triads", aug, len(results))
    return results


def _identify_triad(values: frozenset[int]) -> Chord | None:
    # First major or minor triad whose pitch set matches exactly
    for chord in ChordFactory.all_triads():
        if chord.pitch_set == values:
            return chord
    return None
