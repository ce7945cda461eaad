"""
Dominant tools - secondary dominants, dominant chains, tritone substitution.

All three build dominant seventh chords by transposing a root:
a perfect fifth (7 semitones) up for a secondary dominant, a tritone
(6 semitones) for a substitution.
"""

from __future__ import annotations

from chuk_mcp_harmony.core import Chord, ChordQuality

PERFECT_FIFTH = 7
TRITONE = 6


def secondary_dominant(target: Chord) -> Chord:
    """
    The dominant seventh a perfect fifth above the target's root.

    Example: secondary_dominant(Dm) = A7 (V/ii)
    """
    return Chord(target.root.transpose(PERFECT_FIFTH), ChordQuality.DOM7)


def dominant_chain(target: Chord, length: int) -> list[Chord]:
    """
    A chain of secondary dominants resolving to the target.

    Each chord is a dominant seventh a fifth above the next, and the
    target is always last. length=3 to C gives A7 D7 G7 C.

    Raises:
        ValueError: If length is negative
    """
    if length < 0:
        raise ValueError(f"Chain length must be >= 0, got {length}")

    chain = [target]
    current = target
    for _ in range(length):
        current = secondary_dominant(current)
        chain.insert(0, current)
    return chain


def tritone_substitution(chord: Chord) -> Chord:
    """
    The dominant seventh a tritone away.

    The result is always a dom7, whatever the input quality. Applied twice
    it returns to the original root.
    """
    return Chord(chord.root.transpose(TRITONE), ChordQuality.DOM7)
