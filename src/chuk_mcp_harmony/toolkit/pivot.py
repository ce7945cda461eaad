"""
Pivot chords - triads diatonic to two keys, used to modulate between them.
"""

from __future__ import annotations

from chuk_mcp_harmony.core import Chord, ChordFactory, Mode


def pivot_chords(
    key_root_a: int,
    mode_a: Mode | str,
    key_root_b: int,
    mode_b: Mode | str,
) -> list[Chord]:
    """
    Diatonic triads of key A that are also diatonic triads of key B.

    Results are in key A's degree order. Matching is by chord equality
    (root and quality).

    Example: pivot_chords(0, 'major', 7, 'major') = [C, Em, G, Am]
    """
    in_b = set(ChordFactory.diatonic_triads(key_root_b, mode_b))
    return [chord for chord in ChordFactory.diatonic_triads(key_root_a, mode_a) if chord in in_b]
