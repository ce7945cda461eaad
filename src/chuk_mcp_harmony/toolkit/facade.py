"""
HarmonicToolkit - one entry point for the harmonic transformation tools.
"""

from __future__ import annotations

from chuk_mcp_harmony.core import Chord, Mode
from chuk_mcp_harmony.toolkit.dominants import (
    dominant_chain,
    secondary_dominant,
    tritone_substitution,
)
from chuk_mcp_harmony.toolkit.pivot import pivot_chords
from chuk_mcp_harmony.toolkit.symmetric import (
    augmented_connections,
    augmented_reachable_triads,
    diminished_bridge,
)


class HarmonicToolkit:
    """
    Facade over the harmonic tools.

    Stateless; the module-level `toolkit` instance is shared.
    """

    def secondary_dominant(self, target: Chord) -> Chord:
        """Get the secondary dominant (V7) of a target chord."""
        return secondary_dominant(target)

    def dominant_chain(self, target: Chord, length: int) -> list[Chord]:
        """Build a chain of secondary dominants leading to the target."""
        return dominant_chain(target, length)

    def tritone_substitution(self, chord: Chord) -> Chord:
        """Get the tritone substitution of a chord (always dom7)."""
        return tritone_substitution(chord)

    def diminished_bridge(self, source: Chord, target: Chord) -> list[Chord]:
        """Find diminished 7th chords bridging two chords."""
        return diminished_bridge(source, target)

    def augmented_connections(self, source: Chord, target: Chord) -> list[Chord]:
        """Find augmented triads connecting two chords."""
        return augmented_connections(source, target)

    def augmented_reachable_triads(self, aug: Chord) -> list[Chord]:
        """Find triads reachable from an augmented triad by one semitone."""
        return augmented_reachable_triads(aug)

    def pivot_chords(
        self,
        key_root_a: int,
        mode_a: Mode | str,
        key_root_b: int,
        mode_b: Mode | str,
    ) -> list[Chord]:
        """Find triads diatonic to both keys."""
        return pivot_chords(key_root_a, mode_a, key_root_b, mode_b)


toolkit = HarmonicToolkit()
