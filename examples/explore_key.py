#!/usr/bin/env python3
"""
Example: Explore the harmony around a key.

This demonstrates the engine end to end: proximity ranking around the
tonic, harmonic transformations and function labels.

Usage:
    python examples/explore_key.py [KEY]
    # e.g. python examples/explore_key.py Eb_minor
"""

import sys

from chuk_mcp_harmony.analysis import ProximityLevel, classical_analyzer, proximity_engine
from chuk_mcp_harmony.core import ChordFactory, Scale
from chuk_mcp_harmony.toolkit import toolkit


def main() -> None:
    """Print an overview of one key."""
    scale = Scale.parse(sys.argv[1] if len(sys.argv) > 1 else "C_major")
    flats = scale.prefer_flats
    tonic = scale.tonic_chord()

    print(f"CHUK Harmony: {scale.name()}")
    print("=" * 40)
    print()

    # Diatonic chords with their classical function
    print("Diatonic triads:")
    for chord in ChordFactory.diatonic_triads(scale.root, scale.mode):
        label = classical_analyzer.analyze(chord, scale.root, scale.mode)
        print(f"  {chord.symbol(flats):6} {label.roman_numeral:5} {label.func.value}")
    print()

    # Proximity groups
    ranked = proximity_engine.rank_all(tonic, ChordFactory.all_triads())
    groups = proximity_engine.group_by_proximity(ranked)
    print("Triads by proximity to the tonic:")
    for level in ProximityLevel:
        symbols = ", ".join(r.chord.symbol(flats) for r in groups[level])
        print(f"  {level.value:7} {symbols}")
    print()

    # Transformations
    chain = toolkit.dominant_chain(tonic, 3)
    print("Dominant chain:     " + " -> ".join(c.symbol(flats) for c in chain))

    dominant = toolkit.secondary_dominant(tonic)
    sub = toolkit.tritone_substitution(dominant)
    print(f"Tritone sub of {dominant.symbol(flats)}: {sub.symbol(flats)}")

    relative = ChordFactory.diatonic_triads(scale.root, scale.mode)[5]
    bridges = toolkit.diminished_bridge(tonic, relative)
    print(
        f"Dim7 bridges {tonic.symbol(flats)} -> {relative.symbol(flats)}: "
        + ", ".join(c.symbol(flats) for c in bridges)
    )

    dominant_key = scale.root.transpose(7)
    pivots = toolkit.pivot_chords(scale.root, scale.mode, dominant_key, scale.mode)
    print("Pivots to the dominant key: " + ", ".join(c.symbol(flats) for c in pivots))


if __name__ == "__main__":
    main()
