"""
Harmonic transformation tools.

Tools are organized by technique:
- dominants - secondary dominants, dominant chains, tritone substitution
- symmetric - diminished bridges, augmented connections
- pivot - pivot chords between keys
- facade - HarmonicToolkit over all of them
"""

from chuk_mcp_harmony.toolkit.dominants import (
    dominant_chain,
    secondary_dominant,
    tritone_substitution,
)
from chuk_mcp_harmony.toolkit.facade import HarmonicToolkit, toolkit
from chuk_mcp_harmony.toolkit.pivot import pivot_chords
from chuk_mcp_harmony.toolkit.symmetric import (
    augmented_connections,
    augmented_reachable_triads,
    diminished_bridge,
)

__all__ = [
    "HarmonicToolkit",
    "toolkit",
    "secondary_dominant",
    "dominant_chain",
    "tritone_substitution",
    "diminished_bridge",
    "augmented_connections",
    "augmented_reachable_triads",
    "pivot_chords",
]
