"""
MCP tool implementations.

Tools are organized by domain:
- chords - Chord description, diatonic chords, note parsing
- analysis - Proximity ranking, function labels, voice leading
- toolkit - Harmonic transformations
- progressions - Whole-progression analysis and YAML export
"""

from chuk_mcp_harmony.tools.analysis import register_analysis_tools
from chuk_mcp_harmony.tools.chords import register_chord_tools
from chuk_mcp_harmony.tools.progressions import register_progression_tools
from chuk_mcp_harmony.tools.toolkit import register_toolkit_tools

__all__ = [
    "register_analysis_tools",
    "register_chord_tools",
    "register_progression_tools",
    "register_toolkit_tools",
]
