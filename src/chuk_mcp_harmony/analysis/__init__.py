"""
Harmonic analysis engines.

This module provides:
- ProximityEngine: Ranks chords by shared notes with the tonic
- ClassicalFunctionAnalyzer / SyntacticalFunctionAnalyzer: Function labels
- VoiceLeadingAnalyzer: Common tones between adjacent chords
- analyze_progression: All of the above for a whole progression
"""

from chuk_mcp_harmony.analysis.functions import (
    AnalysisSystem,
    ClassicalFunctionAnalyzer,
    FunctionLabel,
    HarmonicFunction,
    SectionAnalyzer,
    SyntacticalFunctionAnalyzer,
    SyntacticalLabel,
    SyntacticalRole,
    classical_analyzer,
    get_section_analyzer,
    syntactical_analyzer,
)
from chuk_mcp_harmony.analysis.proximity import (
    ProximityEngine,
    ProximityLevel,
    RankedChord,
    proximity_engine,
)
from chuk_mcp_harmony.analysis.report import (
    ProgressionAnalysis,
    SectionAnalysis,
    analyze_progression,
)
from chuk_mcp_harmony.analysis.voice_leading import (
    VoiceLeadingAnalyzer,
    VoiceLeadingResult,
    voice_leading_analyzer,
)

__all__ = [
    # Proximity
    "ProximityEngine",
    "ProximityLevel",
    "RankedChord",
    "proximity_engine",
    # Functions
    "AnalysisSystem",
    "ClassicalFunctionAnalyzer",
    "FunctionLabel",
    "HarmonicFunction",
    "SectionAnalyzer",
    "SyntacticalFunctionAnalyzer",
    "SyntacticalLabel",
    "SyntacticalRole",
    "classical_analyzer",
    "get_section_analyzer",
    "syntactical_analyzer",
    # Voice leading
    "VoiceLeadingAnalyzer",
    "VoiceLeadingResult",
    "voice_leading_analyzer",
    # Report
    "ProgressionAnalysis",
    "SectionAnalysis",
    "analyze_progression",
]
