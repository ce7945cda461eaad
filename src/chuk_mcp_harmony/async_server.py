#!/usr/bin/env python3
"""
Async Harmony MCP Server using chuk-mcp-server

This server exposes a harmonic-analysis engine as MCP tools. Given a key
and a tonic, it ranks chords by closeness, applies standard harmonic
transformations and labels chords with their function.

The server provides tools for:
- Describing chords and listing diatonic chords
- Ranking chords by shared notes with the tonic
- Classical and syntactical function analysis, voice leading
- Secondary dominants, tritone substitutions, diminished/augmented
  connections and pivot chords
- Analyzing and exporting whole progressions as YAML
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_harmony.tools import (
    register_analysis_tools,
    register_chord_tools,
    register_progression_tools,
    register_toolkit_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-harmony")

# Register all tools
chord_tools = register_chord_tools(mcp)
analysis_tools = register_analysis_tools(mcp)
toolkit_tools = register_toolkit_tools(mcp)
progression_tools = register_progression_tools(mcp)

# Export tool functions for direct access
harmony_describe_chord = chord_tools["harmony_describe_chord"]
harmony_diatonic_chords = chord_tools["harmony_diatonic_chords"]
harmony_parse_note = chord_tools["harmony_parse_note"]

harmony_rank_chords = analysis_tools["harmony_rank_chords"]
harmony_analyze_functions = analysis_tools["harmony_analyze_functions"]
harmony_voice_leading = analysis_tools["harmony_voice_leading"]

harmony_secondary_dominant = toolkit_tools["harmony_secondary_dominant"]
harmony_dominant_chain = toolkit_tools["harmony_dominant_chain"]
harmony_tritone_substitution = toolkit_tools["harmony_tritone_substitution"]
harmony_diminished_bridge = toolkit_tools["harmony_diminished_bridge"]
harmony_augmented_connections = toolkit_tools["harmony_augmented_connections"]
harmony_pivot_chords = toolkit_tools["harmony_pivot_chords"]

harmony_export_yaml = progression_tools["harmony_export_yaml"]
harmony_analyze_progression = progression_tools["harmony_analyze_progression"]

logger.info("CHUK Harmony MCP Server initialized")
logger.info(
    "  Tools: %d",
    len(chord_tools) + len(analysis_tools) + len(toolkit_tools) + len(progression_tools),
)
