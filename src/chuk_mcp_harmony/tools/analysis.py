"""
Analysis tools - MCP tools for proximity, function and voice-leading analysis.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.analysis import (
    AnalysisSystem,
    get_section_analyzer,
    proximity_engine,
    voice_leading_analyzer,
)
from chuk_mcp_harmony.constants import DEFAULT_KEY, ErrorMessages
from chuk_mcp_harmony.core import ChordFactory
from chuk_mcp_harmony.tools.chords import parse_chord, parse_key

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_analysis_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register analysis tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_rank_chords(key: str, include_sevenths: bool = False) -> str:
        """
        Rank chords by closeness to the tonic of a key.

        Every major and minor triad (and optionally every seventh chord) is
        graded by the notes it shares with the tonic chord and grouped into
        tonic, close (2+ shared), medium (1) and far (0).

        Args:
            key: Key (e.g., 'C_major', 'A_minor')
            include_sevenths: Also rank the 60 seventh chords

        Returns:
            JSON string with chords grouped by proximity

        Example:
            harmony_rank_chords(key="G_major")
        """
        try:
            scale = parse_key(key)
            tonic = scale.tonic_chord()
            candidates = ChordFactory.all_triads()
            if include_sevenths:
                candidates += ChordFactory.all_sevenths()

            ranked = proximity_engine.rank_all(tonic, candidates)
            groups = proximity_engine.group_by_proximity(ranked)

            return json.dumps(
                {
                    "status": "success",
                    "key": scale.name(),
                    "tonic": tonic.symbol(scale.prefer_flats),
                    "groups": {
                        level.value: [
                            {
                                "symbol": r.chord.symbol(scale.prefer_flats),
                                "shared_notes": [pc.value for pc in r.shared_notes],
                                "shared_note_count": r.shared_note_count,
                            }
                            for r in items
                        ]
                        for level, items in groups.items()
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to rank chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_rank_chords"] = harmony_rank_chords

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_analyze_functions(
        chords: list[str],
        key: str = DEFAULT_KEY,
        system: str = "classical",
    ) -> str:
        """
        Label each chord of a section with its harmonic function.

        Systems:
        - classical: T/S/D and Roman numeral from the chord's scale degree
        - syntactical: role from position (opening, transitional,
          penultimate, closing)

        Args:
            chords: Chord symbols in order (e.g., ['C', 'Am', 'F', 'G', 'C'])
            key: Key (e.g., 'C_major')
            system: 'classical' or 'syntactical'

        Returns:
            JSON string with one label per chord

        Example:
            harmony_analyze_functions(chords=["C", "F", "G7", "C"], key="C_major")
        """
        try:
            try:
                analysis_system = AnalysisSystem(system)
            except ValueError:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_SYSTEM.format(system=system),
                    }
                )

            scale = parse_key(key)
            parsed = [parse_chord(s) for s in chords]
            analyzer = get_section_analyzer(analysis_system)
            labels = analyzer.analyze_section(parsed, scale.root.value, scale.mode)

            return json.dumps(
                {
                    "status": "success",
                    "system": analysis_system.value,
                    "key": scale.name(),
                    "labels": [
                        {"symbol": chord.symbol(scale.prefer_flats), **label.to_dict()}
                        for chord, label in zip(parsed, labels, strict=True)
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to analyze functions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_analyze_functions"] = harmony_analyze_functions

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_voice_leading(chords: list[str]) -> str:
        """
        Find common tones between consecutive chords.

        A move with no common tone is flagged as not smooth.

        Args:
            chords: Chord symbols in order

        Returns:
            JSON string with one result per consecutive pair

        Example:
            harmony_voice_leading(chords=["C", "Am", "F", "G"])
        """
        try:
            parsed = [parse_chord(s) for s in chords]
            results = voice_leading_analyzer.analyze_progression(parsed)

            return json.dumps(
                {
                    "status": "success",
                    "transitions": [
                        {
                            "from": a.symbol(),
                            "to": b.symbol(),
                            **result.to_dict(),
                        }
                        for a, b, result in zip(parsed[:-1], parsed[1:], results, strict=True)
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to analyze voice leading")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_voice_leading"] = harmony_voice_leading

    return tools
