"""
Progression tools - MCP tools for whole-progression analysis and YAML export.

Progressions travel as YAML text; nothing here touches the filesystem.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import yaml

from chuk_mcp_harmony.analysis import analyze_progression
from chuk_mcp_harmony.constants import DEFAULT_KEY, ErrorMessages
from chuk_mcp_harmony.models import Progression
from chuk_mcp_harmony.tools.chords import parse_chord, parse_key

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_progression_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register progression tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_export_yaml(
        chords: list[str],
        key: str = DEFAULT_KEY,
        name: str = "Untitled",
        beats: int = 4,
    ) -> str:
        """
        Build a progression document from chord symbols.

        The YAML stores each chord as its root and quality, which is all a
        persistence or MIDI-export layer needs to rebuild it.

        Args:
            chords: Chord symbols in order
            key: Key (e.g., 'C_major')
            name: Progression name
            beats: Duration of each chord in beats

        Returns:
            JSON string with the YAML document

        Example:
            harmony_export_yaml(chords=["C", "Am", "F", "G7"], name="doo-wop")
        """
        try:
            parse_key(key)
            for symbol in chords:
                parse_chord(symbol)

            progression = Progression.from_symbols(
                chords, key=key, name=name, duration_beats=beats
            )
            yaml_str = yaml.safe_dump(
                progression.to_yaml_dict(),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
            return json.dumps({"status": "success", "yaml": yaml_str})
        except Exception as e:
            logger.exception("Failed to export progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_export_yaml"] = harmony_export_yaml

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_analyze_progression(progression_yaml: str) -> str:
        """
        Analyze a whole progression document.

        Every section gets classical labels, syntactical labels and voice
        leading; moves with no common tone are listed as rough transitions.

        Args:
            progression_yaml: YAML document as produced by harmony_export_yaml.
                Chords may also be written as plain symbols.

        Returns:
            JSON string with the full analysis

        Example:
            harmony_analyze_progression(progression_yaml=exported["yaml"])
        """
        try:
            data = yaml.safe_load(progression_yaml)
            if not isinstance(data, dict):
                return json.dumps({"status": "error", "message": "Expected a YAML mapping."})

            progression = Progression.from_yaml_dict(data)
            if not progression.all_chords():
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.EMPTY_PROGRESSION}
                )

            analysis = analyze_progression(progression)
            prefer_flats = progression.get_scale().prefer_flats
            return json.dumps(
                {"status": "success", "analysis": analysis.to_dict(prefer_flats)},
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to analyze progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_analyze_progression"] = harmony_analyze_progression

    return tools
