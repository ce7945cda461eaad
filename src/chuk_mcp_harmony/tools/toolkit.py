"""
Toolkit tools - MCP tools for harmonic transformations.

Tools for secondary dominants, dominant chains, tritone substitutions,
diminished and augmented connections, and pivot chords.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.constants import DEFAULT_KEY, MAX_CHAIN_LENGTH, ErrorMessages
from chuk_mcp_harmony.toolkit import toolkit
from chuk_mcp_harmony.tools.chords import chord_payload, parse_chord, parse_key

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_toolkit_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register harmonic transformation tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_secondary_dominant(target: str, key: str = DEFAULT_KEY) -> str:
        """
        Get the secondary dominant (V7) of a chord.

        Args:
            target: Chord to be tonicized (e.g., 'Dm')
            key: Key used for spelling

        Returns:
            JSON string with the dominant seventh chord

        Example:
            harmony_secondary_dominant(target="Dm")  # A7, V/ii
        """
        try:
            chord = parse_chord(target)
            flats = parse_key(key).prefer_flats
            result = toolkit.secondary_dominant(chord)
            return json.dumps({"status": "success", "chord": chord_payload(result, flats)})
        except Exception as e:
            logger.exception("Failed to compute secondary dominant")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_secondary_dominant"] = harmony_secondary_dominant

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_dominant_chain(target: str, length: int, key: str = DEFAULT_KEY) -> str:
        """
        Build a chain of secondary dominants resolving to a chord.

        Each dominant seventh resolves down a fifth to the next chord.

        Args:
            target: Final chord of the chain
            length: Number of dominants before the target (0-11)
            key: Key used for spelling

        Returns:
            JSON string with the chain, target last

        Example:
            harmony_dominant_chain(target="C", length=3)  # A7 D7 G7 C
        """
        try:
            if not 0 <= length <= MAX_CHAIN_LENGTH:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_CHAIN_LENGTH.format(
                            length=length, maximum=MAX_CHAIN_LENGTH
                        ),
                    }
                )

            chord = parse_chord(target)
            flats = parse_key(key).prefer_flats
            chain = toolkit.dominant_chain(chord, length)
            return json.dumps(
                {"status": "success", "chain": [chord_payload(c, flats) for c in chain]}
            )
        except Exception as e:
            logger.exception("Failed to build dominant chain")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_dominant_chain"] = harmony_dominant_chain

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_tritone_substitution(chord: str, key: str = DEFAULT_KEY) -> str:
        """
        Get the tritone substitution of a chord.

        The substitute is the dominant seventh a tritone away; it shares the
        original's 3rd and 7th.

        Args:
            chord: Chord to substitute (usually a dom7, e.g. 'G7')
            key: Key used for spelling

        Returns:
            JSON string with the substitute chord

        Example:
            harmony_tritone_substitution(chord="G7")  # C#7 / Db7
        """
        try:
            original = parse_chord(chord)
            flats = parse_key(key).prefer_flats
            result = toolkit.tritone_substitution(original)
            return json.dumps({"status": "success", "chord": chord_payload(result, flats)})
        except Exception as e:
            logger.exception("Failed to compute tritone substitution")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_tritone_substitution"] = harmony_tritone_substitution

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_diminished_bridge(source: str, target: str, key: str = DEFAULT_KEY) -> str:
        """
        Find diminished seventh chords that bridge two chords.

        A bridge shares at least one note with each chord. Only three
        distinct diminished sevenths exist, so at most three are returned.

        Args:
            source: Chord to move from
            target: Chord to move to
            key: Key used for spelling

        Returns:
            JSON string with the bridging chords

        Example:
            harmony_diminished_bridge(source="C", target="Eb")
        """
        try:
            src = parse_chord(source)
            dst = parse_chord(target)
            flats = parse_key(key).prefer_flats
            bridges = toolkit.diminished_bridge(src, dst)
            return json.dumps(
                {"status": "success", "bridges": [chord_payload(c, flats) for c in bridges]}
            )
        except Exception as e:
            logger.exception("Failed to find diminished bridges")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_diminished_bridge"] = harmony_diminished_bridge

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_augmented_connections(
        source: str, target: str, key: str = DEFAULT_KEY
    ) -> str:
        """
        Find augmented triads that connect two chords.

        Each connection also lists the six major/minor triads reachable
        from it by moving one note a semitone.

        Args:
            source: Chord to move from
            target: Chord to move to
            key: Key used for spelling

        Returns:
            JSON string with connecting augmented triads

        Example:
            harmony_augmented_connections(source="C", target="Am")
        """
        try:
            src = parse_chord(source)
            dst = parse_chord(target)
            flats = parse_key(key).prefer_flats
            connections = toolkit.augmented_connections(src, dst)
            return json.dumps(
                {
                    "status": "success",
                    "connections": [
                        {
                            **chord_payload(aug, flats),
                            "reachable_triads": [
                                c.symbol(flats) for c in toolkit.augmented_reachable_triads(aug)
                            ],
                        }
                        for aug in connections
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to find augmented connections")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_augmented_connections"] = harmony_augmented_connections

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_pivot_chords(from_key: str, to_key: str) -> str:
        """
        Find pivot chords for a modulation.

        Pivot chords are triads diatonic to both keys.

        Args:
            from_key: Current key (e.g., 'C_major')
            to_key: Target key (e.g., 'G_major')

        Returns:
            JSON string with pivot chords in the current key's degree order

        Example:
            harmony_pivot_chords(from_key="C_major", to_key="G_major")
        """
        try:
            a = parse_key(from_key)
            b = parse_key(to_key)
            pivots = toolkit.pivot_chords(a.root.value, a.mode, b.root.value, b.mode)
            return json.dumps(
                {
                    "status": "success",
                    "from_key": a.name(),
                    "to_key": b.name(),
                    "pivots": [chord_payload(c, a.prefer_flats) for c in pivots],
                }
            )
        except Exception as e:
            logger.exception("Failed to find pivot chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_pivot_chords"] = harmony_pivot_chords

    return tools
