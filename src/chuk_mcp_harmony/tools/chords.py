"""
Chord tools - MCP tools for chord and key lookup.

Tools for describing chords, listing diatonic chords and parsing notes.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.constants import DEFAULT_KEY, ErrorMessages
from chuk_mcp_harmony.core import (
    Chord,
    ChordFactory,
    InvalidChordSymbol,
    InvalidKey,
    InvalidNoteName,
    PitchClass,
    Scale,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def parse_key(key: str) -> Scale:
    """Parse a key string, raising with the standard message."""
    try:
        return Scale.parse(key)
    except InvalidKey as e:
        raise InvalidKey(ErrorMessages.INVALID_KEY.format(key=key)) from e


def parse_chord(symbol: str) -> Chord:
    """Parse a chord symbol, raising with the standard message."""
    try:
        return Chord.parse(symbol)
    except (InvalidChordSymbol, InvalidNoteName) as e:
        raise InvalidChordSymbol(ErrorMessages.INVALID_CHORD.format(symbol=symbol)) from e


def chord_payload(chord: Chord, prefer_flats: bool = False) -> dict[str, Any]:
    """JSON-friendly description of a chord."""
    return {
        "symbol": chord.symbol(prefer_flats),
        "root": chord.root.value,
        "quality": chord.quality.value,
        "pitch_classes": [pc.value for pc in chord.pitch_classes],
        "notes": [pc.spell(prefer_flats) for pc in chord.pitch_classes],
    }


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord lookup tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_describe_chord(symbol: str, key: str = DEFAULT_KEY) -> str:
        """
        Describe a chord: root, quality and pitch classes.

        Note names are spelled with flats when the key conventionally
        uses them (Db, Eb, F, Ab, Bb).

        Args:
            symbol: Chord symbol (e.g., 'Am7', 'Bb', 'F#dim')
            key: Key used for spelling (e.g., 'C_major', 'Eb_minor')

        Returns:
            JSON string with chord details

        Example:
            harmony_describe_chord(symbol="G7")
        """
        try:
            chord = parse_chord(symbol)
            scale = parse_key(key)
            payload = chord_payload(chord, scale.prefer_flats)
            payload["is_triad"] = chord.is_triad
            payload["in_key"] = all(scale.contains(pc) for pc in chord.pitch_classes)
            return json.dumps({"status": "success", "chord": payload})
        except Exception as e:
            logger.exception("Failed to describe chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_describe_chord"] = harmony_describe_chord

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_diatonic_chords(key: str, sevenths: bool = False) -> str:
        """
        List the seven diatonic chords of a key.

        Args:
            key: Key (e.g., 'C_major', 'A_minor')
            sevenths: Return seventh chords instead of triads

        Returns:
            JSON string with the chords in degree order

        Example:
            harmony_diatonic_chords(key="A_minor")
        """
        try:
            scale = parse_key(key)
            if sevenths:
                chords = ChordFactory.diatonic_sevenths(scale.root, scale.mode)
            else:
                chords = ChordFactory.diatonic_triads(scale.root, scale.mode)

            return json.dumps(
                {
                    "status": "success",
                    "key": scale.name(),
                    "chords": [chord_payload(c, scale.prefer_flats) for c in chords],
                }
            )
        except Exception as e:
            logger.exception("Failed to list diatonic chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_diatonic_chords"] = harmony_diatonic_chords

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_parse_note(name: str) -> str:
        """
        Parse a note name to its pitch class.

        Args:
            name: Note name (e.g., 'C#', 'Bb')

        Returns:
            JSON string with the pitch class and both spellings

        Example:
            harmony_parse_note(name="Bb")
        """
        try:
            pc = PitchClass.from_name(name)
            return json.dumps(
                {
                    "status": "success",
                    "pitch_class": pc.value,
                    "sharp": pc.spell(),
                    "flat": pc.spell(prefer_flats=True),
                }
            )
        except InvalidNoteName as e:
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_parse_note"] = harmony_parse_note

    return tools
