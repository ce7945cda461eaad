"""
Constants for the harmony MCP server.

No magic strings - tool payload fields and messages live here.
"""

from typing import Literal

# Schema versions - frozen for v1
SchemaVersion = Literal["progression/v1"]

DEFAULT_KEY = "C_major"

# Longest dominant chain a tool will build
MAX_CHAIN_LENGTH = 11


class ErrorMessages:
    """Standardized error messages."""

    INVALID_KEY = "Invalid key: '{key}'. Expected format like 'C_major' or 'Eb_minor'."
    INVALID_CHORD = "Invalid chord symbol: '{symbol}'. Expected e.g. 'C', 'F#m', 'Bbmaj7'."
    INVALID_CHAIN_LENGTH = "Invalid chain length: {length}. Must be between 0 and {maximum}."
    UNKNOWN_SYSTEM = "Unknown analysis system: '{system}'. Use 'classical' or 'syntactical'."
    EMPTY_PROGRESSION = "Progression has no chords."
