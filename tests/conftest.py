"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_harmony.core import Chord, ChordQuality, PitchClass


@pytest.fixture
def c_major() -> Chord:
    """The C major triad, the usual tonic in these tests."""
    return Chord(PitchClass.C, ChordQuality.MAJOR)


@pytest.fixture
def a_minor() -> Chord:
    """The A minor triad."""
    return Chord(PitchClass.A, ChordQuality.MINOR)


@pytest.fixture
def g7() -> Chord:
    """The G dominant seventh."""
    return Chord(PitchClass.G, ChordQuality.DOM7)
