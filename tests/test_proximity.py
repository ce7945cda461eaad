"""
Tests for proximity ranking.
"""

from chuk_mcp_harmony.analysis import ProximityEngine, ProximityLevel, proximity_engine
from chuk_mcp_harmony.core import Chord, ChordFactory, PitchClass


def symbols(ranked) -> list[str]:
    return [r.chord.symbol() for r in ranked]


class TestComputeProximity:
    """Tests for grading a single chord."""

    def test_tonic(self, c_major: Chord) -> None:
        """The tonic compared with itself is its own level."""
        ranked = proximity_engine.compute_proximity(c_major, c_major)
        assert ranked.proximity == ProximityLevel.TONIC
        assert ranked.shared_note_count == 3
        assert ranked.shared_notes == c_major.pitch_classes

    def test_close(self, c_major: Chord, a_minor: Chord) -> None:
        """Two shared notes is close."""
        ranked = proximity_engine.compute_proximity(c_major, a_minor)
        assert ranked.proximity == ProximityLevel.CLOSE
        assert ranked.shared_notes == (PitchClass.C, PitchClass.E)
        assert ranked.shared_note_count == 2

    def test_medium(self, c_major: Chord, g7: Chord) -> None:
        """One shared note is medium."""
        for candidate in (Chord.of(5, "major"), Chord.of(7, "major"), g7):
            ranked = proximity_engine.compute_proximity(c_major, candidate)
            assert ranked.proximity == ProximityLevel.MEDIUM
            assert ranked.shared_note_count == 1

    def test_far(self, c_major: Chord) -> None:
        """No shared notes is far."""
        ranked = proximity_engine.compute_proximity(c_major, Chord.of(6, "minor"))
        assert ranked.proximity == ProximityLevel.FAR
        assert ranked.shared_notes == ()

    def test_count_matches_notes(self, c_major: Chord) -> None:
        """shared_note_count always equals len(shared_notes)."""
        for candidate in ChordFactory.all_chords():
            ranked = proximity_engine.compute_proximity(c_major, candidate)
            assert ranked.shared_note_count == len(ranked.shared_notes)

    def test_same_notes_different_root_not_tonic(self) -> None:
        """Tonic level needs chord equality, not just equal pitch content."""
        c_dim7 = Chord.of(0, "dim7")
        ranked = proximity_engine.compute_proximity(c_dim7, Chord.of(3, "dim7"))
        assert ranked.proximity == ProximityLevel.CLOSE
        assert ranked.shared_note_count == 4


class TestRankAll:
    """Tests for ranking many chords."""

    def test_descending_order(self, c_major: Chord, a_minor: Chord) -> None:
        """Ranked by shared-note count, highest first."""
        candidates = [Chord.of(6, "minor"), Chord.of(5, "major"), a_minor, c_major]
        ranked = proximity_engine.rank_all(c_major, candidates)
        assert symbols(ranked) == ["C", "Am", "F", "F#m"]

    def test_stable_ties(self, c_major: Chord) -> None:
        """Ties keep input order."""
        candidates = [Chord.of(7, "major"), Chord.of(5, "major"), Chord.of(9, "major")]
        assert symbols(proximity_engine.rank_all(c_major, candidates)) == ["G", "F", "A"]
        assert symbols(proximity_engine.rank_all(c_major, candidates[::-1])) == ["A", "F", "G"]

    def test_keeps_every_candidate(self, c_major: Chord) -> None:
        """Nothing is dropped, including the tonic."""
        triads = ChordFactory.all_triads()
        ranked = proximity_engine.rank_all(c_major, triads)
        assert len(ranked) == 24
        assert ranked[0].chord == c_major
        counts = [r.shared_note_count for r in ranked]
        assert counts == sorted(counts, reverse=True)

    def test_empty(self, c_major: Chord) -> None:
        """No candidates, no results."""
        assert ProximityEngine().rank_all(c_major, []) == []


class TestGroupByProximity:
    """Tests for bucketing."""

    def test_all_levels_present(self, c_major: Chord) -> None:
        """Every level is a key even when empty."""
        groups = proximity_engine.group_by_proximity([])
        assert set(groups) == set(ProximityLevel)
        assert all(items == [] for items in groups.values())

    def test_triads_around_c(self, c_major: Chord) -> None:
        """Close triads to C major."""
        ranked = proximity_engine.rank_all(c_major, ChordFactory.all_triads())
        groups = proximity_engine.group_by_proximity(ranked)
        assert symbols(groups[ProximityLevel.TONIC]) == ["C"]
        assert symbols(groups[ProximityLevel.CLOSE]) == ["Cm", "Em", "Am"]
        assert sum(len(items) for items in groups.values()) == 24

    def test_level_matches_bucket(self, c_major: Chord) -> None:
        """Each item sits in the bucket of its own level."""
        ranked = proximity_engine.rank_all(c_major, ChordFactory.all_chords())
        for level, items in proximity_engine.group_by_proximity(ranked).items():
            assert all(item.proximity == level for item in items)
