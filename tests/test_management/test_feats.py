"""Tests for statistical feat detection."""

import pytest

from swish.events import PlayerFeatEvent
from swish.management.feats import (
    BoxScoreLine,
    FeatKind,
    GameResult,
    TeamResult,
    check_statistical_feat,
    detect_feats,
    feat_text,
    join_phrases,
)


@pytest.fixture
def five_by_five() -> BoxScoreLine:
    """10 of everything."""
    return BoxScoreLine(name="Ace Fiver", pos="SF", minutes=40, pts=10, orb=3, drb=7, ast=10, stl=10, blk=10)


@pytest.fixture
def win_over_knicks() -> GameResult:
    """Boston 110, New York 95."""
    return GameResult(gid=77, teams=(TeamResult(tid=1, pts=95), TeamResult(tid=0, pts=110)))


# =============================================================================
# Detection Tests
# =============================================================================

class TestDetectFeats:
    """Test threshold checks."""

    def test_five_by_five(self, five_by_five):
        """5x5 is also a multi-double, and double-digit steals and blocks count on their own."""
        kinds, stats = detect_feats(five_by_five, 12)
        assert kinds == [FeatKind.ALL_AROUND, FeatKind.MULTI_DOUBLE, FeatKind.STEALS, FeatKind.BLOCKS]
        assert list(stats) == ["points", "rebounds", "assists", "steals", "blocks"]

    def test_triple_double(self):
        """Three categories in double digits."""
        line = BoxScoreLine(name="T", pts=12, drb=10, ast=11)
        kinds, stats = detect_feats(line, 12)
        assert kinds == [FeatKind.MULTI_DOUBLE]
        assert stats == {"points": 12, "rebounds": 10, "assists": 11}

    def test_fifty_points(self):
        """Big scoring nights."""
        kinds, stats = detect_feats(BoxScoreLine(name="S", pts=52, tp=10), 12)
        assert kinds == [FeatKind.POINTS, FeatKind.THREE_POINTERS]
        assert stats == {"points": 52, "three pointers": 10}

    def test_short_quarters_scale_by_sqrt(self):
        """3 minute quarters halve every threshold."""
        kinds, _ = detect_feats(BoxScoreLine(name="S", pts=26), 3)
        assert kinds == [FeatKind.POINTS]
        assert detect_feats(BoxScoreLine(name="S", pts=26), 12) == ([], {})

    def test_boundary_is_inclusive(self):
        """Exactly at the threshold counts."""
        kinds, _ = detect_feats(BoxScoreLine(name="R", orb=10, drb=15), 12)
        assert kinds == [FeatKind.REBOUNDS]


class TestText:
    """Test headline formatting."""

    @pytest.mark.parametrize(
        "parts, joined",
        [
            ([], ""),
            (["A"], "A"),
            (["A", "B"], "A and B"),
            (["A", "B", "C"], "A, B, and C"),
        ],
    )
    def test_join_phrases(self, parts, joined):
        """Oxford comma for three or more."""
        assert join_phrases(parts) == joined

    def test_article_before_eighty(self):
        """Scores starting with 8 read "an"."""
        text = feat_text("Zed", {"points": 50}, 88, 90, "Chicago Bulls")
        assert text == "Zed had 50 points in an 88-90 loss to the Chicago Bulls."


# =============================================================================
# Check Tests
# =============================================================================

class TestCheckStatisticalFeat:
    """Test the full feat check."""

    def test_feat_record_and_event(self, five_by_five, win_over_knicks, settings, bus, event_log):
        """A 5x5 produces a record and a notification for the user's team."""
        feat = check_statistical_feat(5, 0, five_by_five, win_over_knicks, settings, bus=bus)

        assert feat is not None
        assert feat.won
        assert feat.score == "110-95"
        assert feat.opp_tid == 1
        assert feat.stats["pts"] == 10
        assert not feat.playoffs
        assert feat.to_dict()["kinds"] == ["all_around", "multi_double", "steals", "blocks"]

        (entry,) = event_log.of_kind("playerFeat")
        assert entry.text == (
            "Ace Fiver had 10 points, 10 rebounds, 10 assists, 10 steals, and 10 blocks "
            "in a 110-95 win over the New York Knicks."
        )
        assert entry.show_notification
        assert isinstance(event_log.events[0], PlayerFeatEvent)
        assert event_log.events[0].gid == 77

    def test_losing_side(self, five_by_five, win_over_knicks, playoff_settings):
        """The other team's view of the same game."""
        feat = check_statistical_feat(6, 1, five_by_five, win_over_knicks, playoff_settings)
        assert not feat.won
        assert feat.score == "95-110"
        assert feat.playoffs

    def test_no_feat(self, win_over_knicks, settings, bus, event_log):
        """An ordinary line produces nothing."""
        line = BoxScoreLine(name="Role Player", pts=8, drb=4, ast=2)
        assert check_statistical_feat(9, 0, line, win_over_knicks, settings, bus=bus) is None
        assert len(event_log) == 0
