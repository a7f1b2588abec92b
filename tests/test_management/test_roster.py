"""Tests for RosterManager."""

import random

import pytest

from swish.core.enums import TeamSlot
from swish.core.errors import PlayerNotFoundError, PlayerRecordError
from swish.core.models import PlayerStatsRow
from swish.core.ratings import RATING_KEYS
from swish.management import BoxScoreLine, GameResult, RosterManager, TeamResult


@pytest.fixture
def manager(settings, store, bus, reference_factory, prospect, veteran) -> RosterManager:
    """Manager over a store holding the prospect (team 0) and the veteran (team 1)."""
    store.put_player(prospect)
    store.put_player(veteran)
    return RosterManager(settings, store, bus=bus, rng=random.Random(42), factory=reference_factory)


class TestTransactions:
    """Test transactions written through to the store."""

    def test_retire_player(self, manager, store, event_log):
        """Retired players are saved and the index marked dirty."""
        retired = manager.retire_player(2)
        assert store.get_player(2).tid == TeamSlot.RETIRED
        assert retired.retired_year == 2025
        assert "players" in store.dirty
        assert event_log.counts()["retired"] == 1

    def test_release_player(self, manager, store, event_log):
        """Released players become free agents and the contract is archived."""
        released = manager.release_player(2)
        assert released.tid == TeamSlot.FREE_AGENT
        assert len(released.free_agent_mood) == 30
        assert store.released_players[0].contract.amount == 12000
        assert event_log.of_kind("release")[0].text == "The New York Knicks released Old Veteran."

    def test_release_just_drafted(self, manager, store):
        """Fresh draftees leave no dead money."""
        manager.release_player(1, just_drafted=True)
        assert store.released_players == []
        assert store.get_player(1).is_free_agent

    def test_make_free_agent(self, manager, store):
        """Free agency without a release record."""
        manager.make_free_agent(2)
        assert store.get_player(2).is_free_agent
        assert store.released_players == []

    def test_missing_player(self, manager):
        """Unknown ids raise."""
        with pytest.raises(PlayerNotFoundError):
            manager.retire_player(404)

    def test_kill_one(self, manager, store, event_log):
        """Tragedies go through the store."""
        manager.settings = manager.settings.evolve(num_teams=2)
        dead = manager.kill_one()
        assert dead is not None
        assert store.get_player(dead.pid).died_year == 2025
        assert event_log.counts()["tragedy"] == 1


class TestBookkeeping:
    """Test per-season bookkeeping through the manager."""

    def test_refresh_values(self, manager, store):
        """Values are recomputed from stored stats."""
        store.add_stats_row(PlayerStatsRow(pid=2, tid=1, season=2024, minutes=2000, per=20))
        updated = manager.refresh_values(2)
        assert updated.values.no_pot == pytest.approx(73.5)
        assert store.get_player(2).values.no_pot == pytest.approx(73.5)

    def test_injure_player(self, manager, store):
        """Injuries are drawn and saved."""
        injured = manager.injure_player(1, health_rank=5)
        assert not injured.injury.is_healthy
        assert store.get_player(1).injury == injured.injury

    def test_start_stats_row(self, manager, store):
        """Stats rows are opened and the player's teams updated."""
        store.get_player(2).tid = 4
        row = manager.start_stats_row(2)
        assert row.key == (2, 4, 2025, False)
        assert store.stats_by_pid(2) == [row]
        assert store.get_player(2).stats_tids == [1, 4]

    def test_start_ratings_row(self, manager, store):
        """A new ratings row is appended."""
        manager.start_ratings_row(1, scouting_rank=3)
        assert len(store.get_player(1).ratings) == 2

    def test_record_game_line(self, manager, store):
        """Feats are stored; ordinary games are not."""
        result = GameResult(gid=3, teams=(TeamResult(tid=0, pts=101), TeamResult(tid=1, pts=99)))
        big = BoxScoreLine(name="Young Prospect", pts=55)
        small = BoxScoreLine(name="Young Prospect", pts=5)

        assert manager.record_game_line(1, 0, big, result) is not None
        assert manager.record_game_line(1, 0, small, result) is None
        assert len(store.feats) == 1
        assert store.feats[0].score == "101-99"

    def test_fake_age_player(self, manager):
        """Only the 20 year old qualifies."""
        assert manager.fake_age_player().pid == 1


class TestImport:
    """Test importing partial records."""

    def test_import_player(self, manager, store):
        """Imported players get a pid and their stats are stored."""
        saved = manager.import_player(
            {
                "name": "New Guy",
                "tid": 2,
                "ratings": [{key: 55 for key in RATING_KEYS}],
                "stats": [{"season": 2024, "gp": 70, "min": 2100, "per": 14}],
            },
            scouting_rank=12,
        )
        assert saved.pid == 3
        assert saved.full_name == "New Guy"
        assert store.get_player(3).tid == 2
        (row,) = store.stats_by_pid(3)
        assert row.pid == 3
        assert row.minutes == 2100

    def test_import_rejects_bad_record(self, manager, store):
        """Malformed records never reach the store."""
        with pytest.raises(PlayerRecordError):
            manager.import_player({"name": "No Ratings", "tid": 0}, scouting_rank=1)
        assert len(store) == 2
