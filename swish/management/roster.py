"""Roster Manager - player transactions against a league store.

The lifecycle functions are pure: they take a player and return an
updated copy. The RosterManager is the layer that wires them to storage:
- Reads the player and whatever else the operation depends on
- Calls the operation
- Writes the result back and marks the players index dirty

Operations on one player run strictly in sequence (read, compute, write).
Callers must not run two of them on the same player concurrently.
"""

import logging
import random
from typing import Optional

from swish.core.contracts.free_agency import add_to_free_agents, gen_base_moods
from swish.core.league.settings import LeagueSettings
from swish.core.league.store import LeagueStore
from swish.core.models.player import Player
from swish.core.models.stats import PlayerStatsRow
from swish.core.valuation.value import update_values
from swish.events import EventBus
from swish.generators.player import PlayerFactory, PlayerGenerator
from swish.management.augment import augment_partial_player
from swish.management.feats import BoxScoreLine, GameResult, PlayerFeat, check_statistical_feat
from swish.management.health import draw_injury
from swish.management.lifecycle import (
    add_ratings_row,
    kill_one,
    new_stats_row,
    pick_fake_age_player,
    release,
    retire,
)

logger = logging.getLogger(__name__)

PLAYERS_INDEX = "players"


class RosterManager:
    """
    Runs player lifecycle operations against a LeagueStore.

    Usage:
        store = InMemoryLeagueStore(team_seasons)
        manager = RosterManager(settings, store, bus=bus, rng=random.Random(1))
        manager.release_player(pid)
        manager.retire_player(other_pid)
    """

    def __init__(
        self,
        settings: LeagueSettings,
        store: LeagueStore,
        bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
        factory: Optional[PlayerFactory] = None,
    ) -> None:
        self.settings = settings
        self.store = store
        self.bus = bus
        self.rng = rng or random.Random()
        self.factory = factory or PlayerGenerator(settings, rng=self.rng)

    def _save(self, player: Player) -> Player:
        saved = self.store.put_player(player)
        self.store.mark_dirty(PLAYERS_INDEX)
        return saved

    def base_moods(self) -> list[float]:
        """Base free agent moods for the current season."""
        return gen_base_moods(self.store.team_seasons(self.settings.season), self.settings, self.rng)

    # =========================================================================
    # Transactions
    # =========================================================================

    def retire_player(self, pid: int, notify: bool = True) -> Player:
        """Retire a player (and induct him into the Hall of Fame if deserved)."""
        player = self.store.get_player(pid)
        stats = self.store.stats_by_pid(pid)
        return self._save(retire(player, stats, self.settings, bus=self.bus, notify=notify))

    def release_player(self, pid: int, just_drafted: bool = False) -> Player:
        """Release a player to free agency, archiving any dead money."""
        player = self.store.get_player(pid)
        result = release(
            player,
            self.settings,
            self.base_moods(),
            self.rng,
            just_drafted=just_drafted,
            bus=self.bus,
        )
        if result.released is not None:
            self.store.add_released_player(result.released)
        return self._save(result.player)

    def make_free_agent(self, pid: int) -> Player:
        """Move a player into free agency without the release bookkeeping."""
        player = self.store.get_player(pid)
        return self._save(add_to_free_agents(player, self.base_moods(), self.settings, self.rng))

    def kill_one(self) -> Optional[Player]:
        """Random tragedy. Returns the dead player, if anyone died."""
        return kill_one(self.store, self.settings, self.rng, bus=self.bus)

    # =========================================================================
    # Bookkeeping
    # =========================================================================

    def refresh_values(self, pid: int) -> Player:
        """Recompute a player's cached value estimates."""
        player = self.store.get_player(pid)
        return self._save(update_values(player, self.store.stats_by_pid(pid), self.settings))

    def injure_player(self, pid: int, health_rank: int) -> Player:
        """Give a player a random injury."""
        player = self.store.get_player(pid).copy()
        player.injury = draw_injury(health_rank, self.settings, self.rng)
        logger.info(
            "%s injured: %s (%d games)",
            player.full_name,
            player.injury.type,
            player.injury.games_remaining,
        )
        return self._save(player)

    def start_stats_row(self, pid: int, playoffs: bool = False) -> PlayerStatsRow:
        """Open a stats row for the player's current team and season."""
        player = self.store.get_player(pid)
        updated, row = new_stats_row(player, self.settings, self.store.stats_by_pid(pid), playoffs)
        self.store.add_stats_row(row)
        self._save(updated)
        return row

    def start_ratings_row(self, pid: int, scouting_rank: int) -> Player:
        """Carry the player's ratings into the current season."""
        player = self.store.get_player(pid)
        return self._save(add_ratings_row(player, scouting_rank, self.settings, self.rng))

    def record_game_line(
        self,
        pid: int,
        tid: int,
        line: BoxScoreLine,
        result: GameResult,
    ) -> Optional[PlayerFeat]:
        """Check a finished game line for a feat and store it if there is one."""
        feat = check_statistical_feat(pid, tid, line, result, self.settings, bus=self.bus)
        if feat is not None:
            self.store.add_feat(feat)
        return feat

    def fake_age_player(self) -> Optional[Player]:
        """Pick a rostered player to be revealed as older than listed."""
        players = []
        for tid in range(self.settings.num_teams):
            players.extend(self.store.players_by_tid(tid))
        return pick_fake_age_player(players, self.settings, self.rng)

    # =========================================================================
    # Import
    # =========================================================================

    def import_player(
        self,
        data: dict,
        scouting_rank: int,
        version: Optional[int] = None,
    ) -> Player:
        """
        Complete a partial player record and add it to the league.

        Raises:
            PlayerRecordError: If the record is malformed
        """
        player, stats = augment_partial_player(
            data,
            self.settings,
            self.factory,
            self.rng,
            scouting_rank,
            version=version,
        )
        saved = self._save(player)
        for row in stats:
            row.pid = saved.pid
            self.store.add_stats_row(row)
        logger.info("Imported %s (pid %s)", saved.full_name, saved.pid)
        return saved
