"""
League storage.

The player core never owns persistence. Everything it needs to read or
write goes through a LeagueStore, so tests and callers can swap in their
own backend.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from swish.core.errors import PlayerNotFoundError
from swish.core.models.player import Contract, Player

if TYPE_CHECKING:
    from swish.core.models.stats import PlayerStatsRow
    from swish.core.models.team import TeamSeason
    from swish.management.feats import PlayerFeat


@dataclass(frozen=True)
class ReleasedPlayer:
    """Dead money still owed to a released player."""

    pid: int
    tid: int
    contract: Contract

    def to_dict(self) -> dict:
        return {"pid": self.pid, "tid": self.tid, "contract": self.contract.to_dict()}


class LeagueStore(ABC):
    """
    Abstract interface for league persistence.

    Implementations are synchronous. Callers must not run two lifecycle
    operations on the same player at once.
    """

    @abstractmethod
    def team_seasons(self, season: int) -> list["TeamSeason"]:
        """All team rows for a season, ordered by tid."""
        pass

    @abstractmethod
    def players_by_tid(self, tid: int) -> list[Player]:
        """Players currently assigned to a team (or roster slot)."""
        pass

    @abstractmethod
    def get_player(self, pid: int) -> Player:
        """
        Get a player by id.

        Raises:
            PlayerNotFoundError: No player with that id
        """
        pass

    @abstractmethod
    def stats_by_pid(self, pid: int) -> list["PlayerStatsRow"]:
        """All stats rows for a player, oldest first."""
        pass

    @abstractmethod
    def put_player(self, player: Player) -> Player:
        """Insert or replace a player. Returns the stored player (with pid)."""
        pass

    @abstractmethod
    def add_stats_row(self, row: "PlayerStatsRow") -> None:
        pass

    @abstractmethod
    def add_released_player(self, record: ReleasedPlayer) -> None:
        pass

    @abstractmethod
    def add_feat(self, feat: "PlayerFeat") -> None:
        pass

    @abstractmethod
    def mark_dirty(self, index: str) -> None:
        """Signal that cached views of an index need refreshing."""
        pass


class InMemoryLeagueStore(LeagueStore):
    """Dict-backed store, used by tests and the demo."""

    def __init__(self, team_seasons: Optional[list["TeamSeason"]] = None) -> None:
        self._players: dict[int, Player] = {}
        self._stats: dict[int, list["PlayerStatsRow"]] = {}
        self._team_seasons: list["TeamSeason"] = list(team_seasons or [])
        self.released_players: list[ReleasedPlayer] = []
        self.feats: list["PlayerFeat"] = []
        self.dirty: set[str] = set()
        self._next_pid = 0

    def add_team_season(self, team_season: "TeamSeason") -> None:
        self._team_seasons.append(team_season)

    def team_seasons(self, season: int) -> list["TeamSeason"]:
        rows = [ts for ts in self._team_seasons if ts.season == season]
        return sorted(rows, key=lambda ts: ts.tid)

    def players_by_tid(self, tid: int) -> list[Player]:
        return [p for p in self._players.values() if p.tid == tid]

    def get_player(self, pid: int) -> Player:
        if pid not in self._players:
            raise PlayerNotFoundError(pid)
        return self._players[pid]

    def all_players(self) -> list[Player]:
        return list(self._players.values())

    def stats_by_pid(self, pid: int) -> list["PlayerStatsRow"]:
        return sorted(self._stats.get(pid, []), key=lambda ps: (ps.season, ps.playoffs))

    def put_player(self, player: Player) -> Player:
        if player.pid is None:
            player = player.copy()
            player.pid = self._next_pid
        self._next_pid = max(self._next_pid, player.pid + 1)
        self._players[player.pid] = player
        return player

    def add_stats_row(self, row: "PlayerStatsRow") -> None:
        self._stats.setdefault(row.pid, []).append(row)

    def add_released_player(self, record: ReleasedPlayer) -> None:
        self.released_players.append(record)

    def add_feat(self, feat: "PlayerFeat") -> None:
        self.feats.append(feat)

    def mark_dirty(self, index: str) -> None:
        self.dirty.add(index)

    def __len__(self) -> int:
        return len(self._players)
