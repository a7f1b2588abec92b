"""League configuration and storage."""

from swish.core.league.settings import LeagueSettings
from swish.core.league.store import InMemoryLeagueStore, LeagueStore, ReleasedPlayer

__all__ = [
    "InMemoryLeagueStore",
    "LeagueSettings",
    "LeagueStore",
    "ReleasedPlayer",
]
