"""Event types for league transactions and notable games."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass
class LeagueEvent:
    """Base class for all league events."""

    kind: str = ""
    text: str = ""
    show_notification: bool = False
    pids: list[int] = field(default_factory=list)
    tids: list[int] = field(default_factory=list)
    persistent: bool = False
    season: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class RetiredEvent(LeagueEvent):
    """Fired when a player retires."""

    kind: str = "retired"
    age: Optional[int] = None


@dataclass
class HallOfFameEvent(LeagueEvent):
    """Fired when a retiring player is inducted into the Hall of Fame."""

    kind: str = "hallOfFame"


@dataclass
class ReleasedEvent(LeagueEvent):
    """Fired when a team releases a player."""

    kind: str = "release"


@dataclass
class TragedyEvent(LeagueEvent):
    """Fired when a player dies."""

    kind: str = "tragedy"
    persistent: bool = True


@dataclass
class PlayerFeatEvent(LeagueEvent):
    """Fired when a player has a statistically notable game."""

    kind: str = "playerFeat"
    gid: Optional[int] = None
    stats: dict[str, Any] = field(default_factory=dict)
