"""Event system for league transactions."""

from swish.events.bus import EventBus, emit
from swish.events.types import (
    HallOfFameEvent,
    LeagueEvent,
    PlayerFeatEvent,
    ReleasedEvent,
    RetiredEvent,
    TragedyEvent,
)

__all__ = [
    "EventBus",
    "HallOfFameEvent",
    "LeagueEvent",
    "PlayerFeatEvent",
    "ReleasedEvent",
    "RetiredEvent",
    "TragedyEvent",
    "emit",
]
