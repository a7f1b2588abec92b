"""In-memory log for accumulating league events."""

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from swish.events import EventBus, LeagueEvent


@dataclass
class LogEntry:
    """Single entry in the event log."""

    timestamp: datetime
    kind: str
    text: str
    season: Optional[int]
    pids: tuple[int, ...] = ()
    tids: tuple[int, ...] = ()
    show_notification: bool = False
    persistent: bool = False


class EventLog:
    """
    In-memory accumulator for league events.

    Subscribes to an EventBus and keeps every event it sees, in order.
    """

    def __init__(self) -> None:
        """Initialize event log."""
        self.entries: list[LogEntry] = []
        self.events: list[LeagueEvent] = []

    def connect_to_event_bus(self, event_bus: EventBus) -> None:
        """Subscribe to every event from an event bus."""
        event_bus.subscribe_all(self._handle_event)

    def disconnect(self, event_bus: EventBus) -> None:
        event_bus.unsubscribe_all(self._handle_event)

    def _handle_event(self, event: LeagueEvent) -> None:
        self.events.append(event)
        self.entries.append(
            LogEntry(
                timestamp=event.timestamp,
                kind=event.kind,
                text=event.text,
                season=event.season,
                pids=tuple(event.pids),
                tids=tuple(event.tids),
                show_notification=event.show_notification,
                persistent=event.persistent,
            )
        )

    def of_kind(self, kind: str) -> list[LogEntry]:
        """Entries of one kind, in emission order."""
        return [e for e in self.entries if e.kind == kind]

    def for_player(self, pid: int) -> list[LogEntry]:
        """Entries that involve a player."""
        return [e for e in self.entries if pid in e.pids]

    @property
    def notifications(self) -> list[LogEntry]:
        """Entries that should be shown to the user."""
        return [e for e in self.entries if e.show_notification]

    def counts(self) -> Counter:
        """Number of entries per kind."""
        return Counter(e.kind for e in self.entries)

    def clear(self) -> None:
        self.entries.clear()
        self.events.clear()

    def __len__(self) -> int:
        return len(self.entries)

    def to_text(self) -> str:
        """Plain-text transcript, one line per entry."""
        lines = []
        for entry in self.entries:
            season = "" if entry.season is None else f"{entry.season} "
            lines.append(f"{season}[{entry.kind}] {entry.text}")
        return "\n".join(lines)
