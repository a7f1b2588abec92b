"""
League event publisher.

Transactions (retirements, releases, deaths, feats) are announced here so
the event log and any user notifications can react without the lifecycle
code knowing about them.
"""

from collections import defaultdict
from typing import Callable, Optional

from swish.events.types import LeagueEvent

EventHandler = Callable[[LeagueEvent], None]


class EventBus:
    """
    Routes league events to handlers by event class.

    A handler registered for a class also receives its subclasses, so
    handlers on LeagueEvent see every transaction. The most specific
    handlers run first.

    Example:
        bus = EventBus()
        bus.subscribe(TragedyEvent, lambda e: print(e.text))
        bus.subscribe_all(event_log_handler)
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        """Call handler for every event of event_type or a subclass."""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        self.subscribe(LeagueEvent, handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        """Stop sending every event to handler. Unknown handlers are ignored."""
        handlers = self._handlers[LeagueEvent]
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: LeagueEvent) -> None:
        for event_type in type(event).__mro__:
            for handler in list(self._handlers.get(event_type, ())):
                handler(event)
            if event_type is LeagueEvent:
                break


def emit(bus: Optional[EventBus], event: LeagueEvent) -> None:
    """Emit on a bus if there is one."""
    if bus is not None:
        bus.emit(event)
