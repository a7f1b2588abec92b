"""Tests for the event bus and event log."""

from swish.events import (
    EventBus,
    HallOfFameEvent,
    LeagueEvent,
    ReleasedEvent,
    RetiredEvent,
    TragedyEvent,
    emit,
)
from swish.logging import EventLog


class TestEventBus:
    """Test event routing."""

    def test_typed_subscription(self):
        """Handlers only see their event type."""
        bus = EventBus()
        seen = []
        bus.subscribe(RetiredEvent, seen.append)

        bus.emit(RetiredEvent(text="A retired."))
        bus.emit(ReleasedEvent(text="B released."))

        assert [e.text for e in seen] == ["A retired."]

    def test_base_class_sees_every_event(self):
        """Subscribing to LeagueEvent is the same as subscribing to all."""
        bus = EventBus()
        seen = []
        bus.subscribe(LeagueEvent, seen.append)

        bus.emit(RetiredEvent(text="A retired."))
        bus.emit(TragedyEvent(text="B died."))

        assert [e.kind for e in seen] == ["retired", "tragedy"]

    def test_specific_handlers_run_first(self):
        """Type handlers run before handlers for every event."""
        bus = EventBus()
        order = []
        bus.subscribe_all(lambda e: order.append("all"))
        bus.subscribe(TragedyEvent, lambda e: order.append("tragedy"))

        bus.emit(TragedyEvent(text="..."))

        assert order == ["tragedy", "all"]

    def test_unsubscribe_all(self):
        """Removed handlers stop receiving events; removing twice is harmless."""
        bus = EventBus()
        seen = []
        bus.subscribe_all(seen.append)
        bus.unsubscribe_all(seen.append)
        bus.unsubscribe_all(seen.append)

        bus.emit(RetiredEvent())

        assert seen == []

    def test_handler_can_unsubscribe_while_handling(self):
        """A handler may disconnect itself mid-emit."""
        bus = EventBus()
        seen = []

        def once(event):
            seen.append(event)
            bus.unsubscribe_all(once)

        bus.subscribe_all(once)
        bus.emit(RetiredEvent())
        bus.emit(RetiredEvent())

        assert len(seen) == 1

    def test_emit_without_bus(self):
        """Emitting to no bus is a no-op."""
        emit(None, RetiredEvent(text="Nobody listening."))


class TestEventKinds:
    """Test event defaults."""

    def test_kinds(self):
        """Each event type carries its kind."""
        assert RetiredEvent().kind == "retired"
        assert HallOfFameEvent().kind == "hallOfFame"
        assert ReleasedEvent().kind == "release"
        assert TragedyEvent().kind == "tragedy"

    def test_tragedies_persist(self):
        """Deaths stay in the log."""
        assert TragedyEvent().persistent
        assert not LeagueEvent().persistent


class TestEventLog:
    """Test the in-memory event log."""

    def test_records_everything(self, bus, event_log):
        """Every event on the bus is logged in order."""
        bus.emit(RetiredEvent(text="A retired.", pids=[1], season=2025, show_notification=True))
        bus.emit(ReleasedEvent(text="B released.", pids=[2], season=2025))

        assert len(event_log) == 2
        assert [e.kind for e in event_log.entries] == ["retired", "release"]
        assert event_log.for_player(2)[0].text == "B released."
        assert [e.text for e in event_log.notifications] == ["A retired."]
        assert event_log.counts() == {"retired": 1, "release": 1}

    def test_to_text(self, bus, event_log):
        """Transcript lines carry season and kind."""
        bus.emit(RetiredEvent(text="A retired.", season=2025))
        bus.emit(LeagueEvent(kind="note", text="No season."))

        assert event_log.to_text() == "2025 [retired] A retired.\n[note] No season."

    def test_disconnect_and_clear(self, bus, event_log):
        """A disconnected log stops listening."""
        bus.emit(RetiredEvent())
        event_log.disconnect(bus)
        bus.emit(RetiredEvent())
        assert len(event_log) == 1

        event_log.clear()
        assert event_log.entries == []
        assert event_log.events == []

    def test_independent_logs(self):
        """Two logs on one bus both see events."""
        bus = EventBus()
        first, second = EventLog(), EventLog()
        first.connect_to_event_bus(bus)
        second.connect_to_event_bus(bus)

        bus.emit(TragedyEvent(text="..."))

        assert len(first) == len(second) == 1
