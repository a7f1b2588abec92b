"""Shared pytest fixtures for Swish tests."""

import random

import pytest

from swish.core.enums import Phase
from swish.core.league import InMemoryLeagueStore, LeagueSettings
from swish.core.models import Born, Contract, Draft, Player, TeamSeason
from swish.core.ratings import RatingsRow
from swish.events import EventBus
from swish.logging import EventLog


class ScriptedRandom(random.Random):
    """
    Random source that replays scripted values.

    Each scripted list is consumed front to back; once a list runs out the
    regular seeded generator takes over.
    """

    def __init__(self, uniforms=(), randoms=(), gausses=(), seed: int = 0) -> None:
        super().__init__(seed)
        self.uniforms = list(uniforms)
        self.randoms = list(randoms)
        self.gausses = list(gausses)

    def uniform(self, a, b):
        if self.uniforms:
            return self.uniforms.pop(0)
        return super().uniform(a, b)

    def random(self):
        if self.randoms:
            return self.randoms.pop(0)
        return super().random()

    def gauss(self, mu=0.0, sigma=1.0):
        if self.gausses:
            return self.gausses.pop(0)
        return super().gauss(mu, sigma)


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def settings() -> LeagueSettings:
    """Default 30 team league in the 2025 preseason."""
    return LeagueSettings(
        season=2025,
        phase=Phase.PRESEASON,
        starting_season=2025,
        team_names=("Boston Celtics", "New York Knicks", "Chicago Bulls"),
    )


@pytest.fixture
def playoff_settings(settings) -> LeagueSettings:
    """Same league, during the playoffs."""
    return settings.evolve(phase=Phase.PLAYOFFS)


# =============================================================================
# Random Fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def scripted_random():
    """The ScriptedRandom class, for building deterministic sources."""
    return ScriptedRandom


# =============================================================================
# Player Fixtures
# =============================================================================


def make_ratings(**overrides) -> RatingsRow:
    """Ratings row with every primitive at 50 unless overridden."""
    row = RatingsRow(season=2025)
    for key, value in overrides.items():
        setattr(row, key, value)
    return row


@pytest.fixture
def ratings_factory():
    """Builder for ratings rows (primitives default to 50)."""
    return make_ratings


@pytest.fixture
def average_ratings() -> RatingsRow:
    """All primitives at 50, ovr 50, pot 55."""
    return make_ratings(ovr=50, pot=55)


@pytest.fixture
def prospect() -> Player:
    """20 year old with 70 ovr and 90 pot, no stats."""
    return Player(
        pid=1,
        first_name="Young",
        last_name="Prospect",
        tid=0,
        born=Born(year=2005, loc="USA"),
        draft=Draft(year=2024, round=1, pick=3, tid=0, original_tid=0),
        ratings=[make_ratings(ovr=70, pot=90)],
        contract=Contract(amount=5000, exp=2027),
    )


@pytest.fixture
def veteran() -> Player:
    """30 year old starter on team 1."""
    return Player(
        pid=2,
        first_name="Old",
        last_name="Veteran",
        tid=1,
        born=Born(year=1995, loc="Nigeria"),
        draft=Draft(year=2015, round=1, pick=20, tid=1, original_tid=1),
        ratings=[make_ratings(ovr=60, pot=60)],
        contract=Contract(amount=12000, exp=2026),
        stats_tids=[1],
    )


@pytest.fixture
def reference_factory():
    """Deterministic player factory for augmentation tests."""

    def factory(tid: int, age: int, draft_year: int, scouting_rank: int) -> Player:
        return Player(
            first_name="Ref",
            last_name="Erence",
            tid=tid,
            born=Born(year=2025 - age, loc="USA"),
            draft=Draft(year=draft_year),
            hgt=80,
            weight=225,
            college="Duke",
            ratings=[make_ratings(fuzz=1.5)],
            contract=Contract(amount=1000, exp=2026),
        )

    return factory


# =============================================================================
# League Fixtures
# =============================================================================


@pytest.fixture
def team_seasons() -> list[TeamSeason]:
    """One row per team for 2025, nobody won anything."""
    return [
        TeamSeason(tid=tid, season=2025, hype=0.5, pop=3.0, facilities_rank=tid + 1)
        for tid in range(30)
    ]


@pytest.fixture
def store(team_seasons) -> InMemoryLeagueStore:
    """Empty in-memory store with this season's team rows."""
    return InMemoryLeagueStore(team_seasons)


@pytest.fixture
def bus() -> EventBus:
    """Fresh event bus."""
    return EventBus()


@pytest.fixture
def event_log(bus) -> EventLog:
    """Event log listening on the bus fixture."""
    log = EventLog()
    log.connect_to_event_bus(bus)
    return log
