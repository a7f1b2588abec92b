"""Tests for player generation and the demo command line."""

import random
import sys

import pytest

from swish.__main__ import main
from swish.core.enums import Position, TeamSlot
from swish.core.ratings import RATING_KEYS, ovr
from swish.generators import PlayerGenerator


@pytest.fixture
def generator(settings) -> PlayerGenerator:
    return PlayerGenerator(settings, rng=random.Random(2025))


class TestPlayerGenerator:
    """Test generated players."""

    def test_complete_player(self, generator, settings):
        """Generated players have every field a league needs."""
        player = generator(tid=3, age=24, draft_year=2021, scouting_rank=10)

        assert player.first_name and player.last_name
        assert player.tid == 3
        assert player.born.year == 2001
        assert len(player.ratings) == 1

        row = player.latest_ratings
        assert row.season == 2025
        assert all(0 <= row.get(key) <= 100 for key in RATING_KEYS)
        assert row.ovr == ovr(row)
        assert row.pot >= row.ovr
        assert Position(row.pos)
        assert player.values.value > 0

    def test_rostered_players_are_signed(self, generator, settings):
        """Players on a team have a drafted record and a salary ledger."""
        player = generator(tid=0, age=26, draft_year=2019, scouting_rank=1)
        assert player.draft.round in (1, 2)
        assert player.draft.tid == 0
        assert settings.min_contract <= player.contract.amount <= settings.max_contract
        assert player.salaries
        assert player.salaries[-1].season == player.contract.exp

    def test_prospects_are_unsigned(self, generator):
        """Draft prospects have no ledger and no draft slot yet."""
        player = generator(tid=int(TeamSlot.UNDRAFTED), age=19, draft_year=2026, scouting_rank=15)
        assert player.salaries == []
        assert player.draft.round == 0
        assert player.draft.year == 2026

    def test_height_matches_rating(self, generator):
        """Rating height follows inches."""
        from swish.core.ratings import height_to_rating

        for _ in range(20):
            player = generator(tid=1, age=25, draft_year=2020, scouting_rank=5)
            assert player.latest_ratings.hgt == height_to_rating(player.hgt)

    def test_old_players_have_no_upside(self, generator):
        """Past the peak, potential equals overall."""
        player = generator(tid=1, age=33, draft_year=2013, scouting_rank=5)
        assert player.latest_ratings.pot == player.latest_ratings.ovr

    def test_deterministic_with_seed(self, settings):
        """Same seed, same player."""
        first = PlayerGenerator(settings, rng=random.Random(5))(2, 22, 2024, 8)
        second = PlayerGenerator(settings, rng=random.Random(5))(2, 22, 2024, 8)
        assert first.to_dict() == second.to_dict()


class TestCommandLine:
    """Test the swish command."""

    def test_help_without_demo(self, monkeypatch, capsys):
        """No flags prints usage."""
        monkeypatch.setattr(sys, "argv", ["swish"])
        main()
        assert "usage: swish" in capsys.readouterr().out

    def test_demo(self, monkeypatch, capsys):
        """Demo mode prints one line per player."""
        monkeypatch.setattr(sys, "argv", ["swish", "--demo", "--count", "4", "--seed", "3"])
        main()
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "Swish - Basketball Player Modeling (Demo Mode)"
        assert len(lines) == 2 + 4
        assert all("$" in line for line in lines[2:])
