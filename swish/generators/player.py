"""Player generation."""

import random
from typing import Callable, Optional

from swish.core.contracts.contract import gen_contract, set_contract
from swish.core.league.settings import LeagueSettings
from swish.core.models.player import Born, Draft, Player
from swish.core.ratings.base import (
    MAX_HEIGHT_INCHES,
    MIN_HEIGHT_INCHES,
    RATING_KEYS,
    RatingsRow,
    bound,
    height_to_rating,
    limit_rating,
    round_half_up,
)
from swish.core.ratings.derivation import derive
from swish.core.ratings.fuzz import gen_fuzz
from swish.core.valuation.value import compute_values
from swish.core.weighted import weighted_choice
from swish.generators.names import NameTables, default_name_tables, draw_name

# (tid, age, draft_year, scouting_rank) -> fully defaulted player
PlayerFactory = Callable[[int, int, int, int], Player]

# Sample colleges for US-born players
COLLEGES = [
    "Duke", "Kentucky", "North Carolina", "Kansas", "UCLA", "Michigan State",
    "Villanova", "Arizona", "Gonzaga", "Syracuse", "Indiana", "Louisville",
    "Connecticut", "Florida", "Georgetown", "Texas", "Wake Forest", "Memphis",
    "Ohio State", "Virginia", "Baylor", "Marquette", "Wisconsin", "Purdue",
    "Oregon", "Houston", "Creighton", "Xavier", "Iowa State", "Tennessee",
]

# Rating offsets (from the player's base talent) by build
ARCHETYPES: dict[str, dict[str, int]] = {
    "point": {"hgt": -25, "spd": 12, "drb": 15, "pss": 18, "tp": 6, "oiq": 5, "reb": -12, "ins": -8},
    "wing": {"hgt": -8, "spd": 6, "jmp": 6, "fg": 6, "tp": 8, "dnk": 4, "drb": 4},
    "forward": {"hgt": 5, "stre": 6, "jmp": 4, "dnk": 6, "reb": 6, "diq": 4},
    "big": {"hgt": 18, "stre": 14, "ins": 12, "reb": 16, "dnk": 8, "spd": -12, "drb": -14, "tp": -14, "pss": -8},
}
ARCHETYPE_WEIGHTS = (("point", 25), ("wing", 30), ("forward", 25), ("big", 20))

# Height (inches) by build: (mean, std)
ARCHETYPE_HEIGHTS: dict[str, tuple[float, float]] = {
    "point": (74.5, 2.0),
    "wing": (78.0, 1.8),
    "forward": (80.5, 1.6),
    "big": (83.0, 1.7),
}

PEAK_AGE = 27
DECLINE_AGE = 31


class PlayerGenerator:
    """
    Default player factory.

    Produces a complete player: name and birthplace, height and weight,
    one season of ratings with derived ovr/pot/skills/pos, scouting fuzz,
    value estimates and a contract.

    Example:
        generate = PlayerGenerator(settings, rng=random.Random(7))
        rookie = generate(tid=-2, age=19, draft_year=2026, scouting_rank=15)
    """

    def __init__(
        self,
        settings: LeagueSettings,
        rng: Optional[random.Random] = None,
        names: Optional[NameTables] = None,
    ) -> None:
        self.settings = settings
        self.rng = rng or random.Random()
        self.names = names or default_name_tables()

    def __call__(self, tid: int, age: int, draft_year: int, scouting_rank: int) -> Player:
        return self.generate(tid, age, draft_year, scouting_rank)

    def generate(self, tid: int, age: int, draft_year: int, scouting_rank: int) -> Player:
        """
        Generate a player.

        Args:
            tid: Team (or roster slot) to place the player on
            age: Age this season
            draft_year: Season of the player's draft class
            scouting_rank: Scouting spending rank of the user's team

        Returns:
            Generated Player
        """
        rng = self.rng
        settings = self.settings

        archetype = weighted_choice(ARCHETYPE_WEIGHTS, rng)
        name = draw_name(self.names, rng)

        mean, std = ARCHETYPE_HEIGHTS[archetype]
        hgt = round_half_up(bound(rng.gauss(mean, std), MIN_HEIGHT_INCHES, MAX_HEIGHT_INCHES))
        weight = round_half_up(rng.gauss(215 + (hgt - 78) * 7, 12))

        ratings = self._ratings(archetype, hgt, age, rng)
        ratings.fuzz = gen_fuzz(scouting_rank, settings, rng)
        derive(ratings, settings)
        ratings.pot = self._potential(ratings.ovr, age, rng)

        draft = Draft(year=draft_year)
        if tid >= 0 and draft_year <= settings.season:
            draft = Draft(
                year=draft_year,
                round=rng.randint(1, 2),
                pick=rng.randint(1, settings.num_teams),
                tid=tid,
                original_tid=tid,
            )

        college = ""
        if name.country == "USA" and rng.random() < 0.9:
            college = rng.choice(COLLEGES)

        player = Player(
            first_name=name.first_name,
            last_name=name.last_name,
            tid=tid,
            born=Born(year=settings.season - age, loc=name.country),
            draft=draft,
            hgt=hgt,
            weight=weight,
            college=college,
            ratings=[ratings],
        )
        player.values = compute_values(player, [], settings)

        contract = gen_contract(player, settings, rng, randomize_exp=True)
        return set_contract(player, contract, tid >= 0, settings)

    def _ratings(self, archetype: str, hgt: int, age: int, rng: random.Random) -> RatingsRow:
        """Primitive ratings for a build, developed to the given age."""
        talent = rng.gauss(42, 7)
        if age < PEAK_AGE:
            talent -= (PEAK_AGE - age) * 1.5
        elif age > DECLINE_AGE:
            talent -= (age - DECLINE_AGE) * 2

        offsets = ARCHETYPES[archetype]
        row = RatingsRow(season=self.settings.season)
        for key in RATING_KEYS:
            setattr(row, key, limit_rating(rng.gauss(talent + offsets.get(key, 0), 8)))
        row.hgt = height_to_rating(hgt)
        return row

    def _potential(self, ovr: int, age: int, rng: random.Random) -> int:
        """Projected peak overall. Only players before their peak have upside."""
        if age >= PEAK_AGE:
            return ovr
        growth = (PEAK_AGE - age) * 2.5 + rng.gauss(0, 5)
        return max(ovr, limit_rating(ovr + growth))
