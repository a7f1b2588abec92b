"""Player model."""

import copy
import math
from dataclasses import dataclass, field
from typing import Optional

from swish.core.enums import TeamSlot
from swish.core.ratings.base import RatingsRow

# Retirement year for players who have not retired
NEVER_RETIRED = math.inf


@dataclass(frozen=True)
class Contract:
    """
    Contract terms.

    Amount in thousands per season; exp is the last season covered.
    """

    amount: int
    exp: int

    def to_dict(self) -> dict:
        return {"amount": self.amount, "exp": self.exp}

    @classmethod
    def from_dict(cls, data: dict) -> "Contract":
        return cls(amount=data["amount"], exp=data["exp"])


@dataclass(frozen=True)
class SalaryEntry:
    """One season of salary actually owed to a player."""

    season: int
    amount: int


@dataclass(frozen=True)
class Injury:
    """Current injury. Cleared externally when games_remaining hits zero."""

    type: str = "Healthy"
    games_remaining: int = 0

    @property
    def is_healthy(self) -> bool:
        return self.type == "Healthy"

    def to_dict(self) -> dict:
        return {"type": self.type, "games_remaining": self.games_remaining}

    @classmethod
    def from_dict(cls, data: dict) -> "Injury":
        return cls(
            type=data.get("type", "Healthy"),
            games_remaining=data.get("games_remaining", data.get("gamesRemaining", 0)),
        )


HEALTHY = Injury()


@dataclass(frozen=True)
class Born:
    """Birth year and location (country name)."""

    year: int
    loc: str = ""


@dataclass(frozen=True)
class Draft:
    """Draft details. round/pick of 0 means undrafted."""

    year: int
    round: int = 0
    pick: int = 0
    tid: int = -1
    original_tid: int = -1


@dataclass(frozen=True)
class Award:
    """A career award or honor."""

    season: int
    type: str


@dataclass(frozen=True)
class PlayerValues:
    """Cached value estimates (see swish.core.valuation)."""

    value: float = 0.0
    no_pot: float = 0.0
    fuzz: float = 0.0
    no_pot_fuzz: float = 0.0
    with_contract: float = 0.0

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "no_pot": self.no_pot,
            "fuzz": self.fuzz,
            "no_pot_fuzz": self.no_pot_fuzz,
            "with_contract": self.with_contract,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerValues":
        return cls(
            value=data.get("value", 0.0),
            no_pot=data.get("no_pot", 0.0),
            fuzz=data.get("fuzz", 0.0),
            no_pot_fuzz=data.get("no_pot_fuzz", 0.0),
            with_contract=data.get("with_contract", 0.0),
        )


@dataclass
class Player:
    """
    A basketball player and everything the league tracks about them.

    Ratings history is append-only, one row per season of active play.
    The salary ledger (salaries) is the authoritative payroll record and
    only grows through swish.core.contracts.set_contract.
    """

    pid: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    tid: int = int(TeamSlot.UNDRAFTED)

    # Bio
    born: Born = field(default_factory=lambda: Born(year=2000))
    draft: Draft = field(default_factory=lambda: Draft(year=2025))
    hgt: int = 78  # Inches
    weight: int = 215  # Pounds
    college: str = ""
    img_url: str = ""

    # Ratings history
    ratings: list[RatingsRow] = field(default_factory=list)

    # Contract and payroll
    contract: Contract = field(default_factory=lambda: Contract(amount=750, exp=2025))
    salaries: list[SalaryEntry] = field(default_factory=list)

    # Free agency (one mood per team, only meaningful while a free agent)
    free_agent_mood: list[float] = field(default_factory=list)
    years_free_agent: int = 0

    # Health
    injury: Injury = HEALTHY

    # Career
    hof: bool = False
    retired_year: float = NEVER_RETIRED
    died_year: Optional[int] = None
    awards: list[Award] = field(default_factory=list)
    stats_tids: list[int] = field(default_factory=list)

    # Valuation
    values: PlayerValues = field(default_factory=PlayerValues)

    # Roster management
    pt_modifier: float = 1.0
    roster_order: int = 0
    games_until_tradable: int = 0
    watch: bool = False

    @property
    def full_name(self) -> str:
        """Full name of the player."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def latest_ratings(self) -> RatingsRow:
        """Ratings row for the most recent season."""
        if not self.ratings:
            raise ValueError(f"Player {self.full_name or self.pid} has no ratings")
        return self.ratings[-1]

    @property
    def overall(self) -> int:
        return self.latest_ratings.ovr

    @property
    def potential(self) -> int:
        return self.latest_ratings.pot

    @property
    def is_retired(self) -> bool:
        return self.tid == TeamSlot.RETIRED

    @property
    def is_free_agent(self) -> bool:
        return self.tid == TeamSlot.FREE_AGENT

    def age(self, season: int) -> int:
        """Age during the given season."""
        return season - self.born.year

    def copy(self) -> "Player":
        """Deep copy, so a transformation never aliases its input."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "pid": self.pid,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "tid": self.tid,
            "born": {"year": self.born.year, "loc": self.born.loc},
            "draft": {
                "year": self.draft.year,
                "round": self.draft.round,
                "pick": self.draft.pick,
                "tid": self.draft.tid,
                "original_tid": self.draft.original_tid,
            },
            "hgt": self.hgt,
            "weight": self.weight,
            "college": self.college,
            "img_url": self.img_url,
            "ratings": [r.to_dict() for r in self.ratings],
            "contract": self.contract.to_dict(),
            "salaries": [{"season": s.season, "amount": s.amount} for s in self.salaries],
            "free_agent_mood": list(self.free_agent_mood),
            "years_free_agent": self.years_free_agent,
            "injury": self.injury.to_dict(),
            "hof": self.hof,
            "retired_year": None if self.retired_year == NEVER_RETIRED else self.retired_year,
            "died_year": self.died_year,
            "awards": [{"season": a.season, "type": a.type} for a in self.awards],
            "stats_tids": list(self.stats_tids),
            "values": self.values.to_dict(),
            "pt_modifier": self.pt_modifier,
            "roster_order": self.roster_order,
            "games_until_tradable": self.games_until_tradable,
            "watch": self.watch,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        """Create from a complete dictionary (see to_dict)."""
        retired_year = data.get("retired_year")
        return cls(
            pid=data.get("pid"),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            tid=data.get("tid", int(TeamSlot.UNDRAFTED)),
            born=Born(**data["born"]) if "born" in data else Born(year=2000),
            draft=Draft(**data["draft"]) if "draft" in data else Draft(year=2025),
            hgt=data.get("hgt", 78),
            weight=data.get("weight", 215),
            college=data.get("college", ""),
            img_url=data.get("img_url", ""),
            ratings=[RatingsRow.from_dict(r) for r in data.get("ratings", [])],
            contract=Contract.from_dict(data["contract"]) if "contract" in data else Contract(750, 2025),
            salaries=[SalaryEntry(**s) for s in data.get("salaries", [])],
            free_agent_mood=list(data.get("free_agent_mood", [])),
            years_free_agent=data.get("years_free_agent", 0),
            injury=Injury.from_dict(data.get("injury", {})),
            hof=data.get("hof", False),
            retired_year=NEVER_RETIRED if retired_year is None else retired_year,
            died_year=data.get("died_year"),
            awards=[Award(**a) for a in data.get("awards", [])],
            stats_tids=list(data.get("stats_tids", [])),
            values=PlayerValues.from_dict(data.get("values", {})),
            pt_modifier=data.get("pt_modifier", 1.0),
            roster_order=data.get("roster_order", 0),
            games_until_tradable=data.get("games_until_tradable", 0),
            watch=data.get("watch", False),
        )

    def __str__(self) -> str:
        if self.ratings:
            r = self.latest_ratings
            return f"{self.full_name} ({r.pos}) - {r.ovr}/{r.pot}"
        return self.full_name

    def __repr__(self) -> str:
        return f"Player(pid={self.pid}, name='{self.full_name}', tid={self.tid})"
