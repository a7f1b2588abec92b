"""
League settings.

Immutable snapshot of the league configuration that the formulas need:
calendar position, league shape, salary cap bounds and run modes. A new
snapshot is created (via `evolve`) whenever the season or phase advances.
"""

from dataclasses import asdict, dataclass, field, replace
from typing import Any

from swish.core.enums import Phase

# Contract amounts are always a multiple of this (thousands)
CONTRACT_ROUNDING = 50


@dataclass(frozen=True)
class LeagueSettings:
    """
    Configuration values consumed by the player modeling core.

    All monetary values in thousands (e.g., 750 = $750K).
    """

    # === CALENDAR ===
    season: int = 2025
    phase: Phase = Phase.PRESEASON
    starting_season: int = 2025

    # === LEAGUE SHAPE ===
    num_teams: int = 30
    num_playoff_rounds: int = 4
    num_games: int = 82
    quarter_length: float = 12.0  # Minutes

    # === SALARY CAP ===
    min_contract: int = 750
    max_contract: int = 30000

    # === RUN MODES ===
    user_tid: int = 0
    user_tids: tuple[int, ...] = (0,)
    god_mode: bool = False

    # === DISPLAY ===
    team_names: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.num_teams < 2:
            raise ValueError(f"num_teams must be at least 2, got {self.num_teams}")
        if self.max_contract < self.min_contract:
            raise ValueError(
                f"max_contract ({self.max_contract}) below min_contract ({self.min_contract})"
            )
        if self.min_contract % CONTRACT_ROUNDING or self.max_contract % CONTRACT_ROUNDING:
            raise ValueError(
                f"min_contract and max_contract must be multiples of {CONTRACT_ROUNDING}, "
                f"got {self.min_contract} and {self.max_contract}"
            )
        # Accept plain ints for phase (e.g. from JSON)
        if not isinstance(self.phase, Phase):
            object.__setattr__(self, "phase", Phase(self.phase))

    @property
    def fuzz_disabled(self) -> bool:
        """Fuzz has no meaning with several user teams or in god mode."""
        return len(self.user_tids) > 1 or self.god_mode

    @property
    def contract_range(self) -> int:
        """Spread between the max and min contract."""
        return self.max_contract - self.min_contract

    @property
    def past_trade_deadline(self) -> bool:
        """True once the league is past the trade deadline phase."""
        return self.phase > Phase.AFTER_TRADE_DEADLINE

    def team_name(self, tid: int) -> str:
        """Display name for a team, falling back to a generic label."""
        if 0 <= tid < len(self.team_names):
            return self.team_names[tid]
        return f"Team {tid}"

    def evolve(self, **changes: Any) -> "LeagueSettings":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = asdict(self)
        data["phase"] = int(self.phase)
        data["user_tids"] = list(self.user_tids)
        data["team_names"] = list(self.team_names)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "LeagueSettings":
        """Create from dictionary, ignoring unknown keys."""
        defaults = cls()
        return cls(
            season=data.get("season", defaults.season),
            phase=Phase(data.get("phase", defaults.phase)),
            starting_season=data.get("starting_season", data.get("season", defaults.starting_season)),
            num_teams=data.get("num_teams", defaults.num_teams),
            num_playoff_rounds=data.get("num_playoff_rounds", defaults.num_playoff_rounds),
            num_games=data.get("num_games", defaults.num_games),
            quarter_length=data.get("quarter_length", defaults.quarter_length),
            min_contract=data.get("min_contract", defaults.min_contract),
            max_contract=data.get("max_contract", defaults.max_contract),
            user_tid=data.get("user_tid", defaults.user_tid),
            user_tids=tuple(data.get("user_tids", [data.get("user_tid", defaults.user_tid)])),
            god_mode=data.get("god_mode", defaults.god_mode),
            team_names=tuple(data.get("team_names", ())),
        )
