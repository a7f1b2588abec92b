"""Team season model."""

from dataclasses import dataclass


@dataclass
class TeamSeason:
    """
    A team's off-court profile for one season.

    Only the fields that drive free agent moods are tracked here.
    """

    tid: int
    season: int
    hype: float = 0.5  # 0-1
    pop: float = 2.0  # Metro population, millions
    playoff_rounds_won: int = -1  # -1 = missed playoffs
    facilities_rank: int = 15  # 1 = highest facilities spending

    def to_dict(self) -> dict:
        return {
            "tid": self.tid,
            "season": self.season,
            "hype": self.hype,
            "pop": self.pop,
            "playoff_rounds_won": self.playoff_rounds_won,
            "facilities_rank": self.facilities_rank,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TeamSeason":
        return cls(**data)
