"""Player statistics models."""

from dataclasses import dataclass, fields


@dataclass
class PlayerStatsRow:
    """
    Season totals for one (player, team, season, playoffs) combination.

    A new row is started whenever any part of that key changes; totals
    are only ever added to the row for the current key.
    """

    pid: int
    tid: int
    season: int
    playoffs: bool = False

    gp: int = 0
    gs: int = 0
    minutes: float = 0.0
    fg: int = 0
    fga: int = 0
    tp: int = 0
    tpa: int = 0
    ft: int = 0
    fta: int = 0
    orb: int = 0
    drb: int = 0
    ast: int = 0
    tov: int = 0
    stl: int = 0
    blk: int = 0
    pf: int = 0
    pts: int = 0

    # Advanced
    per: float = 0.0
    ewa: float = 0.0
    ows: float = 0.0
    dws: float = 0.0

    years_with_team: int = 1

    @property
    def trb(self) -> int:
        """Total rebounds."""
        return self.orb + self.drb

    @property
    def win_shares(self) -> float:
        """Offensive plus defensive win shares."""
        return self.ows + self.dws

    @property
    def key(self) -> tuple[int, int, int, bool]:
        return (self.pid, self.tid, self.season, self.playoffs)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerStatsRow":
        names = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in names}
        # Older files call minutes "min"
        if "minutes" not in kwargs and "min" in data:
            kwargs["minutes"] = data["min"]
        return cls(**kwargs)
