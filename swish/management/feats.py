"""
Statistical Feats.

Flags single-game box score lines worth remembering: triple doubles,
5x5s, 50 point games and the like. Thresholds scale with game length
(by the square root, to account for fatigue in short or long games).
"""

import logging
import math
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence

from swish.core.enums import Phase
from swish.events import PlayerFeatEvent, emit

if TYPE_CHECKING:
    from swish.core.league.settings import LeagueSettings
    from swish.events import EventBus

logger = logging.getLogger(__name__)


class FeatKind(Enum):
    """What made a game line notable."""

    ALL_AROUND = "all_around"  # 5x5
    MULTI_DOUBLE = "multi_double"  # Triple double or better
    POINTS = "points"
    REBOUNDS = "rebounds"
    ASSISTS = "assists"
    STEALS = "steals"
    BLOCKS = "blocks"
    THREE_POINTERS = "three_pointers"


@dataclass
class BoxScoreLine:
    """One player's line from a single game."""

    name: str
    pos: str = ""
    minutes: float = 0.0
    pts: int = 0
    orb: int = 0
    drb: int = 0
    ast: int = 0
    stl: int = 0
    blk: int = 0
    tp: int = 0
    tpa: int = 0
    fg: int = 0
    fga: int = 0
    ft: int = 0
    fta: int = 0
    tov: int = 0
    pf: int = 0

    @property
    def trb(self) -> int:
        return self.orb + self.drb


@dataclass(frozen=True)
class TeamResult:
    """A team's side of a final score."""

    tid: int
    pts: int


@dataclass(frozen=True)
class GameResult:
    """Final result of a game."""

    gid: int
    teams: tuple[TeamResult, TeamResult]
    overtimes: int = 0

    def sides(self, tid: int) -> tuple[TeamResult, TeamResult]:
        """(this team, opponent) for a team in the game."""
        first, second = self.teams
        if first.tid == tid:
            return first, second
        return second, first


@dataclass
class PlayerFeat:
    """Persisted record of a statistical feat."""

    pid: int
    name: str
    pos: str
    season: int
    tid: int
    opp_tid: int
    playoffs: bool
    gid: int
    stats: dict
    won: bool
    score: str
    overtimes: int = 0
    kinds: list[FeatKind] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["kinds"] = [k.value for k in self.kinds]
        return data


@dataclass
class FeatThresholds:
    """Feat cutoffs for a given game length."""

    five: float
    ten: float
    twenty: float
    twenty_five: float
    fifty: float

    @classmethod
    def for_quarter_length(cls, quarter_length: float) -> "FeatThresholds":
        factor = math.sqrt(quarter_length / 12)
        return cls(
            five=5 * factor,
            ten=10 * factor,
            twenty=20 * factor,
            twenty_five=25 * factor,
            fifty=50 * factor,
        )


def detect_feats(
    line: BoxScoreLine,
    quarter_length: float,
) -> tuple[list[FeatKind], dict[str, int]]:
    """
    Find every feat in a box score line.

    Args:
        line: The player's line
        quarter_length: Minutes per quarter

    Returns:
        (kinds of feat found, qualifying stats by display label in
        display order); both empty if the line is unremarkable
    """
    t = FeatThresholds.for_quarter_length(quarter_length)
    kinds: list[FeatKind] = []
    stats: dict[str, int] = {}

    doubles = sum(1 for value in (line.pts, line.ast, line.stl, line.blk, line.trb) if value >= t.ten)

    if line.pts >= t.five and line.ast >= t.five and line.stl >= t.five and line.blk >= t.five and line.trb >= t.five:
        stats["points"] = line.pts
        stats["rebounds"] = line.trb
        stats["assists"] = line.ast
        stats["steals"] = line.stl
        stats["blocks"] = line.blk
        kinds.append(FeatKind.ALL_AROUND)

    if doubles >= 3:
        if line.pts >= t.ten:
            stats["points"] = line.pts
        if line.trb >= t.ten:
            stats["rebounds"] = line.trb
        if line.ast >= t.ten:
            stats["assists"] = line.ast
        if line.stl >= t.ten:
            stats["steals"] = line.stl
        if line.blk >= t.ten:
            stats["blocks"] = line.blk
        kinds.append(FeatKind.MULTI_DOUBLE)

    if line.pts >= t.fifty:
        stats["points"] = line.pts
        kinds.append(FeatKind.POINTS)
    if line.trb >= t.twenty_five:
        stats["rebounds"] = line.trb
        kinds.append(FeatKind.REBOUNDS)
    if line.ast >= t.twenty:
        stats["assists"] = line.ast
        kinds.append(FeatKind.ASSISTS)
    if line.stl >= t.ten:
        stats["steals"] = line.stl
        kinds.append(FeatKind.STEALS)
    if line.blk >= t.ten:
        stats["blocks"] = line.blk
        kinds.append(FeatKind.BLOCKS)
    if line.tp >= t.ten:
        stats["three pointers"] = line.tp
        kinds.append(FeatKind.THREE_POINTERS)

    return kinds, stats


def join_phrases(parts: Sequence[str]) -> str:
    """Join phrases as natural English: "A", "A and B", "A, B, and C"."""
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return f"{parts[0]} and {parts[1]}"
    return ", ".join(parts[:-1]) + f", and {parts[-1]}"


def feat_text(
    name: str,
    stats: dict[str, int],
    pts: int,
    opp_pts: int,
    opp_name: str,
) -> str:
    """Headline for a feat, e.g. "X had 12 points and 11 assists in a 101-99 win over the Y."."""
    phrases = join_phrases([f"{value} {label}" for label, value in stats.items()])
    article = "an" if str(pts).startswith("8") else "a"
    outcome = "win over the" if pts > opp_pts else "loss to the"
    return f"{name} had {phrases} in {article} {pts}-{opp_pts} {outcome} {opp_name}."


def check_statistical_feat(
    pid: int,
    tid: int,
    line: BoxScoreLine,
    result: GameResult,
    settings: "LeagueSettings",
    bus: Optional["EventBus"] = None,
) -> Optional[PlayerFeat]:
    """
    Check a box score line for a statistical feat.

    Args:
        pid: Player id
        tid: Player's team
        line: The player's line
        result: Final result of the game
        settings: League settings
        bus: Event bus for the feat notification

    Returns:
        Feat record to persist, or None if nothing notable happened
    """
    kinds, stats = detect_feats(line, settings.quarter_length)
    if not kinds:
        return None

    team, opponent = result.sides(tid)
    won = team.pts > opponent.pts
    text = feat_text(line.name, stats, team.pts, opponent.pts, settings.team_name(opponent.tid))

    emit(
        bus,
        PlayerFeatEvent(
            text=text,
            show_notification=tid == settings.user_tid,
            pids=[pid],
            tids=[tid],
            season=settings.season,
            gid=result.gid,
            stats=dict(stats),
        ),
    )
    logger.debug("Feat: %s", text)

    return PlayerFeat(
        pid=pid,
        name=line.name,
        pos=line.pos,
        season=settings.season,
        tid=tid,
        opp_tid=opponent.tid,
        playoffs=settings.phase == Phase.PLAYOFFS,
        gid=result.gid,
        stats=asdict(line),
        won=won,
        score=f"{team.pts}-{opponent.pts}",
        overtimes=result.overtimes,
        kinds=kinds,
    )
