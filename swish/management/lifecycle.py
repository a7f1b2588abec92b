"""
Player lifecycle transitions.

Retirement, the Hall of Fame, release, untimely death and the season
bookkeeping rows. Every operation here returns a new Player and leaves
its argument alone; persisting the result is the caller's job.
"""

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from swish.core.contracts.free_agency import add_to_free_agents
from swish.core.enums import TeamSlot
from swish.core.league.store import ReleasedPlayer
from swish.core.models.player import Award, Player
from swish.core.models.stats import PlayerStatsRow
from swish.core.ratings.fuzz import next_fuzz
from swish.core.weighted import try_weighted_choice
from swish.events import HallOfFameEvent, ReleasedEvent, RetiredEvent, TragedyEvent, emit

if TYPE_CHECKING:
    from swish.core.league.settings import LeagueSettings
    from swish.core.league.store import LeagueStore
    from swish.events import EventBus

logger = logging.getLogger(__name__)


# =============================================================================
# Hall of Fame
# =============================================================================

HOF_AWARD = "Inducted into the Hall of Fame"

# Top seasons counted toward the dominance factor, and the bar it starts below
DOMINANCE_SEASONS = 5
DOMINANCE_OFFSET = 50
HOF_THRESHOLD = 100


def made_hof(
    player: Player,
    stats: Sequence[PlayerStatsRow],
    settings: "LeagueSettings",
) -> bool:
    """
    Check if a player belongs in the Hall of Fame.

    Career win shares plus a dominance factor (best five seasons minus 50)
    must exceed 100. Players who were already veterans when the league
    started get their best season counted again for each season they
    "missed".

    Args:
        player: The player
        stats: All of the player's stats rows
        settings: League settings

    Returns:
        True if eligible
    """
    win_shares = sorted((ps.win_shares for ps in stats), reverse=True)

    total = sum(win_shares)
    dominance = sum(win_shares[:DOMINANCE_SEASONS]) - DOMINANCE_OFFSET

    # Fudge factor for players generated when the league started
    fudge_seasons = settings.starting_season - player.draft.year - 5
    if fudge_seasons > 0 and win_shares:
        total += win_shares[0] * fudge_seasons

    return total + dominance > HOF_THRESHOLD


# =============================================================================
# Retirement
# =============================================================================


def retire(
    player: Player,
    stats: Sequence[PlayerStatsRow],
    settings: "LeagueSettings",
    bus: Optional["EventBus"] = None,
    notify: bool = True,
    check_hof: bool = True,
) -> Player:
    """
    Retire a player.

    Args:
        player: The player
        stats: All of the player's stats rows (for the Hall of Fame check)
        settings: League settings
        bus: Event bus for notifications
        notify: Emit the "retired" event
        check_hof: Run the Hall of Fame check

    Returns:
        Updated player
    """
    if notify:
        emit(
            bus,
            RetiredEvent(
                text=f"{player.full_name} retired.",
                show_notification=player.tid == settings.user_tid,
                pids=[player.pid],
                tids=[player.tid],
                season=settings.season,
                age=player.age(settings.season),
            ),
        )

    retired = player.copy()
    retired.tid = int(TeamSlot.RETIRED)
    retired.retired_year = settings.season
    logger.info("%s retired in %d", retired.full_name, settings.season)

    if check_hof and made_hof(retired, stats, settings):
        retired.hof = True
        retired.awards.append(Award(season=settings.season, type=HOF_AWARD))
        logger.info("%s inducted into the Hall of Fame", retired.full_name)
        emit(
            bus,
            HallOfFameEvent(
                text=f"{retired.full_name} was inducted into the Hall of Fame.",
                show_notification=settings.user_tid in retired.stats_tids,
                pids=[retired.pid],
                tids=list(retired.stats_tids),
                season=settings.season,
            ),
        )

    return retired


# =============================================================================
# Release
# =============================================================================


@dataclass
class ReleaseResult:
    """
    Outcome of releasing a player.

    released is the dead money record to archive, or None if the player
    was just drafted and is owed nothing.
    """

    player: Player
    released: Optional[ReleasedPlayer] = None


def release(
    player: Player,
    settings: "LeagueSettings",
    base_moods: Sequence[float],
    rng: random.Random,
    just_drafted: bool = False,
    bus: Optional["EventBus"] = None,
) -> ReleaseResult:
    """
    Cut a player from his team and send him to free agency.

    The team keeps paying the remaining contract unless the player was
    just drafted and the regular season hasn't started yet.

    Args:
        player: The player (still on his old team)
        settings: League settings
        base_moods: Current base moods (see gen_base_moods)
        rng: Random source
        just_drafted: Player was drafted this season and never played
        bus: Event bus for notifications

    Returns:
        ReleaseResult with the free agent and any dead money record
    """
    cut = player.copy()
    record = None
    if not just_drafted:
        record = ReleasedPlayer(pid=cut.pid, tid=cut.tid, contract=cut.contract)
    else:
        # Never owed, so never paid
        cut.salaries = []

    emit(
        bus,
        ReleasedEvent(
            text=f"The {settings.team_name(cut.tid)} released {cut.full_name}.",
            show_notification=False,
            pids=[cut.pid],
            tids=[cut.tid],
            season=settings.season,
        ),
    )
    logger.info("%s released by team %d", cut.full_name, cut.tid)

    return ReleaseResult(
        player=add_to_free_agents(cut, base_moods, settings, rng),
        released=record,
    )


# =============================================================================
# Tragedy
# =============================================================================

MURDERERS = (
    "Miss Scarlet",
    "Professor Plum",
    "Mrs. Peacock",
    "Reverend Green",
    "Colonel Mustard",
    "Mrs. White",
)
ROOMS = (
    "kitchen",
    "ballroom",
    "conservatory",
    "dining room",
    "cellar",
    "billiard room",
    "library",
    "lounge",
    "hall",
    "study",
)
WEAPONS = ("candlestick", "dagger", "lead pipe", "revolver", "rope", "spanner")

# None marks the whodunit entry
TRAGEDY_REASONS: tuple[Optional[str], ...] = (
    "was eaten by wolves",
    "died in a car crash",
    "died from a rapidly progressing case of ebola",
    "was killed in a bar fight",
    "died after falling out of his 13th floor hotel room",
    "was shredded to bits by the team plane's propeller",
    "was hit by a stray meteor",
    "spontaneously combusted",
    "had a stroke after reading about the owner's plans to trade him",
    "laughed himself to death while watching a sitcom",
    "rode his Segway off a cliff",
    "was pursued by a bear, and mauled",
    "was smothered by a throng of ravenous, autograph-seeking fans after exiting the team plane",
    None,
    "suffered a heart attack in the team training facility and died",
    "was lost at sea and is presumed dead",
    "was run over by a car",
    "was run over by a car, and then was run over by a second car. "
    "Police believe only the first was intentional",
    "cannot be found and is presumed dead. "
    "Neighbors reported strange lights in the sky above his house last night",
)


def tragedy_reason(rng: random.Random) -> str:
    """Pick the flavor text for a death."""
    reason = rng.choice(TRAGEDY_REASONS)
    if reason is None:
        reason = (
            f"was killed by {rng.choice(MURDERERS)}, "
            f"in the {rng.choice(ROOMS)}, "
            f"with the {rng.choice(WEAPONS)}"
        )
    return reason


def kill_one(
    store: "LeagueStore",
    settings: "LeagueSettings",
    rng: random.Random,
    bus: Optional["EventBus"] = None,
) -> Optional[Player]:
    """
    Kill a random player on a random team.

    The player is retired without the usual notification (the Hall of
    Fame still applies) and saved back to the store.

    Args:
        store: League storage
        settings: League settings
        rng: Random source
        bus: Event bus for notifications

    Returns:
        The dead player, or None if the chosen team has nobody on it
    """
    reason = tragedy_reason(rng)

    tid = rng.randint(0, settings.num_teams - 1)
    players = store.players_by_tid(tid)
    if not players:
        logger.warning("No players on team %d, nobody dies", tid)
        return None

    victim = rng.choice(players)
    stats = store.stats_by_pid(victim.pid)

    dead = retire(victim, stats, settings, bus=bus, notify=False)
    dead.died_year = settings.season

    dead = store.put_player(dead)
    store.mark_dirty("players")
    logger.info("%s %s", dead.full_name, reason)

    emit(
        bus,
        TragedyEvent(
            text=f"{dead.full_name} {reason}.",
            show_notification=tid == settings.user_tid,
            pids=[dead.pid],
            tids=[tid],
            persistent=True,
            season=settings.season,
        ),
    )
    return dead


# =============================================================================
# Fake Ages
# =============================================================================

# Countries where a young player is much more likely to be older than listed
HIGH_RISK_COUNTRIES = frozenset(
    {
        "Angola",
        "Belarus",
        "Benin",
        "Bulgaria",
        "Cameroon",
        "Cape Verde",
        "Central African Republic",
        "Chad",
        "China",
        "Congo",
        "Egypt",
        "Gabon",
        "Georgia",
        "Ghana",
        "Guinea",
        "Haiti",
        "Iran",
        "Ivory Coast",
        "Kazakhstan",
        "Kenya",
        "Mali",
        "Morocco",
        "Nigeria",
        "Senegal",
        "South Africa",
        "South Sudan",
        "Sudan",
        "Turkey",
        "Ukraine",
    }
)
HIGH_RISK_WEIGHT = 40
FAKE_AGE_MAX_AGE = 22


def pick_fake_age_player(
    players: Sequence[Player],
    settings: "LeagueSettings",
    rng: random.Random,
) -> Optional[Player]:
    """
    Pick a young player to be revealed as older than listed.

    Returns:
        The player, or None if nobody is young enough
    """
    young = [p for p in players if settings.season - p.born.year <= FAKE_AGE_MAX_AGE]
    weights = [
        (p, HIGH_RISK_WEIGHT if p.born.loc in HIGH_RISK_COUNTRIES else 1) for p in young
    ]
    return try_weighted_choice(weights, rng)


# =============================================================================
# Season Rows
# =============================================================================


def new_stats_row(
    player: Player,
    settings: "LeagueSettings",
    previous_rows: Sequence[PlayerStatsRow],
    playoffs: bool = False,
) -> tuple[Player, PlayerStatsRow]:
    """
    Start a stats row for the player's current team and season.

    A row exists per (pid, tid, season, playoffs), so call this whenever a
    player changes teams, a season starts, or his team makes the playoffs.
    Update the player's tid first.

    Args:
        player: The player
        settings: League settings
        previous_rows: The player's existing stats rows, oldest first
        playoffs: Row is for the playoffs

    Returns:
        (updated player, new stats row)
    """
    row = PlayerStatsRow(
        pid=player.pid,
        tid=player.tid,
        season=settings.season,
        playoffs=playoffs,
    )

    regular_season = [ps for ps in previous_rows if not ps.playoffs]
    if regular_season:
        last = regular_season[-1]
        if last.season == settings.season - 1 and last.tid == player.tid:
            row.years_with_team = last.years_with_team + 1

    updated = player.copy()
    if player.tid not in updated.stats_tids:
        updated.stats_tids.append(player.tid)

    return updated, row


def add_ratings_row(
    player: Player,
    scouting_rank: int,
    settings: "LeagueSettings",
    rng: random.Random,
) -> Player:
    """
    Start this season's ratings row as a copy of last season's.

    Fuzz is smoothed toward a fresh draw rather than replaced.
    """
    updated = player.copy()
    last = updated.latest_ratings
    updated.ratings.append(
        last.copy_for(
            settings.season,
            fuzz=next_fuzz(last.fuzz, scouting_rank, settings, rng),
        )
    )
    return updated
