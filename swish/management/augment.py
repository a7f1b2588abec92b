"""
Partial player records.

Roster files and other imports may describe a player with only a few
fields. Such records are validated here, then every missing field is
filled in from a freshly generated reference player of the same team and
age. This is the only place malformed player data is rejected.
"""

import logging
import random
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel, to_snake

from swish.core.contracts.contract import set_contract
from swish.core.enums import Phase, Skill, TeamSlot
from swish.core.errors import PlayerRecordError
from swish.core.league.settings import LeagueSettings
from swish.core.models.player import (
    NEVER_RETIRED,
    Award,
    Born,
    Contract,
    Draft,
    Injury,
    Player,
    SalaryEntry,
)
from swish.core.models.stats import PlayerStatsRow
from swish.core.ratings.base import RatingsRow, height_to_rating
from swish.core.ratings.derivation import ovr, pos, skills
from swish.core.valuation.value import compute_values
from swish.generators.player import PlayerFactory

logger = logging.getLogger(__name__)

# Files older than this stored hgt on a different scale
HEIGHT_RESCALE_VERSION = 24

# Random age for records without a birth year
UNKNOWN_AGE_RANGE = (19, 35)


# =============================================================================
# Schemas
# =============================================================================


class RecordModel(BaseModel):
    """Accepts both snake_case and camelCase keys; ignores unknown keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class BornRecord(RecordModel):
    year: int
    loc: str = ""

    def to_model(self) -> Born:
        return Born(year=self.year, loc=self.loc)


class DraftRecord(RecordModel):
    year: int
    round: int = 0
    pick: int = 0
    tid: int = -1
    original_tid: int = -1

    def to_model(self) -> Draft:
        return Draft(
            year=self.year,
            round=self.round,
            pick=self.pick,
            tid=self.tid,
            original_tid=self.original_tid,
        )


class ContractRecord(RecordModel):
    amount: int
    exp: int

    def to_model(self) -> Contract:
        return Contract(amount=self.amount, exp=self.exp)


class InjuryRecord(RecordModel):
    type: str = "Healthy"
    games_remaining: int = 0

    def to_model(self) -> Injury:
        return Injury(type=self.type, games_remaining=self.games_remaining)


class AwardRecord(RecordModel):
    season: int
    type: str


class SalaryRecord(RecordModel):
    season: int
    amount: int


class PartialRatingsRecord(RecordModel):
    """One ratings row. Primitive ratings are required, derived fields are not."""

    hgt: int
    stre: int
    spd: int
    jmp: int
    endu: int
    ins: int
    dnk: int
    ft: int
    fg: int
    tp: int
    oiq: int
    diq: int
    drb: int
    pss: int
    reb: int

    pot: int = 0
    ovr: Optional[int] = None
    fuzz: Optional[float] = None
    skills: Optional[List[Skill]] = None
    season: Optional[int] = None
    pos: Optional[str] = None

    def to_row(self) -> RatingsRow:
        return RatingsRow(
            hgt=self.hgt,
            stre=self.stre,
            spd=self.spd,
            jmp=self.jmp,
            endu=self.endu,
            ins=self.ins,
            dnk=self.dnk,
            ft=self.ft,
            fg=self.fg,
            tp=self.tp,
            oiq=self.oiq,
            diq=self.diq,
            drb=self.drb,
            pss=self.pss,
            reb=self.reb,
            ovr=self.ovr or 0,
            pot=self.pot,
            fuzz=self.fuzz or 0.0,
            season=self.season or 0,
            skills=list(self.skills or []),
            pos=self.pos,
        )


class PartialPlayerRecord(RecordModel):
    """
    A player as it may appear in an imported file.

    Only tid and ratings are required. Everything else that is absent is
    taken from a generated reference player.
    """

    tid: int
    ratings: List[PartialRatingsRecord] = Field(min_length=1)

    pid: Optional[int] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    pos: Optional[str] = None  # Old files keep position outside the ratings

    # Back-filled from the reference player
    awards: Optional[List[AwardRecord]] = None
    born: Optional[BornRecord] = None
    college: Optional[str] = None
    contract: Optional[ContractRecord] = None
    draft: Optional[DraftRecord] = None
    free_agent_mood: Optional[List[float]] = None
    games_until_tradable: Optional[int] = None
    hgt: Optional[int] = None
    hof: Optional[bool] = None
    img_url: Optional[str] = Field(default=None, alias="imgURL")
    injury: Optional[InjuryRecord] = None
    pt_modifier: Optional[float] = None
    retired_year: Optional[int] = None
    roster_order: Optional[int] = None
    watch: Optional[bool] = None
    weight: Optional[int] = None
    years_free_agent: Optional[int] = None

    # Initialized empty when absent
    salaries: Optional[List[SalaryRecord]] = None
    stats: Optional[List[dict[str, Any]]] = None
    stats_tids: Optional[List[int]] = None

    died_year: Optional[int] = None


# =============================================================================
# Augmentation
# =============================================================================


def parse_player_record(data: dict) -> PartialPlayerRecord:
    """
    Validate a raw player record.

    Raises:
        PlayerRecordError: If the record is malformed
    """
    try:
        return PartialPlayerRecord.model_validate(data)
    except ValidationError as e:
        raise PlayerRecordError(
            f"Invalid player record ({e.error_count()} errors)",
            errors=e.errors(include_url=False),
        ) from e


def split_name(name: str) -> tuple[str, str]:
    """First token is the first name, the rest is the last name."""
    parts = name.split(" ")
    return parts[0], " ".join(parts[1:])


def augment_partial_player(
    data: dict,
    settings: LeagueSettings,
    factory: PlayerFactory,
    rng: random.Random,
    scouting_rank: int,
    version: Optional[int] = None,
) -> tuple[Player, list[PlayerStatsRow]]:
    """
    Turn a partial player record into a complete player.

    Running this on the output of a previous run (player.to_dict()) makes
    no further changes.

    Args:
        data: Raw player record (snake_case or camelCase keys)
        settings: League settings
        factory: Generator for the reference player
        rng: Random source
        scouting_rank: Scouting spending rank, for generated fuzz
        version: Data format version of the source file (None if unknown)

    Returns:
        (complete player, stats rows from the record)

    Raises:
        PlayerRecordError: If the record is malformed
    """
    record = parse_player_record(data)
    given = record.model_fields_set

    def has(field: str) -> bool:
        return field in given and getattr(record, field) is not None

    if has("born"):
        age = settings.starting_season - record.born.year
    else:
        age = rng.randint(*UNKNOWN_AGE_RANGE)

    reference = factory(record.tid, age, settings.starting_season - age, scouting_rank)

    # Names
    if has("name") and not has("first_name") and not has("last_name"):
        first_name, last_name = split_name(record.name)
    else:
        first_name = record.first_name if has("first_name") else reference.first_name
        last_name = record.last_name if has("last_name") else reference.last_name

    # Retirement (explicit null means never)
    if "retired_year" in given:
        retired_year = NEVER_RETIRED if record.retired_year is None else record.retired_year
    else:
        retired_year = reference.retired_year

    player = Player(
        pid=record.pid,
        first_name=first_name,
        last_name=last_name,
        tid=record.tid,
        born=record.born.to_model() if has("born") else reference.born,
        draft=record.draft.to_model() if has("draft") else reference.draft,
        hgt=record.hgt if has("hgt") else reference.hgt,
        weight=record.weight if has("weight") else reference.weight,
        college=record.college if has("college") else reference.college,
        img_url=record.img_url if has("img_url") else reference.img_url,
        contract=record.contract.to_model() if has("contract") else reference.contract,
        free_agent_mood=(
            list(record.free_agent_mood) if has("free_agent_mood") else list(reference.free_agent_mood)
        ),
        years_free_agent=(
            record.years_free_agent if has("years_free_agent") else reference.years_free_agent
        ),
        injury=record.injury.to_model() if has("injury") else reference.injury,
        hof=record.hof if has("hof") else reference.hof,
        retired_year=retired_year,
        died_year=record.died_year,
        awards=(
            [Award(season=a.season, type=a.type) for a in record.awards]
            if has("awards")
            else list(reference.awards)
        ),
        pt_modifier=record.pt_modifier if has("pt_modifier") else reference.pt_modifier,
        roster_order=record.roster_order if has("roster_order") else reference.roster_order,
        games_until_tradable=(
            record.games_until_tradable
            if has("games_until_tradable")
            else reference.games_until_tradable
        ),
        watch=record.watch if has("watch") else reference.watch,
    )

    # Salary ledger
    if has("salaries"):
        player.salaries = [SalaryEntry(season=s.season, amount=s.amount) for s in record.salaries]
    else:
        if player.contract.exp < settings.starting_season:
            player.contract = Contract(amount=player.contract.amount, exp=settings.starting_season)
        if player.tid >= 0:
            player = set_contract(player, player.contract, True, settings)

    # Stats
    stats = []
    for raw in record.stats or []:
        totals = {to_snake(key): value for key, value in raw.items()}
        if "season" not in totals:
            raise PlayerRecordError(f"Stats row without a season for {player.full_name}")
        totals.setdefault("pid", player.pid)
        totals.setdefault("tid", player.tid)
        stats.append(PlayerStatsRow.from_dict(totals))

    if has("stats_tids"):
        player.stats_tids = list(record.stats_tids)
    elif player.tid >= 0 and settings.phase <= Phase.PLAYOFFS:
        player.stats_tids = [player.tid]

    # Ratings
    player.ratings = [r.to_row() for r in record.ratings]
    first = player.ratings[0]
    if record.ratings[0].fuzz is None:
        first.fuzz = reference.ratings[0].fuzz
    if record.ratings[0].skills is None:
        first.skills = skills(first, settings)
    if record.ratings[0].ovr is None:
        first.ovr = ovr(first)
    if first.pot < first.ovr:
        first.pot = first.ovr

    # Season, for draft classes that aren't eligible yet
    if player.tid == TeamSlot.UNDRAFTED_2:
        first.season = settings.starting_season + 1
    elif player.tid == TeamSlot.UNDRAFTED_3:
        first.season = settings.starting_season + 2
    else:
        if record.ratings[0].season is None:
            first.season = settings.starting_season

        # Fix improperly-set season in ratings
        if (
            len(player.ratings) == 1
            and first.season < settings.starting_season
            and player.tid != TeamSlot.RETIRED
        ):
            first.season = settings.starting_season

    # Height rescaling
    if version is None or version < HEIGHT_RESCALE_VERSION:
        for row in player.ratings:
            row.hgt = height_to_rating(player.hgt)
            row.ovr = ovr(row)
            if row.ovr > row.pot:
                row.pot = row.ovr

    for row in player.ratings:
        if row.pos is None:
            row.pos = record.pos if record.pos is not None else pos(row).value

    player.values = compute_values(player, stats, settings)

    logger.debug("Augmented %s (%d fields from record)", player.full_name, len(given))
    return player, stats
