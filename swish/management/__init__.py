"""
Player management.

This module provides:
- Lifecycle transitions (retire, release, tragedy, season rows)
- Injuries
- Partial record augmentation
- Statistical feat detection
- RosterManager, which runs all of the above against a league store
"""

from swish.management.augment import (
    PartialPlayerRecord,
    PartialRatingsRecord,
    augment_partial_player,
    parse_player_record,
    split_name,
)
from swish.management.feats import (
    BoxScoreLine,
    FeatKind,
    GameResult,
    PlayerFeat,
    TeamResult,
    check_statistical_feat,
    detect_feats,
    join_phrases,
)
from swish.management.health import INJURY_TABLE, draw_injury
from swish.management.lifecycle import (
    HIGH_RISK_COUNTRIES,
    TRAGEDY_REASONS,
    ReleaseResult,
    add_ratings_row,
    kill_one,
    made_hof,
    new_stats_row,
    pick_fake_age_player,
    release,
    retire,
    tragedy_reason,
)
from swish.management.roster import RosterManager

__all__ = [
    # Augmentation
    "PartialPlayerRecord",
    "PartialRatingsRecord",
    "augment_partial_player",
    "parse_player_record",
    "split_name",
    # Feats
    "BoxScoreLine",
    "FeatKind",
    "GameResult",
    "PlayerFeat",
    "TeamResult",
    "check_statistical_feat",
    "detect_feats",
    "join_phrases",
    # Health
    "INJURY_TABLE",
    "draw_injury",
    # Lifecycle
    "HIGH_RISK_COUNTRIES",
    "ReleaseResult",
    "TRAGEDY_REASONS",
    "add_ratings_row",
    "kill_one",
    "made_hof",
    "new_stats_row",
    "pick_fake_age_player",
    "release",
    "retire",
    "tragedy_reason",
    # Orchestration
    "RosterManager",
]
