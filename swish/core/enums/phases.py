"""League calendar phases and roster slot sentinels."""

from enum import IntEnum


class Phase(IntEnum):
    """
    Season phases, in calendar order.

    Comparisons are meaningful: anything greater than AFTER_TRADE_DEADLINE
    belongs to the back half of the league year.
    """

    EXPANSION_DRAFT = -2
    FANTASY_DRAFT = -1
    PRESEASON = 0
    REGULAR_SEASON = 1
    AFTER_TRADE_DEADLINE = 2
    PLAYOFFS = 3
    DRAFT_LOTTERY = 4
    DRAFT = 5
    AFTER_DRAFT = 6
    RESIGN_PLAYERS = 7
    FREE_AGENCY = 8


class TeamSlot(IntEnum):
    """
    Special values for a player's team id.

    Non-negative team ids are real roster assignments.
    """

    FREE_AGENT = -1
    UNDRAFTED = -2
    RETIRED = -3
    UNDRAFTED_2 = -4  # Draft class two years out
    UNDRAFTED_3 = -5  # Draft class three years out
