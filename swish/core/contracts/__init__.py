"""
Contracts module.

This module provides:
- Contract demands derived from player value
- Signing (salary ledger bookkeeping)
- Free agent mood toward each team
"""

from swish.core.contracts.contract import (
    CONTRACT_ROUNDING,
    contract_seasons_remaining,
    contract_start_season,
    contract_years,
    extend_contract,
    gen_contract,
    set_contract,
)
from swish.core.contracts.free_agency import (
    MoodTier,
    add_to_free_agents,
    describe_mood,
    gen_base_moods,
    player_moods,
)
from swish.core.models.player import Contract, SalaryEntry

__all__ = [
    # Contract
    "CONTRACT_ROUNDING",
    "Contract",
    "SalaryEntry",
    "contract_seasons_remaining",
    "contract_start_season",
    "contract_years",
    "extend_contract",
    "gen_contract",
    "set_contract",
    # Free agency
    "MoodTier",
    "add_to_free_agents",
    "describe_mood",
    "gen_base_moods",
    "player_moods",
]
