"""Player and name generation."""

from swish.generators.names import (
    DEFAULT_NAME_DATA,
    GeneratedName,
    NameTables,
    default_name_tables,
    draw_name,
    load_name_tables,
)
from swish.generators.player import PlayerFactory, PlayerGenerator

__all__ = [
    "DEFAULT_NAME_DATA",
    "GeneratedName",
    "NameTables",
    "PlayerFactory",
    "PlayerGenerator",
    "default_name_tables",
    "draw_name",
    "load_name_tables",
]
