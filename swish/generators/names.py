"""
Name generation.

Players are given a birth country first, then a first and last name drawn
from that country's tables. Tables are loaded once by the caller and
passed to whatever needs them.
"""

import json
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from swish.core.errors import EmptyDistributionError
from swish.core.weighted import WeightedTable


@dataclass(frozen=True)
class GeneratedName:
    """A drawn name and the country it came from."""

    country: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class NameTables:
    """Weighted country list, plus first and last names per country."""

    countries: WeightedTable[str]
    first: dict[str, WeightedTable[str]]
    last: dict[str, WeightedTable[str]]

    @classmethod
    def from_dict(cls, data: dict, cumulative: bool = False) -> "NameTables":
        """
        Build tables from {"countries": [[name, weight], ...],
        "first": {country: [[name, weight], ...]}, "last": {...}}.

        Args:
            data: Raw table data
            cumulative: Weights are already running totals
        """
        build = WeightedTable.from_cumulative if cumulative else WeightedTable.from_weights

        def table(rows: list) -> WeightedTable[str]:
            return build((name, weight) for name, weight in rows)

        return cls(
            countries=table(data["countries"]),
            first={country: table(rows) for country, rows in data["first"].items()},
            last={country: table(rows) for country, rows in data["last"].items()},
        )


# Small built-in table, used when no name file is supplied
DEFAULT_NAME_DATA: dict = {
    "countries": [
        ["USA", 80],
        ["Canada", 4],
        ["France", 3],
        ["Serbia", 3],
        ["Nigeria", 3],
        ["Spain", 2],
        ["Australia", 2],
        ["Lithuania", 1],
        ["Greece", 1],
        ["Brazil", 1],
    ],
    "first": {
        "USA": [
            ["James", 40], ["Michael", 38], ["Chris", 30], ["Anthony", 26],
            ["Kevin", 24], ["Brandon", 22], ["Marcus", 20], ["Tyler", 18],
            ["Jalen", 16], ["Darius", 14], ["Isaiah", 14], ["Andre", 12],
            ["Trey", 10], ["Malik", 10], ["DeShawn", 6], ["Zion", 3],
        ],
        "Canada": [["Andrew", 10], ["Jamal", 8], ["Tristan", 6], ["Kelly", 5], ["Shai", 3]],
        "France": [["Nicolas", 10], ["Rudy", 8], ["Evan", 7], ["Tony", 6], ["Victor", 4]],
        "Serbia": [["Nikola", 12], ["Bogdan", 9], ["Marko", 8], ["Vlade", 4], ["Vasilije", 3]],
        "Nigeria": [["Chinedu", 8], ["Emeka", 8], ["Olumide", 6], ["Festus", 5], ["Hakeem", 3]],
        "Spain": [["Pau", 8], ["Marc", 8], ["Ricky", 6], ["Sergio", 6], ["Juancho", 3]],
        "Australia": [["Ben", 9], ["Patty", 7], ["Joe", 7], ["Josh", 6], ["Dyson", 4]],
        "Lithuania": [["Arvydas", 6], ["Jonas", 8], ["Domantas", 7], ["Sarunas", 5]],
        "Greece": [["Giannis", 6], ["Kostas", 8], ["Nikos", 8], ["Vassilis", 5]],
        "Brazil": [["Leandro", 7], ["Nene", 5], ["Anderson", 8], ["Raul", 6]],
    },
    "last": {
        "USA": [
            ["Johnson", 40], ["Williams", 38], ["Brown", 30], ["Jones", 28],
            ["Davis", 26], ["Miller", 22], ["Wilson", 20], ["Moore", 18],
            ["Taylor", 16], ["Thomas", 16], ["Jackson", 16], ["Harris", 14],
            ["Robinson", 12], ["Walker", 12], ["Green", 10], ["Mitchell", 8],
        ],
        "Canada": [["Wiggins", 6], ["Murray", 8], ["Thompson", 9], ["Olynyk", 4], ["Brooks", 6]],
        "France": [["Batum", 6], ["Gobert", 5], ["Fournier", 6], ["Parker", 7], ["Dubois", 9]],
        "Serbia": [["Jokic", 5], ["Bogdanovic", 7], ["Petrovic", 9], ["Divac", 4], ["Micic", 5]],
        "Nigeria": [["Okafor", 8], ["Okeke", 7], ["Adebayo", 6], ["Olajuwon", 3], ["Ezeli", 5]],
        "Spain": [["Gasol", 5], ["Rodriguez", 9], ["Fernandez", 8], ["Garcia", 10], ["Rubio", 4]],
        "Australia": [["Simmons", 6], ["Mills", 7], ["Ingles", 5], ["Giddey", 4], ["Smith", 10]],
        "Lithuania": [["Sabonis", 5], ["Valanciunas", 5], ["Jasikevicius", 4], ["Kazlauskas", 6]],
        "Greece": [["Papadopoulos", 9], ["Papanikolaou", 6], ["Spanoulis", 5], ["Printezis", 5]],
        "Brazil": [["Barbosa", 7], ["Silva", 10], ["Varejao", 4], ["Neto", 6]],
    },
}


def default_name_tables() -> NameTables:
    """Tables built from DEFAULT_NAME_DATA."""
    return NameTables.from_dict(DEFAULT_NAME_DATA)


def load_name_tables(path: Union[str, Path], cumulative: bool = False) -> NameTables:
    """Load name tables from a JSON file (same layout as DEFAULT_NAME_DATA)."""
    with open(path) as f:
        return NameTables.from_dict(json.load(f), cumulative=cumulative)


def draw_name(tables: NameTables, rng: random.Random) -> GeneratedName:
    """
    Draw a country, then a first and last name from that country.

    Raises:
        EmptyDistributionError: If any table involved is empty or missing
    """
    country = tables.countries.draw(rng)
    if country not in tables.first or country not in tables.last:
        raise EmptyDistributionError(f"No name tables for country {country!r}")

    return GeneratedName(
        country=country,
        first_name=tables.first[country].draw(rng),
        last_name=tables.last[country].draw(rng),
    )
