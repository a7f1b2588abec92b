"""
Weighted random selection over cumulative-weight tables.

Used for name generation (country, then first and last name), injury
types, tragedy narratives and fake-age country weighting. A table is an
ordered list of (item, cumulative_weight) rows, ascending by weight.
"""

import random
from dataclasses import dataclass, field
from typing import Generic, Iterable, Optional, TypeVar

from swish.core.errors import EmptyDistributionError

T = TypeVar("T")


@dataclass(frozen=True)
class WeightedTable(Generic[T]):
    """Cumulative-weight lookup table."""

    rows: tuple[tuple[T, float], ...] = field(default_factory=tuple)

    @classmethod
    def from_weights(cls, pairs: Iterable[tuple[T, float]]) -> "WeightedTable[T]":
        """Build a table from (item, weight) pairs by accumulating weights."""
        rows = []
        running = 0.0
        for item, weight in pairs:
            if weight < 0:
                raise ValueError(f"Negative weight {weight} for {item!r}")
            running += weight
            rows.append((item, running))
        return cls(tuple(rows))

    @classmethod
    def from_cumulative(cls, rows: Iterable[tuple[T, float]]) -> "WeightedTable[T]":
        """Build a table from rows that already carry cumulative weights."""
        rows = tuple((item, float(cum)) for item, cum in rows)
        for (_, prev), (item, cum) in zip(rows, rows[1:]):
            if cum < prev:
                raise ValueError(f"Cumulative weights must ascend (row {item!r})")
        return cls(rows)

    @property
    def total(self) -> float:
        """Largest cumulative weight (0 for an empty table)."""
        if not self.rows:
            return 0.0
        return self.rows[-1][1]

    @property
    def items(self) -> list[T]:
        return [item for item, _ in self.rows]

    def __len__(self) -> int:
        return len(self.rows)

    def lookup(self, r: float) -> T:
        """
        Return the first item whose cumulative weight is >= r.

        Raises:
            EmptyDistributionError: If no row qualifies.
        """
        for item, cumulative in self.rows:
            if cumulative >= r:
                return item
        raise EmptyDistributionError(f"No row for draw {r} (total={self.total})", draw=r)

    def draw(self, rng: random.Random) -> T:
        """
        Draw one item with probability proportional to its weight.

        Raises:
            EmptyDistributionError: If the table is empty or sums to zero.
        """
        if not self.rows or self.total <= 0:
            raise EmptyDistributionError("Cannot draw from an empty weight table")
        return self.lookup(rng.uniform(0, self.total))


def weighted_choice(pairs: Iterable[tuple[T, float]], rng: random.Random) -> T:
    """Draw one item from plain (item, weight) pairs."""
    return WeightedTable.from_weights(pairs).draw(rng)


def try_weighted_choice(
    pairs: Iterable[tuple[T, float]],
    rng: random.Random,
) -> Optional[T]:
    """Like weighted_choice, but returns None for an empty distribution."""
    table = WeightedTable.from_weights(pairs)
    if not table.rows or table.total <= 0:
        return None
    return table.draw(rng)
