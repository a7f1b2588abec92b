"""Error types raised by the player modeling core."""

from typing import Any, Optional


class SwishError(Exception):
    """Base class for all errors raised by swish."""


class EmptyDistributionError(SwishError, ValueError):
    """
    A weighted draw was attempted over a table that cannot produce a row.

    This means the reference data (name tables, injury table, ...) is
    malformed. It is fatal to the operation that triggered the draw.
    """

    def __init__(self, message: str, draw: Optional[float] = None) -> None:
        super().__init__(message)
        self.draw = draw


class PlayerRecordError(SwishError, ValueError):
    """
    A partial player record could not be admitted.

    Raised at the augmentation boundary, never from inside the formulas.
    """

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class PlayerNotFoundError(SwishError, KeyError):
    """No player with the requested id exists in the store."""

    def __init__(self, pid: int) -> None:
        super().__init__(pid)
        self.pid = pid

    def __str__(self) -> str:
        return f"Player {self.pid} not found"
