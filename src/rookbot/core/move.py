"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from rookbot.core.enums import MoveKind, Rank
from rookbot.core.types import Coordinate, coords_to_str


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    ``captured`` is the rank removed by this move, ``value`` starts as the
    immediate capture valuation and is replaced by the search score once the
    move has been searched.
    """

    origin: Coordinate
    target: Coordinate
    captured: Rank | None = None
    value: int = 0
    kind: MoveKind = MoveKind.NORMAL

    def __post_init__(self) -> None:
        if not (self.origin.valid and self.target.valid):
            raise ValueError(
                f"Move coordinates must be on the board: {self.origin!r} -> {self.target!r}"
            )

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def uci(self) -> str:
        """Four-character algebraic notation, e.g. 'e2e4'."""
        return coords_to_str(self.origin, self.target)

    def with_value(self, value: int) -> Move:
        """Copy of this move carrying *value*."""
        return replace(self, value=value)

    def __str__(self) -> str:
        return self.uci
