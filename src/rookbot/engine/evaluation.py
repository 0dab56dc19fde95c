"""Material valuation used by move generation and at the search horizon."""

from __future__ import annotations

from collections.abc import Iterable

from rookbot.core.enums import Rank, Team
from rookbot.core.move import Move


def capture_value(rank: Rank, mover: Team) -> int:
    """Value of capturing a *rank* piece, signed by the capturing side."""
    return rank.valuation(mover)


def max_capture_value(moves: Iterable[Move]) -> int:
    """Largest immediate value among *moves*; 0 when there are none."""
    return max((move.value for move in moves), default=0)
