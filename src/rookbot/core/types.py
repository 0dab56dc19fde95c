"""Coordinate value type and algebraic conversion helpers.

Board layout: ``row`` 0–7 maps to ranks 1–8, ``column`` 0–7 maps to files a–h.
Every conversion between coordinates and algebraic text goes through this
module.
"""

from __future__ import annotations

from dataclasses import dataclass, field

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A board location, possibly off-board.

    ``valid`` is computed from the bounds at construction time: ``True`` means
    the coordinate lies on the board.
    """

    row: int
    column: int
    valid: bool = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "valid", 0 <= self.row <= 7 and 0 <= self.column <= 7
        )

    def offset(self, d_row: int, d_column: int) -> Coordinate:
        """Coordinate shifted by the given deltas (may be off-board)."""
        return Coordinate(self.row + d_row, self.column + d_column)

    @property
    def index(self) -> int:
        """Flat 0–63 index, a1=0 … h8=63."""
        if not self.valid:
            raise ValueError(f"Off-board coordinate has no index: {self!r}")
        return self.row * 8 + self.column

    def __str__(self) -> str:
        return square_name(self)


def make_coordinate(index: int) -> Coordinate:
    """Coordinate for a flat 0–63 index."""
    if not 0 <= index < 64:
        raise ValueError(f"Square index out of range: {index}")
    return Coordinate(index >> 3, index & 7)


def square_name(coord: Coordinate) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1'."""
    if not coord.valid:
        raise ValueError(f"Off-board coordinate has no name: {coord!r}")
    return FILES[coord.column] + RANKS[coord.row]


def parse_square(name: str) -> Coordinate:
    """Parse square name, e.g. 'e4' → Coordinate(3, 4)."""
    if (
        not isinstance(name, str)
        or len(name) != 2
        or name[0] not in FILES
        or name[1] not in RANKS
    ):
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(RANKS.index(name[1]), FILES.index(name[0]))


def coords_to_str(origin: Coordinate, target: Coordinate) -> str:
    """Four-character move text for an origin/target pair."""
    return square_name(origin) + square_name(target)
