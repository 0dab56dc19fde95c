"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

# Material values are zero-sum: White's pieces count up, Black's count down.
_VALUATIONS: dict[int, int] = {
    1: 99,  # king
    2: 9,  # queen
    3: 5,  # rook
    4: 3,  # knight
    5: 3,  # bishop
    6: 1,  # pawn
}


class Team(IntEnum):
    """Side of the board."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Team:
        return Team(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Row delta of a forward pawn step."""
        return 1 if self == Team.WHITE else -1

    @property
    def pawn_start_row(self) -> int:
        return 1 if self == Team.WHITE else 6

    @property
    def promotion_row(self) -> int:
        return 7 if self == Team.WHITE else 0

    @property
    def sign(self) -> int:
        return 1 if self == Team.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece kinds, most valuable first."""

    KING = 1
    QUEEN = 2
    ROOK = 3
    KNIGHT = 4
    BISHOP = 5
    PAWN = 6

    def valuation(self, team: Team) -> int:
        """Signed material value of this rank for *team*."""
        return _VALUATIONS[self.value] * team.sign


class MoveKind(IntEnum):
    """Tag attached to a move when it is built."""

    NORMAL = 0
    CAPTURE = 1
    CASTLE = 2
    PROMOTION = 3


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
