"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from rookbot.core.enums import Rank, Team
from rookbot.core.piece import Piece
from rookbot.core.types import FILES, Coordinate

_BACK_RANK: tuple[Rank, ...] = (
    Rank.ROOK,
    Rank.KNIGHT,
    Rank.BISHOP,
    Rank.QUEEN,
    Rank.KING,
    Rank.BISHOP,
    Rank.KNIGHT,
    Rank.ROOK,
)


@dataclass(frozen=True, slots=True)
class Square:
    """One board cell: its location and the piece standing on it, if any."""

    location: Coordinate
    piece: Piece | None = None


class Board:
    """Mutable 64-cell board indexed by :class:`Coordinate`."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        return self._cells[coord.index]

    def __setitem__(self, coord: Coordinate, piece: Piece | None) -> None:
        self._cells[coord.index] = piece

    def is_empty(self, coord: Coordinate) -> bool:
        return self._cells[coord.index] is None

    def square(self, coord: Coordinate) -> Square:
        return Square(coord, self[coord])

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[Square]:
        """All 64 cells, rank 8 down to rank 1, file a to h within a rank."""
        for row in range(7, -1, -1):
            for column in range(8):
                yield self.square(Coordinate(row, column))

    def pieces(self, team: Team) -> list[Coordinate]:
        """Occupied cells of *team* in scan order (see :meth:`squares`)."""
        return [
            sq.location
            for sq in self.squares()
            if sq.piece is not None and sq.piece.team == team
        ]

    def king_squares(self, team: Team) -> list[Coordinate]:
        return [
            sq.location
            for sq in self.squares()
            if sq.piece is not None
            and sq.piece.team == team
            and sq.piece.rank == Rank.KING
        ]

    def piece_count(self) -> int:
        return sum(1 for piece in self._cells if piece is not None)

    def material(self) -> int:
        """Signed material balance, positive when White is ahead."""
        return sum(piece.value for piece in self._cells if piece is not None)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    def clear(self) -> None:
        self._cells = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for column in range(8):
            b[Coordinate(1, column)] = Piece(Team.WHITE, Rank.PAWN)
            b[Coordinate(6, column)] = Piece(Team.BLACK, Rank.PAWN)

        for column, rank in enumerate(_BACK_RANK):
            b[Coordinate(0, column)] = Piece(Team.WHITE, rank)
            b[Coordinate(7, column)] = Piece(Team.BLACK, rank)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = []
            for column in range(8):
                p = self[Coordinate(row, column)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append(f"  {' '.join(FILES)}")
        return "\n".join(rows)
