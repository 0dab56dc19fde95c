"""Position: board plus side to move, with make/unmake."""

from __future__ import annotations

from dataclasses import dataclass

from rookbot.core.board import Board
from rookbot.core.enums import MoveKind, Rank, Team
from rookbot.core.exceptions import IllegalMoveError
from rookbot.core.move import Move
from rookbot.core.piece import Piece
from rookbot.core.types import Coordinate

# Castling target column -> (rook origin column, rook destination column)
_CASTLE_ROOK_COLUMNS: dict[int, tuple[int, int]] = {
    2: (0, 3),
    6: (7, 5),
}


@dataclass(slots=True)
class _PositionState:
    """Snapshot saved before each move so we can undo it."""

    moved_piece: Piece
    captured_piece: Piece | None
    rook_from: Coordinate | None = None
    rook_to: Coordinate | None = None
    rook_to_piece: Piece | None = None


class Position:
    """Board + side to move.

    :meth:`apply` is pure and returns a new position.  :meth:`make_move` /
    :meth:`unmake_move` mutate in place through an internal history stack and
    are meant for search code working on its own copy.
    """

    __slots__ = ("board", "side_to_move", "_history")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Team = Team.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self._history: list[_PositionState] = []

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, White to move."""
        return cls(Board.initial(), Team.WHITE)

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move*, pushing undo state onto the history stack."""
        piece = self.board[move.origin]
        if piece is None:
            raise IllegalMoveError(f"No piece on {move.origin}")

        state = _PositionState(moved_piece=piece, captured_piece=self.board[move.target])

        # Resolve the rook before touching the board so a failure leaves it intact
        if move.kind == MoveKind.CASTLE:
            try:
                rook_from_col, rook_to_col = _CASTLE_ROOK_COLUMNS[move.target.column]
            except KeyError:
                raise IllegalMoveError(f"Invalid castling move: {move}") from None
            state.rook_from = Coordinate(move.origin.row, rook_from_col)
            state.rook_to = Coordinate(move.target.row, rook_to_col)
            state.rook_to_piece = self.board[state.rook_to]
            if self.board[state.rook_from] is None:
                raise IllegalMoveError(
                    f"Castling {move} needs a rook on {state.rook_from}"
                )

        placed = piece
        if move.kind == MoveKind.PROMOTION:
            placed = Piece(piece.team, Rank.QUEEN)

        self.board[move.origin] = None
        self.board[move.target] = placed

        if state.rook_from is not None and state.rook_to is not None:
            self.board[state.rook_to] = self.board[state.rook_from]
            self.board[state.rook_from] = None

        self._history.append(state)
        self.side_to_move = self.side_to_move.opposite

    def unmake_move(self, move: Move) -> None:
        """Undo the last :meth:`make_move`."""
        state = self._history.pop()
        self.side_to_move = self.side_to_move.opposite

        if state.rook_from is not None and state.rook_to is not None:
            self.board[state.rook_from] = self.board[state.rook_to]
            self.board[state.rook_to] = state.rook_to_piece

        self.board[move.origin] = state.moved_piece
        self.board[move.target] = state.captured_piece

    def apply(self, move: Move) -> Position:
        """New position with *move* played; ``self`` is left untouched."""
        child = self.copy()
        child.make_move(move)
        child._history.clear()
        return child

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy without history."""
        return Position(board=self.board.copy(), side_to_move=self.side_to_move)

    @property
    def ply(self) -> int:
        """Number of moves currently on the undo stack."""
        return len(self._history)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.side_to_move == other.side_to_move and self.board == other.board

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
