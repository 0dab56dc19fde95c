"""Candidate and legal move generation + king-exposure filtering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookbot.core.enums import MoveKind, Rank, Team
from rookbot.core.move import Move
from rookbot.core.types import Coordinate

if TYPE_CHECKING:
    from rookbot.core.position import Position


# (row delta, column delta); the order is significant, search scores depend on it.
NORTH = (1, 0)
SOUTH = (-1, 0)
EAST = (0, 1)
WEST = (0, -1)
NORTH_WEST = (1, -1)
NORTH_EAST = (1, 1)
SOUTH_EAST = (-1, 1)
SOUTH_WEST = (-1, -1)

ROOK_DIRS: tuple[tuple[int, int], ...] = (NORTH, SOUTH, EAST, WEST)
BISHOP_DIRS: tuple[tuple[int, int], ...] = (
    NORTH_WEST,
    NORTH_EAST,
    SOUTH_EAST,
    SOUTH_WEST,
)
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS
KING_DIRS: tuple[tuple[int, int], ...] = QUEEN_DIRS

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (1, -2),
    (2, 1),
    (2, -1),
    (-1, 2),
    (-1, -2),
    (-2, 1),
    (-2, -1),
)

# Forward diagonals per team, in generation order.
_PAWN_CAPTURE_DIRS: dict[Team, tuple[tuple[int, int], ...]] = {
    Team.WHITE: (NORTH_WEST, NORTH_EAST),
    Team.BLACK: (SOUTH_EAST, SOUTH_WEST),
}

_MAX_SLIDE = 7

_SLIDING_DIRS: dict[Rank, tuple[tuple[int, int], ...]] = {
    Rank.ROOK: ROOK_DIRS,
    Rank.BISHOP: BISHOP_DIRS,
    Rank.QUEEN: QUEEN_DIRS,
}


class MoveGenerator:
    """Generates moves for the side to move in a given :class:`Position`.

    The king-exposure filter mutates the position via ``make_move`` /
    ``unmake_move`` internally but always restores it before returning.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """Candidate moves that do not leave the mover's king capturable."""
        return [
            move
            for move in self.generate_candidate_moves()
            if not self.rejects_own_king_exposure(move)
        ]

    def generate_candidate_moves(self) -> list[Move]:
        """All structurally valid moves for the side to move.

        Pieces are visited from rank 8 down to rank 1, file a to h.
        """
        moves: list[Move] = []
        for coord in self._board.pieces(self._pos.side_to_move):
            self._gen_piece(coord, moves)
        return moves

    def moves_for_square(self, coord: Coordinate) -> list[Move]:
        """Candidate moves of the piece on *coord*.

        Empty for an empty square or a piece of the side not to move.
        """
        moves: list[Move] = []
        piece = self._board[coord]
        if piece is not None and piece.team == self._pos.side_to_move:
            self._gen_piece(coord, moves)
        return moves

    # -- King safety (public) ----------------------------------------------

    def rejects_own_king_exposure(self, move: Move) -> bool:
        """Would *move* let the opponent capture the mover's king next ply?"""
        pos = self._pos
        mover = pos.side_to_move
        pos.make_move(move)
        try:
            return self._can_capture_king(mover)
        finally:
            pos.unmake_move(move)

    def is_king_capturable(self, team: Team) -> bool:
        """Could *team*'s king be captured if the opponent were to move now?"""
        pos = self._pos
        saved = pos.side_to_move
        pos.side_to_move = team.opposite
        try:
            return self._can_capture_king(team)
        finally:
            pos.side_to_move = saved

    def _can_capture_king(self, victim: Team) -> bool:
        for reply in self.generate_candidate_moves():
            if reply.captured == Rank.KING:
                target = self._board[reply.target]
                if target is not None and target.team == victim:
                    return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_piece(self, coord: Coordinate, moves: list[Move]) -> None:
        piece = self._board[coord]
        assert piece is not None
        rank = piece.rank
        if rank == Rank.PAWN:
            self._gen_pawn(coord, piece.team, moves)
        elif rank == Rank.KNIGHT:
            self._gen_steps(coord, KNIGHT_OFFSETS, moves)
        elif rank == Rank.KING:
            self._gen_steps(coord, KING_DIRS, moves)
        else:
            self._gen_sliding(coord, _SLIDING_DIRS[rank], moves)

    def _make(self, origin: Coordinate, target: Coordinate) -> Move:
        """Quiet or capturing move onto *target* (which may hold an enemy)."""
        victim = self._board[target]
        if victim is None:
            return Move(origin, target)
        return Move(
            origin,
            target,
            victim.rank,
            victim.rank.valuation(self._pos.side_to_move),
            MoveKind.CAPTURE,
        )

    def _gen_steps(
        self,
        coord: Coordinate,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        color = self._pos.side_to_move
        for d_row, d_col in offsets:
            to = coord.offset(d_row, d_col)
            if not to.valid:
                continue
            target = board[to]
            if target is None or target.team != color:
                moves.append(self._make(coord, to))

    def _gen_sliding(
        self,
        coord: Coordinate,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        color = self._pos.side_to_move
        for d_row, d_col in directions:
            for distance in range(1, _MAX_SLIDE + 1):
                to = coord.offset(d_row * distance, d_col * distance)
                if not to.valid:
                    break
                target = board[to]
                if target is None:
                    moves.append(self._make(coord, to))
                    continue
                if target.team != color:
                    moves.append(self._make(coord, to))
                break

    def _gen_pawn(self, coord: Coordinate, team: Team, moves: list[Move]) -> None:
        board = self._board
        step = team.pawn_direction
        max_distance = 2 if coord.row == team.pawn_start_row else 1
        promotion_row = team.promotion_row

        # Forward advance: blocked by any piece, never captures
        for distance in range(1, max_distance + 1):
            to = coord.offset(step * distance, 0)
            if not to.valid or not board.is_empty(to):
                break
            kind = MoveKind.PROMOTION if to.row == promotion_row else MoveKind.NORMAL
            moves.append(Move(coord, to, kind=kind))

        for d_row, d_col in _PAWN_CAPTURE_DIRS[team]:
            to = coord.offset(d_row, d_col)
            if not to.valid:
                continue
            target = board[to]
            if target is None or target.team == team:
                continue
            kind = MoveKind.PROMOTION if to.row == promotion_row else MoveKind.CAPTURE
            moves.append(
                Move(coord, to, target.rank, target.rank.valuation(team), kind)
            )
