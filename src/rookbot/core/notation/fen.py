"""FEN parsing and serialization (placement and side to move)."""

from __future__ import annotations

from rookbot.core.board import Board
from rookbot.core.enums import Rank, Team
from rookbot.core.piece import Piece
from rookbot.core.position import Position
from rookbot.core.types import Coordinate

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Castling, en-passant and clock fields are validated for count only; the
    position model does not track them.
    """
    parts = fen.split()
    if not (2 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 2-6 fields): {fen!r}")

    placement, side_part = parts[:2]

    # 1. Piece placement
    rows = placement.split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    kings = {Team.WHITE: 0, Team.BLACK: 0}
    for rank_idx, rank_text in enumerate(rows):
        row = 7 - rank_idx
        column = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                column += step
            else:
                if column >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                piece = Piece.from_char(ch)
                if piece.rank == Rank.KING:
                    kings[piece.team] += 1
                board[Coordinate(row, column)] = piece
                column += 1
            if column > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if column != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    for team, count in kings.items():
        if count > 1:
            raise ValueError(f"Invalid FEN: {count} {team} kings: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Team.WHITE
    elif side_part == "b":
        side = Team.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    return Position(board, side)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    rows: list[str] = []
    for row in range(7, -1, -1):
        empty = 0
        text = ""
        for column in range(8):
            piece = pos.board[Coordinate(row, column)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    side_str = "w" if pos.side_to_move == Team.WHITE else "b"

    return f"{board_str} {side_str} - - 0 1"
