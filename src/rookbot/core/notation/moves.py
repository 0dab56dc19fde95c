"""Four-character move text: parsing, application and move-list replay."""

from __future__ import annotations

from rookbot.core.enums import MoveKind, Rank
from rookbot.core.exceptions import IllegalMoveError, MoveParseError
from rookbot.core.move import Move
from rookbot.core.position import Position
from rookbot.core.types import Coordinate, parse_square


def split_move_text(text: str) -> tuple[Coordinate, Coordinate]:
    """Origin and target coordinates of *text*, e.g. 'e2e4'.

    No promotion suffix is accepted; pawns always promote to a queen.
    """
    if not isinstance(text, str) or len(text) != 4:
        raise MoveParseError(f"Move must be 4 characters like 'e2e4': {text!r}")
    try:
        return parse_square(text[:2]), parse_square(text[2:])
    except ValueError:
        raise MoveParseError(f"Invalid move text: {text!r}") from None


def parse_move(position: Position, text: str) -> Move:
    """Build the tagged :class:`Move` that *text* denotes in *position*.

    Castling rights, earlier king/rook moves and attacked transit squares are
    not checked: any king move two files sideways onto the c- or g-file is
    treated as castling.  A null move or one landing on a piece of the
    mover's own side raises :class:`IllegalMoveError`.
    """
    origin, target = split_move_text(text)
    piece = position.board[origin]
    if piece is None:
        raise IllegalMoveError(f"No piece on {origin} for move {text!r}")
    if origin == target:
        raise IllegalMoveError(f"Move {text!r} does not leave its square")

    victim = position.board[target]
    if victim is not None and victim.team == piece.team:
        raise IllegalMoveError(
            f"Move {text!r} lands on its own {victim.rank.name.lower()}"
        )
    captured = victim.rank if victim is not None else None
    value = captured.valuation(piece.team) if captured is not None else 0

    if piece.rank == Rank.PAWN and target.row == piece.team.promotion_row:
        kind = MoveKind.PROMOTION
    elif (
        piece.rank == Rank.KING
        and abs(origin.column - target.column) == 2
        and target.column in (2, 6)
    ):
        kind = MoveKind.CASTLE
    elif captured is not None:
        kind = MoveKind.CAPTURE
    else:
        kind = MoveKind.NORMAL
    return Move(origin, target, captured, value, kind)


def apply_move(position: Position, text: str) -> Position:
    """New position after playing *text*; *position* is left unchanged."""
    return position.apply(parse_move(position, text))


def position_from_moves(moves: str, start: Position | None = None) -> Position:
    """Replay space-separated move text from *start* (default: initial).

    Every entry goes through :func:`parse_move`, so a stream carrying
    promotion suffixes such as 'c7c8q' raises :class:`MoveParseError`;
    strip the suffix first (promotion is always to a queen).
    """
    position = start.copy() if start is not None else Position.initial()
    for text in moves.split():
        position = apply_move(position, text)
    return position
