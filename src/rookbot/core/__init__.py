"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from rookbot.core import MoveGenerator, Position, apply_move

    pos = apply_move(Position.initial(), "e2e4")
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
"""

from rookbot.core.board import Board, Square
from rookbot.core.enums import GameResult, MoveKind, Rank, Team
from rookbot.core.exceptions import IllegalMoveError, MoveParseError
from rookbot.core.move import Move
from rookbot.core.move_generator import MoveGenerator
from rookbot.core.notation import (
    STARTING_FEN,
    apply_move,
    parse_move,
    position_from_fen,
    position_from_moves,
    position_to_fen,
)
from rookbot.core.piece import Piece
from rookbot.core.position import Position
from rookbot.core.rules import Rules
from rookbot.core.types import Coordinate, parse_square, square_name

__all__ = [
    # Enums
    "GameResult",
    "MoveKind",
    "Rank",
    "Team",
    # Errors
    "IllegalMoveError",
    "MoveParseError",
    # Types / helpers
    "Coordinate",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "Square",
    # Notation
    "STARTING_FEN",
    "apply_move",
    "parse_move",
    "position_from_fen",
    "position_from_moves",
    "position_to_fen",
]
