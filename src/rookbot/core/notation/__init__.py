"""Notation package: move text and FEN parsing and serialization."""

from rookbot.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from rookbot.core.notation.moves import (
    apply_move,
    parse_move,
    position_from_moves,
    split_move_text,
)

__all__ = [
    "STARTING_FEN",
    "apply_move",
    "parse_move",
    "position_from_fen",
    "position_from_moves",
    "position_to_fen",
    "split_move_text",
]
