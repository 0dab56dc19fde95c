"""rookbot: move selection for a chess bot.

Quick start::

    from rookbot import Position, apply_move, find_next_move

    pos = apply_move(Position.initial(), "e2e4")
    print(find_next_move(pos, depth=2))
"""

from rookbot.core import MoveParseError, Position, apply_move
from rookbot.engine import find_next_move, legal_moves

__all__ = [
    "MoveParseError",
    "Position",
    "apply_move",
    "find_next_move",
    "legal_moves",
]
