"""High-level rule queries: check and terminal outcome."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookbot.core.enums import GameResult, Team
from rookbot.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from rookbot.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Only the no-legal-moves case is classified; draws by repetition, move
    counters or material are not detected.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_king_capturable(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return len(MoveGenerator(position).generate_legal_moves()) == 0

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return len(MoveGenerator(position).generate_legal_moves()) == 0

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Outcome for the side to move: a win for the opponent when mated,
        a draw when stalemated, otherwise still in progress."""
        gen = MoveGenerator(position)
        if gen.generate_legal_moves():
            return GameResult.IN_PROGRESS
        return Rules.terminal_result(position)

    @staticmethod
    def terminal_result(position: Position) -> GameResult:
        """Classify a position already known to have no legal moves."""
        if Rules.is_in_check(position):
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Team.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW
