"""Top-level move selection from search scores."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from rookbot.core.enums import Team
from rookbot.core.move import Move
from rookbot.core.position import Position
from rookbot.engine.alphabeta import INF_SCORE, AlphaBetaSearch
from rookbot.engine.evaluation import capture_value

_LOGGER = logging.getLogger(__name__)


class MoveSelector:
    """Scores top-level moves and picks one.

    Ties on the extremal score go to a capture, preferring the most valuable
    victim; without a capture among them the choice is uniform through the
    injected random source.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def choose(
        self,
        position: Position,
        legal_moves: Sequence[Move],
        depth: int,
        search: AlphaBetaSearch,
    ) -> tuple[Move | None, list[Move]]:
        """Best move of *legal_moves* and all moves with their scores."""
        scored = self.score_moves(position, legal_moves, depth, search)
        if not scored:
            return None, scored
        best = self.pick(position.side_to_move, scored)
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "possible move values: %s",
                [f"{move.uci}.{move.value}" for move in scored],
            )
            _LOGGER.debug(
                "who moves: %s, best move value: %d", position.side_to_move, best.value
            )
        return best, scored

    def score_moves(
        self,
        position: Position,
        legal_moves: Sequence[Move],
        depth: int,
        search: AlphaBetaSearch,
    ) -> list[Move]:
        """Each move with ``value`` replaced by its search score."""
        maximizing = position.side_to_move == Team.WHITE
        return [
            move.with_value(
                search.alphabeta(
                    position, move, depth, -INF_SCORE, INF_SCORE, maximizing
                )
            )
            for move in legal_moves
        ]

    def pick(self, side: Team, scored: Sequence[Move]) -> Move:
        """Extremal-score move for *side* with capture-first tie-breaking."""
        if not scored:
            raise ValueError("Cannot pick from an empty move list")

        if side == Team.WHITE:
            best_value = max(move.value for move in scored)
        else:
            best_value = min(move.value for move in scored)

        best_moves = [move for move in scored if move.value == best_value]
        captures = [move for move in best_moves if move.captured is not None]
        if not captures:
            return self._rng.choice(best_moves)

        # White: last of the highest victims; Black: first of the lowest.
        chosen = captures[0]
        chosen_value = capture_value(chosen.captured, side)
        for move in captures[1:]:
            victim_value = capture_value(move.captured, side)
            if side == Team.WHITE and victim_value >= chosen_value:
                chosen, chosen_value = move, victim_value
            elif side == Team.BLACK and victim_value < chosen_value:
                chosen, chosen_value = move, victim_value
        return chosen
