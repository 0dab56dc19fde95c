"""Minimax engine: legal-move filtering, search and selection in one call."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from rookbot.core.enums import GameResult
from rookbot.core.move import Move
from rookbot.core.move_generator import MoveGenerator
from rookbot.core.position import Position
from rookbot.core.rules import Rules
from rookbot.engine.alphabeta import AlphaBetaSearch
from rookbot.engine.search import IEngine, SearchLimits, SearchResult, validate_depth
from rookbot.engine.selector import MoveSelector

_LOGGER = logging.getLogger(__name__)


class MinimaxEngine(IEngine):
    """Fixed-depth alpha-beta engine over material captures."""

    __slots__ = ("_search", "_selector")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._search = AlphaBetaSearch()
        self._selector = MoveSelector(rng)

    def search(self, position: Position, limits: SearchLimits) -> SearchResult:
        depth = validate_depth(limits.max_depth)
        root = position.copy()
        _LOGGER.debug("searching depth %d for %s\n%r", depth, root.side_to_move, root.board)

        legal = MoveGenerator(root).generate_legal_moves()
        if not legal:
            outcome = Rules.terminal_result(root)
            _LOGGER.warning(
                "no legal moves for %s: %s", root.side_to_move, outcome.name
            )
            return SearchResult(None, 0, depth, 0, outcome)

        return self.choose(root, legal, depth)

    def choose(
        self, position: Position, legal_moves: Sequence[Move], depth: int
    ) -> SearchResult:
        """Score *legal_moves* at *depth* and select one."""
        validate_depth(depth)
        self._search.reset()
        root = position.copy()
        best, scored = self._selector.choose(root, legal_moves, depth, self._search)
        nodes = self._search.nodes
        if best is None:
            return SearchResult(None, 0, depth, nodes, Rules.game_result(root))

        _LOGGER.info(
            "chosen move %s (score %d, depth %d, %d nodes)",
            best.uci,
            best.value,
            depth,
            nodes,
        )
        return SearchResult(
            best_move=best,
            score=best.value,
            depth=depth,
            nodes=nodes,
            outcome=GameResult.IN_PROGRESS,
            scored_moves=tuple(scored),
        )


def legal_moves(position: Position) -> list[str]:
    """Every legal move of the side to move, as 4-character strings."""
    return [move.uci for move in MoveGenerator(position.copy()).generate_legal_moves()]


def choose_best_move(
    position: Position,
    moves: Sequence[Move],
    depth: int,
    rng: random.Random | None = None,
) -> str | None:
    """Pick among already-filtered *moves*; ``None`` when there are none."""
    return MinimaxEngine(rng).choose(position, moves, depth).uci


def find_next_move(
    position: Position,
    depth: int,
    rng: random.Random | None = None,
) -> str | None:
    """Chosen move for the side to move, or ``None`` without legal moves.

    Use :meth:`MinimaxEngine.search` to learn whether a ``None`` result is
    checkmate or stalemate.
    """
    result = MinimaxEngine(rng).search(position, SearchLimits(max_depth=depth))
    return result.uci
