"""Depth-bounded minimax with alpha-beta pruning over simulated positions."""

from __future__ import annotations

from operator import attrgetter

from rookbot.core.move import Move
from rookbot.core.move_generator import MoveGenerator
from rookbot.core.position import Position
from rookbot.engine.evaluation import max_capture_value

INF_SCORE = 1_000_000_000

_BY_VALUE = attrgetter("value")


class AlphaBetaSearch:
    """Recursive alpha-beta searcher.

    Every node adds the best immediate capture value among its children to
    the extremal value returned by its subtree, so capturing lines are
    rewarded at each ply rather than only at the horizon.  Children are not
    filtered for king exposure.

    ``nodes`` counts visited nodes and is reset by :meth:`reset`.
    """

    __slots__ = ("nodes",)

    def __init__(self) -> None:
        self.nodes = 0

    def reset(self) -> None:
        self.nodes = 0

    def alphabeta(
        self,
        position: Position,
        node: Move,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
    ) -> int:
        """Score of playing *node* in *position*.

        *position* is mutated while the subtree is searched and restored
        before returning.
        """
        if depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {depth}")

        self.nodes += 1
        position.make_move(node)
        try:
            children = MoveGenerator(position).generate_candidate_moves()
            if not children:
                return 0

            max_val = max_capture_value(children)
            if depth == 0:
                return max_val

            children.sort(key=_BY_VALUE)
            if maximizing:
                value = -INF_SCORE
                for child in children:
                    value = max(
                        value,
                        self.alphabeta(position, child, depth - 1, alpha, beta, False),
                    )
                    alpha = max(alpha, value)
                    if beta <= alpha:
                        break
            else:
                value = INF_SCORE
                for child in children:
                    value = min(
                        value,
                        self.alphabeta(position, child, depth - 1, alpha, beta, True),
                    )
                    beta = min(beta, value)
                    if beta <= alpha:
                        break
            return value + max_val
        finally:
            position.unmake_move(node)
