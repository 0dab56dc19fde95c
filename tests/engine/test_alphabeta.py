"""Tests for the alpha-beta searcher."""

import pytest

from rookbot.core.move_generator import MoveGenerator
from rookbot.core.notation import (
    parse_move,
    position_from_fen,
    position_from_moves,
    position_to_fen,
)
from rookbot.core.position import Position
from rookbot.engine.alphabeta import INF_SCORE, AlphaBetaSearch
from rookbot.engine.evaluation import max_capture_value


def _candidates(position: Position):
    return MoveGenerator(position).generate_candidate_moves()


def _search(position: Position, text: str, depth: int, maximizing: bool) -> int:
    node = parse_move(position, text)
    return AlphaBetaSearch().alphabeta(
        position, node, depth, -INF_SCORE, INF_SCORE, maximizing
    )


class TestHorizon:
    def test_depth_zero_is_best_immediate_capture(self) -> None:
        pos = position_from_moves("e2e4 d7d5 a2a3")
        # After a7a6 White can take on d5 for +1.
        assert _search(pos, "a7a6", 0, False) == 1

    def test_depth_zero_quiet_replies(self) -> None:
        assert _search(Position.initial(), "e2e4", 0, True) == 0

    @pytest.mark.parametrize("text", ["a2a3", "b1c3", "e4d5", "d1g4"])
    def test_depth_zero_matches_children(self, text: str) -> None:
        pos = position_from_moves("e2e4 d7d5")
        node = parse_move(pos, text)
        expected = max_capture_value(_candidates(pos.apply(node)))
        assert _search(pos, text, 0, True) == expected

    def test_node_without_replies_scores_zero(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/K7 w - - 0 1")
        assert _search(pos, "a1a2", 0, True) == 0
        assert _search(pos, "a1a2", 2, True) == 0


class TestRecursion:
    @pytest.mark.parametrize("text", ["b1c3", "e4d5", "f1b5"])
    def test_depth_one_adds_node_capture_value(self, text: str) -> None:
        pos = position_from_moves("e2e4 d7d5")
        node_pos = pos.apply(parse_move(pos, text))
        children = _candidates(node_pos)
        child_scores = [
            max_capture_value(_candidates(node_pos.apply(child))) for child in children
        ]
        expected = max(child_scores) + max_capture_value(children)
        assert _search(pos, text, 1, True) == expected

    def test_minimizing_depth_one(self) -> None:
        pos = position_from_moves("e2e4 d7d5 b1c3")
        node_pos = pos.apply(parse_move(pos, "d5e4"))
        children = _candidates(node_pos)
        child_scores = [
            max_capture_value(_candidates(node_pos.apply(child))) for child in children
        ]
        expected = min(child_scores) + max_capture_value(children)
        assert _search(pos, "d5e4", 1, False) == expected

    def test_position_restored_after_search(self) -> None:
        pos = position_from_moves("e2e4 d7d5")
        fen_before = position_to_fen(pos)
        _search(pos, "e4d5", 2, True)
        assert position_to_fen(pos) == fen_before
        assert pos.ply == 0

    def test_node_counter(self) -> None:
        pos = Position.initial()
        search = AlphaBetaSearch()
        node = parse_move(pos, "e2e4")
        search.alphabeta(pos, node, 0, -INF_SCORE, INF_SCORE, True)
        assert search.nodes == 1
        search.alphabeta(pos, node, 1, -INF_SCORE, INF_SCORE, True)
        assert search.nodes == 1 + 1 + 20
        search.reset()
        assert search.nodes == 0

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError):
            _search(Position.initial(), "e2e4", -1, True)
