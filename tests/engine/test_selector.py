"""Tests for top-level move selection and tie-breaking."""

import random

import pytest

from rookbot.core.enums import MoveKind, Rank, Team
from rookbot.core.move import Move
from rookbot.core.move_generator import MoveGenerator
from rookbot.core.notation import position_from_moves
from rookbot.core.position import Position
from rookbot.core.types import parse_square
from rookbot.engine.alphabeta import INF_SCORE, AlphaBetaSearch
from rookbot.engine.selector import MoveSelector


def _quiet(origin: str, target: str, value: int) -> Move:
    return Move(parse_square(origin), parse_square(target), value=value)


def _capture(origin: str, target: str, rank: Rank, value: int) -> Move:
    return Move(parse_square(origin), parse_square(target), rank, value, MoveKind.CAPTURE)


class TestPick:
    def test_capture_wins_tie_with_quiet_move(self) -> None:
        quiet = _quiet("a2", "a3", 0)
        capture = _capture("b2", "c3", Rank.PAWN, 0)
        for seed in range(20):
            selector = MoveSelector(random.Random(seed))
            assert selector.pick(Team.WHITE, [quiet, capture]) == capture
            assert selector.pick(Team.BLACK, [capture, quiet]) == capture

    def test_white_maximizes(self) -> None:
        low = _capture("a2", "b3", Rank.QUEEN, 1)
        high = _quiet("c2", "c3", 4)
        assert MoveSelector(random.Random(0)).pick(Team.WHITE, [low, high]) == high

    def test_black_minimizes(self) -> None:
        low = _quiet("a7", "a6", -4)
        high = _capture("c7", "b6", Rank.QUEEN, 2)
        assert MoveSelector(random.Random(0)).pick(Team.BLACK, [high, low]) == low

    def test_white_prefers_most_valuable_victim(self) -> None:
        pawn = _capture("a2", "b3", Rank.PAWN, 3)
        queen = _capture("c2", "d3", Rank.QUEEN, 3)
        rook = _capture("e2", "f3", Rank.ROOK, 3)
        selector = MoveSelector(random.Random(0))
        assert selector.pick(Team.WHITE, [pawn, queen, rook]) == queen

    def test_black_prefers_most_valuable_victim(self) -> None:
        pawn = _capture("a7", "b6", Rank.PAWN, -3)
        rook = _capture("c7", "d6", Rank.ROOK, -3)
        knight = _capture("e7", "f6", Rank.KNIGHT, -3)
        selector = MoveSelector(random.Random(0))
        assert selector.pick(Team.BLACK, [pawn, rook, knight]) == rook

    def test_equal_victims_white_takes_last_black_takes_first(self) -> None:
        first = _capture("a2", "b3", Rank.KNIGHT, 0)
        second = _capture("c2", "d3", Rank.BISHOP, 0)
        selector = MoveSelector(random.Random(0))
        assert selector.pick(Team.WHITE, [first, second]) == second
        assert selector.pick(Team.BLACK, [first, second]) == first

    def test_random_fallback_is_reproducible(self) -> None:
        moves = [_quiet("a2", "a3", 0), _quiet("b2", "b3", 0), _quiet("c2", "c3", 0)]
        picks = [MoveSelector(random.Random(11)).pick(Team.WHITE, moves) for _ in range(3)]
        assert picks[0] in moves
        assert picks.count(picks[0]) == 3

    def test_random_fallback_only_among_best(self) -> None:
        best = [_quiet("a2", "a3", 2), _quiet("b2", "b3", 2)]
        worse = _quiet("c2", "c3", 1)
        selector = MoveSelector(random.Random(3))
        for _ in range(10):
            assert selector.pick(Team.WHITE, [worse, *best]) in best

    def test_empty_list_rejected(self) -> None:
        with pytest.raises(ValueError):
            MoveSelector().pick(Team.WHITE, [])


class TestChoose:
    def test_scores_match_search(self) -> None:
        pos = position_from_moves("e2e4 d7d5")
        legal = MoveGenerator(pos).generate_legal_moves()
        scored = MoveSelector(random.Random(0)).score_moves(
            pos, legal, 0, AlphaBetaSearch()
        )
        assert [m.uci for m in scored] == [m.uci for m in legal]
        for move, scored_move in zip(legal, scored):
            expected = AlphaBetaSearch().alphabeta(
                pos, move, 0, -INF_SCORE, INF_SCORE, True
            )
            assert scored_move.value == expected

    def test_choose_from_nothing(self) -> None:
        best, scored = MoveSelector().choose(
            Position.initial(), [], 1, AlphaBetaSearch()
        )
        assert best is None
        assert scored == []

    def test_choose_returns_member_of_scored(self) -> None:
        pos = Position.initial()
        legal = MoveGenerator(pos).generate_legal_moves()
        best, scored = MoveSelector(random.Random(5)).choose(
            pos, legal, 0, AlphaBetaSearch()
        )
        assert best in scored
        assert len(scored) == 20
