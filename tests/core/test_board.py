"""Tests for Board."""

from rookbot.core.board import Board, Square
from rookbot.core.enums import Rank, Team
from rookbot.core.piece import Piece
from rookbot.core.types import Coordinate, parse_square

_BACK_RANK = [
    Rank.ROOK, Rank.KNIGHT, Rank.BISHOP, Rank.QUEEN,
    Rank.KING, Rank.BISHOP, Rank.KNIGHT, Rank.ROOK,
]


class TestBoardInitial:
    def test_white_back_rank(self) -> None:
        board = Board.initial()
        for column, rank in enumerate(_BACK_RANK):
            assert board[Coordinate(0, column)] == Piece(Team.WHITE, rank), (
                f"Mismatch at column {column}"
            )

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        for column, rank in enumerate(_BACK_RANK):
            assert board[Coordinate(7, column)] == Piece(Team.BLACK, rank), (
                f"Mismatch at column {column}"
            )

    def test_pawn_ranks(self) -> None:
        board = Board.initial()
        for column in range(8):
            assert board[Coordinate(1, column)] == Piece(Team.WHITE, Rank.PAWN)
            assert board[Coordinate(6, column)] == Piece(Team.BLACK, Rank.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for column in range(8):
                assert board.is_empty(Coordinate(row, column))

    def test_counts_and_material(self) -> None:
        board = Board.initial()
        assert board.piece_count() == 32
        assert board.material() == 0
        assert len(board.pieces(Team.WHITE)) == 16
        assert board.king_squares(Team.BLACK) == [parse_square("e8")]


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Team.WHITE, Rank.PAWN)
        board[parse_square("e4")] = piece
        assert board[parse_square("e4")] == piece
        assert board.square(parse_square("e4")) == Square(parse_square("e4"), piece)
        assert board.is_empty(parse_square("e2"))

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[parse_square("e1")] = None
        assert board != copy
        assert board[parse_square("e1")] == Piece(Team.WHITE, Rank.KING)

    def test_squares_scan_order(self) -> None:
        cells = list(Board.initial().squares())
        assert len(cells) == 64
        assert cells[0].location == parse_square("a8")
        assert cells[7].location == parse_square("h8")
        assert cells[-1].location == parse_square("h1")
        assert cells[0].piece == Piece(Team.BLACK, Rank.ROOK)

    def test_pieces_follow_scan_order(self) -> None:
        white = Board.initial().pieces(Team.WHITE)
        assert white[0] == parse_square("a2")
        assert white[-1] == parse_square("h1")

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board.piece_count() == 0

    def test_repr_dump(self) -> None:
        text = repr(Board.initial())
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[4] == "4 . . . . . . . ."
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"
