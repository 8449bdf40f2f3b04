"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.position import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2, E4, E5,
    A8, B8, C8, D8, E8, F8, G8, H8,
    Position,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        for column in range(1, 9):
            assert board[Position(2, column)] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[Position(7, column)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(3, 7):
            for column in range(1, 9):
                assert board[Position(row, column)] is None

    def test_reset_restores_start(self) -> None:
        board = Board()
        board[E4] = Piece(Color.BLACK, PieceType.QUEEN)
        board.reset()
        assert board == Board.initial()


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_find_king_missing_returns_none(self) -> None:
        assert Board().find_king(Color.WHITE) is None

    def test_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16

    def test_occupied_scan_order(self) -> None:
        board = Board.initial()
        squares = [pos for pos, _ in board.occupied()]
        assert squares[0] == A1
        assert squares[-1] == H8
        assert len(squares) == 32

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.occupied()) == []

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text


class TestBoardDiagram:
    def test_repr_round_trip(self) -> None:
        board = Board.initial()
        assert Board.from_diagram(repr(board)) == board

    def test_packed_rows(self) -> None:
        board = Board.from_diagram(
            """
            ....k...
            ........
            ........
            ........
            ........
            ........
            ....P...
            ....K...
            """
        )
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)
        assert board[E2] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert len(list(board.occupied())) == 3

    def test_wrong_row_count(self) -> None:
        with pytest.raises(ValueError, match="8 rows"):
            Board.from_diagram("........\n........")

    def test_wrong_row_width(self) -> None:
        with pytest.raises(ValueError, match="8 squares"):
            Board.from_diagram("\n".join(["......."] * 8))

    def test_bad_piece_letter(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Board.from_diagram("\n".join(["x......."] + ["........"] * 7))


class TestBoardSimulate:
    def test_applies_move_inside_block(self) -> None:
        board = Board.initial()
        pawn = board[E2]
        with board.simulate(Move(E2, E4)) as captured:
            assert captured is None
            assert board[E4] == pawn
            assert board[E2] is None
        assert board == Board.initial()

    def test_restores_capture(self) -> None:
        board = Board()
        rook = Piece(Color.WHITE, PieceType.ROOK)
        knight = Piece(Color.BLACK, PieceType.KNIGHT)
        board[E2] = rook
        board[E5] = knight
        with board.simulate(Move(E2, E5)) as captured:
            assert captured == knight
            assert board[E5] == rook
        assert board[E2] == rook
        assert board[E5] == knight

    def test_restores_on_exception(self) -> None:
        board = Board.initial()
        before = board.layout()
        with pytest.raises(RuntimeError):
            with board.simulate(Move(E2, E4)):
                raise RuntimeError("boom")
        assert board.layout() == before

    def test_promotion_not_applied(self) -> None:
        board = Board()
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        board[Position(7, 1)] = pawn
        with board.simulate(Move(Position(7, 1), A8, PieceType.QUEEN)):
            assert board[A8] == pawn
