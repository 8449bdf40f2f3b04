"""Stateless rules: check, legal-move filtering, checkmate and stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.move_calculators import piece_moves

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.move import Move
    from chessrules.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Nothing here knows whose turn it is; callers pass the color they care
    about. Legal-move filtering mutates the board while it simulates each
    candidate and always restores it before returning.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by any pseudo-legal enemy move?

        One scan locates the king and gathers every enemy destination.
        Enemy moves are not filtered for their own king safety. A board
        without *color*'s king is never in check.
        """
        king_sq: Position | None = None
        attacked: set[Position] = set()
        for pos, piece in board.occupied():
            if piece.color == color:
                if piece.piece_type == PieceType.KING:
                    king_sq = pos
            else:
                attacked.update(move.end for move in piece_moves(board, pos))
        return king_sq is not None and king_sq in attacked

    @staticmethod
    def legal_moves(board: Board, position: Position) -> set[Move]:
        """Pseudo-legal moves of the piece on *position* that keep its king safe."""
        piece = board[position]
        if piece is None:
            return set()

        legal: set[Move] = set()
        for move in piece_moves(board, position):
            with board.simulate(move):
                if not Rules.is_in_check(board, piece.color):
                    legal.add(move)
        return legal

    @staticmethod
    def team_legal_moves(board: Board, color: Color) -> set[Move]:
        """Union of legal moves over every piece of *color*."""
        moves: set[Move] = set()
        for pos in board.pieces(color):
            moves |= Rules.legal_moves(board, pos)
        return moves

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.team_legal_moves(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.team_legal_moves(board, color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Result of the game with *side_to_move* about to play."""
        if Rules.team_legal_moves(board, side_to_move):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(board, side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
