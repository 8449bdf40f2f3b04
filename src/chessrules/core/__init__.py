"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Position, Rules

    board = Board.initial()
    for move in Rules.legal_moves(board, Position.parse("g1")):
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.move import Move
from chessrules.core.move_calculators import PROMOTION_TYPES, piece_moves
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "Position",
    "Rules",
    # Move generation
    "PROMOTION_TYPES",
    "piece_moves",
]
