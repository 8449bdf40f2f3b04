"""Pseudo-legal move calculators, one per piece type.

Every calculator reads the board and returns the set of moves the piece on
*position* could make, ignoring whether its own king would be left in check.
None of them mutates the board. Castling and en passant are not modelled.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.position import Position

MoveCalculator = Callable[["Board", "Position"], set[Move]]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, -1), (1, -1), (-1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# color -> (forward row step, start row, promotion row)
_PAWN_RULES: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (1, 2, 8),
    Color.BLACK: (-1, 7, 1),
}


# -- Shared algorithms ------------------------------------------------------


def sliding_moves(
    board: Board,
    position: Position,
    directions: tuple[tuple[int, int], ...],
) -> set[Move]:
    """Cast a ray per direction until the edge or the first occupied square.

    An enemy on the blocking square is included as a capture; a friendly
    piece is not.
    """
    color = board[position].color
    moves: set[Move] = set()
    for d_row, d_column in directions:
        target = position.offset(d_row, d_column)
        while target is not None:
            occupant = board[target]
            if occupant is None:
                moves.add(Move(position, target))
                target = target.offset(d_row, d_column)
                continue
            if occupant.color != color:
                moves.add(Move(position, target))
            break
    return moves


def stepping_moves(
    board: Board,
    position: Position,
    offsets: tuple[tuple[int, int], ...],
) -> set[Move]:
    """One move per on-board offset not occupied by a friendly piece."""
    color = board[position].color
    moves: set[Move] = set()
    for d_row, d_column in offsets:
        target = position.offset(d_row, d_column)
        if target is None:
            continue
        occupant = board[target]
        if occupant is None or occupant.color != color:
            moves.add(Move(position, target))
    return moves


# -- Piece-specific calculators ---------------------------------------------


def bishop_moves(board: Board, position: Position) -> set[Move]:
    return sliding_moves(board, position, BISHOP_DIRS)


def rook_moves(board: Board, position: Position) -> set[Move]:
    return sliding_moves(board, position, ROOK_DIRS)


def queen_moves(board: Board, position: Position) -> set[Move]:
    return sliding_moves(board, position, QUEEN_DIRS)


def knight_moves(board: Board, position: Position) -> set[Move]:
    return stepping_moves(board, position, KNIGHT_OFFSETS)


def king_moves(board: Board, position: Position) -> set[Move]:
    return stepping_moves(board, position, KING_OFFSETS)


def pawn_moves(board: Board, position: Position) -> set[Move]:
    """Forward advances, diagonal captures and promotion expansion."""
    color = board[position].color
    forward, start_row, promotion_row = _PAWN_RULES[color]
    targets: list[Position] = []

    one_step = position.offset(forward, 0)
    if one_step is not None and board.is_empty(one_step):
        targets.append(one_step)
        if position.row == start_row:
            two_step = one_step.offset(forward, 0)
            if two_step is not None and board.is_empty(two_step):
                targets.append(two_step)

    for d_column in (-1, 1):
        capture = position.offset(forward, d_column)
        if capture is None:
            continue
        occupant = board[capture]
        if occupant is not None and occupant.color != color:
            targets.append(capture)

    moves: set[Move] = set()
    for target in targets:
        if target.row == promotion_row:
            moves.update(Move(position, target, pt) for pt in PROMOTION_TYPES)
        else:
            moves.add(Move(position, target))
    return moves


_CALCULATORS: dict[PieceType, MoveCalculator] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def piece_moves(board: Board, position: Position) -> set[Move]:
    """Pseudo-legal moves of whatever piece stands on *position*."""
    piece = board[position]
    if piece is None:
        return set()
    return _CALCULATORS[piece.piece_type](board, position)
