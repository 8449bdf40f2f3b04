"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.position import BOARD_SIZE, Position, all_positions

if TYPE_CHECKING:
    from chessrules.core.move import Move

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)
_SCAN_ORDER: tuple[Position, ...] = tuple(all_positions())
_FILE_LABELS = "a b c d e f g h"


def _index(pos: Position) -> int:
    return (pos.row - 1) * BOARD_SIZE + (pos.column - 1)


class Board:
    """Mutable 8x8 grid; each square holds one :class:`Piece` or ``None``.

    The board is a pure snapshot of occupancy: no move history, no side to
    move. Whose turn it is lives on the game that owns the board.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[_index(pos)]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        self._squares[_index(pos)] = piece

    def is_empty(self, pos: Position) -> bool:
        return self._squares[_index(pos)] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Position, Piece]]:
        """Yield ``(position, piece)`` for every occupied square, row by row."""
        squares = self._squares
        for idx, pos in enumerate(_SCAN_ORDER):
            piece = squares[idx]
            if piece is not None:
                yield pos, piece

    def pieces(self, color: Color) -> list[Position]:
        """Squares occupied by *color*."""
        return [pos for pos, piece in self.occupied() if piece.color == color]

    def find_king(self, color: Color) -> Position | None:
        """First square holding *color*'s king, or ``None`` if it is missing."""
        for pos, piece in self.occupied():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return pos
        return None

    def layout(self) -> tuple[Piece | None, ...]:
        """Immutable snapshot of every square, in scan order."""
        return tuple(self._squares)

    # -- Mutation / copying -------------------------------------------------

    def reset(self) -> None:
        """Put the standard starting position on this board."""
        self.clear()
        for column, pt in enumerate(_BACK_RANK, start=1):
            self[Position(1, column)] = Piece(Color.WHITE, pt)
            self[Position(2, column)] = Piece(Color.WHITE, PieceType.PAWN)
            self[Position(7, column)] = Piece(Color.BLACK, PieceType.PAWN)
            self[Position(8, column)] = Piece(Color.BLACK, pt)

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    @contextmanager
    def simulate(self, move: Move) -> Iterator[Piece | None]:
        """Apply *move* in place for the duration of a ``with`` block.

        The moving piece is placed on the destination unchanged (promotion
        is not applied) and the origin is cleared. The displaced occupant of
        the destination is yielded. Both squares are restored on exit,
        whether the block finishes normally, returns early or raises.
        """
        piece = self[move.start]
        captured = self[move.end]
        self[move.end] = piece
        self[move.start] = None
        try:
            yield captured
        finally:
            self[move.end] = captured
            self[move.start] = piece

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    @classmethod
    def from_diagram(cls, text: str) -> Board:
        """Build a board from an 8-rank diagram, row 8 first.

        Accepts the output of ``repr(board)``; rank labels and the file
        footer are optional, squares may be space separated or packed::

            . . . . k . . .        ....k...
            . . . . . . . .        ........
            ...                    ...
        """
        rows: list[list[str]] = []
        for line in text.strip().splitlines():
            tokens = line.split()
            if not tokens or " ".join(tokens) == _FILE_LABELS:
                continue
            if len(tokens) > 1 and tokens[0].isdigit():
                tokens = tokens[1:]
            if len(tokens) == 1:
                tokens = list(tokens[0])
            if len(tokens) != BOARD_SIZE:
                raise ValueError(f"Diagram row must have 8 squares: {line!r}")
            rows.append(tokens)

        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Diagram must have 8 rows, got {len(rows)}")

        b = cls()
        for offset, tokens in enumerate(rows):
            row = BOARD_SIZE - offset
            for column, char in enumerate(tokens, start=1):
                if char != ".":
                    b[Position(row, column)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE, 0, -1):
            cells = []
            for column in range(1, BOARD_SIZE + 1):
                p = self[Position(row, column)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append(f"  {_FILE_LABELS}")
        return "\n".join(rows)
