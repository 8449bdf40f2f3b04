"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

# Diagram letter ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_SYMBOLS: dict[PieceType, tuple[str, str]] = {
    PieceType.PAWN: ("♙", "♟"),
    PieceType.KNIGHT: ("♘", "♞"),
    PieceType.BISHOP: ("♗", "♝"),
    PieceType.ROOK: ("♖", "♜"),
    PieceType.QUEEN: ("♕", "♛"),
    PieceType.KING: ("♔", "♚"),
}

_LETTERS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (color, type) pair.

    A piece never changes color or type; promotion places a fresh
    ``Piece`` on the destination square instead.
    """

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Diagram letter (uppercase = white, lowercase = black)."""
        return _LETTERS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its diagram letter, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _SYMBOLS[self.piece_type][int(self.color)]
