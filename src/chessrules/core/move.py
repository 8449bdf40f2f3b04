"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.position import Position

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    Two moves are equal only when start, end *and* promotion type match,
    so each promotion choice on the same squares is a distinct move.
    """

    start: Position
    end: Position
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{self.start.name}{self.end.name}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base
