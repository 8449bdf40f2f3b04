"""Exceptions raised by the game layer.

Every rejected move raises a subclass of :class:`InvalidMoveError`, so
callers that only care whether a move went through catch that one type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import Color
    from chessrules.core.move import Move


class InvalidMoveError(ValueError):
    """A move was rejected; the game state is unchanged."""

    def __init__(self, move: Move, reason: str) -> None:
        super().__init__(f"Invalid move {move}: {reason}")
        self.move = move
        self.reason = reason


class NoPieceAtOriginError(InvalidMoveError):
    def __init__(self, move: Move) -> None:
        super().__init__(move, f"no piece on {move.start}")


class NotYourTurnError(InvalidMoveError):
    def __init__(self, move: Move, mover: Color, team_turn: Color) -> None:
        super().__init__(move, f"it is {team_turn}'s turn, not {mover}'s")
        self.mover = mover
        self.team_turn = team_turn


class MoveNotLegalError(InvalidMoveError):
    """The piece cannot make this move (or has no legal moves at all)."""


class MissingKingError(ValueError):
    """Raised in strict mode when a check query finds no king for a color."""

    def __init__(self, color: Color) -> None:
        super().__init__(f"No {color.name} king on board")
        self.color = color
