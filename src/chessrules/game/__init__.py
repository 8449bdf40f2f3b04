"""Game management layer: turn order, move commit, check/mate queries.

Quick start::

    from chessrules.core import Move, Position
    from chessrules.game import Game

    game = Game()
    game.make_move(Move(Position.parse("e2"), Position.parse("e4")))
"""

from chessrules.game.errors import (
    InvalidMoveError,
    MissingKingError,
    MoveNotLegalError,
    NoPieceAtOriginError,
    NotYourTurnError,
)
from chessrules.game.game import Game, GameEvents
from chessrules.game.interfaces import GameOptions, IGame

__all__ = [
    # Interfaces / options
    "GameOptions",
    "IGame",
    # Concrete
    "Game",
    "GameEvents",
    # Errors
    "InvalidMoveError",
    "MissingKingError",
    "MoveNotLegalError",
    "NoPieceAtOriginError",
    "NotYourTurnError",
]
