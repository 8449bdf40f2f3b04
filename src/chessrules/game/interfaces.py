"""Abstract interface and options for the game layer.

Presentation layers (CLI, GUI, network adapters) depend on :class:`IGame`
rather than on the concrete :class:`~chessrules.game.game.Game`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.enums import Color, GameResult
    from chessrules.core.move import Move
    from chessrules.core.position import Position


# ── Options ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GameOptions:
    """Per-game behaviour switches.

    Args:
        require_king: Check queries raise ``MissingKingError`` when the
            queried color has no king, instead of answering "not in check".
        synchronized: Guard every public operation with a per-game
            re-entrant lock. Disable only when the game is confined to a
            single thread.
    """

    require_king: bool = False
    synchronized: bool = True

    @classmethod
    def lenient(cls) -> GameOptions:
        return cls()

    @classmethod
    def strict(cls) -> GameOptions:
        return cls(require_king=True)


# ── Game contract ───────────────────────────────────────────────────────────


class IGame(ABC):
    """What a presentation layer may ask of a game."""

    @property
    @abstractmethod
    def board(self) -> Board: ...

    @abstractmethod
    def set_board(self, board: Board) -> None:
        """Replace the board wholesale; the turn is left as it is."""

    @property
    @abstractmethod
    def team_turn(self) -> Color: ...

    @abstractmethod
    def set_team_turn(self, color: Color) -> None: ...

    @abstractmethod
    def valid_moves(self, position: Position) -> set[Move]:
        """Legal moves for the piece on *position* (empty if there is none)."""

    @abstractmethod
    def make_move(self, move: Move) -> None:
        """Commit *move* or raise ``InvalidMoveError``."""

    @abstractmethod
    def is_in_check(self, color: Color) -> bool: ...

    @abstractmethod
    def is_in_checkmate(self, color: Color) -> bool: ...

    @abstractmethod
    def is_in_stalemate(self, color: Color) -> bool: ...

    @abstractmethod
    def result(self) -> GameResult: ...
