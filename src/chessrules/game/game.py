"""Game: the stateful orchestrator of a chess game.

Owns the board and whose turn it is, filters moves through :class:`Rules`,
commits moves, and notifies listeners via simple callbacks.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NoReturn

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.game.errors import (
    InvalidMoveError,
    MissingKingError,
    MoveNotLegalError,
    NoPieceAtOriginError,
    NotYourTurnError,
)
from chessrules.game.interfaces import GameOptions, IGame

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[["Move", "Game"], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Game ─────────────────────────────────────────────────────────────────────


class Game(IGame):
    """A single game: board + side to move.

    Starts from the standard position with WHITE to move unless a board and
    turn are supplied.

    Thread-safety: legal-move generation temporarily mutates the board, so
    every public method holds a per-game re-entrant lock for its whole
    duration (see :class:`GameOptions`). Callbacks run inside that lock and
    may query the game they were fired from.
    """

    __slots__ = ("_board", "_team_turn", "_options", "_guard", "events")

    def __init__(
        self,
        board: Board | None = None,
        team_turn: Color = Color.WHITE,
        options: GameOptions | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._team_turn = team_turn
        self._options = options if options is not None else GameOptions()
        self._guard: contextlib.AbstractContextManager[object] = (
            threading.RLock()
            if self._options.synchronized
            else contextlib.nullcontext()
        )
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def team_turn(self) -> Color:
        return self._team_turn

    @property
    def options(self) -> GameOptions:
        return self._options

    def set_board(self, board: Board) -> None:
        with self._guard:
            self._board = board
            _LOGGER.debug("Board replaced; %s to move", self._team_turn)

    def set_team_turn(self, color: Color) -> None:
        with self._guard:
            self._team_turn = color

    # ── Move queries ─────────────────────────────────────────────────────

    def valid_moves(self, position: Position) -> set[Move]:
        with self._guard:
            return Rules.legal_moves(self._board, position)

    def all_valid_moves(self, color: Color) -> set[Move]:
        """Every legal move available to *color*, regardless of turn."""
        with self._guard:
            return Rules.team_legal_moves(self._board, color)

    # ── Move commit ──────────────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Validate *move* and apply it as the next ply.

        Raises:
            NoPieceAtOriginError: the start square is empty.
            NotYourTurnError: the piece belongs to the side not on move.
            MoveNotLegalError: the piece has no legal moves, or *move* is
                not among them.
        """
        with self._guard:
            board = self._board
            piece = board[move.start]
            if piece is None:
                self._reject(NoPieceAtOriginError(move))
            if piece.color != self._team_turn:
                self._reject(NotYourTurnError(move, piece.color, self._team_turn))

            legal = Rules.legal_moves(board, move.start)
            if not legal:
                reason = f"the piece on {move.start} has no legal moves"
                self._reject(MoveNotLegalError(move, reason))
            if move not in legal:
                self._reject(MoveNotLegalError(move, "not a legal move for this piece"))

            placed = piece
            if move.promotion is not None:
                placed = Piece(piece.color, move.promotion)
            board[move.end] = placed
            board[move.start] = None
            self._team_turn = self._team_turn.opposite
            _LOGGER.debug(
                "%s played %s; %s to move", piece.color, move, self._team_turn
            )

            self._emit_move(move)
            if self.events.on_game_over:
                result = Rules.game_result(board, self._team_turn)
                if result != GameResult.IN_PROGRESS:
                    _LOGGER.info("Game over: %s", result.name)
                    self._emit_game_over(result)

    # ── Check / mate queries ─────────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        with self._guard:
            self._ensure_king(color)
            return Rules.is_in_check(self._board, color)

    def is_in_checkmate(self, color: Color) -> bool:
        with self._guard:
            self._ensure_king(color)
            return Rules.is_checkmate(self._board, color)

    def is_in_stalemate(self, color: Color) -> bool:
        with self._guard:
            self._ensure_king(color)
            return Rules.is_stalemate(self._board, color)

    def result(self) -> GameResult:
        """Outcome with the current side to move about to play."""
        with self._guard:
            self._ensure_king(self._team_turn)
            return Rules.game_result(self._board, self._team_turn)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _ensure_king(self, color: Color) -> None:
        if self._board.find_king(color) is not None:
            return
        if self._options.require_king:
            raise MissingKingError(color)
        _LOGGER.warning("No %s king on board; treating as not in check", color)

    def _reject(self, error: InvalidMoveError) -> NoReturn:
        _LOGGER.debug("Rejected %s: %s", error.move, error.reason)
        raise error

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self._team_turn == other._team_turn and self._board == other._board

    def __repr__(self) -> str:
        return f"{self._team_turn} to move\n{self._board!r}"
