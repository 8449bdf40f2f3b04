"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.core.move import Move
from chessrules.core.position import D8, E5, E7, F2, F3, G2, G4, H4
from chessrules.game.game import Game

# 1.f3 e5 2.g4 Qh4#
FOOLS_MATE: tuple[Move, ...] = (
    Move(F2, F3),
    Move(E7, E5),
    Move(G2, G4),
    Move(D8, H4),
)

# Black king h8 boxed in by white king f6 and queen g6, black to move.
STALEMATE_DIAGRAM = """
8 . . . . . . . k
7 . . . . . . . .
6 . . . . . K Q .
5 . . . . . . . .
4 . . . . . . . .
3 . . . . . . . .
2 . . . . . . . .
1 . . . . . . . .
  a b c d e f g h
"""


@pytest.fixture
def game() -> Game:
    """Fresh game from the standard position, white to move."""
    return Game()


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def fools_mate_game() -> Game:
    """Game in which white has just been mated by 2...Qh4#."""
    g = Game()
    for move in FOOLS_MATE:
        g.make_move(move)
    return g


@pytest.fixture
def stalemate_board() -> Board:
    return Board.from_diagram(STALEMATE_DIAGRAM)
