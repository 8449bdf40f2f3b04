"""Position value object: one square of the 8x8 board.

Coordinates are 1-based, as read off a physical board:
    row 1 = White's back rank, row 8 = Black's back rank
    column 1 = a-file, column 8 = h-file
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
_FILES = "abcdefgh"


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (row, column) square, both in ``1..8``."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not Position.is_valid(self.row, self.column):
            raise ValueError(f"Position off the board: ({self.row}, {self.column})")

    @staticmethod
    def is_valid(row: int, column: int) -> bool:
        """Whether ``(row, column)`` names a square on the board."""
        return 1 <= row <= BOARD_SIZE and 1 <= column <= BOARD_SIZE

    def offset(self, d_row: int, d_column: int) -> Position | None:
        """Neighbouring square, or ``None`` if it falls off the board."""
        row = self.row + d_row
        column = self.column + d_column
        if not Position.is_valid(row, column):
            return None
        return Position(row, column)

    # ── Naming ───────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Square name, e.g. ``Position(2, 5)`` → ``'e2'``."""
        return f"{_FILES[self.column - 1]}{self.row}"

    @classmethod
    def parse(cls, name: str) -> Position:
        """Parse a square name, e.g. ``'e4'`` → ``Position(4, 5)``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(int(name[1]), _FILES.index(name[0]) + 1)

    def __str__(self) -> str:
        return self.name


def all_positions() -> list[Position]:
    """Every square in scan order: rows 1..8, columns 1..8 within each row."""
    return [
        Position(row, column)
        for row in range(1, BOARD_SIZE + 1)
        for column in range(1, BOARD_SIZE + 1)
    ]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(1, c) for c in range(1, 9))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(2, c) for c in range(1, 9))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(3, c) for c in range(1, 9))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(4, c) for c in range(1, 9))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(5, c) for c in range(1, 9))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(6, c) for c in range(1, 9))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(7, c) for c in range(1, 9))
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(8, c) for c in range(1, 9))
