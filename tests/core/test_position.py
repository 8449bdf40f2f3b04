"""Tests for Position (square) value object."""

import pytest

from chessrules.core.position import A1, E2, E4, H8, Position, all_positions


class TestPositionConstruction:
    def test_corners_valid(self) -> None:
        assert Position(1, 1) == A1
        assert Position(8, 8) == H8

    @pytest.mark.parametrize("row, column", [(0, 1), (9, 1), (1, 0), (1, 9), (-1, 4)])
    def test_off_board_raises(self, row: int, column: int) -> None:
        with pytest.raises(ValueError, match="off the board"):
            Position(row, column)

    def test_is_valid(self) -> None:
        assert Position.is_valid(4, 5)
        assert not Position.is_valid(0, 5)
        assert not Position.is_valid(4, 9)

    def test_value_equality_and_hash(self) -> None:
        assert Position(2, 5) == E2
        assert len({Position(2, 5), E2, Position(4, 5)}) == 2

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            E2.row = 3  # type: ignore[misc]


class TestPositionOffset:
    def test_inside_board(self) -> None:
        assert E2.offset(2, 0) == E4

    def test_off_board_returns_none(self) -> None:
        assert A1.offset(-1, 0) is None
        assert H8.offset(0, 1) is None


class TestPositionNaming:
    def test_name(self) -> None:
        assert E2.name == "e2"
        assert str(H8) == "h8"

    def test_parse(self) -> None:
        assert Position.parse("e4") == E4
        assert Position.parse("a1") == A1

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E4", "e44"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            Position.parse(name)

    def test_all_positions_scan_order(self) -> None:
        squares = all_positions()
        assert len(squares) == 64
        assert squares[0] == A1
        assert squares[1] == Position(1, 2)
        assert squares[-1] == H8
