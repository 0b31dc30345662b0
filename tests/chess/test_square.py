"""Unit tests for /src/chess/square.py"""

import pytest

from src.chess.square import BOARD_DIMENSIONS, Square, all_squares


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for row in range(BOARD_DIMENSIONS[0]):
        for col in range(BOARD_DIMENSIONS[1]):
            square = Square(row, col)
            assert square.is_within_bounds()


@pytest.mark.parametrize(
    "row, col",
    [(-1, 0), (0, -1), (8, 0), (0, 8), (8, 8), (-1, -1)],
)
def test_square_out_of_bounds(row: int, col: int) -> None:
    """One past the edge in any direction is off the board"""
    assert not Square(row, col).is_within_bounds()


def test_offset() -> None:
    """Offsetting does not check the bounds: that is up to the caller"""
    square = Square(0, 7)
    assert square.offset(1, -1) == Square(1, 6)
    assert square.offset(-1, 1) == Square(-1, 8)
    assert not square.offset(-1, 1).is_within_bounds()


def test_all_squares() -> None:
    """Every square exactly once, row by row"""
    squares = list(all_squares())
    assert len(squares) == BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]
    assert len(set(squares)) == len(squares)
    assert squares[0] == Square(0, 0)
    assert squares[1] == Square(0, 1)
    assert squares[-1] == Square(7, 7)


def test_squares_are_hashable_values() -> None:
    """Squares are used as dictionary keys, so equal squares must hash the same"""
    assert Square(3, 4) == Square(3, 4)
    assert {Square(3, 4): "x"}[Square(3, 4)] == "x"
