"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square

# (row, col) -> (color, piece type)
PieceLayout = dict[tuple[int, int], tuple[Color, PieceType]]


@pytest.fixture
def board_with_pieces() -> Callable[[PieceLayout], Board]:
    """Call the inner function with a mapping {(row, col): (color, piece type)} to get a board with just those pieces"""

    def _create_board(layout: PieceLayout) -> Board:
        return Board.from_pieces(
            {
                Square(row, col): Piece(piece_type, color)
                for (row, col), (color, piece_type) in layout.items()
            }
        )

    return _create_board
