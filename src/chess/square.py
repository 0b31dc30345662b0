"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

# Chess board is always 8x8 (rows, columns). Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """
    (row, col) pair, both counted from zero.

    Row 0 is the back rank of the black pieces, row 7 the back rank of the white pieces.
    """

    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Square:
        """Neighbouring square. NOTE: may fall off the board, check with is_within_bounds()"""
        return Square(self.row + d_row, self.col + d_col)


def all_squares() -> Iterator[Square]:
    """Every square on the board, row by row"""
    for row in range(BOARD_DIMENSIONS[0]):
        for col in range(BOARD_DIMENSIONS[1]):
            yield Square(row, col)
