"""The Game board implements all rules that effect the `position` (in chess: the configuration of pieces on the board)"""

from dataclasses import dataclass
from typing import Mapping, Optional, Self

from src.chess.moves import Move, can_attack
from src.chess.pieces import Color, Piece, PieceType, opponent_of
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.exceptions import SquareOutOfBoundsError

# Back rank, read from the first column to the last. Both colors use the same order (mirrored across the board).
BACK_RANK_ORDER: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# Rows on which each color sets up its pieces at the start: (back rank, pawn rank)
STARTING_ROWS: dict[Color, tuple[int, int]] = {
    Color.BLACK: (0, 1),
    Color.WHITE: (7, 6),
}


@dataclass
class Board:
    """
    The position: one slot per square (row by row), holding either a piece or None for an empty square.

    NOTE: Pieces are immutable, so copying the list of slots is enough to get an independent snapshot of the board.
    """

    slots: list[Optional[Piece]]

    @classmethod
    def empty(cls) -> Self:
        """Board with no pieces on it"""
        return cls([None] * (BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]))

    @classmethod
    def from_pieces(cls, pieces: Mapping[Square, Piece]) -> Self:
        """Convenience method: start from an empty board and put the given pieces on it"""
        board = cls.empty()
        for square, piece in pieces.items():
            board.place_piece(piece, square)
        return board

    @classmethod
    def starting_position(cls) -> Self:
        """
        The standard starting position:
        * black pieces on row 0, black pawns on row 1
        * rows 2 through 5 are empty
        * white pawns on row 6, white pieces on row 7
        """
        board = cls.empty()
        for color, (back_row, pawn_row) in STARTING_ROWS.items():
            for col, piece_type in enumerate(BACK_RANK_ORDER):
                board.place_piece(Piece(piece_type, color), Square(back_row, col))
                board.place_piece(Piece(PieceType.PAWN, color), Square(pawn_row, col))
        return board

    def copy(self) -> Self:
        """Independent snapshot to simulate moves on (without touching this board)"""
        return type(self)(list(self.slots))

    def piece(self, square: Square) -> Optional[Piece]:
        return self.slots[self._index(square)]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.slots[self._index(square)] = piece

    def remove_piece(self, square: Square) -> None:
        self.slots[self._index(square)] = None

    def move_piece(self, move: Move) -> None:
        """Update the position on the board (whatever stood on the target square gets replaced)"""
        piece_that_moved = self.piece(move.from_square)
        self.remove_piece(move.from_square)
        self.slots[self._index(move.to_square)] = piece_that_moved

    def occupied_squares(self) -> list[Square]:
        return [square for square in all_squares() if not self.is_empty(square)]

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square in all_squares()
            if (piece := self.piece(square)) is not None and piece.color == color
        ]

    def king_square(self, color: Color) -> Optional[Square]:
        """
        Where is the king of the given color?

        NOTE: Nothing forces a king to be on the board. Returns None if there is none.
        """
        king = Piece(PieceType.KING, color)
        return next(
            (square for square in all_squares() if self.piece(square) == king), None
        )

    def count_pieces(self) -> dict[Color, int]:
        """Tally how many pieces each player still has on the board"""
        return {color: len(self.locate_color(color)) for color in Color}

    # -- ATTACK DETECTION --
    def is_square_attacked(self, square: Square, defender_color: Color) -> bool:
        """
        Attack scanner
        ----

        Could any piece of the opponent of `defender_color` capture on `square` on its next move?

        NOTE: Uses the attacking rules only (see `can_attack()`). It never asks whether the attacker would expose its own king:
        that would require simulating yet another board for every attacker.
        """
        attacker_color = opponent_of(defender_color)
        for attacker_square in self.locate_color(attacker_color):
            # a piece does not attack the square it stands on
            if attacker_square == square:
                continue
            attacker = self.piece(attacker_square)
            # for the type checker: locate_color only returns occupied squares
            assert attacker is not None
            if can_attack(attacker, Move(attacker_square, square), self):
                return True
        return False

    def is_check(self, color: Color) -> bool:
        """
        Is the king of the given color under attack?

        NOTE: a missing king is treated as 'not in check'.
        # TODO: decide whether a board without a king should be rejected when it is created instead.
        """
        king_square = self.king_square(color)
        if king_square is None:
            return False
        return self.is_square_attacked(king_square, color)

    def _index(self, square: Square) -> int:
        """Position of the square in the list of slots. Fail loudly when asked for a square that does not exist."""
        if not square.is_within_bounds():
            raise SquareOutOfBoundsError(
                f"Square (row={square.row}, col={square.col}) is not on the {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
            )
        return square.row * BOARD_DIMENSIONS[1] + square.col
