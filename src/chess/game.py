"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game:
deciding whether a move is legal, and applying it.
"""

import logging
from dataclasses import dataclass
from typing import Self

from src.chess.board import Board
from src.chess.moves import Move, can_move
from src.chess.pieces import FIRST_TO_MOVE, Color, Piece, PieceType, opponent_of
from src.chess.square import Square, all_squares
from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import Color as ColorName
from src.core.shared_types import PieceType as PieceTypeName

logger = logging.getLogger(__name__)


# --- MOVE LEGALITY ---
def is_legal(board: Board, turn_color: Color, move: Move) -> bool:
    """
    Decide if a move is legal
    ----

    ----
    Checks in order, stops at the first failure:

    0. There must be a piece of the side to move on the starting square.
    1. The target square must be on the board.
    2. You cannot take your own pieces.
    3. The piece must be able to move there (geometry + nothing standing in the way).
    4. The move must not leave your own king in check.

    NOTE: never changes the board. Simulating the move happens on a copy.
    """
    if not move.from_square.is_within_bounds():
        logger.debug("Rejected %s: starting square is off the board", move)
        return False

    piece = board.piece(move.from_square)
    if piece is None or piece.color != turn_color:
        logger.debug(
            "Rejected %s: no %s piece to move", move, turn_color.name.lower()
        )
        return False

    if not move.to_square.is_within_bounds():
        logger.debug("Rejected %s: target square is off the board", move)
        return False

    target = board.piece(move.to_square)
    if target is not None and target.color == piece.color:
        logger.debug("Rejected %s: cannot capture your own piece", move)
        return False

    if not can_move(piece, move, board):
        logger.debug(
            "Rejected %s: %s cannot move like that", move, piece.type.name.lower()
        )
        return False

    if leaves_king_in_check(board, move):
        logger.debug("Rejected %s: would leave the king in check", move)
        return False

    return True


def leaves_king_in_check(board: Board, move: Move) -> bool:
    """Return True if the move puts (or leaves) your own king in check

    plan:
    1. Copy the board
    2. make the candidate move
    3. determine if king is in check on the new board (no king on the board? Then it cannot be in check either)
    """
    piece = board.piece(move.from_square)
    # for the type checker: only called for moves that start from an occupied square
    assert piece is not None

    hypothetical_board = board.copy()
    hypothetical_board.move_piece(move)
    return hypothetical_board.is_check(piece.color)


def legal_moves_from(board: Board, turn_color: Color, square: Square) -> list[Move]:
    """
    All legal moves of the piece standing on the given square.
    ----
    These can be used to display to the user (highlight the squares the selected piece can go to).
    """
    candidate_moves = [Move(square, target) for target in all_squares()]
    return [move for move in candidate_moves if is_legal(board, turn_color, move)]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    color_to_move: Color

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, white to move."""
        return cls(board=Board.starting_position(), color_to_move=FIRST_TO_MOVE)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        color_to_move = _parse_color(model.color_to_move)

        # create the Board
        board = Board.empty()
        for (row, col), (color_name, type_name) in model.pieces.items():
            square = Square(row, col)
            if not square.is_within_bounds():
                raise GameStateError(
                    f"Piece placed outside the board: (row={row}, col={col})."
                )
            piece = Piece(_parse_piece_type(type_name), _parse_color(color_name))
            board.place_piece(piece, square)

        return cls(board, color_to_move)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        pieces: dict[tuple[int, int], tuple[str, str]] = {}
        for square in self.board.occupied_squares():
            piece = self.board.piece(square)
            assert piece is not None
            pieces[(square.row, square.col)] = (
                ColorName[piece.color.name].value,
                PieceTypeName[piece.type.name].value,
            )
        return GameModel(
            pieces=pieces,
            color_to_move=ColorName[self.color_to_move.name].value,
        )

    def get_piece(self, square: Square) -> Piece | None:
        """read accessor (for rendering). Raises SquareOutOfBoundsError for a square that is not on the board."""
        return self.board.piece(square)

    def is_legal(self, move: Move) -> bool:
        return is_legal(self.board, self.color_to_move, move)

    def legal_moves(self, square: Square) -> list[Move]:
        return legal_moves_from(self.board, self.color_to_move, square)

    def apply_move(self, move: Move) -> bool:
        """
        Attempt to make a move
        -----

        Illegal moves are simply rejected: the game stays exactly as it was and False is returned.
        Otherwise:
        1. update the board (the piece lands on the target square, the starting square is cleared)
        2. the other player is to move
        """
        if not self.is_legal(move):
            return False

        self.board.move_piece(move)
        logger.info(
            "%s moved %s -> %s",
            self.color_to_move.name.lower(),
            (move.from_square.row, move.from_square.col),
            (move.to_square.row, move.to_square.col),
        )
        self._switch_turn()
        return True

    # -- PRIVATE HELPERS ---
    def _switch_turn(self) -> None:
        self.color_to_move = opponent_of(self.color_to_move)


def _parse_color(name: str) -> Color:
    if name.upper() not in Color.__members__:
        raise GameStateError(
            f"Invalid color: {name!r}. \nPick one from {','.join([c.name.lower() for c in Color])}"
        )
    return Color[name.upper()]


def _parse_piece_type(name: str) -> PieceType:
    if name.upper() not in PieceType.__members__:
        raise GameStateError(
            f"Invalid piece type: {name!r}. \nPick one from {','.join([t.name.lower() for t in PieceType])}"
        )
    return PieceType[name.upper()]
