"""
Geometry/Base movement and capturing/attacking rules

Key idea: one geometry rule per piece type, dispatched with an exhaustive match on the PieceType.
The same geometry is used twice:
* `can_move()`: Could the piece move there? (pawns need to know whether the target is occupied)
* `can_attack()`: Could the piece capture on that square? (used by the attack scanner)

Whether the move leaves your own king in check is decided later by the Game.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, assert_never

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square

Vector = tuple[int, int]

# White moves UP the board (towards row 0), black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
# Only from here a pawn may advance by two squares
PAWN_HOME_ROWS: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @property
    def row_diff(self) -> int:
        return abs(self.to_square.row - self.from_square.row)

    @property
    def col_diff(self) -> int:
        return abs(self.to_square.col - self.from_square.col)

    @property
    def unit_step(self) -> Vector:
        """Direction of the move, normalized so that each component is -1, 0, or 1"""
        d_row = self.to_square.row - self.from_square.row
        d_col = self.to_square.col - self.from_square.col
        return _sign(d_row), _sign(d_col)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# --- PATH CHECK ---
def is_path_clear(move: Move, board: Board) -> bool:
    """
    Walk from the starting square towards the target square, one unit step at a time.
    Both endpoints are excluded: only the squares in between must be empty.

    NOTE: only meaningful for straight lines and diagonals (the sliding pieces).
    """
    d_row, d_col = move.unit_step
    square = move.from_square.offset(d_row, d_col)
    while square != move.to_square:
        if not board.is_empty(square):
            return False
        square = square.offset(d_row, d_col)
    return True


# --- GEOMETRY ---
def is_knight_jump(move: Move) -> bool:
    """Knights always move such that |delta_row| + |delta_col| = 3 (and never along a straight line)"""
    return (move.row_diff, move.col_diff) in [(2, 1), (1, 2)]


def is_diagonal(move: Move) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return move.row_diff == move.col_diff


def is_straight(move: Move) -> bool:
    """Rooks move either horizontally or vertically: exactly one of the differences is zero"""
    return (move.row_diff == 0) != (move.col_diff == 0)


def is_king_step(move: Move) -> bool:
    """The king can move by a single square at the time, in any direction."""
    return move.row_diff <= 1 and move.col_diff <= 1


def is_pawn_capture_step(move: Move, color: Color) -> bool:
    """Pawns take diagonally: one column sideways, one row forward"""
    forward = PAWN_DIRECTION[color]
    d_row = move.to_square.row - move.from_square.row
    return move.col_diff == 1 and d_row == forward


def is_pawn_move(move: Move, color: Color, board: Board) -> bool:
    """
    A pawn:
    - moves by a single square forward onto an empty square.
    - It can move by two in their first move (so when on their home row), if both squares are empty.
    - takes diagonally, but only when there is an opponent's piece to take

    NOTE: No en passant, no promotion
    """
    forward = PAWN_DIRECTION[color]
    d_row = move.to_square.row - move.from_square.row
    target = board.piece(move.to_square)

    # pawn pushes
    if move.col_diff == 0:
        if d_row == forward:
            return target is None
        is_on_home_row = move.from_square.row == PAWN_HOME_ROWS[color]
        if is_on_home_row and d_row == 2 * forward:
            in_between = move.from_square.offset(forward, 0)
            return target is None and board.is_empty(in_between)
        return False

    # pawn takes
    if is_pawn_capture_step(move, color):
        return target is not None and target.color != color
    return False


# -- MOVEMENT RULES ---
def can_move(piece: Piece, move: Move, board: Board) -> bool:
    """
    Geometry + blocking check for the piece standing on the starting square of the move.

    Assumes the target square is on the board and does not hold a piece of the same color (checked by the caller).
    """
    match piece.type:
        case PieceType.PAWN:
            return is_pawn_move(move, piece.color, board)
        case PieceType.KNIGHT:
            return is_knight_jump(move)
        case PieceType.BISHOP:
            return is_diagonal(move) and is_path_clear(move, board)
        case PieceType.ROOK:
            return is_straight(move) and is_path_clear(move, board)
        case PieceType.QUEEN:
            return (is_straight(move) or is_diagonal(move)) and is_path_clear(
                move, board
            )
        case PieceType.KING:
            return is_king_step(move)
        case _:
            assert_never(piece.type)


# --- CAPTURING RULES / ATTACKING RULES ---
def can_attack(piece: Piece, move: Move, board: Board) -> bool:
    """
    Could the piece on the starting square capture on the target square on its next move?
    ---

    Same geometry as `can_move()`, except:
    * pawns only attack diagonally forward (a pawn push never captures)
    * no check on what is standing on the target square
    * no check whether the attacker would leave its own king in check
    """
    match piece.type:
        case PieceType.PAWN:
            return is_pawn_capture_step(move, piece.color)
        case PieceType.KNIGHT:
            return is_knight_jump(move)
        case PieceType.BISHOP:
            return is_diagonal(move) and is_path_clear(move, board)
        case PieceType.ROOK:
            return is_straight(move) and is_path_clear(move, board)
        case PieceType.QUEEN:
            return (is_straight(move) or is_diagonal(move)) and is_path_clear(
                move, board
            )
        case PieceType.KING:
            return is_king_step(move)
        case _:
            assert_never(piece.type)
