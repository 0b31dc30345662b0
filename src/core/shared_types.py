"""
Type definitions used across layers
"""

from enum import StrEnum

# --- The domain layer has its own Enum versions of Color and PieceType (see src/chess/pieces.py).
# --- These are the string versions that can be sent across the boundaries (requests, responses, GameModel).


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
