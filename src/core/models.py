"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain layer (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the API layer or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
RowCol = tuple[int, int]
PieceColor = str
PieceTypeName = str


@dataclass
class GameModel:
    """Transport-safe representation of a chess game used between API, Service, Repository, and Game layers."""

    pieces: dict[RowCol, tuple[PieceColor, PieceTypeName]]
    color_to_move: PieceColor
    selected_square: Optional[RowCol] = None
