"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType


class SquareModel(BaseModel):
    """A square as the view layer sees it: the row and column of the clicked cell."""

    row: int
    col: int

    @field_validator("row")
    @classmethod
    def validate_row(cls, value: int) -> int:
        if not 0 <= value < BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(
                f"Row {value} is not on the board. Pick one in 0-{BOARD_DIMENSIONS[0] - 1}."
            )
        return value

    @field_validator("col")
    @classmethod
    def validate_col(cls, value: int) -> int:
        if not 0 <= value < BOARD_DIMENSIONS[1]:
            raise InvalidRequestError(
                f"Column {value} is not on the board. Pick one in 0-{BOARD_DIMENSIONS[1] - 1}."
            )
        return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """A new game always starts from the standard position with white to move: nothing to choose (yet)."""


class GetBoardRequest(BaseModel):
    game_id: UUID


class GetPieceRequest(BaseModel):
    game_id: UUID
    square: SquareModel


class SelectSquareRequest(BaseModel):
    game_id: UUID
    square: SquareModel


class LegalMovesRequest(BaseModel):
    game_id: UUID
    square: SquareModel


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    type: PieceType
    color: Color


class PlacedPieceResponse(BaseModel):
    square: SquareModel
    piece: PieceResponse


class BoardResponse(BaseModel):
    game_id: UUID
    color_to_move: Color
    pieces: list[PlacedPieceResponse]
    selected_square: Optional[SquareModel]


class SelectionResponse(BaseModel):
    game_id: UUID
    color_to_move: Color
    selected_square: Optional[SquareModel]
    move_attempted: bool
    move_applied: bool


class LegalMovesResponse(BaseModel):
    game_id: UUID
    square: SquareModel
    targets: list[SquareModel]
