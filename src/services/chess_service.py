"""Orchestration of communication from API layer to business logic and the repository (and the reverse direction)."""

import logging
from dataclasses import replace
from uuid import UUID

from src.api.models import (
    BoardResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GetBoardRequest,
    GetPieceRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    PieceResponse,
    PlacedPieceResponse,
    SelectionResponse,
    SelectSquareRequest,
    SquareModel,
)
from src.chess.game import Game
from src.chess.pieces import Piece
from src.chess.selection import (
    NoSelection,
    PieceSelected,
    SelectionState,
    select_or_move,
)
from src.chess.square import Square
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color, PieceType
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API logic ---
    def create_game(self, request: CreateGameRequest) -> BoardResponse:
        """Start a new game in the standard starting position."""

        # Create a new Game, and convert into GameModel
        new_game = Game.new_game()
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        # Return a BoardResponse
        return self._create_board_response(game_id, stored_game)

    def get_board(self, request: GetBoardRequest) -> BoardResponse:
        """Retrieve current position (everything the view layer needs to render the board)."""
        game_model = self._fetch_game(request.game_id)
        return self._create_board_response(request.game_id, game_model)

    def get_piece(self, request: GetPieceRequest) -> PieceResponse | None:
        """What stands on a single square. None for an empty square."""
        game = Game.from_model(self._fetch_game(request.game_id))
        piece = game.get_piece(_to_square(request.square))
        return _to_piece_response(piece) if piece else None

    def select_square(self, request: SelectSquareRequest) -> SelectionResponse:
        """A square got clicked: either select a piece or attempt to move the selected piece there."""

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Create a new Game instance + current selection from the retrieved GameModel
        game = Game.from_model(stored_model)
        selection = _to_selection(stored_model)

        # Handle the click
        change = select_or_move(game, selection, _to_square(request.square))

        # Capture updated state in GameModel, and store in repository
        updated_model = replace(
            game.to_model(), selected_square=_selected_row_col(change.current)
        )
        self.repo.update_game(request.game_id, updated_model)

        return SelectionResponse(
            game_id=request.game_id,
            color_to_move=Color(updated_model.color_to_move),
            selected_square=_to_square_model(change.current),
            move_attempted=change.attempted_move is not None,
            move_applied=change.move_applied,
        )

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve the squares the piece on the requested square can legally go to."""
        game = Game.from_model(self._fetch_game(request.game_id))
        moves = game.legal_moves(_to_square(request.square))
        return LegalMovesResponse(
            game_id=request.game_id,
            square=request.square,
            targets=[
                SquareModel(row=move.to_square.row, col=move.to_square.col)
                for move in moves
            ],
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        deleted_game = self.repo.delete_game(request.game_id)
        if deleted_game is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_board_response(self, game_id: UUID, model: GameModel) -> BoardResponse:
        """Convert info in GameModel to a BoardResponse (for game with given ID.)"""
        return BoardResponse(
            game_id=game_id,
            color_to_move=Color(model.color_to_move),
            pieces=[
                PlacedPieceResponse(
                    square=SquareModel(row=row, col=col),
                    piece=PieceResponse(
                        type=PieceType(type_name), color=Color(color_name)
                    ),
                )
                for (row, col), (color_name, type_name) in sorted(model.pieces.items())
            ],
            selected_square=(
                SquareModel(row=model.selected_square[0], col=model.selected_square[1])
                if model.selected_square is not None
                else None
            ),
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model


def _to_square(square: SquareModel) -> Square:
    return Square(square.row, square.col)


def _to_piece_response(piece: Piece) -> PieceResponse:
    return PieceResponse(
        type=PieceType[piece.type.name], color=Color[piece.color.name]
    )


def _to_selection(model: GameModel) -> SelectionState:
    if model.selected_square is None:
        return NoSelection()
    row, col = model.selected_square
    return PieceSelected(Square(row, col))


def _selected_row_col(selection: SelectionState) -> tuple[int, int] | None:
    if isinstance(selection, PieceSelected):
        return selection.square.row, selection.square.col
    return None


def _to_square_model(selection: SelectionState) -> SquareModel | None:
    row_col = _selected_row_col(selection)
    if row_col is None:
        return None
    return SquareModel(row=row_col[0], col=row_col[1])
