"""
Selecting a piece, then selecting where it should go.

The view layer only knows about clicked squares. This state machine turns two clicks into one move attempt:

* NoSelection --(click own piece of the side to move)--> PieceSelected
* NoSelection --(click anything else)--> NoSelection
* PieceSelected --(click any square: attempt the move)--> NoSelection

The selection is a plain value that is passed in and returned: nothing is stored on the Game.
"""

import logging
from dataclasses import dataclass
from typing import Optional, assert_never

from src.chess.game import Game
from src.chess.moves import Move
from src.chess.square import Square

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoSelection:
    pass


@dataclass(frozen=True)
class PieceSelected:
    square: Square


SelectionState = NoSelection | PieceSelected


@dataclass(frozen=True)
class SelectionStateChange:
    """What happened after a single click"""

    previous: SelectionState
    current: SelectionState
    attempted_move: Optional[Move] = None
    move_applied: bool = False


def select_or_move(
    game: Game, selection: SelectionState, square: Square
) -> SelectionStateChange:
    """
    Handle a click on a square.
    ----

    NOTE: after a move attempt the selection is always cleared, whether the move was accepted or not.
    """
    match selection:
        case NoSelection():
            return _select(game, selection, square)
        case PieceSelected(square=origin):
            move = Move(origin, square)
            applied = game.apply_move(move)
            return SelectionStateChange(
                previous=selection,
                current=NoSelection(),
                attempted_move=move,
                move_applied=applied,
            )
        case _:
            assert_never(selection)


def _select(
    game: Game, selection: NoSelection, square: Square
) -> SelectionStateChange:
    """Only a piece of the side to move can be selected. Anything else is ignored."""
    if not square.is_within_bounds():
        return SelectionStateChange(previous=selection, current=selection)

    piece = game.get_piece(square)
    if piece is None or piece.color != game.color_to_move:
        logger.debug("Ignored selection of (%d, %d)", square.row, square.col)
        return SelectionStateChange(previous=selection, current=selection)

    return SelectionStateChange(previous=selection, current=PieceSelected(square))
