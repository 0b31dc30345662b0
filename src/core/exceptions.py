"""
Custom exceptions used across layers.

NOTE: A rejected move is NOT an exception. The rules engine reports it by returning False / leaving the game untouched.
These errors are for programming-contract violations and invalid requests.
"""


class GameError(Exception):
    """Top-level error of this application. Catch this one if you do not care about the specifics."""


class SquareOutOfBoundsError(GameError):
    """A square outside the board was passed to an accessor."""


class GameStateError(GameError):
    """The stored game data cannot be turned into a valid Game."""


class InvalidRequestError(GameError):
    """Request data that does not pass validation.

    NOTE: not a ValueError on purpose. Pydantic only wraps ValueError/AssertionError, so this one propagates as is.
    """


class RepositoryError(GameError):
    """Record could not be found / stored."""
