"""Custom exceptions raised by the engine and propagated to the API layer."""

from src.core.shared_types import ErrorKind


class GameError(Exception):
    """Top-level exception for anything going wrong while handling a game."""

    kind: ErrorKind


class InvalidParametersError(GameError):
    """A game cannot be created with the supplied settings."""

    kind = ErrorKind.INVALID_PARAMETERS


class GameNotFoundError(GameError):
    """No game stored under the requested ID."""

    kind = ErrorKind.NOT_FOUND


class InvalidMoveError(GameError):
    """Wrong turn, or the number of matches taken is not allowed."""

    kind = ErrorKind.INVALID_MOVE
