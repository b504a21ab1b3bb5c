"""
Type definitions used across layers
"""

from enum import StrEnum


class PlayerType(StrEnum):
    PLAYER = "player"
    COMPUTER = "computer"


class ErrorKind(StrEnum):
    """Tag carried by every GameError. The API layer maps these to status codes."""

    INVALID_PARAMETERS = "invalid parameters"
    NOT_FOUND = "not found"
    INVALID_MOVE = "invalid move"
