"""Protocol repository (key-value store of GameState by game ID)."""

from typing import Protocol

from src.core.models import GameState


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def save(self, state: GameState) -> GameState:
        """Insert when state.game_id is None (a new ID gets assigned), otherwise overwrite the stored record."""
        ...

    def find_by_id(self, game_id: str) -> GameState | None:
        """Get game by ID, if record exists."""
        ...

    def exists_by_id(self, game_id: str) -> bool:
        """Check whether a record exists for this ID."""
        ...
