"""Response models"""

from typing import Optional, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.core.models import GameState
from src.core.shared_types import PlayerType


# --- RESPONSE MODELS ---
class GameStateResponse(BaseModel):
    """Serialized with camelCase keys (gameId, matchesInHeap, isGameOver, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    game_id: Optional[str] = None
    total_matches: int
    max_matches_per_turn: int
    matches_in_heap: int
    current_player: PlayerType
    is_game_over: bool
    winner: Optional[PlayerType] = None
    message: Optional[str] = None

    @classmethod
    def from_state(cls, state: GameState, message: Optional[str] = None) -> Self:
        """Build the response for a game state. A given message replaces the stored one (used for rejected moves)."""
        return cls(
            game_id=state.game_id,
            total_matches=state.total_matches,
            max_matches_per_turn=state.max_matches_per_turn,
            matches_in_heap=state.matches_in_heap,
            current_player=state.current_player,
            is_game_over=state.is_game_over,
            winner=state.winner,
            message=message if message is not None else state.message,
        )


class ErrorResponse(BaseModel):
    detail: str
