"""
Boundary layer data model.

GameState is passed between the Service, the Repository and the API layer.
The rules in src/nim/rules.py produce new GameState values; they never mutate one in place.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import PlayerType


@dataclass
class GameState:
    """Full state of one Nim game."""

    total_matches: int
    max_matches_per_turn: int
    matches_in_heap: int
    current_player: PlayerType = PlayerType.PLAYER
    is_game_over: bool = False
    winner: Optional[PlayerType] = None
    message: Optional[str] = None
    game_id: Optional[str] = None  # assigned by the repository on first save
