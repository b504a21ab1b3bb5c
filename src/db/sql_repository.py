"""Implementation of (Game)Repository using SQLAlchemy"""

from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameState
from src.core.shared_types import PlayerType
from src.db.schema import DBGameState


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def save(self, state: GameState) -> GameState:
        """Insert a new record (with a fresh ID) or overwrite the existing one."""
        game_db = self._fetch_game(state.game_id) if state.game_id else None
        if game_db is None:
            game_db = DBGameState(id=state.game_id or str(uuid4()))
            self.db.add(game_db)
        game_db.total_matches = state.total_matches
        game_db.max_matches_per_turn = state.max_matches_per_turn
        game_db.matches_in_heap = state.matches_in_heap
        game_db.current_player = state.current_player.value
        game_db.is_game_over = state.is_game_over
        game_db.winner = state.winner.value if state.winner else None
        game_db.message = state.message
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def find_by_id(self, game_id: str) -> GameState | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def exists_by_id(self, game_id: str) -> bool:
        return self._fetch_game(game_id) is not None

    def _fetch_game(self, game_id: str) -> DBGameState | None:
        query = select(DBGameState).where(DBGameState.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGameState) -> GameState:
        """Convert SQLAlchemy model to data transfer model."""
        return GameState(
            game_id=game_db.id,
            total_matches=game_db.total_matches,
            max_matches_per_turn=game_db.max_matches_per_turn,
            matches_in_heap=game_db.matches_in_heap,
            current_player=PlayerType(game_db.current_player),
            is_game_over=game_db.is_game_over,
            winner=PlayerType(game_db.winner) if game_db.winner else None,
            message=game_db.message,
        )
