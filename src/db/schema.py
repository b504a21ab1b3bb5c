"""Database tables / schema"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DBGameState(Base):
    __tablename__ = "game_states"
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    total_matches: Mapped[int]
    max_matches_per_turn: Mapped[int]
    matches_in_heap: Mapped[int]
    current_player: Mapped[str]
    is_game_over: Mapped[bool] = mapped_column(default=False)
    winner: Mapped[Optional[str]]
    message: Mapped[Optional[str]]
