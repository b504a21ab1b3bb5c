"""FastAPI dependencies wiring the service to its repository and random source. Tests override these."""

from fastapi import Depends
from sqlalchemy.orm import Session

from src.core.config import RANDOM_SEED
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.nim.random_source import RandomSource, SystemRandomSource
from src.services.nim_service import NimService

_random_source = SystemRandomSource(RANDOM_SEED)


def get_random_source() -> RandomSource:
    return _random_source


def get_nim_service(
    db: Session = Depends(get_db),
    random_source: RandomSource = Depends(get_random_source),
) -> NimService:
    return NimService(SQLGameRepository(db), random_source)
