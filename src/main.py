"""Entrypoint: build the FastAPI app. Run with `uvicorn src.main:app` or `python -m src.main`."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from src.api.routes import router
from src.core.config import DEBUG, LOG_FILE
from src.core.logging_config import setup_logging
from src.db.database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db()
    yield


def create_app() -> FastAPI:
    setup_logging(debug=DEBUG, log_file=LOG_FILE)
    app = FastAPI(title="Nim", description="Misère Nim against the computer.", lifespan=lifespan)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8000)
