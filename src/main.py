"""Application factory and server entrypoint"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse
from src.api.routes import game_router
from src.core.config import Settings
from src.core.exceptions import GameError, RepositoryError
from src.db.memory_repository import InMemoryGameRepository
from src.services.tictactoe_service import TicTacToeService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """The game store exists from server start until shutdown, and is reached only through app.state."""
    repository = InMemoryGameRepository()
    app.state.repository = repository
    app.state.service = TicTacToeService(repository)
    logger.info("Start Server")
    try:
        yield
    finally:
        logger.info("Stop Server, dropping %d game(s)", len(repository))
        repository.clear()


async def handle_game_error(request: Request, exc: GameError) -> JSONResponse:
    """Domain errors are the client's fault, except for unknown IDs which are a 404."""
    status_code = (
        status.HTTP_404_NOT_FOUND
        if isinstance(exc, RepositoryError)
        else status.HTTP_400_BAD_REQUEST
    )
    body = ErrorResponse(detail=str(exc), error=exc.error_kind, reason=exc.sub_reason)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(title="Tic-Tac-Toe", lifespan=lifespan)
    app.include_router(game_router)
    app.add_exception_handler(GameError, handle_game_error)
    return app


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(create_app(), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
