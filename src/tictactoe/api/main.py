"""FastAPI application: routes, exception handlers and startup."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tictactoe.api.routes import router
from tictactoe.core.exceptions import InvalidRequestError, RepositoryError
from tictactoe.db.database import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    init_db()
    yield


async def handle_invalid_request(_request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Rejected request: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
    )


async def handle_repository_error(_request: Request, exc: Exception) -> JSONResponse:
    # already logged with traceback by the repository
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)}
    )


def create_app(initialize_db: bool = True) -> FastAPI:
    """Build the app. Tests pass initialize_db=False and override the db dependency instead."""
    app = FastAPI(
        title="Tic Tac Toe",
        description="Stores finished Tic Tac Toe games and serves win/loss/draw statistics.",
        version="0.1.0",
        lifespan=lifespan if initialize_db else None,
    )
    app.add_exception_handler(InvalidRequestError, handle_invalid_request)
    app.add_exception_handler(RepositoryError, handle_repository_error)
    app.include_router(router)
    return app
