"""HTTP routes. Handlers only translate between HTTP and the GameRecordService."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tictactoe.api.models import (
    ErrorResponse,
    GameRecordResponse,
    StatsResponse,
    SubmitGameRequest,
)
from tictactoe.config import get_settings
from tictactoe.db.database import get_db
from tictactoe.db.sql_repository import SQLGameRecordRepository
from tictactoe.services.record_service import GameRecordService

router = APIRouter(prefix="/api", tags=["Games"])

STORAGE_ERROR = {500: {"model": ErrorResponse}}


def get_record_service(db: Session = Depends(get_db)) -> GameRecordService:
    return GameRecordService(
        SQLGameRecordRepository(db),
        recent_limit=get_settings().recent_games_limit,
    )


@router.post(
    "/games",
    response_model=GameRecordResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, **STORAGE_ERROR},
)
def submit_game(
    request: SubmitGameRequest,
    service: GameRecordService = Depends(get_record_service),
) -> GameRecordResponse:
    """Store a finished game."""
    return service.submit_game(request)


@router.get(
    "/games", response_model=list[GameRecordResponse], responses=STORAGE_ERROR
)
def list_recent_games(
    service: GameRecordService = Depends(get_record_service),
) -> list[GameRecordResponse]:
    """Up to 10 most recent games, newest first."""
    return service.list_recent_games()


@router.get("/stats", response_model=StatsResponse, responses=STORAGE_ERROR)
def get_stats(
    service: GameRecordService = Depends(get_record_service),
) -> StatsResponse:
    return service.get_stats()
