"""Requests and Response models"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from tictactoe.core.exceptions import InvalidRequestError
from tictactoe.core.shared_types import Mark, Outcome
from tictactoe.game.board import CELL_COUNT


class MoveEntry(BaseModel):
    player: Mark
    position: int = Field(ge=0, lt=CELL_COUNT)


# --- REQUEST MODELS ---
class SubmitGameRequest(BaseModel):
    winner: Outcome
    moves: list[MoveEntry]

    @field_validator("moves")
    @classmethod
    def validate_unique_positions(cls, value: list[MoveEntry]) -> list[MoveEntry]:
        positions = [move.position for move in value]
        if len(positions) != len(set(positions)):
            raise InvalidRequestError(
                f"A cell can only be played once per game. Got positions: {positions}"
            )
        return value


# --- RESPONSE MODELS ---
class GameRecordResponse(BaseModel):
    id: int
    winner: Outcome
    moves: list[MoveEntry]
    created_at: datetime


class StatsResponse(BaseModel):
    total_games: int = 0
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0


class ErrorResponse(BaseModel):
    error: str
