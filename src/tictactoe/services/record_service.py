"""Orchestration of communication from API router to persistence layer (and the reverse direction)."""

import logging

from tictactoe.api.models import (
    GameRecordResponse,
    MoveEntry,
    StatsResponse,
    SubmitGameRequest,
)
from tictactoe.core.models import GameRecordModel, MoveModel
from tictactoe.db.repository import GameRecordRepository

logger = logging.getLogger(__name__)

RECENT_GAMES_LIMIT = 10


class GameRecordService:
    """Orchestration of layers for finished game records."""

    def __init__(
        self, repository: GameRecordRepository, recent_limit: int = RECENT_GAMES_LIMIT
    ) -> None:
        self.repo = repository
        self.recent_limit = recent_limit

    # -- API routes logic ---
    def submit_game(self, request: SubmitGameRequest) -> GameRecordResponse:
        """A client finished a game and sends the result + moves."""
        logger.debug(
            "Submitting game: winner=%s, %d moves", request.winner, len(request.moves)
        )

        # Convert the request into the boundary model
        record = GameRecordModel(
            winner=request.winner.value,
            moves=[
                MoveModel(player=move.player.value, position=move.position)
                for move in request.moves
            ],
        )

        # Store it (storage errors propagate to the API layer)
        stored = self.repo.create_record(record)

        # Return the stored record, moves in structured form
        return self._create_record_response(stored)

    def list_recent_games(self) -> list[GameRecordResponse]:
        """Newest first. An empty list simply means no game was played yet."""
        records = self.repo.list_recent(self.recent_limit)
        return [self._create_record_response(record) for record in records]

    def get_stats(self) -> StatsResponse:
        stats = self.repo.get_stats()
        return StatsResponse(
            total_games=stats.total_games,
            x_wins=stats.x_wins,
            o_wins=stats.o_wins,
            draws=stats.draws,
        )

    # -- Internal helpers --
    def _create_record_response(self, model: GameRecordModel) -> GameRecordResponse:
        """Convert info in GameRecordModel to a GameRecordResponse."""
        return GameRecordResponse(
            id=model.id,
            winner=model.winner,
            moves=[
                MoveEntry(player=move.player, position=move.position)
                for move in model.moves
            ],
            created_at=model.created_at,
        )
