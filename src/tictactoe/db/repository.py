"""Protocol repository (SQLAlchemy implementation lives in sql_repository.py, tests use an in-memory mock)"""

from typing import Protocol

from tictactoe.core.models import GameRecordModel, StatsModel


class GameRecordRepository(Protocol):
    """Persistence layer orchestration. Records are append-only."""

    def create_record(self, record: GameRecordModel) -> GameRecordModel:
        """Store a finished game and return it with the store-assigned id and created_at."""
        ...

    def list_recent(self, limit: int) -> list[GameRecordModel]:
        """Most recently created records first, at most `limit` of them."""
        ...

    def get_stats(self) -> StatsModel:
        """Counts over every stored record."""
        ...
