"""Implementation of (GameRecord)Repository using SQLAlchemy"""

import logging

from sqlalchemy import ColumnElement, case, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tictactoe.core.exceptions import StorageReadError, StorageWriteError
from tictactoe.core.models import GameRecordModel, MoveModel, StatsModel
from tictactoe.core.shared_types import Outcome
from tictactoe.db.schema import DBGame

logger = logging.getLogger(__name__)


class SQLGameRecordRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def create_record(self, record: GameRecordModel) -> GameRecordModel:
        """Single row insert: either the whole record is committed or nothing is."""
        game_db = DBGame(
            winner=record.winner,
            moves=[
                {"player": move.player, "position": move.position}
                for move in record.moves
            ],
        )
        try:
            self.db.add(game_db)
            self.db.commit()
            self.db.refresh(game_db)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error saving game")
            raise StorageWriteError("Failed to save game") from e
        logger.info("Saved game %s (winner: %s)", game_db.id, game_db.winner)
        return self._to_model(game_db)

    def list_recent(self, limit: int) -> list[GameRecordModel]:
        # created_at only has second resolution in SQLite, id breaks the ties
        query = (
            select(DBGame)
            .order_by(DBGame.created_at.desc(), DBGame.id.desc())
            .limit(limit)
        )
        try:
            games = self.db.scalars(query).all()
        except SQLAlchemyError as e:
            logger.exception("Error fetching games")
            raise StorageReadError("Failed to fetch games") from e
        return [self._to_model(game_db) for game_db in games]

    def get_stats(self) -> StatsModel:
        query = select(
            func.count(DBGame.id),
            self._count_winner(Outcome.X),
            self._count_winner(Outcome.O),
            self._count_winner(Outcome.DRAW),
        )
        try:
            total_games, x_wins, o_wins, draws = self.db.execute(query).one()
        except SQLAlchemyError as e:
            logger.exception("Error fetching stats")
            raise StorageReadError("Failed to fetch stats") from e
        return StatsModel(
            total_games=total_games or 0,
            x_wins=x_wins or 0,
            o_wins=o_wins or 0,
            draws=draws or 0,
        )

    @staticmethod
    def _count_winner(outcome: Outcome) -> ColumnElement[int]:
        """SUM(CASE ...) is NULL on an empty table, hence the coalesce."""
        return func.coalesce(
            func.sum(case((DBGame.winner == outcome.value, 1), else_=0)), 0
        )

    def _to_model(self, game_db: DBGame) -> GameRecordModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameRecordModel(
            id=game_db.id,
            winner=game_db.winner,
            moves=[
                MoveModel(player=move["player"], position=move["position"])
                for move in game_db.moves
            ],
            created_at=game_db.created_at,
        )
