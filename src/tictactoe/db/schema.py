"""Database tables / schema"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    """One finished game. Rows are inserted once and never updated."""

    __tablename__ = "games"
    # ids of removed rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    winner: Mapped[str]
    # list of {"player": "X", "position": 4} in the order they were played
    moves: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    # assigned by the database at insert time
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
