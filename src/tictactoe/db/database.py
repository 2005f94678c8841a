"""Generate database session"""

import logging
from pathlib import Path
from typing import Any, Generator, Optional

from sqlalchemy import URL, Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from tictactoe.config import get_settings
from tictactoe.db.schema import Base

logger = logging.getLogger(__name__)


def _sqlite_file(url: URL) -> Optional[Path]:
    """Path of the SQLite database file, None for other backends and in-memory databases."""
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return None
    return Path(url.database)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine. A SQLite file database is shared between request threads and uses WAL journaling."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url, echo=echo)

    engine = create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    if _sqlite_file(url) is not None:

        @event.listens_for(engine, "connect")
        def _set_wal_mode(dbapi_connection: Any, _connection_record: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return engine


settings = get_settings()
engine = build_engine(settings.database_url, echo=settings.database_echo)
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    """Ensure all tables are created (no migrations beyond this)."""
    db_file = _sqlite_file(bind.url)
    if db_file is not None:
        db_file.parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind)
    logger.info("Database initialized at %s", bind.url.render_as_string(hide_password=True))


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
