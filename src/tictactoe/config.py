"""Settings read from the environment (same names as the deployment uses)."""

import logging
import os
from dataclasses import dataclass, field

DEFAULT_DATABASE_URL = "sqlite:///data/tictactoe.db"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str = field(
        default_factory=lambda: os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    )
    database_echo: bool = field(default_factory=lambda: _env_flag("DATABASE_ECHO"))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "10000")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    api_base_url: str = field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:10000")
    )
    recent_games_limit: int = field(
        default_factory=lambda: int(os.getenv("RECENT_GAMES_LIMIT", "10"))
    )


def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """One stream handler for the whole process. Called once by the CLI / app factory."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
