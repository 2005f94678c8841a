"""Unit tests for src/tictactoe/config.py and the cli parser"""

import pytest

from tictactoe.cli import build_parser
from tictactoe.config import DEFAULT_DATABASE_URL, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["DATABASE_URL", "DATABASE_ECHO", "PORT", "RECENT_GAMES_LIMIT"]:
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.database_echo is False
    assert settings.port == 10000
    assert settings.recent_games_limit == 10


def test_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("DATABASE_ECHO", "true")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("API_BASE_URL", "http://example.test")
    settings = Settings()
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.database_echo is True
    assert settings.port == 8080
    assert settings.api_base_url == "http://example.test"


def test_cli_serve_arguments() -> None:
    args = build_parser().parse_args(["serve", "--port", "9000"])
    assert args.command == "serve"
    assert args.port == 9000


def test_cli_play_arguments() -> None:
    args = build_parser().parse_args(["play", "--api-url", "http://localhost:1234"])
    assert args.command == "play"
    assert args.api_url == "http://localhost:1234"


def test_cli_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
