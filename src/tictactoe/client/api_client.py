"""Async HTTP client for the game record API."""

import logging
from types import TracebackType
from typing import Optional, Self

import httpx

from tictactoe.api.models import GameRecordResponse, StatsResponse
from tictactoe.game.session import FinishedGame

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class RecordApiClient:
    """Thin wrapper around httpx.AsyncClient. Every call raises httpx.HTTPError on network errors and non-2xx answers."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        )

    async def submit_game(self, game: FinishedGame) -> GameRecordResponse:
        response = await self._client.post("/api/games", json=game.to_payload())
        response.raise_for_status()
        return GameRecordResponse.model_validate(response.json())

    async def recent_games(self) -> list[GameRecordResponse]:
        response = await self._client.get("/api/games")
        response.raise_for_status()
        return [GameRecordResponse.model_validate(item) for item in response.json()]

    async def stats(self) -> StatsResponse:
        response = await self._client.get("/api/stats")
        response.raise_for_status()
        return StatsResponse.model_validate(response.json())

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()
