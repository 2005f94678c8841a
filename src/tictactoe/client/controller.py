"""
Glue between one GameSession and the record API.

The session calls back synchronously when a game ends; the controller turns that into a background asyncio task
(save the game, then refresh stats). Failures inside that task are logged and dropped: a failed save or stats
refresh never blocks playing on or restarting.
"""

import asyncio
import logging
from typing import Optional

import httpx

from tictactoe.api.models import StatsResponse
from tictactoe.client.api_client import RecordApiClient
from tictactoe.game.session import FinishedGame, GameSession

logger = logging.getLogger(__name__)


class GameController:
    def __init__(
        self, client: RecordApiClient, session: Optional[GameSession] = None
    ) -> None:
        self.client = client
        self.session = session if session is not None else GameSession()
        self.session.on_finish(self._schedule_save)
        # last stats we managed to fetch, stays stale (or None) when the server cannot be reached
        self.stats: Optional[StatsResponse] = None
        self._pending: set[asyncio.Task[None]] = set()

    def play(self, index: int) -> bool:
        """Forward a click to the session. Needs a running event loop, the save of a finished game is scheduled on it."""
        # fail before the board changes, not half way through finishing the game
        asyncio.get_running_loop()
        return self.session.apply_move(index)

    def restart(self) -> None:
        self.session.restart()

    async def refresh_stats(self) -> Optional[StatsResponse]:
        try:
            self.stats = await self.client.stats()
        except (httpx.HTTPError, ValueError) as e:
            # ValueError: body is not JSON, or not shaped like the stats
            logger.error("Error fetching stats: %s", e)
        return self.stats

    async def drain(self) -> None:
        """Wait for every save that is still in flight."""
        await asyncio.gather(*list(self._pending))

    # -- PRIVATE HELPERS ---
    def _schedule_save(self, game: FinishedGame) -> None:
        task = asyncio.get_running_loop().create_task(self._save_and_refresh(game))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _save_and_refresh(self, game: FinishedGame) -> None:
        try:
            record = await self.client.submit_game(game)
            logger.info("Game saved as record %s", record.id)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Error saving game: %s", e)
            return
        await self.refresh_stats()
