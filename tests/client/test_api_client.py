"""Unit tests for src/tictactoe/client/api_client.py"""

import asyncio

import httpx
import pytest
from record_server import FakeRecordServer

from tictactoe.api.models import StatsResponse
from tictactoe.core.shared_types import Mark, Outcome
from tictactoe.game.moves import Move
from tictactoe.game.session import FinishedGame

GAME = FinishedGame(winner=Outcome.O, moves=(Move(Mark.X, 0), Move(Mark.O, 4)))


def test_submit_then_list(fake_server: FakeRecordServer) -> None:
    server = fake_server

    async def scenario() -> None:
        async with server.client() as client:
            record = await client.submit_game(GAME)
            assert record.id == 1
            assert record.winner == Outcome.O
            assert [(m.player, m.position) for m in record.moves] == [
                (Mark.X, 0),
                (Mark.O, 4),
            ]

            (listed,) = await client.recent_games()
            assert listed == record

    asyncio.run(scenario())
    assert server.games[0]["moves"] == [
        {"player": "X", "position": 0},
        {"player": "O", "position": 4},
    ]


def test_stats(fake_server: FakeRecordServer) -> None:
    server = fake_server

    async def scenario() -> StatsResponse:
        async with server.client() as client:
            await client.submit_game(GAME)
            return await client.stats()

    assert asyncio.run(scenario()) == StatsResponse(total_games=1, o_wins=1)


def test_server_error_raises(fake_server: FakeRecordServer) -> None:
    server = fake_server
    server.fail_saves = True

    async def scenario() -> None:
        async with server.client() as client:
            await client.submit_game(GAME)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(scenario())


def test_network_error_raises(fake_server: FakeRecordServer) -> None:
    server = fake_server
    server.offline = True

    async def scenario() -> None:
        async with server.client() as client:
            await client.stats()

    with pytest.raises(httpx.HTTPError):
        asyncio.run(scenario())
