"""In-memory stand-in for the record API, served through httpx.MockTransport."""

import json
from typing import Optional

import httpx

from tictactoe.client.api_client import RecordApiClient

BASE_URL = "http://tictactoe.test"


class FakeRecordServer:
    def __init__(
        self, fail_saves: bool = False, offline: bool = False, html_only: bool = False
    ) -> None:
        self.fail_saves = fail_saves
        self.offline = offline
        # answers 200 with an HTML page, like a proxy or a wrong base url would
        self.html_only = html_only
        self.games: list[dict] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        if self.offline:
            raise httpx.ConnectError("Connection refused", request=request)
        if self.html_only:
            return httpx.Response(
                200,
                text="<html><body>Welcome</body></html>",
                headers={"content-type": "text/html"},
            )

        if request.method == "POST" and request.url.path == "/api/games":
            if self.fail_saves:
                return httpx.Response(500, json={"error": "Failed to save game"})
            body = json.loads(request.content)
            record = {
                "id": len(self.games) + 1,
                "winner": body["winner"],
                "moves": body["moves"],
                "created_at": "2024-01-01T12:00:00",
            }
            self.games.append(record)
            return httpx.Response(201, json=record)

        if request.method == "GET" and request.url.path == "/api/games":
            return httpx.Response(200, json=list(reversed(self.games))[:10])

        if request.method == "GET" and request.url.path == "/api/stats":
            winners = [game["winner"] for game in self.games]
            return httpx.Response(
                200,
                json={
                    "total_games": len(winners),
                    "x_wins": winners.count("X"),
                    "o_wins": winners.count("O"),
                    "draws": winners.count("draw"),
                },
            )
        return httpx.Response(404, json={"detail": "Not Found"})

    def client(self, base_url: Optional[str] = None) -> RecordApiClient:
        return RecordApiClient(
            base_url or BASE_URL, transport=httpx.MockTransport(self.handle)
        )
