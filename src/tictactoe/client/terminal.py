"""Terminal front-end: draws the board and stats, reads cell numbers from stdin."""

import asyncio
from typing import Callable, Optional

from tictactoe.api.models import StatsResponse
from tictactoe.client.api_client import RecordApiClient
from tictactoe.client.controller import GameController
from tictactoe.core.exceptions import InvalidMoveError
from tictactoe.game.session import GameSession

HELP = "Type a cell number (0-8) to play, 'r' to restart, 'q' to quit."


def render_stats(stats: Optional[StatsResponse]) -> str:
    if stats is None:
        return "Game Statistics: unavailable"
    return "\n".join(
        [
            "Game Statistics",
            f"Total Games: {stats.total_games}",
            f"X Wins: {stats.x_wins}",
            f"O Wins: {stats.o_wins}",
            f"Draws: {stats.draws}",
        ]
    )


def render_screen(session: GameSession, stats: Optional[StatsResponse]) -> str:
    return "\n\n".join(
        [session.board.render(), session.status_message(), render_stats(stats)]
    )


async def run_terminal_game(
    api_url: str,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    client: Optional[RecordApiClient] = None,
) -> None:
    """Play until the user quits. Pending saves are awaited before returning."""
    async with client if client is not None else RecordApiClient(api_url) as api:
        controller = GameController(api)
        await controller.refresh_stats()
        write(HELP)
        write(render_screen(controller.session, controller.stats))

        while True:
            try:
                command = (await asyncio.to_thread(read_line, "> ")).strip().lower()
            except EOFError:
                break

            if command == "q":
                break
            if command == "r":
                controller.restart()
            elif command.isdecimal():
                try:
                    controller.play(int(command))
                except InvalidMoveError as e:
                    write(str(e))
                    continue
            else:
                write(HELP)
                continue
            # let a finished game's save get going before drawing
            await asyncio.sleep(0)
            write(render_screen(controller.session, controller.stats))

        await controller.drain()
