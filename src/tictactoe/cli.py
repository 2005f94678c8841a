"""Command line entrypoint: `tictactoe serve` runs the API, `tictactoe play` a terminal game against it."""

import argparse
import asyncio
from typing import Optional, Sequence

import uvicorn

from tictactoe.config import configure_logging, get_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="tictactoe", description=__doc__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the game record API")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)

    play = subparsers.add_parser("play", help="Play in the terminal")
    play.add_argument("--api-url", default=settings.api_base_url)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)

    if args.command == "serve":
        # imported here so `play` does not need a database
        from tictactoe.api.main import create_app

        uvicorn.run(create_app(), host=args.host, port=args.port)
    elif args.command == "play":
        from tictactoe.client.terminal import run_terminal_game

        asyncio.run(run_terminal_game(args.api_url))


if __name__ == "__main__":
    main()
