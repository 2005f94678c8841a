"""
The GameSession is the rules engine for a single player sitting at one board.
It owns the in-progress state (board, turn, move list) for the lifetime of one game and
hands the finished game to whoever registered a finish listener (the client controller sends it to the record service).

No I/O happens here: the session is synchronous and only ever touched by one sequence of user events.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from tictactoe.core.shared_types import Mark, Outcome, Status
from tictactoe.game.board import Board, validate_index
from tictactoe.game.moves import Move

WIN_STATUS = {Mark.X: Status.X_WON, Mark.O: Status.O_WON}
STATUS_OUTCOME = {
    Status.X_WON: Outcome.X,
    Status.O_WON: Outcome.O,
    Status.DRAW: Outcome.DRAW,
}


@dataclass(frozen=True)
class FinishedGame:
    """What gets submitted once a game reaches a terminal condition."""

    winner: Outcome
    moves: tuple[Move, ...]

    def to_payload(self) -> dict:
        return {
            "winner": self.winner.value,
            "moves": [move.to_dict() for move in self.moves],
        }


FinishListener = Callable[[FinishedGame], None]


@dataclass
class GameSession:
    board: Board = field(default_factory=Board)
    current_player: Mark = Mark.X
    status: Status = Status.IN_PROGRESS
    moves: list[Move] = field(default_factory=list)
    _listeners: list[FinishListener] = field(default_factory=list, repr=False)

    # --- STATE ---
    @property
    def game_active(self) -> bool:
        return self.status == Status.IN_PROGRESS

    @property
    def winner(self) -> Optional[Outcome]:
        """Final result, None while the game is still being played."""
        return STATUS_OUTCOME.get(self.status)

    def status_message(self) -> str:
        if self.status == Status.DRAW:
            return "It's a draw!"
        if self.status in (Status.X_WON, Status.O_WON):
            return f"Player {self.winner} wins!"
        return f"Player {self.current_player}'s turn"

    def on_finish(self, listener: FinishListener) -> None:
        """Register a callable that receives the FinishedGame once per completed game."""
        self._listeners.append(listener)

    # --- OPERATIONS ---
    def apply_move(self, index: int) -> bool:
        """
        Place the current player's mark on the cell.
        ----

        Clicking an occupied cell, or any cell once the game is over, is ignored: nothing changes and False is returned.
        Otherwise, after placing the mark, checks (in this order):
        1. win: one of the 8 lines is complete
        2. draw: board is full
        3. neither: the other player is up next
        """
        validate_index(index)
        if not self.game_active or not self.board.is_empty(index):
            return False

        self.board.place(index, self.current_player)
        self.moves.append(Move(self.current_player, index))

        winning_mark = self.board.winner()
        if winning_mark is not None:
            self._finish(WIN_STATUS[winning_mark])
        elif self.board.is_full():
            self._finish(Status.DRAW)
        else:
            self.current_player = self.current_player.opponent
        return True

    def restart(self) -> None:
        """Start over with an empty board. Registered listeners are kept."""
        self.board.clear()
        self.current_player = Mark.X
        self.status = Status.IN_PROGRESS
        self.moves = []

    # -- PRIVATE HELPERS ---
    def _finish(self, status: Status) -> None:
        self.status = status
        finished = FinishedGame(winner=STATUS_OUTCOME[status], moves=tuple(self.moves))
        for listener in self._listeners:
            listener(finished)
