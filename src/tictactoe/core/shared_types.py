"""
Type definitions used across layers
"""

from enum import StrEnum


class Mark(StrEnum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> "Mark":
        return Mark.O if self == Mark.X else Mark.X


class Outcome(StrEnum):
    """Final result of a game as it is stored and sent over the wire."""

    X = "X"
    O = "O"  # noqa: E741
    DRAW = "draw"


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    X_WON = "x won"
    O_WON = "o won"
    DRAW = "draw"
