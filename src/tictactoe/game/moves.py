"""Moves as recorded during a game."""

from dataclasses import dataclass

from tictactoe.core.shared_types import Mark


@dataclass(frozen=True)
class Move:
    player: Mark
    position: int

    def to_dict(self) -> dict[str, str | int]:
        """Wire format: {"player": "X", "position": 4}"""
        return {"player": self.player.value, "position": self.position}
