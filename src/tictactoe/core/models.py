"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and the db layer (lower) use the models defined here to send to/receive from the Service.
(Decouples the data model specific to the DB layer or API layer from the information needed to cross boundaries)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# Type aliases to make the models easier to read
PlayerMark = str
Winner = str


@dataclass
class MoveModel:
    player: PlayerMark
    position: int


@dataclass
class GameRecordModel:
    """Transport-safe representation of a finished game used between API, Service and DB layers.

    `id` and `created_at` are assigned by the store, so they stay None until the record is persisted.
    """

    winner: Winner
    moves: list[MoveModel] = field(default_factory=list)
    id: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass
class StatsModel:
    total_games: int = 0
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0
