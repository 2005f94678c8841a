"""Custom exceptions. Every layer raises a subclass of GameError so callers can catch the whole family at once."""


class GameError(Exception):
    """Top-level exception for this project."""


class InvalidMoveError(GameError):
    """A cell index outside of the board was passed to the rules engine."""


class InvalidRequestError(GameError):
    """Request data is structurally fine but does not describe a playable game."""


class RepositoryError(GameError):
    """Persistence layer could not complete an operation."""


class StorageWriteError(RepositoryError):
    pass


class StorageReadError(RepositoryError):
    pass
