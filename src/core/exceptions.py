"""
Custom exceptions used across layers.

Everything derives from GameError, so the Service layer (and its callers) can catch a single top-level type.
"""


class GameError(Exception):
    """Top-level exception for anything that went wrong while keeping score."""


class InvalidArgumentError(GameError):
    """Programmer error: an index or count outside of the allowed range."""


class GameSetupError(GameError):
    """The game setup cannot be turned into a playable session."""


class PlayerLimitError(GameSetupError):
    """Adding or removing a player would leave the game with too many / too few players."""


class RepositoryError(GameError):
    """Persistence layer failure."""


class StoreError(RepositoryError):
    """The durable key-value store could not be read from or written to."""


class RecordDecodeError(RepositoryError):
    """A stored collection does not match the expected JSON shape."""


class GameStateError(GameError):
    """Action not allowed in the current state of the game (e.g. tapping after a win)."""
