"""
Type definitions used across layers
"""

from enum import StrEnum

# Cricket is always played on 20 down to 15, plus the Bull. Order matters: it is the row order of the grid.
ROW_LABELS: tuple[str, ...] = ("20", "19", "18", "17", "16", "15", "Bull")
ROW_COUNT = len(ROW_LABELS)

# Three marks close a number
MAX_TAPS = 3

MIN_PLAYERS = 2
MAX_PLAYERS = 4

DEFAULT_PLAYERS: tuple[str, ...] = ("Player 1", "Player 2")
DEFAULT_GAME_NAME = "Game"


class Status(StrEnum):
    ACTIVE = "active"
    WON = "won"


class Collection(StrEnum):
    """The two durable partitions of game records. Values are the keys in the durable store."""

    IN_PROGRESS = "inProgressGames"
    COMPLETED = "completedGames"
