"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the domain layer and the persistence layer send/receive these, so neither depends on the other's internal types.
(Field contents are plain python data: the persistence layer maps them onto the stored JSON field names.)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameRecord easier to read
PlayerName = str
Taps = int
# (row_index, col_index, previous_taps)
MoveData = tuple[int, int, int]


@dataclass
class GameRecord:
    """Transport-safe representation of a Cricket game used between Service, DB, and Game layers."""

    game_name: str
    players: list[PlayerName]
    grid: list[list[Taps]]
    date: str
    # In-progress records carry a history, completed ones do not
    history: Optional[list[MoveData]] = field(default_factory=list)
    # Only set on completed records
    time: Optional[str] = None
    winner: Optional[PlayerName] = None

    @property
    def is_completed(self) -> bool:
        return self.winner is not None
