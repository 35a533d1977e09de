"""Rules for setting up a new game: naming it and choosing 2 to 4 players."""

from dataclasses import dataclass, field

from src.core.exceptions import GameSetupError, InvalidArgumentError, PlayerLimitError
from src.core.shared_types import DEFAULT_PLAYERS, MAX_PLAYERS, MIN_PLAYERS

DEFAULT_SETUP_NAME = "New Game"


@dataclass
class GameSetup:
    game_name: str = DEFAULT_SETUP_NAME
    players: list[str] = field(default_factory=lambda: list(DEFAULT_PLAYERS))

    def add_player(self) -> None:
        """New players get a numbered placeholder name."""
        if len(self.players) >= MAX_PLAYERS:
            raise PlayerLimitError(f"You can only add up to {MAX_PLAYERS} players.")
        self.players.append(f"Player {len(self.players) + 1}")

    def remove_player(self, index: int) -> None:
        if len(self.players) <= MIN_PLAYERS:
            raise PlayerLimitError(f"You must have at least {MIN_PLAYERS} players.")
        self._check_index(index)
        del self.players[index]

    def rename_player(self, index: int, name: str) -> None:
        self._check_index(index)
        self.players[index] = name

    def validate(self) -> None:
        if not self.game_name.strip() or len(self.players) < MIN_PLAYERS:
            raise GameSetupError(
                "Please ensure the game name is set and at least two players are added."
            )

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.players):
            raise InvalidArgumentError(f"No player at position {index}.")
