"""Unit tests for /src/cricket/setup.py"""

import pytest

from src.core.exceptions import GameSetupError, InvalidArgumentError, PlayerLimitError
from src.cricket.setup import DEFAULT_SETUP_NAME, GameSetup


def test_defaults() -> None:
    setup = GameSetup()
    assert setup.game_name == DEFAULT_SETUP_NAME
    assert setup.players == ["Player 1", "Player 2"]


def test_defaults_are_not_shared() -> None:
    first, second = GameSetup(), GameSetup()
    first.add_player()
    assert len(second.players) == 2


def test_add_players_up_to_four() -> None:
    setup = GameSetup()
    setup.add_player()
    setup.add_player()
    assert setup.players == ["Player 1", "Player 2", "Player 3", "Player 4"]

    with pytest.raises(PlayerLimitError):
        setup.add_player()
    assert len(setup.players) == 4


def test_remove_player() -> None:
    setup = GameSetup(players=["Ann", "Ben", "Cas"])
    setup.remove_player(1)
    assert setup.players == ["Ann", "Cas"]


def test_cannot_go_below_two_players() -> None:
    setup = GameSetup()
    with pytest.raises(PlayerLimitError):
        setup.remove_player(0)
    assert setup.players == ["Player 1", "Player 2"]


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_remove_unknown_player(index: int) -> None:
    setup = GameSetup(players=["Ann", "Ben", "Cas"])
    with pytest.raises(InvalidArgumentError):
        setup.remove_player(index)


def test_rename_player() -> None:
    setup = GameSetup()
    setup.rename_player(1, "The Power")
    assert setup.players == ["Player 1", "The Power"]


@pytest.mark.parametrize(
    "game_name, players",
    [
        ("", ["Ann", "Ben"]),  # no name
        ("   ", ["Ann", "Ben"]),  # whitespace only
        ("Solo", ["Ann"]),  # not enough players
    ],
)
def test_invalid_setup(game_name: str, players: list[str]) -> None:
    with pytest.raises(GameSetupError):
        GameSetup(game_name=game_name, players=players).validate()


def test_valid_setup() -> None:
    GameSetup(game_name="League night", players=["Ann", "Ben", "Cas"]).validate()
