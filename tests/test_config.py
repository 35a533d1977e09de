"""Unit tests for src/config.py"""

import pytest
from pydantic import ValidationError

from src.config import ScoreboardSettings, get_settings


def test_defaults() -> None:
    settings = ScoreboardSettings()
    assert settings.database_url == "sqlite:///scoreboard.db"
    assert settings.log_level == "INFO"
    assert settings.winner_announcement_delay == 0.1


def test_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCOREBOARD_DATABASE_URL", "sqlite:///other.db")
    monkeypatch.setenv("SCOREBOARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("SCOREBOARD_WINNER_ANNOUNCEMENT_DELAY", "0.5")

    settings = ScoreboardSettings()
    assert settings.database_url == "sqlite:///other.db"
    assert settings.log_level == "DEBUG"
    assert settings.winner_announcement_delay == 0.5


@pytest.mark.parametrize(
    "overrides",
    [
        {"log_level": "chatty"},
        {"winner_announcement_delay": -1},
    ],
)
def test_invalid_settings(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        ScoreboardSettings(**overrides)


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()
