"""Scoreboard configuration via environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class ScoreboardSettings(BaseSettings):
    model_config = {"env_prefix": "SCOREBOARD_"}

    database_url: str = "sqlite:///scoreboard.db"
    database_echo: bool = False
    log_dir: Optional[str] = None
    log_level: str = "INFO"
    # Seconds between the winning tap and handing the winner to the announcement screen
    winner_announcement_delay: float = 0.1

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("winner_announcement_delay")
    @classmethod
    def validate_delay(cls, value: float) -> float:
        if value < 0:
            raise ValueError(f"winner_announcement_delay must not be negative, got {value}")
        return value


@lru_cache
def get_settings() -> ScoreboardSettings:
    return ScoreboardSettings()
