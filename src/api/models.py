"""Requests and Response models exchanged with the (external) screens"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.core.shared_types import DEFAULT_GAME_NAME

PlayerName = str


# --- REQUEST MODELS ---
class SessionRequest(BaseModel):
    """
    Parameters a game screen gets opened with.

    ---
    players, grid and history arrive serialized (JSON strings). They are only parsed when the session starts,
    where anything malformed falls back to a fresh default game instead of failing.
    """

    model_config = ConfigDict(populate_by_name=True)

    game_name: str = Field(default=DEFAULT_GAME_NAME, alias="gameName")
    players: Optional[str] = None
    grid: Optional[str] = None
    history: Optional[str] = None


# --- RESPONSE MODELS ---
class WinnerAnnouncement(BaseModel):
    """Handed to the winner screen."""

    model_config = ConfigDict(populate_by_name=True)

    player_name: PlayerName = Field(alias="playerName")
    date: str


class HistoryEntry(BaseModel):
    game_name: str
    players: list[PlayerName]
    date: str
    time: Optional[str] = None
    winner: Optional[PlayerName] = None


class GameHistoryResponse(BaseModel):
    in_progress: list[HistoryEntry]
    completed: list[HistoryEntry]
