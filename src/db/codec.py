"""
Stored JSON shapes of the game collections.

The field names (gameName, players, grid, history, date, time, winner) are shared with data saved by earlier
versions of the app, so they must not change.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from src.core.exceptions import RecordDecodeError
from src.core.models import GameRecord
from src.core.shared_types import MAX_TAPS


class StoredCell(BaseModel):
    taps: int = Field(ge=0, le=MAX_TAPS)


class StoredMove(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    row_index: int = Field(alias="rowIndex", ge=0)
    col_index: int = Field(alias="colIndex", ge=0)
    previous_taps: int = Field(alias="previousTaps", ge=0, le=MAX_TAPS)


class StoredRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_name: str = Field(alias="gameName")
    players: list[str]
    grid: list[list[StoredCell]]
    history: Optional[list[StoredMove]] = None
    date: str = ""
    time: Optional[str] = None
    winner: Optional[str] = None

    @classmethod
    def from_record(cls, record: GameRecord) -> "StoredRecord":
        return cls(
            game_name=record.game_name,
            players=record.players,
            grid=[[StoredCell(taps=taps) for taps in row] for row in record.grid],
            history=(
                None
                if record.history is None
                else [
                    StoredMove(row_index=r, col_index=c, previous_taps=p)
                    for r, c, p in record.history
                ]
            ),
            date=record.date,
            time=record.time,
            winner=record.winner,
        )

    def to_record(self) -> GameRecord:
        return GameRecord(
            game_name=self.game_name,
            players=list(self.players),
            grid=[[cell.taps for cell in row] for row in self.grid],
            history=(
                None
                if self.history is None
                else [
                    (move.row_index, move.col_index, move.previous_taps)
                    for move in self.history
                ]
            ),
            date=self.date,
            time=self.time,
            winner=self.winner,
        )


_COLLECTION = TypeAdapter(list[StoredRecord])


def encode_records(records: list[GameRecord]) -> str:
    """JSON array of records. Unset optional fields (time/winner, or history of a completed game) are left out."""
    stored = [StoredRecord.from_record(record) for record in records]
    return _COLLECTION.dump_json(stored, by_alias=True, exclude_none=True).decode()


def decode_records(payload: str) -> list[GameRecord]:
    try:
        stored = _COLLECTION.validate_json(payload)
    except ValidationError as exc:
        raise RecordDecodeError(
            f"Stored collection does not match the expected shape: {exc.error_count()} error(s)."
        ) from exc
    return [record.to_record() for record in stored]


def encode_grid(grid: list[list[int]]) -> str:
    """Grid in its stored form, e.g. to pass it along when resuming a game."""
    cells = [[StoredCell(taps=taps) for taps in row] for row in grid]
    return TypeAdapter(list[list[StoredCell]]).dump_json(cells).decode()


def encode_history(history: list[tuple[int, int, int]]) -> str:
    moves = [StoredMove(row_index=r, col_index=c, previous_taps=p) for r, c, p in history]
    return TypeAdapter(list[StoredMove]).dump_json(moves, by_alias=True).decode()


def decode_grid(payload: str) -> list[list[int]]:
    cells = TypeAdapter(list[list[StoredCell]]).validate_json(payload)
    return [[cell.taps for cell in row] for row in cells]


def decode_history(payload: str) -> list[tuple[int, int, int]]:
    moves = TypeAdapter(list[StoredMove]).validate_json(payload)
    return [(move.row_index, move.col_index, move.previous_taps) for move in moves]


def encode_players(players: list[str]) -> str:
    return TypeAdapter(list[str]).dump_json(players).decode()


def decode_players(payload: str) -> list[str]:
    return TypeAdapter(list[str]).validate_json(payload)
