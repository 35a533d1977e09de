"""Orchestration of the game history: listing, resuming and deleting stored games."""

import logging

from src.api.models import GameHistoryResponse, HistoryEntry, SessionRequest
from src.core.exceptions import GameStateError
from src.core.models import GameRecord
from src.core.shared_types import Collection
from src.db.codec import encode_grid, encode_history, encode_players
from src.db.record_store import RecordStore
from src.services.session_service import Confirm

logger = logging.getLogger(__name__)


class GameHistoryService:
    def __init__(self, record_store: RecordStore) -> None:
        self.repo = record_store

    def list_games(self) -> GameHistoryResponse:
        """Both collections, in stored order."""
        return GameHistoryResponse(
            in_progress=[
                self._create_entry(record)
                for record in self.repo.list_records(Collection.IN_PROGRESS)
            ],
            completed=[
                self._create_entry(record)
                for record in self.repo.list_records(Collection.COMPLETED)
            ],
        )

    def resume_request(self, record: GameRecord) -> SessionRequest:
        """Parameters to reopen an in-progress game on the game screen."""
        if record.is_completed:
            raise GameStateError(
                f"Game {record.game_name!r} is completed and cannot be resumed."
            )
        return SessionRequest(
            game_name=record.game_name,
            players=encode_players(record.players),
            grid=encode_grid(record.grid),
            history=encode_history(record.history or []),
        )

    def delete_game(
        self, record: GameRecord, collection: Collection, confirm: Confirm
    ) -> bool:
        """
        Delete a game after the user confirmed.

        Only a stored record identical to the given one is removed (not just any game with the same name).
        Returns whether a record was actually removed.
        """
        if not confirm():
            return False
        deleted = self.repo.remove_record(collection, record)
        if deleted:
            logger.info("Deleted game %r from %s", record.game_name, collection.value)
        return deleted

    # -- Internal helpers --
    def _create_entry(self, record: GameRecord) -> HistoryEntry:
        return HistoryEntry(
            game_name=record.game_name,
            players=record.players,
            date=record.date,
            time=record.time,
            winner=record.winner,
        )
