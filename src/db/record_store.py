"""
Durable bookkeeping of the in-progress and completed game collections.

Each collection is stored as one JSON array under its own key. Every write replaces the whole array.

---
NOTE: Failures of the underlying store are never raised from here. Listing a collection that cannot be read gives an
empty list. Writes (upsert / remove) read the collection first: if that read or the write itself fails, nothing is
written and False is returned (state then only lives in memory until the next save succeeds).
"""

import logging
from dataclasses import replace
from typing import Callable, Optional

from src.core.clock import Clock, format_date, format_time, local_now
from src.core.exceptions import RepositoryError
from src.core.models import GameRecord
from src.core.shared_types import Collection
from src.db.codec import decode_records, encode_records
from src.db.repository import KeyValueStore

logger = logging.getLogger(__name__)

RecordFilter = Callable[[GameRecord], bool]


class RecordStore:
    """Insert / update / remove / list game records, keyed by game name."""

    def __init__(self, store: KeyValueStore, clock: Clock = local_now) -> None:
        self.store = store
        self.clock = clock

    def list_records(self, collection: Collection) -> list[GameRecord]:
        """All records in the collection, in stored order. Empty if nothing (readable) is stored."""
        try:
            return self._load(collection)
        except RepositoryError:
            logger.exception("Failed to load %s, treating it as empty", collection.value)
            return []

    def find(self, collection: Collection, game_name: str) -> Optional[GameRecord]:
        return next(
            (
                record
                for record in self.list_records(collection)
                if record.game_name == game_name
            ),
            None,
        )

    def upsert(self, collection: Collection, record: GameRecord) -> bool:
        """
        Replace any record with the same game name, then append the record.

        ---
        NOTE: identity is the name only. Two different games with the same name overwrite each other.
        """
        try:
            records = [
                stored
                for stored in self._load(collection)
                if stored.game_name != record.game_name
            ]
            records.append(record)
            self._dump(collection, records)
        except RepositoryError:
            logger.exception("Failed to save %r to %s", record.game_name, collection.value)
            return False
        return True

    def remove(self, collection: Collection, predicate: RecordFilter) -> bool:
        """Remove all matching records. Returns whether any record was removed."""
        try:
            return self._remove(collection, predicate) > 0
        except RepositoryError:
            logger.exception("Failed to remove games from %s", collection.value)
            return False

    def remove_record(self, collection: Collection, record: GameRecord) -> bool:
        """User requested delete: only records equal to the given one in every field are removed."""
        return self.remove(collection, lambda stored: stored == record)

    def migrate_to_completed(
        self, record: GameRecord, winner_name: str
    ) -> Optional[GameRecord]:
        """
        Move a won game from in-progress to completed.

        1. remove it (by name) from in-progress
        2. stamp winner, date and time and drop the history
        3. upsert it into completed

        ---
        NOTE: the two collection writes are not a transaction. A failure (or crash) in between can leave the game in
        neither or in both collections. Failures are logged, earlier steps are not rolled back.
        Returns the completed record if it was stored.
        """
        try:
            self._remove(
                Collection.IN_PROGRESS,
                lambda stored: stored.game_name == record.game_name,
            )
        except RepositoryError:
            logger.exception(
                "Could not remove %r from in-progress games, continuing the migration",
                record.game_name,
            )

        moment = self.clock()
        completed = replace(
            record,
            history=None,
            winner=winner_name,
            date=format_date(moment),
            time=format_time(moment),
        )
        if not self.upsert(Collection.COMPLETED, completed):
            logger.error("Could not store completed game %r", record.game_name)
            return None

        logger.info("Game %r completed, winner: %s", record.game_name, winner_name)
        return completed

    # -- Internal helpers (raise RepositoryError) --
    def _load(self, collection: Collection) -> list[GameRecord]:
        payload = self.store.get_item(collection.value)
        if payload is None:
            return []
        return decode_records(payload)

    def _dump(self, collection: Collection, records: list[GameRecord]) -> None:
        self.store.set_item(collection.value, encode_records(records))

    def _remove(self, collection: Collection, predicate: RecordFilter) -> int:
        records = self._load(collection)
        remaining = [record for record in records if not predicate(record)]
        removed = len(records) - len(remaining)
        if removed:
            self._dump(collection, remaining)
        return removed
