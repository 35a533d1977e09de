"""Implementation of KeyValueStore using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import StoreError
from src.db.schema import DBEntry

logger = logging.getLogger(__name__)


class SQLKeyValueStore:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_item(self, key: str) -> str | None:
        """Get the value stored under key, if any."""
        try:
            entry = self._fetch_entry(key)
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to read {key=}.") from exc
        return entry.value if entry else None

    def set_item(self, key: str, value: str) -> None:
        """Insert a new entry, or overwrite the value of an existing one."""
        try:
            entry = self._fetch_entry(key)
            if entry is None:
                self.db.add(DBEntry(key=key, value=value))
            else:
                entry.value = value
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"Failed to write {key=}.") from exc
        logger.debug("Stored %d characters under %r", len(value), key)

    def _fetch_entry(self, key: str) -> DBEntry | None:
        query = select(DBEntry).where(DBEntry.key == key)
        return self.db.scalar(query)
