"""Wiring of the layers: settings -> logging -> database -> record store."""

import logging

from sqlalchemy.orm import Session

from src.config import ScoreboardSettings, get_settings
from src.db.database import build_engine, session_factory
from src.db.record_store import RecordStore
from src.db.sql_repository import SQLKeyValueStore
from src.logging import setup_logging

logger = logging.getLogger(__name__)


def open_session(settings: ScoreboardSettings | None = None) -> Session:
    """Database session for the configured database (tables are created when missing)."""
    settings = settings or get_settings()
    return session_factory(build_engine(settings))()


def create_record_store(db_session: Session) -> RecordStore:
    return RecordStore(SQLKeyValueStore(db_session))


def bootstrap(settings: ScoreboardSettings | None = None) -> RecordStore:
    """Configure logging and return a record store backed by the configured database."""
    settings = settings or get_settings()
    setup_logging(settings)
    logger.info("Using database %s", settings.database_url)
    return create_record_store(open_session(settings))
