"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from datetime import datetime
from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.config import ScoreboardSettings
from src.core.clock import Clock
from src.db.memory_repository import InMemoryKeyValueStore
from src.db.record_store import RecordStore
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

# Every record written during tests gets stamped with this moment (7/4/2025, 1:05:09 PM)
FIXED_MOMENT = datetime(2025, 7, 4, 13, 5, 9)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def fixed_clock() -> Clock:
    return lambda: FIXED_MOMENT


@pytest.fixture
def kv_store() -> Generator[InMemoryKeyValueStore, None, None]:
    """Ensures to clear the store between tests"""
    store = InMemoryKeyValueStore()
    try:
        yield store
    finally:
        store.clear()


@pytest.fixture
def record_store(kv_store: InMemoryKeyValueStore, fixed_clock: Clock) -> RecordStore:
    return RecordStore(kv_store, clock=fixed_clock)


@pytest.fixture
def settings() -> ScoreboardSettings:
    return ScoreboardSettings(database_url=DATABASE_URL, winner_announcement_delay=0.1)
