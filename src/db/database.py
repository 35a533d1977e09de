"""Generate database session"""

from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.config import ScoreboardSettings, get_settings
from src.db.schema import Base


def build_engine(settings: ScoreboardSettings | None = None) -> Engine:
    """Engine for the configured database. Ensure all tables are created."""
    settings = settings or get_settings()
    engine = create_engine(settings.database_url, echo=settings.database_echo)
    Base.metadata.create_all(bind=engine)
    return engine


def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine)


def get_db(engine: Engine | None = None) -> Generator[Session, None, None]:
    db = session_factory(engine or build_engine())()
    try:
        yield db
    finally:
        db.close()
