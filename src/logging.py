"""
Logging of the scoreboard: always to stdout, additionally to one file per run when a log directory is configured.
"""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Optional

from src.config import ScoreboardSettings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_PREFIX = "scoreboard"


def log_file_path(log_dir: str, started_at: datetime) -> Path:
    """File of the run started at the given moment (the directory is created when missing)."""
    dir_path = Path(log_dir)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path / f"{LOG_FILE_PREFIX}_{started_at:%Y-%m-%d_%H-%M-%S}.log"


def setup_logging(settings: ScoreboardSettings) -> Optional[Path]:
    """
    Configure the root logger from the settings (level, optional log directory).

    Handlers of an earlier call are closed and replaced. Returns the log file of this run, if any.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    log_file = None
    if settings.log_dir:
        log_file = log_file_path(settings.log_dir, datetime.now(tz=UTC))
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # SQL statements are only wanted when echo is switched on
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return log_file
