"""Logging setup for the API process, the sweep loops and scripts."""

import logging
import sys

from podium.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure root logging to stdout.

    DEBUG when settings.debug is True, otherwise INFO. SQLAlchemy engine
    logs are held at WARNING unless DATABASE_ECHO is on, so the sweep loops
    do not flood the log with their queries.
    """
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
