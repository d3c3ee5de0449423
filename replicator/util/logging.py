"""Standard library logging, routed into Logfire.

Most code logs through ``logfire`` directly. Modules that use ``logging``
(uvicorn, alembic, the odd route) end up in the same place through the
Logfire handler installed here.
"""

import logging
import sys

import logfire

from replicator.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

# Chatty libraries that only matter when something is wrong
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncpg")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Debug mode logs everything at DEBUG; otherwise INFO. Records go to
    stdout and to Logfire.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT, "%H:%M:%S"))

    logging.basicConfig(
        level=level,
        handlers=[stdout_handler, logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    get_logger(__name__).info(
        f"Logging at {logging.getLevelName(level)} for {settings.environment}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (pass ``__name__``)."""
    return logging.getLogger(name)
